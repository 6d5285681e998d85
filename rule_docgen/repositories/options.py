from pathlib import Path
from typing import Any, Optional

from rule_docgen.constants import CONFIG_FILENAMES
from rule_docgen.errors import InvalidConfigSchemaError, MissingConfigFileError
from rule_docgen.schemas import OPTIONS_SCHEMA
from rule_docgen.utils import read_structured, validate_payload


class OptionsRepository:
    def __init__(self, root: Path, config_path: Optional[Path] = None) -> None:
        self.root = root
        self._explicit_path = config_path

    @property
    def config_path(self) -> Optional[Path]:
        if self._explicit_path is not None:
            return self._explicit_path
        for filename in CONFIG_FILENAMES:
            path = self.root / filename
            if path.is_file():
                return path
        return None

    def load(self) -> dict[str, Any]:
        path = self.config_path
        if path is None:
            return {}
        if not path.is_file():
            raise MissingConfigFileError(path)
        if path.stat().st_size == 0:
            return {}
        payload = read_structured(path)
        if not isinstance(payload, dict):
            raise InvalidConfigSchemaError(path, "top-level value must be an object")
        validate_payload(path, payload, OPTIONS_SCHEMA)
        return payload
