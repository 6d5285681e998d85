import difflib
import json
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from rule_docgen.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    InvalidYamlFormatError,
)


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_structured(path: Path) -> Any:
    """Load a JSON or YAML file, picking the parser from the suffix."""
    if path.suffix in (".yaml", ".yml"):
        try:
            return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise InvalidYamlFormatError(path, str(exc)) from exc
    try:
        return read_json(path)
    except json.JSONDecodeError as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def validate_payload(path: Path, payload: Any, schema: dict[str, Any]) -> None:
    error = next(iter(Draft202012Validator(schema).iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, format_schema_error(error))


def unified_diff(path: str, before: str, after: str) -> str:
    lines = difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"{path} (current)",
        tofile=f"{path} (expected)",
    )
    return "".join(line if line.endswith("\n") else f"{line}\n" for line in lines)


def display_path(path: Path, root: Path) -> str:
    try:
        return str(path.resolve().relative_to(root.resolve()))
    except ValueError:
        return str(path)
