from pathlib import Path
from typing import Optional

from rule_docgen.errors import MissingDocumentError


class DocumentRepository:
    def __init__(self, root: Path) -> None:
        self.root = root

    def rule_doc_path(self, template: str, name: str) -> Path:
        return self.root / template.replace("{name}", name)

    def rule_list_path(self, template: str) -> Path:
        requested = self.root / template
        exact = self.exact_casing(requested)
        return exact if exact is not None else requested

    @staticmethod
    def exact_casing(path: Path) -> Optional[Path]:
        """Find ``path`` in its directory ignoring case (``readme.md`` vs ``README.md``)."""
        if path.is_file() and path.name in {child.name for child in path.parent.iterdir()}:
            return path
        if not path.parent.is_dir():
            return None
        for child in sorted(path.parent.iterdir()):
            if child.is_file() and child.name.lower() == path.name.lower():
                return child
        return None

    def read(self, path: Path) -> str:
        if not path.is_file():
            raise MissingDocumentError(path)
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
