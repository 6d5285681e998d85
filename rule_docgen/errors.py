from pathlib import Path


class DocgenError(Exception):
    """Base user-facing application error."""


class DocgenFileError(DocgenError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingDocumentError(DocgenFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Could not find document")


class MissingConfigFileError(DocgenFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidJsonFormatError(DocgenFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidYamlFormatError(DocgenFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidConfigSchemaError(DocgenFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class PluginLoadError(DocgenError):
    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Could not load plugin from {source} ({detail})")


class InvalidOptionError(DocgenError):
    def __init__(self, option: str, detail: str) -> None:
        self.option = option
        self.detail = detail
        super().__init__(f"Invalid value for option `{option}` ({detail})")
