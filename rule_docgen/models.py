from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class NoticeType(str, Enum):
    CONFIGS = "configs"
    FIXABLE = "fixable"
    HAS_SUGGESTIONS = "hasSuggestions"
    REQUIRES_TYPE_CHECKING = "requiresTypeChecking"
    TYPE = "type"
    OPTIONS = "options"
    DEPRECATED = "deprecated"


class ColumnType(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"
    CONFIGS = "configs"
    FIXABLE = "fixable"
    HAS_SUGGESTIONS = "hasSuggestions"
    REQUIRES_TYPE_CHECKING = "requiresTypeChecking"
    TYPE = "type"
    OPTIONS = "options"
    DEPRECATED = "deprecated"


class TitleFormat(str, Enum):
    DESC = "desc"
    DESC_PARENS_NAME = "desc-parens-name"
    DESC_PARENS_PREFIX_NAME = "desc-parens-prefix-name"
    NAME = "name"
    PREFIX_NAME = "prefix-name"


class ConfigFormat(str, Enum):
    NAME = "name"
    PLUGIN_COLON_PREFIX_NAME = "plugin-colon-prefix-name"
    PREFIX_NAME = "prefix-name"


class ActionKind(str, Enum):
    WRITE_TEXT = "write_text"


class ActionStatus(str, Enum):
    NOOP = "noop"
    UPDATE = "update"


class DocumentRole(str, Enum):
    RULE_DOC = "rule_doc"
    RULE_LIST = "rule_list"


@dataclass
class DocAction:
    kind: ActionKind
    path: Path
    status: ActionStatus
    detail: str
    payload: Optional[str] = None
    diff: str = ""
    role: DocumentRole = DocumentRole.RULE_DOC
    rule: Optional[str] = None


@dataclass(frozen=True)
class SectionViolation:
    rule: str
    path: Path
    message: str

    def as_dict(self) -> dict[str, str]:
        return {
            "rule": self.rule,
            "path": str(self.path),
            "message": self.message,
        }


@dataclass
class DocsPlan:
    actions: list[DocAction] = field(default_factory=list)
    violations: list[SectionViolation] = field(default_factory=list)

    def is_valid(self) -> bool:
        return not self.violations

    def has_drift(self) -> bool:
        return any(action.status != ActionStatus.NOOP for action in self.actions)

    def drifted(self) -> list[DocAction]:
        return [action for action in self.actions if action.status != ActionStatus.NOOP]

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ActionStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        counts["violations"] = len(self.violations)
        return counts
