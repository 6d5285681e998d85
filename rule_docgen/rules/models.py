"""Rule and plugin data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class RuleShape(str, Enum):
    OBJECT = "object"
    FUNCTION = "function"


@dataclass(frozen=True)
class RuleDetails:
    name: str
    description: Optional[str] = None
    fixable: bool = False
    has_suggestions: bool = False
    requires_type_checking: bool = False
    deprecated: bool = False
    replaced_by: tuple[str, ...] = ()
    schema: Any = None
    type: Optional[str] = None
    meta: Mapping[str, Any] = field(default_factory=dict)
    shape: RuleShape = RuleShape.OBJECT

    def attribute(self, path: str) -> Any:
        """Resolve a rule attribute by field name or dotted ``meta`` path.

        ``type`` and ``description`` read the normalized fields, anything else
        (``meta.docs.category``, ``docs.category``) walks the raw metadata.
        """
        if path in ("type", "description", "name"):
            return getattr(self, path)
        parts = path.split(".")
        if parts[0] == "meta":
            parts = parts[1:]
        current: Any = self.meta
        for part in parts:
            if isinstance(current, Mapping):
                current = current.get(part)
            else:
                current = getattr(current, part, None)
            if current is None:
                return None
        return current


@dataclass(frozen=True)
class Plugin:
    name: str
    rules: Mapping[str, Any] = field(default_factory=dict)
    configs: Mapping[str, Any] = field(default_factory=dict)
