"""Named options extracted from a rule's JSON schema."""

from __future__ import annotations

from typing import Any, Mapping

# Keywords whose value is a schema or a list of schemas.
_SCHEMA_KEYWORDS = (
    "items",
    "prefixItems",
    "additionalItems",
    "contains",
    "additionalProperties",
    "propertyNames",
    "not",
    "if",
    "then",
    "else",
    "allOf",
    "anyOf",
    "oneOf",
)
# Keywords whose value maps names to schemas.
_SCHEMA_MAP_KEYWORDS = (
    "properties",
    "patternProperties",
    "dependencies",
    "dependentSchemas",
    "definitions",
    "$defs",
)


def _walk(schema: Any, found: list[str]) -> None:
    if isinstance(schema, list):
        for item in schema:
            _walk(item, found)
        return
    if not isinstance(schema, Mapping):
        return

    properties = schema.get("properties")
    if isinstance(properties, Mapping):
        for key in properties:
            if key not in found:
                found.append(str(key))

    for keyword, value in schema.items():
        if keyword in _SCHEMA_KEYWORDS:
            _walk(value, found)
        elif keyword in _SCHEMA_MAP_KEYWORDS and isinstance(value, Mapping):
            for child in value.values():
                _walk(child, found)


def get_all_named_options(schema: Any) -> list[str]:
    if not schema:
        return []
    found: list[str] = []
    _walk(schema, found)
    return found


def has_options(schema: Any) -> bool:
    if isinstance(schema, (list, tuple)):
        return len(schema) > 0
    if isinstance(schema, Mapping):
        return len(schema) > 0
    return False
