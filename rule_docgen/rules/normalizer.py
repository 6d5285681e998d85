"""Normalize heterogeneous rule declarations into RuleDetails."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from rule_docgen.constants import FIXABLE_VALUES
from rule_docgen.rules.models import Plugin, RuleDetails, RuleShape


def read_field(source: Any, key: str, default: Any = None) -> Any:
    if source is None:
        return default
    if isinstance(source, Mapping):
        return source.get(key, default)
    return getattr(source, key, default)


def _as_mapping(source: Any) -> dict[str, Any]:
    if source is None:
        return {}
    if isinstance(source, Mapping):
        return {str(key): value for key, value in source.items()}
    attributes = getattr(source, "__dict__", {})
    return {key: value for key, value in attributes.items() if not key.startswith("_")}


def rule_shape(rule: Any) -> RuleShape:
    if isinstance(rule, Mapping) or hasattr(rule, "meta"):
        return RuleShape.OBJECT
    if callable(rule):
        return RuleShape.FUNCTION
    return RuleShape.OBJECT


def _replaced_by(meta: Any) -> tuple[str, ...]:
    value = read_field(meta, "replacedBy")
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(item) for item in value)
    return ()


def normalize_rule(name: str, rule: Any) -> RuleDetails:
    if rule_shape(rule) == RuleShape.FUNCTION:
        # Function-style rules carry no accessible metadata.
        return RuleDetails(name=name, schema=[], shape=RuleShape.FUNCTION)

    meta = read_field(rule, "meta")
    docs = read_field(meta, "docs")
    description = read_field(docs, "description")
    rule_type = read_field(meta, "type")
    return RuleDetails(
        name=name,
        description=str(description) if description else None,
        fixable=read_field(meta, "fixable") in FIXABLE_VALUES,
        has_suggestions=bool(read_field(meta, "hasSuggestions", False)),
        requires_type_checking=bool(read_field(docs, "requiresTypeChecking", False)),
        deprecated=bool(read_field(meta, "deprecated", False)),
        replaced_by=_replaced_by(meta),
        schema=read_field(meta, "schema"),
        type=str(rule_type) if rule_type else None,
        meta=_as_mapping(meta),
        shape=RuleShape.OBJECT,
    )


def gather_rule_details(
    plugin: Plugin, ignore_deprecated_rules: bool = False
) -> list[RuleDetails]:
    details = [normalize_rule(name, rule) for name, rule in plugin.rules.items()]
    if ignore_deprecated_rules:
        details = [item for item in details if not item.deprecated]
    return details
