from typing import Any, Final


_STRING_LIST: Final[dict[str, Any]] = {"type": "array", "items": {"type": "string"}}
_STRING_OR_LIST: Final[dict[str, Any]] = {"anyOf": [{"type": "string"}, _STRING_LIST]}

OPTIONS_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "check": {"type": "boolean"},
        "config_emoji": {
            "anyOf": [
                _STRING_LIST,
                {"type": "object", "additionalProperties": {"type": ["string", "null"]}},
            ]
        },
        "config_format": {
            "enum": ["name", "plugin-colon-prefix-name", "prefix-name"],
        },
        "ignore_config": _STRING_OR_LIST,
        "ignore_deprecated_rules": {"type": "boolean"},
        "path_rule_doc": {"type": "string", "pattern": "\\{name\\}"},
        "path_rule_list": {"type": "string", "minLength": 1},
        "plugin": {"type": "string", "minLength": 1},
        "plugin_prefix": {"type": "string"},
        "rule_doc_notices": _STRING_OR_LIST,
        "rule_doc_section_include": _STRING_LIST,
        "rule_doc_section_exclude": _STRING_LIST,
        "rule_doc_section_options": {"type": "boolean"},
        "rule_doc_title_format": {
            "enum": [
                "desc",
                "desc-parens-name",
                "desc-parens-prefix-name",
                "name",
                "prefix-name",
            ],
        },
        "rule_list_columns": _STRING_OR_LIST,
        "rule_list_sort": _STRING_OR_LIST,
        "split_by": {"type": "string", "minLength": 1},
        "url_configs": {"type": "string", "minLength": 1},
    },
}

PLUGIN_MANIFEST_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["rules"],
    "properties": {
        "name": {"type": "string"},
        "rules": {
            "type": "object",
            "additionalProperties": {"type": "object"},
        },
        "configs": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {
                    "description": {"type": "string"},
                    "rules": {"type": "object"},
                    "overrides": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {"rules": {"type": "object"}},
                        },
                    },
                },
            },
        },
    },
}
