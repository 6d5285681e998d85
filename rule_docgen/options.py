from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping, Optional, TypeVar, Union

from rule_docgen.constants import DEFAULT_PATH_RULE_DOC, DEFAULT_PATH_RULE_LIST
from rule_docgen.errors import InvalidOptionError
from rule_docgen.models import ColumnType, ConfigFormat, NoticeType, TitleFormat


DEFAULT_RULE_DOC_NOTICES: tuple[NoticeType, ...] = (
    NoticeType.CONFIGS,
    NoticeType.FIXABLE,
    NoticeType.HAS_SUGGESTIONS,
    NoticeType.REQUIRES_TYPE_CHECKING,
    NoticeType.DEPRECATED,
)

DEFAULT_RULE_LIST_COLUMNS: tuple[ColumnType, ...] = (
    ColumnType.NAME,
    ColumnType.DESCRIPTION,
    ColumnType.CONFIGS,
    ColumnType.FIXABLE,
    ColumnType.HAS_SUGGESTIONS,
    ColumnType.REQUIRES_TYPE_CHECKING,
    ColumnType.DEPRECATED,
)

E = TypeVar("E", NoticeType, ColumnType, TitleFormat, ConfigFormat)


@dataclass(frozen=True)
class GeneratorOptions:
    check: bool = False
    config_emoji: tuple[str, ...] = ()
    config_format: ConfigFormat = ConfigFormat.NAME
    ignore_config: tuple[str, ...] = ()
    ignore_deprecated_rules: bool = False
    path_rule_doc: str = DEFAULT_PATH_RULE_DOC
    path_rule_list: str = DEFAULT_PATH_RULE_LIST
    plugin: Optional[str] = None
    plugin_prefix: Optional[str] = None
    rule_doc_notices: tuple[NoticeType, ...] = DEFAULT_RULE_DOC_NOTICES
    rule_doc_section_include: tuple[str, ...] = ()
    rule_doc_section_exclude: tuple[str, ...] = ()
    rule_doc_section_options: bool = True
    rule_doc_title_format: TitleFormat = TitleFormat.DESC_PARENS_PREFIX_NAME
    rule_list_columns: tuple[ColumnType, ...] = DEFAULT_RULE_LIST_COLUMNS
    rule_list_sort: tuple[ColumnType, ...] = ()
    split_by: Optional[str] = None
    url_configs: Optional[str] = None


def _split_list(value: Union[str, Iterable[str], None]) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item).strip() for item in value if str(item).strip()]


def _parse_enum(option: str, enum_type: type[E], value: Any) -> E:
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(item.value for item in enum_type)
        raise InvalidOptionError(option, f"{value}; expected one of: {allowed}")


def parse_enum_list(
    option: str, enum_type: type[E], value: Union[str, Iterable[str], None]
) -> tuple[E, ...]:
    parsed: list[E] = []
    for item in _split_list(value):
        member = _parse_enum(option, enum_type, item)
        if member not in parsed:
            parsed.append(member)
    return tuple(parsed)


def parse_rule_doc_notices(value: Union[str, Iterable[str], None]) -> tuple[NoticeType, ...]:
    if value is None:
        return DEFAULT_RULE_DOC_NOTICES
    return parse_enum_list("rule_doc_notices", NoticeType, value)


def parse_rule_list_columns(value: Union[str, Iterable[str], None]) -> tuple[ColumnType, ...]:
    if value is None:
        return DEFAULT_RULE_LIST_COLUMNS
    return parse_enum_list("rule_list_columns", ColumnType, value)


def _config_emoji_entries(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, Mapping):
        return tuple(f"{name},{emoji or ''}".rstrip(",") for name, emoji in value.items())
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def build_options(*layers: Mapping[str, Any]) -> GeneratorOptions:
    """Merge option layers, later layers win; ``None`` values are skipped."""
    known = {item.name for item in fields(GeneratorOptions)}
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            if key not in known:
                raise InvalidOptionError(key, "unknown option")
            if value is None:
                continue
            merged[key] = value

    kwargs: dict[str, Any] = {}
    for key, value in merged.items():
        if key == "rule_doc_notices":
            kwargs[key] = parse_rule_doc_notices(value)
        elif key == "rule_list_columns":
            kwargs[key] = parse_rule_list_columns(value)
        elif key == "rule_list_sort":
            kwargs[key] = parse_enum_list(key, ColumnType, value)
        elif key == "rule_doc_title_format":
            kwargs[key] = _parse_enum(key, TitleFormat, value)
        elif key == "config_format":
            kwargs[key] = _parse_enum(key, ConfigFormat, value)
        elif key == "config_emoji":
            kwargs[key] = _config_emoji_entries(value)
        elif key == "ignore_config":
            kwargs[key] = tuple(_split_list(value))
        elif key in ("rule_doc_section_include", "rule_doc_section_exclude"):
            kwargs[key] = (value,) if isinstance(value, str) else tuple(str(item) for item in value)
        else:
            kwargs[key] = value
    return GeneratorOptions(**kwargs)
