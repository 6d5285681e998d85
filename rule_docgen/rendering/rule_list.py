"""Render the rules summary table embedded in the root document."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from rule_docgen.configs.emojis import config_badge
from rule_docgen.configs.resolver import ConfigsToRules
from rule_docgen.constants import (
    BEGIN_RULE_LIST_MARKER,
    DEFAULT_PATH_RULE_DOC,
    DEFAULT_PATH_RULE_LIST,
    EMOJI_DEPRECATED,
    EMOJI_FIXABLE,
    EMOJI_HAS_SUGGESTIONS,
    EMOJI_OPTIONS,
    EMOJI_REQUIRES_TYPE_CHECKING,
    EMOJI_TYPE,
    END_RULE_LIST_MARKER,
)
from rule_docgen.markdown import replace_marker_region
from rule_docgen.models import ColumnType
from rule_docgen.options import DEFAULT_RULE_LIST_COLUMNS
from rule_docgen.rendering.notices import TYPE_DESCRIPTIONS
from rule_docgen.rendering.table import escape_cell, markdown_table
from rule_docgen.rules.models import RuleDetails
from rule_docgen.rules.options import has_options


@dataclass(frozen=True)
class Column:
    key: str
    kind: ColumnType
    header: str
    cell: Callable[[RuleDetails], str]
    legend: Callable[[Sequence[RuleDetails]], list[str]]


def _fixed_legend(line: str) -> Callable[[Sequence[RuleDetails]], list[str]]:
    return lambda rules: [line]


def _flag_column(
    kind: ColumnType, emoji: str, legend: str, predicate: Callable[[RuleDetails], bool]
) -> Column:
    return Column(
        key=kind.value,
        kind=kind,
        header=emoji,
        cell=lambda rule: emoji if predicate(rule) else "",
        legend=_fixed_legend(f"{emoji} {legend}"),
    )


def _type_legend(rules: Sequence[RuleDetails]) -> list[str]:
    used = {rule.type for rule in rules}
    return [
        f"{emoji} {TYPE_DESCRIPTIONS[type_name].capitalize()}."
        for type_name, emoji in EMOJI_TYPE.items()
        if type_name in used
    ]


def _config_columns(
    configs_to_rules: ConfigsToRules,
    config_emojis: Mapping[str, str],
    url_configs: Optional[str],
) -> list[Column]:
    # Configs sharing an emoji share one column and one legend line.
    groups: dict[str, list[str]] = {}
    for name in sorted(configs_to_rules, key=str.lower):
        if not configs_to_rules[name]:
            continue
        groups.setdefault(config_badge(name, config_emojis), []).append(name)

    columns: list[Column] = []
    for badge, names in groups.items():
        members = {rule for name in names for rule in configs_to_rules[name]}
        word = "configuration" if len(names) == 1 else "configurations"
        if url_configs:
            word = f"[{word}]({url_configs})"
        listed = ", ".join(f"`{name}`" for name in names)
        columns.append(
            Column(
                key=f"config:{badge}",
                kind=ColumnType.CONFIGS,
                header=badge,
                cell=lambda rule, members=members, badge=badge: badge if rule.name in members else "",
                legend=_fixed_legend(f"{badge} Enabled in the {listed} {word}."),
            )
        )
    return columns


def build_columns(
    requested: Sequence[ColumnType],
    configs_to_rules: ConfigsToRules,
    config_emojis: Mapping[str, str],
    path_rule_doc: str = DEFAULT_PATH_RULE_DOC,
    path_rule_list: str = DEFAULT_PATH_RULE_LIST,
    url_configs: Optional[str] = None,
) -> list[Column]:
    """Candidate columns in their fixed display order."""
    wanted = set(requested)
    list_dir = posixpath.dirname(path_rule_list) or "."

    def _name_cell(rule: RuleDetails) -> str:
        link = posixpath.relpath(path_rule_doc.replace("{name}", rule.name), list_dir)
        return f"[{rule.name}]({link})"

    columns = [
        Column(
            key=ColumnType.NAME.value,
            kind=ColumnType.NAME,
            header="Name",
            cell=_name_cell,
            legend=lambda rules: [],
        )
    ]
    for kind in ColumnType:
        if kind == ColumnType.NAME or kind not in wanted:
            continue
        if kind == ColumnType.DESCRIPTION:
            columns.append(
                Column(
                    key=kind.value,
                    kind=kind,
                    header="Description",
                    cell=lambda rule: escape_cell(rule.description or ""),
                    legend=lambda rules: [],
                )
            )
        elif kind == ColumnType.CONFIGS:
            columns.extend(_config_columns(configs_to_rules, config_emojis, url_configs))
        elif kind == ColumnType.FIXABLE:
            columns.append(
                _flag_column(
                    kind,
                    EMOJI_FIXABLE,
                    "Automatically fixable by the `--fix` CLI option.",
                    lambda rule: rule.fixable,
                )
            )
        elif kind == ColumnType.HAS_SUGGESTIONS:
            columns.append(
                _flag_column(
                    kind,
                    EMOJI_HAS_SUGGESTIONS,
                    "Manually fixable by editor suggestions.",
                    lambda rule: rule.has_suggestions,
                )
            )
        elif kind == ColumnType.REQUIRES_TYPE_CHECKING:
            columns.append(
                _flag_column(
                    kind,
                    EMOJI_REQUIRES_TYPE_CHECKING,
                    "Requires type information.",
                    lambda rule: rule.requires_type_checking,
                )
            )
        elif kind == ColumnType.TYPE:
            columns.append(
                Column(
                    key=kind.value,
                    kind=kind,
                    header="Type",
                    cell=lambda rule: EMOJI_TYPE.get(rule.type or "", ""),
                    legend=_type_legend,
                )
            )
        elif kind == ColumnType.OPTIONS:
            columns.append(
                _flag_column(
                    kind,
                    EMOJI_OPTIONS,
                    "Has configuration options.",
                    lambda rule: has_options(rule.schema),
                )
            )
        elif kind == ColumnType.DEPRECATED:
            columns.append(
                _flag_column(kind, EMOJI_DEPRECATED, "Deprecated.", lambda rule: rule.deprecated)
            )
    return columns


def visible_columns(columns: Sequence[Column], rules: Sequence[RuleDetails]) -> list[Column]:
    return [
        column
        for column in columns
        if column.kind == ColumnType.NAME or any(column.cell(rule) for rule in rules)
    ]


def sort_rules(
    rules: Sequence[RuleDetails], columns: Sequence[Column], sort_by: Sequence[ColumnType] = ()
) -> list[RuleDetails]:
    """Order rows by name, optionally grouping on non-empty ``sort_by`` columns first.

    Deprecated rules always come last.
    """
    sort_columns = [
        [column for column in columns if column.kind == kind] for kind in sort_by
    ]

    def _key(rule: RuleDetails) -> tuple[Any, ...]:
        groups = tuple(
            0 if any(column.cell(rule) for column in group) else 1 for group in sort_columns
        )
        return (rule.deprecated, groups, rule.name.lower(), rule.name)

    return sorted(rules, key=_key)


def partition_rules(
    rules: Sequence[RuleDetails], split_by: Optional[str]
) -> list[tuple[Optional[str], list[RuleDetails]]]:
    if not split_by:
        return [(None, list(rules))]
    partitions: dict[Optional[str], list[RuleDetails]] = {}
    for rule in rules:
        value = rule.attribute(split_by)
        key = None if value is None or value == "" else str(value)
        partitions.setdefault(key, []).append(rule)
    ordered = sorted((key for key in partitions if key is not None), key=lambda item: (item.lower(), item))
    result: list[tuple[Optional[str], list[RuleDetails]]] = []
    if None in partitions:
        result.append((None, partitions[None]))
    result.extend((key, partitions[key]) for key in ordered)
    return result


def generate_rules_list_markdown(
    details: Sequence[RuleDetails],
    configs_to_rules: ConfigsToRules,
    config_emojis: Mapping[str, str],
    columns: Sequence[ColumnType] = DEFAULT_RULE_LIST_COLUMNS,
    path_rule_doc: str = DEFAULT_PATH_RULE_DOC,
    path_rule_list: str = DEFAULT_PATH_RULE_LIST,
    url_configs: Optional[str] = None,
    sort_by: Sequence[ColumnType] = (),
    split_by: Optional[str] = None,
) -> str:
    candidates = build_columns(
        columns, configs_to_rules, config_emojis, path_rule_doc, path_rule_list, url_configs
    )
    sortable = build_columns(
        list(ColumnType), configs_to_rules, config_emojis, path_rule_doc, path_rule_list
    )

    visible_keys: set[str] = set()
    sections: list[str] = []
    for heading, rules in partition_rules(details, split_by):
        shown = visible_columns(candidates, rules)
        rows = [[column.header for column in shown]]
        rows.extend(
            [column.cell(rule) for column in shown]
            for rule in sort_rules(rules, sortable, sort_by)
        )
        visible_keys.update(column.key for column in shown)
        table = markdown_table(rows)
        sections.append(f"### {heading}\n\n{table}" if heading is not None else table)

    legend: list[str] = []
    for column in candidates:
        if column.key not in visible_keys:
            continue
        for line in column.legend(details):
            if line not in legend:
                legend.append(line)

    parts = []
    if legend:
        parts.append("\\\n".join(legend))
    parts.append("\n\n".join(sections))
    return "\n\n".join(parts)


def update_rules_list(
    details: Sequence[RuleDetails],
    markdown: str,
    configs_to_rules: ConfigsToRules,
    config_emojis: Mapping[str, str],
    columns: Sequence[ColumnType] = DEFAULT_RULE_LIST_COLUMNS,
    path_rule_doc: str = DEFAULT_PATH_RULE_DOC,
    path_rule_list: str = DEFAULT_PATH_RULE_LIST,
    url_configs: Optional[str] = None,
    sort_by: Sequence[ColumnType] = (),
    split_by: Optional[str] = None,
) -> str:
    if not details:
        return markdown
    content = generate_rules_list_markdown(
        details,
        configs_to_rules,
        config_emojis,
        columns=columns,
        path_rule_doc=path_rule_doc,
        path_rule_list=path_rule_list,
        url_configs=url_configs,
        sort_by=sort_by,
        split_by=split_by,
    )
    return replace_marker_region(markdown, BEGIN_RULE_LIST_MARKER, END_RULE_LIST_MARKER, content)
