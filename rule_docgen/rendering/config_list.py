"""Render the configs table embedded in the root document."""

from __future__ import annotations

from typing import Mapping

from rule_docgen.configs.resolver import ConfigsToRules, config_description
from rule_docgen.constants import BEGIN_CONFIG_LIST_MARKER, END_CONFIG_LIST_MARKER
from rule_docgen.markdown import replace_marker_region
from rule_docgen.models import ConfigFormat
from rule_docgen.rendering.table import escape_cell, markdown_table
from rule_docgen.rules.models import Plugin


def config_name_to_display(config_name: str, config_format: ConfigFormat, plugin_prefix: str) -> str:
    if config_format == ConfigFormat.PLUGIN_COLON_PREFIX_NAME:
        return f"plugin:{plugin_prefix}/{config_name}"
    if config_format == ConfigFormat.PREFIX_NAME:
        return f"{plugin_prefix}/{config_name}"
    return config_name


def generate_config_list_markdown(
    plugin: Plugin,
    configs_to_rules: ConfigsToRules,
    plugin_prefix: str,
    config_emojis: Mapping[str, str],
    config_format: ConfigFormat = ConfigFormat.NAME,
) -> str:
    names = sorted(configs_to_rules, key=str.lower)
    has_description = any(config_description(plugin, name) for name in names)

    header = ["", "Name"]
    if has_description:
        header.append("Description")
    rows = [header]
    for name in names:
        row = [
            config_emojis.get(name, ""),
            f"`{config_name_to_display(name, config_format, plugin_prefix)}`",
        ]
        if has_description:
            row.append(escape_cell(config_description(plugin, name)))
        rows.append(row)
    return markdown_table(rows)


def update_configs_list(
    markdown: str,
    plugin: Plugin,
    configs_to_rules: ConfigsToRules,
    plugin_prefix: str,
    config_emojis: Mapping[str, str],
    config_format: ConfigFormat = ConfigFormat.NAME,
) -> str:
    if not configs_to_rules:
        # No non-ignored configs.
        return markdown
    content = generate_config_list_markdown(
        plugin, configs_to_rules, plugin_prefix, config_emojis, config_format
    )
    return replace_marker_region(markdown, BEGIN_CONFIG_LIST_MARKER, END_CONFIG_LIST_MARKER, content)
