"""Render the generated header block of a rule doc."""

from __future__ import annotations

from typing import Sequence

from rule_docgen.constants import END_RULE_HEADER_MARKER
from rule_docgen.models import TitleFormat
from rule_docgen.rendering.notices import Badge
from rule_docgen.rules.models import RuleDetails


def prefixed_name(name: str, plugin_prefix: str) -> str:
    return f"{plugin_prefix}/{name}" if plugin_prefix else name


def rule_title(details: RuleDetails, plugin_prefix: str, title_format: TitleFormat) -> str:
    name = details.name
    full_name = prefixed_name(name, plugin_prefix)
    description = (details.description or "").strip()
    if description.endswith("."):
        description = description[:-1].rstrip()

    if not description:
        if title_format in (TitleFormat.DESC_PARENS_PREFIX_NAME, TitleFormat.PREFIX_NAME):
            return f"# `{full_name}`"
        return f"# `{name}`"

    if title_format == TitleFormat.DESC:
        return f"# {description}"
    if title_format == TitleFormat.DESC_PARENS_NAME:
        return f"# {description} (`{name}`)"
    if title_format == TitleFormat.DESC_PARENS_PREFIX_NAME:
        return f"# {description} (`{full_name}`)"
    if title_format == TitleFormat.NAME:
        return f"# {name}"
    return f"# {full_name}"


def generate_rule_header_lines(
    details: RuleDetails,
    badges: Sequence[Badge],
    plugin_prefix: str,
    title_format: TitleFormat = TitleFormat.DESC_PARENS_PREFIX_NAME,
) -> list[str]:
    lines = [rule_title(details, plugin_prefix, title_format), ""]
    for badge in badges:
        lines.extend([badge.sentence, ""])
    lines.append(END_RULE_HEADER_MARKER)
    return lines
