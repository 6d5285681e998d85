"""Tests for rule doc titles and header blocks."""

import pytest

from rule_docgen.constants import END_RULE_HEADER_MARKER
from rule_docgen.models import TitleFormat
from rule_docgen.rendering.header import generate_rule_header_lines, rule_title
from rule_docgen.rendering.notices import derive_badges
from rule_docgen.rules.models import RuleDetails


@pytest.mark.parametrize(
    ("title_format", "expected"),
    [
        (TitleFormat.DESC, "# Disallow foo"),
        (TitleFormat.DESC_PARENS_NAME, "# Disallow foo (`no-foo`)"),
        (TitleFormat.DESC_PARENS_PREFIX_NAME, "# Disallow foo (`test/no-foo`)"),
        (TitleFormat.NAME, "# no-foo"),
        (TitleFormat.PREFIX_NAME, "# test/no-foo"),
    ],
)
def test_title_formats(title_format: TitleFormat, expected: str) -> None:
    details = RuleDetails(name="no-foo", description="Disallow foo.")

    assert rule_title(details, "test", title_format) == expected


def test_title_without_description_falls_back_to_name() -> None:
    details = RuleDetails(name="no-foo")

    assert rule_title(details, "test", TitleFormat.DESC) == "# `no-foo`"
    assert rule_title(details, "test", TitleFormat.DESC_PARENS_PREFIX_NAME) == "# `test/no-foo`"


def test_empty_prefix_uses_bare_name() -> None:
    details = RuleDetails(name="no-foo", description="Disallow foo")

    assert rule_title(details, "", TitleFormat.PREFIX_NAME) == "# no-foo"


def test_header_lines_include_badges_and_marker() -> None:
    details = RuleDetails(name="no-foo", description="Disallow foo.", fixable=True)
    badges = derive_badges(details, {"recommended": ["no-foo"]}, {"recommended": "✅"})

    lines = generate_rule_header_lines(details, badges, "test")

    assert lines == [
        "# Disallow foo (`test/no-foo`)",
        "",
        "💼 This rule is enabled in the ✅ `recommended` config.",
        "",
        "🔧 This rule is automatically fixable by the `--fix` CLI option.",
        "",
        END_RULE_HEADER_MARKER,
    ]


def test_header_lines_without_badges() -> None:
    lines = generate_rule_header_lines(RuleDetails(name="no-foo"), [], "test")

    assert lines == ["# `test/no-foo`", "", END_RULE_HEADER_MARKER]
