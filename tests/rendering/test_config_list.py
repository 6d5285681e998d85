"""Tests for the generated configs list."""

from rule_docgen.constants import BEGIN_CONFIG_LIST_MARKER, END_CONFIG_LIST_MARKER
from rule_docgen.models import ConfigFormat
from rule_docgen.rendering.config_list import (
    config_name_to_display,
    generate_config_list_markdown,
    update_configs_list,
)
from rule_docgen.rules.models import Plugin


def test_display_formats() -> None:
    assert config_name_to_display("all", ConfigFormat.NAME, "test") == "all"
    assert config_name_to_display("all", ConfigFormat.PREFIX_NAME, "test") == "test/all"
    assert (
        config_name_to_display("all", ConfigFormat.PLUGIN_COLON_PREFIX_NAME, "test")
        == "plugin:test/all"
    )


def test_table_without_descriptions() -> None:
    plugin = Plugin(name="p", configs={"strict": {}, "all": {}})

    markdown = generate_config_list_markdown(
        plugin, {"strict": [], "all": []}, "test", {}
    )

    assert markdown.splitlines() == [
        "|     | Name     |",
        "| :-- | :------- |",
        "|     | `all`    |",
        "|     | `strict` |",
    ]


def test_table_with_descriptions_and_prefix() -> None:
    plugin = Plugin(
        name="p",
        configs={"recommended": {"description": "Sane defaults."}, "all": {}},
    )

    markdown = generate_config_list_markdown(
        plugin,
        {"recommended": [], "all": []},
        "test",
        {"recommended": "✅"},
        ConfigFormat.PREFIX_NAME,
    )

    lines = markdown.splitlines()
    assert "Description" in lines[0]
    assert "`test/all`" in lines[2]
    assert "`test/recommended`" in lines[3]
    assert "✅" in lines[3]
    assert "Sane defaults." in lines[3]


def test_update_replaces_region() -> None:
    plugin = Plugin(name="p", configs={"all": {}})
    document = f"Intro\n{BEGIN_CONFIG_LIST_MARKER}\nold\n{END_CONFIG_LIST_MARKER}\nOutro\n"

    updated = update_configs_list(document, plugin, {"all": []}, "test", {})

    assert updated.startswith(f"Intro\n{BEGIN_CONFIG_LIST_MARKER}\n\n| ")
    assert updated.endswith(f"\n\n{END_CONFIG_LIST_MARKER}\nOutro\n")
    assert "old" not in updated


def test_update_without_configs_is_unchanged() -> None:
    document = f"{BEGIN_CONFIG_LIST_MARKER}\nold\n{END_CONFIG_LIST_MARKER}\n"

    assert update_configs_list(document, Plugin(name="p"), {}, "test", {}) == document
