"""Tests for config to rule resolution."""

from rule_docgen.configs.resolver import (
    config_description,
    configs_for_rule,
    get_plugin_prefix,
    is_enabled,
    resolve_configs_to_rules,
)
from rule_docgen.rules.models import Plugin


def _plugin(configs: dict) -> Plugin:
    return Plugin(
        name="eslint-plugin-test",
        rules={"no-foo": {}, "no-bar": {}, "no-baz": {}},
        configs=configs,
    )


def test_plugin_prefix_variants() -> None:
    assert get_plugin_prefix("eslint-plugin-test") == "test"
    assert get_plugin_prefix("@scope/eslint-plugin") == "@scope"
    assert get_plugin_prefix("@scope/eslint-plugin-test") == "@scope/test"
    assert get_plugin_prefix("custom") == "custom"


def test_severity_levels() -> None:
    assert is_enabled("error") is True
    assert is_enabled("warn") is True
    assert is_enabled(2) is True
    assert is_enabled(["error", {"allow": []}]) is True
    assert is_enabled("off") is False
    assert is_enabled("OFF") is False
    assert is_enabled(0) is False
    assert is_enabled(["off"]) is False
    assert is_enabled([]) is False


def test_prefixed_and_bare_names_resolve() -> None:
    plugin = _plugin(
        {
            "recommended": {"rules": {"test/no-foo": "error", "no-bar": "warn"}},
        }
    )

    result = resolve_configs_to_rules(plugin, ["no-foo", "no-bar", "no-baz"], "test")

    assert result == {"recommended": ["no-foo", "no-bar"]}


def test_disabled_and_foreign_rules_are_dropped() -> None:
    plugin = _plugin(
        {
            "strict": {
                "rules": {
                    "test/no-foo": "off",
                    "other/no-bar": "error",
                    "eqeqeq": "error",
                    "test/no-baz": ["error", {}],
                }
            },
        }
    )

    result = resolve_configs_to_rules(plugin, ["no-foo", "no-bar", "no-baz"], "test")

    assert result == {"strict": ["no-baz"]}


def test_override_rules_are_included() -> None:
    plugin = _plugin(
        {
            "typescript": {
                "overrides": [
                    {"files": ["*.ts"], "rules": {"test/no-bar": "error"}},
                ]
            },
        }
    )

    result = resolve_configs_to_rules(plugin, ["no-foo", "no-bar", "no-baz"], "test")

    assert result == {"typescript": ["no-bar"]}


def test_ignored_configs_are_excluded_entirely() -> None:
    plugin = _plugin(
        {
            "recommended": {"rules": {"test/no-foo": "error"}},
            "all": {"rules": {"test/no-foo": "error"}},
        }
    )

    result = resolve_configs_to_rules(
        plugin, ["no-foo", "no-bar", "no-baz"], "test", ignore_config=["all"]
    )

    assert list(result) == ["recommended"]


def test_config_without_rules_is_kept_empty() -> None:
    plugin = _plugin({"empty": {}})

    assert resolve_configs_to_rules(plugin, ["no-foo"], "test") == {"empty": []}


def test_configs_for_rule_sorted_case_insensitively() -> None:
    configs_to_rules = {
        "strict": ["no-foo"],
        "All": ["no-foo"],
        "recommended": ["no-foo", "no-bar"],
    }

    assert configs_for_rule(configs_to_rules, "no-foo") == ["All", "recommended", "strict"]
    assert configs_for_rule(configs_to_rules, "no-bar") == ["recommended"]
    assert configs_for_rule(configs_to_rules, "no-baz") == []


def test_config_description() -> None:
    plugin = _plugin({"recommended": {"description": "Sane defaults."}, "strict": {}})

    assert config_description(plugin, "recommended") == "Sane defaults."
    assert config_description(plugin, "strict") == ""
    assert config_description(plugin, "missing") == ""
