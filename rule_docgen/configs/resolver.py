"""Resolve which rules each plugin config enables."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from rule_docgen.constants import DISABLED_SEVERITIES
from rule_docgen.rules.models import Plugin
from rule_docgen.rules.normalizer import read_field

ConfigsToRules = dict[str, list[str]]

_PLUGIN_PACKAGE_PREFIX = "eslint-plugin"


def get_plugin_prefix(plugin_name: str) -> str:
    if plugin_name.startswith("@"):
        scope, _, package = plugin_name.partition("/")
        if package == _PLUGIN_PACKAGE_PREFIX:
            return scope
        if package.startswith(f"{_PLUGIN_PACKAGE_PREFIX}-"):
            return f"{scope}/{package[len(_PLUGIN_PACKAGE_PREFIX) + 1:]}"
        return plugin_name
    if plugin_name.startswith(f"{_PLUGIN_PACKAGE_PREFIX}-"):
        return plugin_name[len(_PLUGIN_PACKAGE_PREFIX) + 1 :]
    return plugin_name


def is_enabled(severity: Any) -> bool:
    if isinstance(severity, (list, tuple)):
        if not severity:
            return False
        severity = severity[0]
    if isinstance(severity, str):
        severity = severity.strip().lower()
    return severity not in DISABLED_SEVERITIES


def _config_rule_entries(config: Any) -> Iterable[tuple[str, Any]]:
    rules = read_field(config, "rules")
    if isinstance(rules, Mapping):
        yield from rules.items()
    for override in read_field(config, "overrides") or []:
        override_rules = read_field(override, "rules")
        if isinstance(override_rules, Mapping):
            yield from override_rules.items()


def _strip_prefix(rule_id: str, plugin_prefix: str) -> str:
    prefixed = f"{plugin_prefix}/"
    if plugin_prefix and rule_id.startswith(prefixed):
        return rule_id[len(prefixed) :]
    return rule_id


def resolve_configs_to_rules(
    plugin: Plugin,
    rule_names: Sequence[str],
    plugin_prefix: str,
    ignore_config: Sequence[str] = (),
) -> ConfigsToRules:
    known = list(rule_names)
    configs_to_rules: ConfigsToRules = {}
    for config_name, config in plugin.configs.items():
        if config_name in ignore_config:
            continue
        enabled: set[str] = set()
        for rule_id, severity in _config_rule_entries(config):
            name = _strip_prefix(str(rule_id), plugin_prefix)
            if name in known and is_enabled(severity):
                enabled.add(name)
        configs_to_rules[config_name] = [name for name in known if name in enabled]
    return configs_to_rules


def configs_for_rule(configs_to_rules: ConfigsToRules, rule_name: str) -> list[str]:
    return sorted(
        (name for name, rules in configs_to_rules.items() if rule_name in rules),
        key=str.lower,
    )


def config_description(plugin: Plugin, config_name: str) -> str:
    value = read_field(plugin.configs.get(config_name), "description")
    return str(value) if value else ""
