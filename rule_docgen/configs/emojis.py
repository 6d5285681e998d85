"""Config to emoji mapping."""

from __future__ import annotations

from typing import Mapping, Sequence

from rule_docgen.constants import DEFAULT_CONFIG_EMOJIS
from rule_docgen.errors import InvalidOptionError
from rule_docgen.rules.models import Plugin

ConfigEmojis = dict[str, str]


def parse_config_emoji_options(
    plugin: Plugin, entries: Sequence[str] | Mapping[str, str] | None = None
) -> ConfigEmojis:
    emojis: ConfigEmojis = {
        name: emoji
        for name, emoji in DEFAULT_CONFIG_EMOJIS.items()
        if name in plugin.configs
    }
    if not entries:
        return emojis

    pairs: list[tuple[str, str]] = []
    if isinstance(entries, Mapping):
        pairs = [(str(name), str(emoji or "")) for name, emoji in entries.items()]
    else:
        for entry in entries:
            config, _, emoji = entry.partition(",")
            if not config.strip() or "," in emoji:
                raise InvalidOptionError(
                    "config_emoji", f"{entry}. Expected format: config,emoji"
                )
            pairs.append((config.strip(), emoji.strip()))

    for config, emoji in pairs:
        if config not in plugin.configs:
            raise InvalidOptionError("config_emoji", f"{config} config not found")
        if emoji:
            emojis[config] = emoji
        else:
            # A bare config name drops the default emoji.
            emojis.pop(config, None)
    return emojis


def config_badge(config_name: str, emojis: Mapping[str, str]) -> str:
    return emojis.get(config_name) or f"![badge-{config_name}][]"
