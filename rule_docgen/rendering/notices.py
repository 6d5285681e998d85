"""Derive the ordered badge list shown at the top of a rule doc."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from rule_docgen.configs.emojis import config_badge
from rule_docgen.configs.resolver import ConfigsToRules, configs_for_rule
from rule_docgen.constants import (
    EMOJI_CONFIG,
    EMOJI_DEPRECATED,
    EMOJI_FIXABLE,
    EMOJI_HAS_SUGGESTIONS,
    EMOJI_OPTIONS,
    EMOJI_REQUIRES_TYPE_CHECKING,
    EMOJI_TYPE,
)
from rule_docgen.models import NoticeType
from rule_docgen.options import DEFAULT_RULE_DOC_NOTICES
from rule_docgen.rules.models import RuleDetails
from rule_docgen.rules.options import has_options

TYPE_DESCRIPTIONS: dict[str, str] = {
    "problem": "identifies problems that could cause errors or unexpected behavior",
    "suggestion": "identifies potential improvements",
    "layout": "focuses on code formatting",
}


@dataclass(frozen=True)
class Badge:
    kind: NoticeType
    emoji: str
    sentence: str
    link: Optional[str] = None


def _linked(text: str, url: Optional[str]) -> str:
    return f"[{text}]({url})" if url else text


def _configs_badge(
    configs: list[str], config_emojis: Mapping[str, str], url_configs: Optional[str]
) -> Badge:
    listed = [f"{config_badge(name, config_emojis)} `{name}`" for name in configs]
    if len(listed) == 1:
        sentence = (
            f"{EMOJI_CONFIG} This rule is enabled in the {listed[0]} "
            f"{_linked('config', url_configs)}."
        )
    else:
        sentence = (
            f"{EMOJI_CONFIG} This rule is enabled in the following "
            f"{_linked('configs', url_configs)}: {', '.join(listed)}."
        )
    return Badge(NoticeType.CONFIGS, EMOJI_CONFIG, sentence, link=url_configs)


def _deprecated_badge(details: RuleDetails) -> Badge:
    if not details.replaced_by:
        return Badge(
            NoticeType.DEPRECATED,
            EMOJI_DEPRECATED,
            f"{EMOJI_DEPRECATED} This rule is deprecated.",
        )
    replacements = ", ".join(f"[`{name}`]({name}.md)" for name in details.replaced_by)
    return Badge(
        NoticeType.DEPRECATED,
        EMOJI_DEPRECATED,
        f"{EMOJI_DEPRECATED} This rule is deprecated. It was replaced by {replacements}.",
        link=f"{details.replaced_by[0]}.md",
    )


def derive_badges(
    details: RuleDetails,
    configs_to_rules: ConfigsToRules,
    config_emojis: Mapping[str, str],
    notices: Sequence[NoticeType] = DEFAULT_RULE_DOC_NOTICES,
    url_configs: Optional[str] = None,
) -> list[Badge]:
    """Return the badges that apply to ``details``.

    Order follows ``NoticeType`` declaration order, not the order of
    ``notices``, so output is stable whatever order options were given in.
    Ignored configs never reach this point: they are dropped from
    ``configs_to_rules`` during resolution.
    """
    enabled = set(notices)
    badges: list[Badge] = []
    for kind in NoticeType:
        if kind not in enabled:
            continue
        if kind == NoticeType.CONFIGS:
            configs = configs_for_rule(configs_to_rules, details.name)
            if configs:
                badges.append(_configs_badge(configs, config_emojis, url_configs))
        elif kind == NoticeType.FIXABLE and details.fixable:
            badges.append(
                Badge(
                    kind,
                    EMOJI_FIXABLE,
                    f"{EMOJI_FIXABLE} This rule is automatically fixable by the `--fix` CLI option.",
                )
            )
        elif kind == NoticeType.HAS_SUGGESTIONS and details.has_suggestions:
            badges.append(
                Badge(
                    kind,
                    EMOJI_HAS_SUGGESTIONS,
                    f"{EMOJI_HAS_SUGGESTIONS} This rule is manually fixable by editor suggestions.",
                )
            )
        elif kind == NoticeType.REQUIRES_TYPE_CHECKING and details.requires_type_checking:
            badges.append(
                Badge(
                    kind,
                    EMOJI_REQUIRES_TYPE_CHECKING,
                    f"{EMOJI_REQUIRES_TYPE_CHECKING} This rule requires type information.",
                )
            )
        elif kind == NoticeType.TYPE and details.type in EMOJI_TYPE:
            emoji = EMOJI_TYPE[details.type]
            badges.append(
                Badge(
                    kind,
                    emoji,
                    f"{emoji} This rule {TYPE_DESCRIPTIONS[details.type]}.",
                )
            )
        elif kind == NoticeType.OPTIONS and has_options(details.schema):
            badges.append(
                Badge(kind, EMOJI_OPTIONS, f"{EMOJI_OPTIONS} This rule is configurable.")
            )
        elif kind == NoticeType.DEPRECATED and details.deprecated:
            badges.append(_deprecated_badge(details))
    return badges
