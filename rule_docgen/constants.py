from typing import Final


BEGIN_RULE_LIST_MARKER: Final[str] = "<!-- begin auto-generated rules list -->"
END_RULE_LIST_MARKER: Final[str] = "<!-- end auto-generated rules list -->"
BEGIN_CONFIG_LIST_MARKER: Final[str] = "<!-- begin auto-generated configs list -->"
END_CONFIG_LIST_MARKER: Final[str] = "<!-- end auto-generated configs list -->"
END_RULE_HEADER_MARKER: Final[str] = "<!-- end auto-generated rule header -->"

DEFAULT_PATH_RULE_DOC: Final[str] = "docs/rules/{name}.md"
DEFAULT_PATH_RULE_LIST: Final[str] = "README.md"

CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    ".rule-docgen.json",
    ".rule-docgen.yaml",
    ".rule-docgen.yml",
)
PLUGIN_MANIFEST_FILENAMES: Final[tuple[str, ...]] = (
    "plugin.json",
    "plugin.yaml",
    "plugin.yml",
)

EMOJI_CONFIG: Final[str] = "💼"
EMOJI_CONFIG_RECOMMENDED: Final[str] = "✅"
EMOJI_FIXABLE: Final[str] = "🔧"
EMOJI_HAS_SUGGESTIONS: Final[str] = "💡"
EMOJI_REQUIRES_TYPE_CHECKING: Final[str] = "💭"
EMOJI_DEPRECATED: Final[str] = "❌"
EMOJI_OPTIONS: Final[str] = "⚙️"
EMOJI_TYPE: Final[dict[str, str]] = {
    "problem": "❗",
    "suggestion": "📖",
    "layout": "📏",
}

DEFAULT_CONFIG_EMOJIS: Final[dict[str, str]] = {
    "recommended": EMOJI_CONFIG_RECOMMENDED,
}

FIXABLE_VALUES: Final[tuple[str, ...]] = ("code", "whitespace")
DISABLED_SEVERITIES: Final[tuple[object, ...]] = ("off", 0, "0")
OPTIONS_SECTION_HEADERS: Final[tuple[str, ...]] = ("Options", "Config")
