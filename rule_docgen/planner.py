from pathlib import Path
from typing import Optional

from rule_docgen.configs.emojis import ConfigEmojis, parse_config_emoji_options
from rule_docgen.configs.resolver import (
    ConfigsToRules,
    get_plugin_prefix,
    resolve_configs_to_rules,
)
from rule_docgen.constants import END_RULE_HEADER_MARKER
from rule_docgen.markdown import replace_or_create_header
from rule_docgen.models import (
    ActionKind,
    ActionStatus,
    DocAction,
    DocsPlan,
    DocumentRole,
    SectionViolation,
)
from rule_docgen.options import GeneratorOptions
from rule_docgen.rendering.config_list import update_configs_list
from rule_docgen.rendering.header import generate_rule_header_lines
from rule_docgen.rendering.notices import derive_badges
from rule_docgen.rendering.rule_list import update_rules_list
from rule_docgen.repositories.documents import DocumentRepository
from rule_docgen.repositories.plugin import PluginRepository
from rule_docgen.rules.models import Plugin, RuleDetails
from rule_docgen.rules.normalizer import gather_rule_details
from rule_docgen.utils import display_path, unified_diff
from rule_docgen.validator import SectionValidator


class DocsPlanner:
    """Render every managed document and record how it differs from disk.

    Nothing is written here; the resulting plan is applied by ``DocsExecutor``
    in write mode or reported as drift in check mode. A missing document
    aborts planning by raising ``MissingDocumentError``.
    """

    def __init__(
        self,
        root: Path,
        options: Optional[GeneratorOptions] = None,
        plugin: Optional[Plugin] = None,
        documents: Optional[DocumentRepository] = None,
    ) -> None:
        self.root = root
        self.options = options or GeneratorOptions()
        self.plugin = plugin
        self.documents = documents or DocumentRepository(root)
        self.validator = SectionValidator(
            include=self.options.rule_doc_section_include,
            exclude=self.options.rule_doc_section_exclude,
            check_options=self.options.rule_doc_section_options,
        )

        self.actions: list[DocAction] = []
        self.violations: list[SectionViolation] = []

    def build(self) -> DocsPlan:
        plugin = self.plugin or PluginRepository(self.root, self.options.plugin).load()
        plugin_prefix = (
            self.options.plugin_prefix
            if self.options.plugin_prefix is not None
            else get_plugin_prefix(plugin.name)
        )
        details = gather_rule_details(plugin, self.options.ignore_deprecated_rules)
        configs_to_rules = resolve_configs_to_rules(
            plugin,
            [item.name for item in details],
            plugin_prefix,
            ignore_config=self.options.ignore_config,
        )
        config_emojis = parse_config_emoji_options(plugin, self.options.config_emoji)

        for item in details:
            self._plan_rule_doc(item, configs_to_rules, config_emojis, plugin_prefix)
        self._plan_rule_list(plugin, details, configs_to_rules, config_emojis, plugin_prefix)
        return DocsPlan(actions=self.actions, violations=self.violations)

    def _plan_rule_doc(
        self,
        details: RuleDetails,
        configs_to_rules: ConfigsToRules,
        config_emojis: ConfigEmojis,
        plugin_prefix: str,
    ) -> None:
        path = self.documents.rule_doc_path(self.options.path_rule_doc, details.name)
        contents = self.documents.read(path)

        badges = derive_badges(
            details,
            configs_to_rules,
            config_emojis,
            notices=self.options.rule_doc_notices,
            url_configs=self.options.url_configs,
        )
        header_lines = generate_rule_header_lines(
            details, badges, plugin_prefix, self.options.rule_doc_title_format
        )
        updated = replace_or_create_header(contents, header_lines, END_RULE_HEADER_MARKER)

        self.actions.append(
            self._write_action(path, contents, updated, DocumentRole.RULE_DOC, details.name)
        )
        self.violations.extend(self.validator.validate(details, contents, path))

    def _plan_rule_list(
        self,
        plugin: Plugin,
        details: list[RuleDetails],
        configs_to_rules: ConfigsToRules,
        config_emojis: ConfigEmojis,
        plugin_prefix: str,
    ) -> None:
        path = self.documents.rule_list_path(self.options.path_rule_list)
        contents = self.documents.read(path)

        updated = update_rules_list(
            details,
            contents,
            configs_to_rules,
            config_emojis,
            columns=self.options.rule_list_columns,
            path_rule_doc=self.options.path_rule_doc,
            path_rule_list=self.options.path_rule_list,
            url_configs=self.options.url_configs,
            sort_by=self.options.rule_list_sort,
            split_by=self.options.split_by,
        )
        updated = update_configs_list(
            updated,
            plugin,
            configs_to_rules,
            plugin_prefix,
            config_emojis,
            self.options.config_format,
        )
        self.actions.append(
            self._write_action(path, contents, updated, DocumentRole.RULE_LIST)
        )

    def _write_action(
        self,
        path: Path,
        current: str,
        rendered: str,
        role: DocumentRole,
        rule: Optional[str] = None,
    ) -> DocAction:
        if current == rendered:
            return DocAction(
                ActionKind.WRITE_TEXT,
                path,
                ActionStatus.NOOP,
                "already up to date",
                payload=rendered,
                role=role,
                rule=rule,
            )
        shown = display_path(path, self.root)
        return DocAction(
            ActionKind.WRITE_TEXT,
            path,
            ActionStatus.UPDATE,
            "rule doc out of date" if role == DocumentRole.RULE_DOC else "rules list out of date",
            payload=rendered,
            diff=unified_diff(shown, current, rendered),
            role=role,
            rule=rule,
        )


def build_plan(
    root: Path, options: Optional[GeneratorOptions] = None, plugin: Optional[Plugin] = None
) -> DocsPlan:
    return DocsPlanner(root=root, options=options, plugin=plugin).build()
