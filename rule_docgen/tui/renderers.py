from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax

from rule_docgen.models import ActionStatus, DocsPlan
from rule_docgen.tui.enums import UIStyle
from rule_docgen.tui.sections import UISection
from rule_docgen.tui.tables import ApplyTable, PlanTable, ViolationTable
from rule_docgen.utils import display_path


class DocsConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_plan(self, plan: DocsPlan, root: Path, mode: str, verbose: bool = False) -> None:
        self.console.print(
            UISection.wrap(
                "docs overview",
                PlanTable.summary_block(plan, mode=mode),
                style=UIStyle.BLUE.value,
            )
        )

        rule_docs, rule_lists = PlanTable.split_actions(plan)
        if not verbose:
            rule_docs = [action for action in rule_docs if action.status != ActionStatus.NOOP]
            rule_lists = [action for action in rule_lists if action.status != ActionStatus.NOOP]

        if rule_docs:
            self.console.print(
                UISection.wrap(
                    "rule docs",
                    PlanTable.actions_table(rule_docs, root),
                    style=UIStyle.CYAN.value,
                )
            )
        if rule_lists:
            self.console.print(
                UISection.wrap(
                    "rules list",
                    PlanTable.actions_table(rule_lists, root),
                    style=UIStyle.MAGENTA.value,
                )
            )
        if not plan.has_drift():
            self.console.print(
                UISection.note(
                    "documents", "All documents up to date.", style=UIStyle.DIM.value
                )
            )

        if plan.violations:
            self.console.print(
                UISection.wrap(
                    "rule doc problems",
                    ViolationTable.violations_table(plan.violations, root),
                    style=UIStyle.RED.value,
                )
            )

    def render_diffs(self, plan: DocsPlan, root: Path) -> None:
        for action in plan.drifted():
            self.console.print(
                UISection.wrap(
                    display_path(action.path, root),
                    Syntax(action.diff.rstrip("\n"), "diff", word_wrap=True),
                    style=UIStyle.YELLOW.value,
                    subtitle="out of date",
                )
            )
        if plan.has_drift():
            self.console.print(
                UISection.note(
                    "next",
                    "Documents are out of date. Regenerate them with:\n"
                    "- rule-docgen generate",
                    style=UIStyle.DIM.value,
                )
            )

    def render_apply_result(self, applied: int, failed: int, failures: list[str]) -> None:
        self.console.print(ApplyTable.stats_panel(applied=applied, failed=failed))
        if failures:
            failure_text = "\n".join([f"- {item}" for item in failures])
            self.console.print(
                UISection.note("failures", failure_text, style=UIStyle.RED.value)
            )
