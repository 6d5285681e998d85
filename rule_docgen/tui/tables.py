from collections import Counter
from pathlib import Path

from rich.panel import Panel
from rich.table import Column, Table

from rule_docgen.models import DocAction, DocsPlan, DocumentRole, SectionViolation
from rule_docgen.tui.enums import ACTION_STATUS_STYLE, UIStyle
from rule_docgen.utils import display_path


class PlanTable:
    @staticmethod
    def summary_block(plan: DocsPlan, mode: str):
        counts = Counter(action.status.value for action in plan.actions)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Documents", str(len(plan.actions)))
        table.add_row("Statuses", "  ".join(chips))
        table.add_row("Violations", str(len(plan.violations)))
        return table

    @staticmethod
    def split_actions(plan: DocsPlan) -> tuple[list[DocAction], list[DocAction]]:
        rule_docs: list[DocAction] = []
        rule_lists: list[DocAction] = []
        for action in plan.actions:
            if action.role == DocumentRole.RULE_LIST:
                rule_lists.append(action)
            else:
                rule_docs.append(action)
        return rule_docs, rule_lists

    @staticmethod
    def actions_table(actions: list[DocAction], root: Path) -> Table:
        table = Table(
            Column(header="Rule", width=28),
            Column(header="Status", width=10),
            Column(header="Document", overflow="ellipsis", max_width=58),
            Column(header="Detail", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )

        for action in actions:
            status_style = ACTION_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            status_text = f"[{status_style}]{action.status.value}[/{status_style}]"
            table.add_row(
                action.rule or "",
                status_text,
                display_path(action.path, root),
                action.detail,
            )
        return table


class ViolationTable:
    @staticmethod
    def violations_table(items: list[SectionViolation], root: Path) -> Table:
        table = Table(
            Column(header="Rule", width=28),
            Column(header="Document", overflow="ellipsis", max_width=48),
            Column(header="Problem", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for item in items:
            table.add_row(item.rule, display_path(item.path, root), item.message)
        return table


class ApplyTable:
    @staticmethod
    def stats_panel(applied: int, failed: int) -> Panel:
        stats: dict[str, str] = {
            "written": str(applied),
            "failed": str(failed),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title="generate",
            border_style=UIStyle.GREEN.value if failed == 0 else UIStyle.RED.value,
        )
