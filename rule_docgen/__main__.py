from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from click.core import ParameterSource
from rich.console import Console

from rule_docgen.errors import DocgenError
from rule_docgen.executor import DocsExecutor
from rule_docgen.models import ColumnType, ConfigFormat, NoticeType, TitleFormat
from rule_docgen.options import build_options
from rule_docgen.planner import DocsPlanner
from rule_docgen.repositories.documents import DocumentRepository
from rule_docgen.repositories.options import OptionsRepository
from rule_docgen.tui import DocsConsoleUI


NOTICE_VALUES = ", ".join(item.value for item in NoticeType)
COLUMN_VALUES = ", ".join(item.value for item in ColumnType)

# Parameters that are not generator options.
_CLI_ONLY = ("path", "config", "verbose")


def _path_argument() -> Callable:
    return click.argument(
        "path",
        required=False,
        default=".",
        type=click.Path(path_type=Path, file_okay=False, exists=True),
    )


def _generator_options(func: Callable) -> Callable:
    decorators = [
        click.option("--config", type=click.Path(path_type=Path, dir_okay=False), help="Options file (default: .rule-docgen.json/.yaml in PATH)."),
        click.option("--plugin", help="Plugin manifest file, Python file or `module[:attribute]`."),
        click.option("--plugin-prefix", help="Rule name prefix (default: derived from the plugin name)."),
        click.option("--config-emoji", multiple=True, metavar="CONFIG,EMOJI", help="Emoji for a config (repeatable)."),
        click.option("--config-format", type=click.Choice([item.value for item in ConfigFormat]), help="How config names are shown in the configs list."),
        click.option("--ignore-config", multiple=True, help="Config to leave out entirely (repeatable)."),
        click.option("--ignore-deprecated-rules", is_flag=True, help="Skip deprecated rules everywhere."),
        click.option("--path-rule-doc", help="Rule doc path template, must contain {name}."),
        click.option("--path-rule-list", help="Document that holds the rules list."),
        click.option("--rule-doc-notices", help=f"Comma-separated notices: {NOTICE_VALUES}."),
        click.option("--rule-doc-section-include", multiple=True, help="Header every rule doc must have (repeatable)."),
        click.option("--rule-doc-section-exclude", multiple=True, help="Header no rule doc may have (repeatable)."),
        click.option("--rule-doc-section-options/--no-rule-doc-section-options", default=True, help="Require an options section that mentions every option."),
        click.option("--rule-doc-title-format", type=click.Choice([item.value for item in TitleFormat]), help="Rule doc title format."),
        click.option("--rule-list-columns", help=f"Comma-separated columns: {COLUMN_VALUES}."),
        click.option("--rule-list-sort", help="Comma-separated columns to group rows by (non-empty first)."),
        click.option("--split-by", help="Rule attribute or dotted meta path to split the rules list by."),
        click.option("--url-configs", help="Link to documentation about the configs."),
        click.option("-v", "--verbose", is_flag=True, help="List up-to-date documents too."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _explicit_options(ctx: click.Context, params: Dict[str, Any]) -> Dict[str, Any]:
    explicit: Dict[str, Any] = {}
    for name, value in params.items():
        if name in _CLI_ONLY:
            continue
        if ctx.get_parameter_source(name) in (ParameterSource.DEFAULT, None):
            continue
        explicit[name] = list(value) if isinstance(value, tuple) else value
    return explicit


def _run(ctx: click.Context, params: Dict[str, Any], check: bool) -> None:
    ui = DocsConsoleUI(Console())
    root: Path = params["path"]
    config: Optional[Path] = params.get("config")

    try:
        file_options = OptionsRepository(root, config).load()
        options = build_options(file_options, _explicit_options(ctx, params))
        plan_result = DocsPlanner(root=root, options=options).build()
    except DocgenError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    check = check or options.check
    ui.render_plan(plan_result, root, mode="check" if check else "generate", verbose=params["verbose"])

    if check:
        ui.render_diffs(plan_result, root)
        if plan_result.has_drift() or not plan_result.is_valid():
            raise click.exceptions.Exit(1)
        return

    applied, failed, failures = DocsExecutor(DocumentRepository(root)).execute(plan_result)
    ui.render_apply_result(applied, failed, failures)

    if failed or not plan_result.is_valid():
        raise click.exceptions.Exit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Generate and check lint plugin rule documentation."""
    ctx.obj = {}


@cli.command(help="Regenerate rule doc headers and the rules list.")
@_path_argument()
@_generator_options
@click.pass_context
def generate(ctx: click.Context, **params: Any) -> None:
    _run(ctx, params, check=False)


@cli.command(help="Report out-of-date docs as a diff without writing anything.")
@_path_argument()
@_generator_options
@click.pass_context
def check(ctx: click.Context, **params: Any) -> None:
    _run(ctx, params, check=True)


def main() -> int:
    try:
        # Non-standalone click hands back the code of a raised Exit.
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
