from pathlib import Path

import pytest

from rule_docgen.constants import END_RULE_HEADER_MARKER
from rule_docgen.errors import MissingDocumentError
from rule_docgen.executor import DocsExecutor
from rule_docgen.models import ActionKind, ActionStatus, DocAction, DocsPlan, DocumentRole
from rule_docgen.options import build_options
from rule_docgen.planner import DocsPlanner, build_plan
from rule_docgen.repositories.documents import DocumentRepository
from rule_docgen.rules.models import Plugin


def _apply(root: Path, plan) -> tuple[int, int, list[str]]:
    return DocsExecutor(DocumentRepository(root)).execute(plan)


def test_plan_reports_drift_without_writing(plugin_root: Path) -> None:
    before = (plugin_root / "docs" / "rules" / "no-foo.md").read_text(encoding="utf-8")

    plan = build_plan(plugin_root)

    assert plan.has_drift()
    assert plan.is_valid()
    assert {action.status for action in plan.actions} == {ActionStatus.UPDATE}
    assert [action.rule for action in plan.actions] == ["no-foo", "no-bar", None]
    assert plan.actions[-1].role == DocumentRole.RULE_LIST
    assert (plugin_root / "docs" / "rules" / "no-foo.md").read_text(encoding="utf-8") == before


def test_drift_carries_unified_diff(plugin_root: Path) -> None:
    plan = build_plan(plugin_root)
    no_foo = next(action for action in plan.actions if action.rule == "no-foo")

    assert no_foo.diff.startswith("--- docs/rules/no-foo.md (current)\n+++ docs/rules/no-foo.md (expected)\n")
    assert "+# Disallow foo (`test/no-foo`)\n" in no_foo.diff


def test_apply_writes_expected_documents(plugin_root: Path) -> None:
    applied, failed, failures = _apply(plugin_root, build_plan(plugin_root))

    assert (applied, failed, failures) == (3, 0, [])
    assert (plugin_root / "docs" / "rules" / "no-foo.md").read_text(encoding="utf-8") == (
        "# Disallow foo (`test/no-foo`)\n"
        "\n"
        "💼 This rule is enabled in the ✅ `recommended` config.\n"
        "\n"
        "🔧 This rule is automatically fixable by the `--fix` CLI option.\n"
        "\n"
        f"{END_RULE_HEADER_MARKER}\n"
        "\n"
        "## Rule details\n"
        "\n"
        "Foo is bad.\n"
    )
    assert (plugin_root / "docs" / "rules" / "no-bar.md").read_text(encoding="utf-8") == (
        "# `test/no-bar`\n"
        "\n"
        "❌ This rule is deprecated.\n"
        "\n"
        f"{END_RULE_HEADER_MARKER}\n"
        "\n"
        "Bar is bad.\n"
    )

    readme = (plugin_root / "README.md").read_text(encoding="utf-8")
    assert readme.startswith("# eslint-plugin-test\n\nIntro prose.\n")
    assert readme.endswith("<!-- end auto-generated rules list -->\n\n## License\n")
    assert "[no-foo](docs/rules/no-foo.md)" in readme
    assert "`recommended`" in readme
    assert readme.index("[no-foo]") < readme.index("[no-bar]")


def test_second_plan_after_apply_is_clean(plugin_root: Path) -> None:
    _apply(plugin_root, build_plan(plugin_root))

    plan = build_plan(plugin_root)

    assert not plan.has_drift()
    assert plan.summary()["noop"] == 3
    assert _apply(plugin_root, plan) == (0, 0, [])


def test_ignored_config_is_left_out(plugin_root: Path) -> None:
    options = build_options({"ignore_config": ["recommended"]})

    plan = build_plan(plugin_root, options)
    no_foo = next(action for action in plan.actions if action.rule == "no-foo")
    readme = plan.actions[-1].payload

    assert "💼" not in no_foo.payload
    assert "✅" not in readme
    # Configs list markers stay empty when no config remains.
    assert (
        "<!-- begin auto-generated configs list -->\n<!-- end auto-generated configs list -->"
        in readme
    )


def test_ignore_deprecated_rules(plugin_root: Path) -> None:
    options = build_options({"ignore_deprecated_rules": True})

    plan = build_plan(plugin_root, options)

    assert [action.rule for action in plan.actions] == ["no-foo", None]
    assert "no-bar" not in plan.actions[-1].payload


def test_missing_rule_doc_aborts(plugin_root: Path) -> None:
    (plugin_root / "docs" / "rules" / "no-bar.md").unlink()

    with pytest.raises(MissingDocumentError, match="no-bar.md"):
        build_plan(plugin_root)


def test_missing_rule_list_aborts(plugin_root: Path) -> None:
    (plugin_root / "README.md").unlink()

    with pytest.raises(MissingDocumentError, match="README.md"):
        build_plan(plugin_root)


def test_section_violations_are_collected(plugin_root: Path) -> None:
    options = build_options({"rule_doc_section_include": ["Rule details"]})

    plan = build_plan(plugin_root, options)

    assert not plan.is_valid()
    assert [violation.rule for violation in plan.violations] == ["no-bar"]


def test_explicit_plugin_and_prefix(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("# Readme\n", encoding="utf-8")
    (tmp_path / "docs" / "rules").mkdir(parents=True)
    (tmp_path / "docs" / "rules" / "no-foo.md").write_text("", encoding="utf-8")
    plugin = Plugin(name="custom", rules={"no-foo": {"meta": {"docs": {"description": "Foo."}}}})
    options = build_options({"plugin_prefix": "acme"})

    plan = DocsPlanner(tmp_path, options=options, plugin=plugin).build()

    assert plan.actions[0].payload.startswith("# Foo (`acme/no-foo`)\n")
    # README has no markers, so it is left alone.
    assert plan.actions[-1].status == ActionStatus.NOOP


def test_executor_reports_missing_payload(tmp_path: Path) -> None:
    plan = DocsPlan(
        actions=[
            DocAction(ActionKind.WRITE_TEXT, tmp_path / "a.md", ActionStatus.UPDATE, "out of date")
        ]
    )

    applied, failed, failures = _apply(tmp_path, plan)

    assert (applied, failed) == (0, 1)
    assert failures == [f"Missing text payload for write action: {tmp_path / 'a.md'}"]


def test_sections_are_checked_on_the_document_as_read(plugin_root: Path) -> None:
    options = build_options({"rule_doc_section_exclude": ["Old title"]})

    plan = build_plan(plugin_root, options)

    # The regenerated header drops "# Old title", the file on disk still has it.
    assert [violation.rule for violation in plan.violations] == ["no-bar"]
    assert "Old title" not in next(
        action.payload for action in plan.actions if action.rule == "no-bar"
    )
