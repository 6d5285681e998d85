import sys
import json
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


README_WITH_MARKERS = (
    "# eslint-plugin-test\n"
    "\n"
    "Intro prose.\n"
    "\n"
    "## Configs\n"
    "\n"
    "<!-- begin auto-generated configs list -->\n"
    "<!-- end auto-generated configs list -->\n"
    "\n"
    "## Rules\n"
    "\n"
    "<!-- begin auto-generated rules list -->\n"
    "<!-- end auto-generated rules list -->\n"
    "\n"
    "## License\n"
)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def basic_manifest() -> dict[str, Any]:
    return {
        "name": "eslint-plugin-test",
        "rules": {
            "no-foo": {
                "meta": {
                    "docs": {"description": "Disallow foo."},
                    "fixable": "code",
                }
            },
            "no-bar": {"meta": {"deprecated": True}},
        },
        "configs": {
            "recommended": {"rules": {"test/no-foo": "error"}},
        },
    }


@pytest.fixture
def plugin_root(tmp_path: Path, write_json, basic_manifest) -> Path:
    root = tmp_path / "plugin"
    write_json(root / "plugin.json", basic_manifest)
    (root / "README.md").write_text(README_WITH_MARKERS, encoding="utf-8")
    rules_dir = root / "docs" / "rules"
    rules_dir.mkdir(parents=True)
    (rules_dir / "no-foo.md").write_text("## Rule details\n\nFoo is bad.\n", encoding="utf-8")
    (rules_dir / "no-bar.md").write_text("# Old title\n\nBar is bad.\n", encoding="utf-8")
    return root


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
