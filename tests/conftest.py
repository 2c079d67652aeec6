from __future__ import annotations

import json
import sys
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


def _write_template(root: Path, name: str, *, main_file: str) -> None:
    template = root / name
    (template / "src").mkdir(parents=True)
    (template / "package.json").write_text(
        json.dumps({"name": name, "private": True, "version": "0.0.0"}, indent=2),
        encoding="utf-8",
    )
    (template / "index.html").write_text("<div id=\"app\"></div>\n", encoding="utf-8")
    (template / "_gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (template / "src" / main_file).write_text(f"// {name}\n", encoding="utf-8")


@pytest.fixture()
def install_root(tmp_path: Path) -> Path:
    """A fake installation: a ``package.json`` marker next to a few templates."""

    root = tmp_path / "install"
    root.mkdir()
    (root / "package.json").write_text('{"name": "tt"}', encoding="utf-8")
    _write_template(root, "template-vue", main_file="main.js")
    _write_template(root, "template-vue-ts", main_file="main.ts")
    _write_template(root, "template-react", main_file="main.jsx")
    return root


@pytest.fixture()
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty working directory the scaffolder runs in."""

    path = tmp_path / "workspace"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture()
def console() -> Console:
    return Console(file=StringIO(), width=120, color_system=None)
