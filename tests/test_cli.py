from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from tests.fixtures.prompter import ScriptedPrompter
from tplkit import __version__
from tplkit.cli import build_parser, main
from tplkit.config import Framework, Language, PackageManager


def test_parser_accepts_optional_directory():
    parser = build_parser()
    assert parser.parse_args([]).directory is None
    assert parser.parse_args(["myapp"]).directory == "myapp"


def test_version_flag(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_cli_scaffolds_project(install_root: Path, workspace: Path, console: Console):
    prompter = ScriptedPrompter(Language.JAVASCRIPT, Framework.VUE, PackageManager.NPM)

    exit_code = main(["myapp"], prompter=prompter, installation_root=install_root, console=console)

    assert exit_code == 0
    assert (workspace / "myapp" / ".gitignore").exists()


def test_cli_reports_fatal_errors_on_stderr(
    install_root: Path, workspace: Path, console: Console, capsys: pytest.CaptureFixture[str]
):
    (workspace / "myapp").mkdir()
    (workspace / "myapp" / "file.txt").write_text("x", encoding="utf-8")
    prompter = ScriptedPrompter(False)

    exit_code = main(["myapp"], prompter=prompter, installation_root=install_root, console=console)

    assert exit_code == 1
    assert "Operation canceled" in capsys.readouterr().err
    assert (workspace / "myapp" / "file.txt").exists()


def test_cli_reports_invalid_name(install_root: Path, workspace: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["__"], prompter=ScriptedPrompter(), installation_root=install_root)

    assert exit_code == 1
    assert "Invalid project name" in capsys.readouterr().err


def test_cli_reports_name_too_long(install_root: Path, workspace: Path, capsys: pytest.CaptureFixture[str]):
    prompter = ScriptedPrompter(Language.JAVASCRIPT, Framework.VUE, PackageManager.NPM)

    exit_code = main(["a" * 300], prompter=prompter, installation_root=install_root)

    assert exit_code == 1
    err = " ".join(capsys.readouterr().err.split())
    assert "failed to inspect" in err
    assert "File name too long" in err
