"""Command line interface for the ``tt`` template installer."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .errors import ScaffoldError
from .prompts import Prompter
from .scaffold import ProjectScaffolder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tt",
        description="Install template for vue, react, angular, svelte and etc.",
    )
    parser.add_argument(
        "directory",
        metavar="DIRECTORY",
        nargs="?",
        help="DIRECTORY for install template",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    prompter: Prompter | None = None,
    installation_root: str | Path | None = None,
    console: Console | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    scaffolder = ProjectScaffolder(prompter, console, installation_root=installation_root)
    try:
        scaffolder.run(args.directory)
    except ScaffoldError as exc:
        Console(stderr=True).print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
