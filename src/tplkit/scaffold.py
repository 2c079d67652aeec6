"""Interactive flow that turns a few answers into a starter project."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import (
    CURRENT_DIRECTORY,
    DEFAULT_TARGET,
    Framework,
    Language,
    PackageManager,
    ProjectConfig,
    TemplateSelection,
)
from .errors import OverwriteDeclined
from .fs import clear_directory, copy_tree, is_effectively_empty, path_exists
from .naming import validated_package_name
from .prompts import ConsolePrompter, Prompter
from .template import available_templates, installation_root, resolve_template

__all__ = ["ProjectScaffolder", "next_steps"]


LOGGER = logging.getLogger(__name__)

_INDENT = " " * 18


def next_steps(config: ProjectConfig) -> list[str]:
    """Return the commands the user should run after scaffolding."""

    manager = config.package_manager.value
    cd_hint = "" if config.is_current_directory else f"cd {config.target}"
    return [cd_hint, f"{manager} install", f"{manager} run dev"]


class ProjectScaffolder:
    """Drive the prompts and copy the chosen template.

    Parameters
    ----------
    prompter:
        Source of answers. Defaults to a :class:`ConsolePrompter`.
    console:
        Where progress and next-step instructions are printed.
    installation_root:
        Directory containing the ``template-*`` folders. When omitted it is
        discovered by walking up from the installed package.
    cwd:
        Directory relative targets are resolved against. Defaults to the
        process working directory.
    """

    def __init__(
        self,
        prompter: Prompter | None = None,
        console: Console | None = None,
        *,
        installation_root: str | Path | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.console = console or Console()
        self.prompter = prompter or ConsolePrompter(self.console)
        self.installation_root = Path(installation_root) if installation_root is not None else None
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def run(self, directory: str | None = None) -> ProjectConfig:
        """Execute the whole flow and return the collected configuration."""

        target = self.acquire_target(directory)
        self.check_overwrite(target)
        project_name = validated_package_name(ProjectConfig.project_name_for(target, self.cwd))
        LOGGER.debug("target=%s project_name=%s", target, project_name)

        selection = self.select_template()
        self.materialize(target, selection)

        manager = self.prompter.select("Select package manager:", list(PackageManager))
        config = ProjectConfig(
            target=target,
            project_name=project_name,
            selection=selection,
            package_manager=manager,
        )
        self.report(config)
        return config

    def resolve_path(self, target: str) -> Path:
        return self.cwd / target

    def acquire_target(self, directory: str | None) -> str:
        if directory is None:
            directory = self.prompter.text("Project name:", default=DEFAULT_TARGET)
        target = directory.strip()
        if target != "/":
            target = target.rstrip("/")
        return target or DEFAULT_TARGET

    def check_overwrite(self, target: str) -> None:
        path = self.resolve_path(target)
        if not path_exists(path) or is_effectively_empty(path):
            return

        if target == CURRENT_DIRECTORY:
            message = "Current directory is not empty. Remove existing files and continue?"
        else:
            message = f"Target directory {target} is not empty. Remove existing files and continue?"
        if not self.prompter.confirm(message):
            raise OverwriteDeclined()
        clear_directory(path)

    def select_template(self) -> TemplateSelection:
        language = self.prompter.select("Select language:", list(Language))
        framework = self.prompter.select("Select framework:", list(Framework))
        return TemplateSelection(language=language, framework=framework)

    def materialize(self, target: str, selection: TemplateSelection) -> Path:
        root = self.installation_root or installation_root()
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug("templates under %s: %s", root, available_templates(root))
        source = resolve_template(selection, root)
        destination = self.resolve_path(target)

        self.console.print(
            f"\nScaffolding project in {destination.resolve()}...", markup=False, highlight=False
        )
        copy_tree(source, destination)
        LOGGER.info("copied %s into %s", source, destination)
        return destination

    def report(self, config: ProjectConfig) -> None:
        self.console.print("\nDone. Now run:\n", highlight=False)
        for line in next_steps(config):
            self.console.print(f"{_INDENT}[green]{escape(line)}[/green]", highlight=False)
