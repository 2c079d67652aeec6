"""Interactive installer for starter project templates.

The package prompts for a target directory, a language/framework pair and a
package manager, then copies the matching ``template-*`` directory bundled
next to the tool. The helpers are usable programmatically and via the ``tt``
command line interface.
"""

from __future__ import annotations

from .config import Framework, Language, PackageManager, ProjectConfig, TemplateSelection
from .errors import ScaffoldError
from .naming import is_valid_package_name, normalize_package_name
from .scaffold import ProjectScaffolder
from .template import resolve_template

__all__ = [
    "Framework",
    "Language",
    "PackageManager",
    "ProjectConfig",
    "ProjectScaffolder",
    "ScaffoldError",
    "TemplateSelection",
    "is_valid_package_name",
    "normalize_package_name",
    "resolve_template",
]

__version__ = "0.1.0"
