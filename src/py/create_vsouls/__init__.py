"""create-vsouls: scaffold a front-end project from a bundled template.

Basic usage from a shell:
    create-vsouls my-app --template react-ts

Or programmatically:
    from create_vsouls import resolve

    answers = resolve("my-app", "react-ts", no_prompt=True)
"""

from create_vsouls.__metadata__ import __version__
from create_vsouls.config import ScaffoldConfig
from create_vsouls.exceptions import CreateVsoulsError, ManifestNotFoundError, TemplateNotFoundError
from create_vsouls.prompts import Cancelled, ResolvedAnswers, resolve
from create_vsouls.reporter import detect_package_manager, pkg_from_user_agent
from create_vsouls.scaffolding import FRAMEWORKS, TEMPLATES, generate_project, select_template

__all__ = (
    "FRAMEWORKS",
    "TEMPLATES",
    "Cancelled",
    "CreateVsoulsError",
    "ManifestNotFoundError",
    "ResolvedAnswers",
    "ScaffoldConfig",
    "TemplateNotFoundError",
    "__version__",
    "detect_package_manager",
    "generate_project",
    "pkg_from_user_agent",
    "resolve",
    "select_template",
)
