"""Project scaffolding module for create-vsouls.

Supported templates:
- React (JavaScript)
- React (TypeScript)
"""

from create_vsouls.scaffolding.generator import empty_dir, generate_project, prepare_target_dir
from create_vsouls.scaffolding.selector import TemplateSelection, select_template
from create_vsouls.scaffolding.templates import FRAMEWORKS, TEMPLATES, Framework, FrameworkVariant

__all__ = (
    "FRAMEWORKS",
    "TEMPLATES",
    "Framework",
    "FrameworkVariant",
    "TemplateSelection",
    "empty_dir",
    "generate_project",
    "prepare_target_dir",
    "select_template",
)
