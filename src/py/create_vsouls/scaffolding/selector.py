"""Template selection.

Maps the resolved answers (or a valid ``--template`` flag) to a single template
identifier and its installed directory.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from create_vsouls._console import logger
from create_vsouls.exceptions import TemplateNotFoundError
from create_vsouls.scaffolding.templates import FRAMEWORKS, Framework, find_variant

if TYPE_CHECKING:
    from create_vsouls.prompts import ResolvedAnswers

__all__ = ("TemplateSelection", "get_template_dir", "select_template")


@dataclass
class TemplateSelection:
    """The outcome of template selection.

    Exactly one of ``template_dir`` and ``custom_command`` is set.
    """

    template: str
    template_dir: "Path | None" = None
    custom_command: "str | None" = None

    @property
    def is_custom(self) -> bool:
        return self.custom_command is not None


def get_template_dir(template_root: Path, template: str) -> Path:
    return template_root / f"template-{template}"


def select_template(
    answers: "ResolvedAnswers",
    arg_template: "str | None",
    *,
    template_root: Path,
    frameworks: Sequence[Framework] = FRAMEWORKS,
) -> TemplateSelection:
    """Pick the template for the resolved answers.

    The variant wins over the framework name, which wins over the raw flag value.

    Args:
        answers: Answers collected by the resolver.
        arg_template: Value of the ``--template`` flag, if any.
        template_root: Directory holding the ``template-<name>`` folders.
        frameworks: Catalog searched for custom generator commands.

    Raises:
        TemplateNotFoundError: If the catalog entry has no installed template directory.
        ValueError: If no template could be determined at all.

    Returns:
        The selected template.
    """
    template = answers.variant or (answers.framework.name if answers.framework else None) or arg_template
    if not template:
        msg = "No template was selected."
        raise ValueError(msg)

    variant = find_variant(template, frameworks)
    if variant is not None and variant.custom_command:
        command = variant.custom_command.replace("TARGET_DIR", answers.target_dir)
        logger.debug("Template %s delegates to an external generator: %s", template, command)
        return TemplateSelection(template=template, custom_command=command)

    template_dir = get_template_dir(template_root, template)
    if not template_dir.is_dir():
        raise TemplateNotFoundError(template, str(template_dir))
    logger.debug("Using template %s from %s", template, template_dir)
    return TemplateSelection(template=template, template_dir=template_dir)
