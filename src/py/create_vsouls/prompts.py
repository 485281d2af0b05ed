"""Interactive resolution of the scaffolding answers.

The resolver walks a fixed sequence of prompts: project name, overwrite
confirmation, package name, framework and variant. Each step decides from the
answers gathered so far whether it applies. Aborting a prompt or declining the
overwrite confirmation yields :class:`Cancelled` instead of raising.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from create_vsouls._console import console, logger
from create_vsouls.config import ScaffoldConfig
from create_vsouls.exceptions import TargetNotADirectoryError
from create_vsouls.scaffolding.templates import FRAMEWORKS, Framework, get_available_templates
from create_vsouls.utils import (
    format_target_dir,
    is_empty_dir,
    is_valid_package_name,
    project_name_of,
    target_root,
    to_valid_package_name,
)

__all__ = ("CANCELLED_MESSAGE", "INVALID_PACKAGE_NAME", "Cancelled", "ResolvedAnswers", "needs_overwrite", "resolve")

CANCELLED_MESSAGE = "✖ Operation cancelled"
INVALID_PACKAGE_NAME = "Invalid package.json name"


@dataclass
class ResolvedAnswers:
    """Answers accumulated across the prompt sequence.

    Attributes:
        target_dir: Current target directory candidate, relative to the working directory
        project_name: Answer of the project name prompt
        overwrite: Whether the existing target directory is emptied first
        package_name: Answer of the package name prompt
        framework: Selected framework
        variant: Selected variant name
    """

    target_dir: str
    project_name: "str | None" = None
    overwrite: "bool | None" = None
    package_name: "str | None" = None
    framework: "Framework | None" = None
    variant: "str | None" = None


@dataclass
class Cancelled:
    """The user stopped the prompt sequence."""

    message: str = CANCELLED_MESSAGE


def needs_overwrite(root: Path, vcs_dir: str = ".git") -> bool:
    """Check whether writing into ``root`` requires confirmation.

    Raises:
        TargetNotADirectoryError: If ``root`` is an existing file.

    Returns:
        ``False`` for a missing directory, an empty one, or one holding only ``vcs_dir``.
    """
    if not root.exists():
        return False
    if not root.is_dir():
        raise TargetNotADirectoryError(str(root))
    return not is_empty_dir(root, vcs_dir)


def _ask_text(message: str, default: str) -> str:
    return Prompt.ask(message, default=default, console=console)


def _ask_confirm(message: str) -> bool:
    return Confirm.ask(message, default=False, console=console)


def _ask_select(message: str, choices: Sequence[tuple[str, str]], initial: int = 0) -> int:
    """Present a numbered single-select list.

    Args:
        message: Prompt heading.
        choices: ``(label, style)`` pairs in display order.
        initial: Index preselected when the user just presses enter.

    Returns:
        The index of the chosen entry.
    """
    console.print(message)
    for number, (label, style) in enumerate(choices, start=1):
        console.print(f"  {number}. [{style}]{escape(label)}[/]")
    selected = IntPrompt.ask(
        "Choice",
        choices=[str(number) for number in range(1, len(choices) + 1)],
        default=initial + 1,
        show_choices=False,
        console=console,
    )
    return selected - 1


def _resolve_project_name(answers: ResolvedAnswers, config: ScaffoldConfig, *, no_prompt: bool) -> None:
    value = config.default_target_dir if no_prompt else _ask_text("Project name:", config.default_target_dir)
    answers.project_name = value
    answers.target_dir = format_target_dir(value) or config.default_target_dir


def _resolve_overwrite(
    answers: ResolvedAnswers, config: ScaffoldConfig, cwd: Path, *, overwrite: bool, no_prompt: bool
) -> bool:
    """Run the overwrite confirmation step.

    Returns:
        ``False`` when the user declined.
    """
    if not needs_overwrite(target_root(cwd, answers.target_dir), config.vcs_dir):
        return True
    if overwrite:
        answers.overwrite = True
        return True
    if no_prompt:
        answers.overwrite = False
        return False
    subject = "Current directory" if answers.target_dir == "." else f'Target directory "{escape(answers.target_dir)}"'
    answers.overwrite = _ask_confirm(f"{subject} is not empty. Remove existing files and continue?")
    return answers.overwrite


def _resolve_package_name(answers: ResolvedAnswers, cwd: Path, *, no_prompt: bool) -> None:
    project_name = project_name_of(answers.target_dir, cwd)
    if is_valid_package_name(project_name):
        return
    suggestion = to_valid_package_name(project_name)
    if no_prompt:
        answers.package_name = suggestion
        return
    while True:
        value = _ask_text("Package name:", suggestion)
        if is_valid_package_name(value):
            answers.package_name = value
            return
        console.print(f"[red]{INVALID_PACKAGE_NAME}[/]")


def _resolve_framework(
    answers: ResolvedAnswers, arg_template: "str | None", frameworks: Sequence[Framework], *, no_prompt: bool
) -> None:
    if arg_template and arg_template in get_available_templates(frameworks):
        return
    if arg_template is not None:
        message = f'"{escape(arg_template)}" isn\'t a valid template. Please choose from below: '
    else:
        message = "Select a framework:"
    index = 0 if no_prompt else _ask_select(message, [(f.label, f.color) for f in frameworks])
    answers.framework = frameworks[index]


def _resolve_variant(answers: ResolvedAnswers, *, no_prompt: bool) -> None:
    framework = answers.framework
    if framework is None or not framework.variants:
        return
    index = (
        0
        if no_prompt
        else _ask_select("Select a variant:", [(v.display or v.name, v.color) for v in framework.variants])
    )
    answers.variant = framework.variants[index].name


def resolve(
    arg_target_dir: "str | None",
    arg_template: "str | None",
    *,
    config: "ScaffoldConfig | None" = None,
    frameworks: Sequence[Framework] = FRAMEWORKS,
    overwrite: bool = False,
    no_prompt: bool = False,
    cwd: "Path | None" = None,
) -> "ResolvedAnswers | Cancelled":
    """Collect the answers needed to scaffold a project.

    Args:
        arg_target_dir: Normalized target directory from the command line.
        arg_template: Value of the ``--template`` flag.
        config: Scaffolding settings.
        frameworks: Catalog offered in the framework prompt.
        overwrite: Pre-answer "yes" to the overwrite confirmation.
        no_prompt: Use defaults instead of prompting.
        cwd: Directory the target is relative to.

    Returns:
        The accumulated answers, or :class:`Cancelled`.
    """
    config = config or ScaffoldConfig()
    cwd = cwd or Path.cwd()
    answers = ResolvedAnswers(target_dir=arg_target_dir or config.default_target_dir)

    try:
        if not arg_target_dir:
            _resolve_project_name(answers, config, no_prompt=no_prompt)
        if not _resolve_overwrite(answers, config, cwd, overwrite=overwrite, no_prompt=no_prompt):
            logger.debug("Overwrite of %s declined", answers.target_dir)
            return Cancelled()
        _resolve_package_name(answers, cwd, no_prompt=no_prompt)
        _resolve_framework(answers, arg_template, frameworks, no_prompt=no_prompt)
        _resolve_variant(answers, no_prompt=no_prompt)
    except (KeyboardInterrupt, EOFError):
        console.print()
        return Cancelled()
    return answers
