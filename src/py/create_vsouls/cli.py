import logging
from pathlib import Path
from typing import Optional

from click import argument, command, option, version_option
from rich.markup import escape

from create_vsouls.__metadata__ import __project__, __version__
from create_vsouls._console import configure_logging, console, logger
from create_vsouls.config import ScaffoldConfig
from create_vsouls.prompts import Cancelled, resolve
from create_vsouls.reporter import detect_package_manager, print_completion
from create_vsouls.scaffolding import generate_project, prepare_target_dir, select_template
from create_vsouls.utils import format_target_dir, project_name_of, target_root

_LOG_LEVELS = {"quiet": logging.ERROR, "normal": logging.WARNING, "verbose": logging.DEBUG}


def _apply_cli_log_level(config: ScaffoldConfig, *, verbose: bool = False, quiet: bool = False) -> None:
    """Override the configured log level from CLI flags and attach the console handler."""
    if verbose:
        config.log_level = "verbose"
    elif quiet:
        config.log_level = "quiet"
    configure_logging(_LOG_LEVELS[config.log_level])


@command(
    name="create-vsouls",
    help="Scaffold a new front-end project from a bundled template.",
)
@argument("target_dir", required=False)
@option(
    "-t",
    "--template",
    type=str,
    help="Template to use.  Skips the framework and variant prompts when it names a known template.",
    default=None,
    required=False,
)
@option("--overwrite", type=bool, help="Empty a non-empty target directory without asking.", default=False, is_flag=True)
@option(
    "--no-prompt",
    help="Do not prompt and use all defaults for initializing the project.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@option("--quiet", type=bool, help="Only report errors in the log output.", default=False, is_flag=True)
@version_option(version=__version__, prog_name=__project__)
def create_project(
    target_dir: "Optional[str]",
    template: "Optional[str]",
    overwrite: "bool",
    no_prompt: "bool",
    verbose: "bool",
    quiet: "bool",
) -> None:
    """Scaffold a project into TARGET_DIR."""
    config = ScaffoldConfig()
    _apply_cli_log_level(config, verbose=verbose, quiet=quiet)
    cwd = Path.cwd()

    result = resolve(
        format_target_dir(target_dir),
        template,
        config=config,
        overwrite=overwrite,
        no_prompt=no_prompt,
        cwd=cwd,
    )
    if isinstance(result, Cancelled):
        console.print(f"[red]{escape(result.message)}[/]")
        return

    root = target_root(cwd, result.target_dir)
    selection = select_template(result, template, template_root=config.template_path)
    if selection.is_custom or selection.template_dir is None:
        console.print(
            f"Template [bold]{escape(selection.template)}[/] is created by an external generator. Run:\n\n"
            f"  {escape(selection.custom_command or '')}\n",
            soft_wrap=True,
        )
        return

    prepare_target_dir(root, overwrite=bool(result.overwrite), vcs_dir=config.vcs_dir)
    console.print(f"\nScaffolding project in {escape(str(root))}...", soft_wrap=True)

    generated_files = generate_project(
        selection.template_dir,
        root,
        result.package_name or project_name_of(result.target_dir, cwd),
        manifest_name=config.manifest_name,
        rename_files=config.rename_files,
    )
    logger.debug("Generated %d entries in %s", len(generated_files), root)

    print_completion(root, cwd, detect_package_manager(fallback=config.fallback_package_manager))
