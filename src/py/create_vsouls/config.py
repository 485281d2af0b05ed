"""Scaffolding configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from create_vsouls.utils import get_package_path

__all__ = ("USER_AGENT_ENV_VAR", "ScaffoldConfig", "get_default_log_level")

USER_AGENT_ENV_VAR = "npm_config_user_agent"


def _default_template_root() -> Path:
    env_value = os.getenv("CREATE_VSOULS_TEMPLATE_ROOT")
    if env_value:
        return Path(env_value)
    return get_package_path("templates")


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks CREATE_VSOULS_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("CREATE_VSOULS_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


@dataclass
class ScaffoldConfig:
    """Settings for a single scaffolding run.

    Attributes:
        template_root: Directory holding the ``template-<name>`` folders.
        default_target_dir: Project name offered when no target directory is given.
        fallback_package_manager: Package manager named in the hints when none is detected.
        manifest_name: Name of the manifest rewritten with the package name.
        vcs_dir: Version-control metadata directory kept when emptying the target.
        rename_files: Template file names renamed on write.
        log_level: Console verbosity.
    """

    template_root: "str | Path" = field(default_factory=_default_template_root)
    default_target_dir: str = field(
        default_factory=lambda: os.getenv("CREATE_VSOULS_DEFAULT_TARGET_DIR", "vite-project")
    )
    fallback_package_manager: str = field(default_factory=lambda: os.getenv("CREATE_VSOULS_PACKAGE_MANAGER", "pnpm"))
    manifest_name: str = "package.json"
    vcs_dir: str = ".git"
    rename_files: dict[str, str] = field(default_factory=lambda: {"_gitignore": ".gitignore"})
    log_level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)

    def __post_init__(self) -> None:
        if isinstance(self.template_root, str):
            self.template_root = Path(self.template_root)

    @property
    def template_path(self) -> Path:
        return Path(self.template_root)
