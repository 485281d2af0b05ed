"""Completion hints printed after scaffolding."""

import os
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from create_vsouls._console import console
from create_vsouls.config import USER_AGENT_ENV_VAR

__all__ = (
    "PackageManagerInfo",
    "completion_commands",
    "detect_package_manager",
    "pkg_from_user_agent",
    "print_completion",
)


@dataclass
class PackageManagerInfo:
    """Package manager parsed from a user agent string."""

    name: str
    version: "str | None" = None


def pkg_from_user_agent(user_agent: "str | None") -> "PackageManagerInfo | None":
    """Parse the ``<name>/<version> ...`` user agent set by package managers.

    Args:
        user_agent: Value of ``npm_config_user_agent``.

    Returns:
        The package manager, or ``None`` when the value is missing.
    """
    if not user_agent:
        return None
    name, _, version = user_agent.split(" ")[0].partition("/")
    return PackageManagerInfo(name=name, version=version or None)


def detect_package_manager(user_agent: "str | None" = None, fallback: str = "pnpm") -> str:
    if user_agent is None:
        user_agent = os.getenv(USER_AGENT_ENV_VAR)
    info = pkg_from_user_agent(user_agent)
    return info.name if info and info.name else fallback


def completion_commands(root: Path, cwd: Path, package_manager: str) -> list[str]:
    """Build the commands the user should run next.

    Args:
        root: Absolute path of the generated project.
        cwd: Working directory the tool was started from.
        package_manager: Detected package manager name.

    Returns:
        Shell commands in the order they should be run.
    """
    commands: list[str] = []
    if root != cwd:
        cd_target = os.path.relpath(root, cwd)
        commands.append(f'cd "{cd_target}"' if " " in cd_target else f"cd {cd_target}")
    match package_manager:
        case "yarn":
            commands.extend(["yarn", "yarn dev"])
        case _:
            commands.extend([f"{package_manager} install", f"{package_manager} run dev"])
    return commands


def print_completion(root: Path, cwd: Path, package_manager: str) -> None:
    console.print("\n Done. Now run: \n")
    for command in completion_commands(root, cwd, package_manager):
        console.print(f"  {escape(command)}", soft_wrap=True)
    console.print()
