"""Utility helpers for create-vsouls."""

import os
import re
from importlib.util import find_spec
from pathlib import Path

__all__ = (
    "format_target_dir",
    "get_package_path",
    "is_empty_dir",
    "is_valid_package_name",
    "project_name_of",
    "target_root",
    "to_valid_package_name",
)

_PACKAGE_NAME_RE = re.compile(r"^(?:@[a-z\d\-*~][a-z\d\-*._~]*/)?[a-z\d\-~][a-z\d\-._~]*$", re.ASCII)
_TRAILING_RE = re.compile(r"[\s/]+$")


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed create-vsouls package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("create_vsouls")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    return Path(__file__).resolve().parent.joinpath(*parts)


def format_target_dir(target_dir: "str | None") -> "str | None":
    """Trim surrounding whitespace and any trailing slashes from a target directory.

    Returns:
        The normalized directory, or ``None`` when nothing was given.
    """
    if target_dir is None:
        return None
    return _TRAILING_RE.sub("", target_dir).strip()


def project_name_of(target_dir: str, cwd: "Path | None" = None) -> str:
    """Return the project name for a target directory.

    ``.`` stands for the current directory, whose base name is used instead.
    """
    if target_dir == ".":
        return (cwd or Path.cwd()).resolve().name
    return target_dir


def is_valid_package_name(project_name: str) -> bool:
    return _PACKAGE_NAME_RE.fullmatch(project_name) is not None


def to_valid_package_name(project_name: str) -> str:
    """Normalize an arbitrary string into a valid package.json name.

    Lowercases, turns whitespace into hyphens, drops a leading dot or
    underscore and collapses any other invalid run of characters into a hyphen.

    Returns:
        A name accepted by :func:`is_valid_package_name`.
    """
    name = project_name.strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"^[._]", "", name)
    name = re.sub(r"[^a-z\d\-~]+", "-", name, flags=re.ASCII)
    return name or "-"


def is_empty_dir(path: Path, vcs_dir: str = ".git") -> bool:
    """Check whether a directory is empty, ignoring a lone version-control directory."""
    entries = [entry.name for entry in path.iterdir()]
    return not entries or entries == [vcs_dir]


def target_root(cwd: Path, target_dir: str) -> Path:
    """Resolve a target directory against ``cwd`` with ``..`` and ``.`` segments collapsed."""
    return Path(os.path.normpath(cwd / target_dir))
