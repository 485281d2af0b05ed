"""Project materialization.

This module copies a template directory into the target directory and writes
the template's ``package.json`` with the resolved package name.
"""

import shutil
from collections.abc import Mapping
from pathlib import Path

import msgspec

from create_vsouls._console import logger
from create_vsouls.exceptions import ManifestNotFoundError, TargetNotADirectoryError

__all__ = (
    "MANIFEST_NAME",
    "RENAME_FILES",
    "copy",
    "copy_dir",
    "empty_dir",
    "generate_project",
    "prepare_target_dir",
    "render_manifest",
    "write_manifest",
)

MANIFEST_NAME = "package.json"

# npm strips dot files such as .gitignore from published packages.
RENAME_FILES: dict[str, str] = {"_gitignore": ".gitignore"}


def empty_dir(path: Path, vcs_dir: str = ".git") -> None:
    """Remove every entry of a directory except the version-control directory.

    Args:
        path: Directory to empty. Nothing happens if it does not exist.
        vcs_dir: Name of the entry left untouched.

    Raises:
        TargetNotADirectoryError: If ``path`` exists but is not a directory.
    """
    if not path.exists():
        return
    if not path.is_dir():
        raise TargetNotADirectoryError(str(path))
    for entry in path.iterdir():
        if entry.name == vcs_dir:
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
        logger.debug("Removed %s", entry)


def prepare_target_dir(root: Path, *, overwrite: bool, vcs_dir: str = ".git") -> None:
    """Get the target directory ready to receive the template.

    An existing directory is emptied when ``overwrite`` is set and written into
    as-is otherwise. A missing directory is created along with its parents.
    """
    if overwrite:
        empty_dir(root, vcs_dir)
    elif not root.exists():
        root.mkdir(parents=True)
        logger.debug("Created %s", root)


def copy(src: Path, dest: Path) -> None:
    if src.is_dir():
        copy_dir(src, dest)
    else:
        shutil.copyfile(src, dest)
        logger.debug("Copied %s", dest)


def copy_dir(src_dir: Path, dest_dir: Path) -> None:
    dest_dir.mkdir(parents=True, exist_ok=True)
    for entry in sorted(src_dir.iterdir()):
        copy(entry, dest_dir / entry.name)


def render_manifest(manifest_path: Path, package_name: str) -> bytes:
    """Render a template manifest with its ``name`` replaced.

    Key order of the template is kept. The output is indented with two spaces
    and ends with a newline.

    Args:
        manifest_path: The template's ``package.json``.
        package_name: Value written to the ``name`` field.

    Raises:
        ManifestNotFoundError: If the manifest does not exist.

    Returns:
        The encoded manifest.
    """
    if not manifest_path.is_file():
        raise ManifestNotFoundError(str(manifest_path))
    manifest = msgspec.json.decode(manifest_path.read_bytes())
    manifest["name"] = package_name
    return msgspec.json.format(msgspec.json.encode(manifest), indent=2) + b"\n"


def write_manifest(template_dir: Path, root: Path, package_name: str, manifest_name: str = MANIFEST_NAME) -> Path:
    output_path = root / manifest_name
    output_path.write_bytes(render_manifest(template_dir / manifest_name, package_name))
    logger.debug("Wrote %s", output_path)
    return output_path


def generate_project(
    template_dir: Path,
    root: Path,
    package_name: str,
    *,
    manifest_name: str = MANIFEST_NAME,
    rename_files: "Mapping[str, str] | None" = None,
) -> list[Path]:
    """Copy a template into the target directory.

    Every top-level entry except the manifest is copied, applying
    ``rename_files``. The manifest is written last with ``package_name``.
    Filesystem errors propagate and nothing already written is rolled back.

    Args:
        template_dir: The ``template-<name>`` directory.
        root: Target directory, already prepared.
        package_name: Name written into the manifest.
        manifest_name: File name of the manifest.
        rename_files: Source to target name mapping. Defaults to ``RENAME_FILES``.

    Returns:
        Top-level paths written in the target directory.
    """
    renames = RENAME_FILES if rename_files is None else rename_files
    manifest_path = template_dir / manifest_name
    if not manifest_path.is_file():
        raise ManifestNotFoundError(str(manifest_path))

    generated_files: list[Path] = []
    for entry in sorted(template_dir.iterdir()):
        if entry.name == manifest_name:
            continue
        target_path = root / renames.get(entry.name, entry.name)
        copy(entry, target_path)
        generated_files.append(target_path)

    generated_files.append(write_manifest(template_dir, root, package_name, manifest_name))
    return generated_files
