"""Tests for create_vsouls.scaffolding.generator module."""

from pathlib import Path

import msgspec
import pytest

from create_vsouls.exceptions import ManifestNotFoundError, TargetNotADirectoryError
from create_vsouls.scaffolding.generator import (
    copy_dir,
    empty_dir,
    generate_project,
    prepare_target_dir,
    render_manifest,
)


def _files(root: Path) -> dict[str, bytes]:
    return {str(path.relative_to(root)): path.read_bytes() for path in root.rglob("*") if path.is_file()}


def test_empty_dir_keeps_vcs_dir(tmp_path: Path) -> None:
    (tmp_path / ".git" / "objects").mkdir(parents=True)
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (tmp_path / "src" / "nested").mkdir(parents=True)
    (tmp_path / "src" / "nested" / "file.txt").write_text("x")
    (tmp_path / "README.md").write_text("old")
    (tmp_path / ".env").write_text("SECRET=1")

    empty_dir(tmp_path)

    assert sorted(p.name for p in tmp_path.iterdir()) == [".git"]
    assert (tmp_path / ".git" / "HEAD").read_text() == "ref: refs/heads/main\n"
    assert (tmp_path / ".git" / "objects").is_dir()


def test_empty_dir_missing_is_noop(tmp_path: Path) -> None:
    empty_dir(tmp_path / "missing")
    assert not (tmp_path / "missing").exists()


def test_prepare_target_dir_creates_parents(tmp_path: Path) -> None:
    root = tmp_path / "a" / "b" / "my-app"
    prepare_target_dir(root, overwrite=False)
    assert root.is_dir()


def test_prepare_target_dir_without_overwrite_is_additive(tmp_path: Path) -> None:
    (tmp_path / "keep.txt").write_text("keep")
    prepare_target_dir(tmp_path, overwrite=False)
    assert (tmp_path / "keep.txt").read_text() == "keep"


def test_prepare_target_dir_with_overwrite_empties(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    (tmp_path / "old.txt").write_text("old")
    prepare_target_dir(tmp_path, overwrite=True)
    assert [p.name for p in tmp_path.iterdir()] == [".git"]


def test_copy_dir_is_byte_identical(template_root: Path, tmp_path: Path) -> None:
    src = template_root / "template-demo" / "src"
    dest = tmp_path / "out"
    copy_dir(src, dest)
    assert _files(dest) == _files(src)


def test_generate_project_into_fresh_dir(template_root: Path, tmp_path: Path) -> None:
    template_dir = template_root / "template-demo"
    root = tmp_path / "my-app"
    prepare_target_dir(root, overwrite=False)

    generated = generate_project(template_dir, root, "my-app")

    expected = {name: content for name, content in _files(template_dir).items() if name not in {"package.json", "_gitignore"}}
    actual = _files(root)
    for name, content in expected.items():
        assert actual[name] == content
    assert actual[".gitignore"] == (template_dir / "_gitignore").read_bytes()
    assert "_gitignore" not in actual
    assert root / "package.json" in generated
    assert root / ".gitignore" in generated


def test_generate_project_rewrites_only_the_name(template_root: Path, tmp_path: Path) -> None:
    template_dir = template_root / "template-demo"
    generate_project(template_dir, tmp_path, "@scope/my-app")

    template_manifest = msgspec.json.decode((template_dir / "package.json").read_bytes())
    manifest = msgspec.json.decode((tmp_path / "package.json").read_bytes())

    assert list(manifest) == list(template_manifest)
    assert manifest["name"] == "@scope/my-app"
    assert {k: v for k, v in manifest.items() if k != "name"} == {
        k: v for k, v in template_manifest.items() if k != "name"
    }


def test_render_manifest_format(template_root: Path) -> None:
    content = render_manifest(template_root / "template-demo" / "package.json", "my-app").decode()
    assert content == (
        "{\n"
        '  "name": "my-app",\n'
        '  "private": true,\n'
        '  "version": "0.0.0",\n'
        '  "scripts": {\n'
        '    "dev": "vite"\n'
        "  }\n"
        "}\n"
    )


def test_generate_project_custom_renames(template_root: Path, tmp_path: Path) -> None:
    generate_project(template_root / "template-demo", tmp_path, "my-app", rename_files={"index.html": "home.html"})
    assert (tmp_path / "home.html").is_file()
    assert (tmp_path / "_gitignore").is_file()


def test_generate_project_requires_manifest(template_root: Path, tmp_path: Path) -> None:
    template_dir = template_root / "template-demo"
    (template_dir / "package.json").unlink()
    root = tmp_path / "out"
    root.mkdir()
    with pytest.raises(ManifestNotFoundError):
        generate_project(template_dir, root, "my-app")
    assert list(root.iterdir()) == []


def test_generate_project_propagates_filesystem_errors(template_root: Path, tmp_path: Path) -> None:
    root = tmp_path / "out"
    root.mkdir()
    # A file where a directory is expected makes the copy fail part way.
    (root / "src").write_text("not a directory")
    with pytest.raises(OSError):
        generate_project(template_root / "template-demo", root, "my-app")


def test_empty_dir_rejects_a_file(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("keep")
    with pytest.raises(TargetNotADirectoryError):
        empty_dir(target)
    assert target.read_text() == "keep"
