from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

# Environment variables that may affect test behavior - clear before each test
_SCAFFOLD_ENV_VARS = [
    "CREATE_VSOULS_TEMPLATE_ROOT",
    "CREATE_VSOULS_DEFAULT_TARGET_DIR",
    "CREATE_VSOULS_PACKAGE_MANAGER",
    "CREATE_VSOULS_LOG_LEVEL",
    "npm_config_user_agent",
]


@pytest.fixture(autouse=True)
def clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear scaffolding environment variables before each test for isolation."""
    for var in _SCAFFOLD_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A template root holding a small ``template-demo`` tree."""
    root = tmp_path / "templates"
    template_dir = root / "template-demo"
    (template_dir / "src" / "components").mkdir(parents=True)
    (template_dir / "package.json").write_text(
        '{"name": "demo", "private": true, "version": "0.0.0", "scripts": {"dev": "vite"}}',
        encoding="utf-8",
    )
    (template_dir / "_gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (template_dir / "index.html").write_text("<div id='root'></div>\n", encoding="utf-8")
    (template_dir / "src" / "main.js").write_text("console.log('hi')\n", encoding="utf-8")
    (template_dir / "src" / "components" / "logo.bin").write_bytes(bytes(range(256)))
    return root
