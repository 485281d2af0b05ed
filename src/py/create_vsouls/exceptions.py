"""create-vsouls exception classes."""

__all__ = [
    "CreateVsoulsError",
    "ManifestNotFoundError",
    "TargetNotADirectoryError",
    "TemplateNotFoundError",
]


class CreateVsoulsError(Exception):
    """Base exception for create-vsouls related errors."""


class TemplateNotFoundError(CreateVsoulsError):
    """Raised when a catalog entry has no matching installed template directory."""

    def __init__(self, template: str, template_dir: str) -> None:
        super().__init__(
            f"Template {template!r} is listed in the catalog but no template directory exists at {template_dir!r}."
        )
        self.template = template
        self.template_dir = template_dir


class ManifestNotFoundError(CreateVsoulsError):
    """Raised when a template directory does not contain a package.json."""

    def __init__(self, manifest_path: str) -> None:
        super().__init__(f"Template manifest not found at {manifest_path!r}.")


class TargetNotADirectoryError(CreateVsoulsError):
    """Raised when the target directory path points at an existing file."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Target {target!r} exists and is not a directory.")
        self.target = target
