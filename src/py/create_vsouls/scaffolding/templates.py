"""Framework catalog for scaffolding.

This module defines the frameworks and variants offered in the selection
prompts. Every variant name doubles as the suffix of a ``template-<name>``
directory shipped with the package.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = (
    "FRAMEWORKS",
    "TEMPLATES",
    "Framework",
    "FrameworkVariant",
    "find_variant",
    "get_available_templates",
)


@dataclass(frozen=True)
class FrameworkVariant:
    """A selectable flavour of a framework.

    Attributes:
        name: Template identifier, also the ``template-<name>`` directory suffix
        display: Label shown in the selection prompt
        color: Rich style used to render the label
        custom_command: External generator command; ``TARGET_DIR`` is replaced with the target
    """

    name: str
    display: str
    color: str = "default"
    custom_command: "str | None" = None


@dataclass(frozen=True)
class Framework:
    """A framework entry in the selection prompt.

    Attributes:
        name: Framework identifier, used as template identifier when there are no variants
        display: Label shown in the selection prompt
        color: Rich style used to render the label
        variants: Ordered variants offered once the framework is chosen
    """

    name: str
    display: str
    color: str = "default"
    variants: tuple[FrameworkVariant, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return self.display or self.name


FRAMEWORKS: tuple[Framework, ...] = (
    Framework(
        name="react",
        display="React",
        color="cyan",
        variants=(
            FrameworkVariant(name="react", display="JavaScript", color="yellow"),
            FrameworkVariant(name="react-ts", display="TypeScript", color="blue"),
        ),
    ),
)


def get_available_templates(frameworks: Sequence[Framework] = FRAMEWORKS) -> list[str]:
    """Flatten the catalog into template identifiers.

    Args:
        frameworks: Catalog to flatten.

    Returns:
        Variant names in catalog order, or the framework name for a framework without variants.
    """
    templates: list[str] = []
    for framework in frameworks:
        if framework.variants:
            templates.extend(variant.name for variant in framework.variants)
        else:
            templates.append(framework.name)
    return templates


TEMPLATES: tuple[str, ...] = tuple(get_available_templates())


def find_variant(template: str, frameworks: Sequence[Framework] = FRAMEWORKS) -> "FrameworkVariant | None":
    for framework in frameworks:
        for variant in framework.variants:
            if variant.name == template:
                return variant
    return None
