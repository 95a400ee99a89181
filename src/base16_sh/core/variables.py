"""
Template variable derivation.

Expands a scheme definition into the flat string variables mustache
templates consume. For a slot ``base0D`` holding ``#f92672``::

    base0D-hex      f92672
    base0D-hex-r    f9          (also -g, -b)
    base0D-hex-bgr  7226f9
    base0D-rgb-r    249         (also -g, -b)
    base0D-rgb16-r  63993       (x257, also -g, -b)
    base0D-dec-r    0.976471    (/255, six decimals, also -g, -b)

Slots whose value is not six hex digits only get ``-hex``; numeric
variables are omitted rather than zero-filled.
"""

from __future__ import annotations

from collections.abc import Mapping

from .colors import hex_to_rgb, is_hex6, strip_hash
from .models import SchemeDefinition, SchemeSystem, Variant

TemplateVariables = dict[str, str]

CHANNELS: tuple[str, ...] = ("r", "g", "b")

TRUE = "true"


def slugify(name: str) -> str:
    """Lowercase with spaces replaced by hyphens."""
    return name.lower().replace(" ", "-")


def slugify_underscored(name: str) -> str:
    """Lowercase with spaces replaced by underscores."""
    return name.lower().replace(" ", "_")


def scheme_variables(
    definition: SchemeDefinition, system: SchemeSystem | str | None = None
) -> TemplateVariables:
    """Scalar scheme variables (name, author, slug, system, variant)."""
    variables: TemplateVariables = {
        "scheme-name": definition.name,
        "scheme-author": definition.author,
        "scheme-system": str(definition.system or system or SchemeSystem.BASE16),
        "scheme-slug": slugify(definition.name),
        "scheme-slug-underscored": slugify_underscored(definition.name),
    }
    if definition.variant is not None:
        variables["scheme-variant"] = definition.variant.value
        # Flags are only set when true; mustache treats absent keys as false
        if definition.variant == Variant.DARK:
            variables["scheme-is-dark-variant"] = TRUE
        elif definition.variant == Variant.LIGHT:
            variables["scheme-is-light-variant"] = TRUE
    return variables


def slot_variables(slot: str, value: str) -> TemplateVariables:
    """All representations of one palette slot."""
    digits = strip_hash(value.strip())
    variables: TemplateVariables = {f"{slot}-hex": digits}
    if not is_hex6(digits):
        return variables

    components = dict(zip(CHANNELS, (digits[0:2], digits[2:4], digits[4:6]), strict=True))
    rgb = dict(zip(CHANNELS, hex_to_rgb(digits), strict=True))

    variables[f"{slot}-hex-bgr"] = components["b"] + components["g"] + components["r"]
    for channel in CHANNELS:
        variables[f"{slot}-hex-{channel}"] = components[channel]
        variables[f"{slot}-rgb-{channel}"] = str(rgb[channel])
        variables[f"{slot}-rgb16-{channel}"] = str(rgb[channel] * 257)
        variables[f"{slot}-dec-{channel}"] = f"{rgb[channel] / 255:.6f}"
    return variables


def palette_variables(palette: Mapping[str, str]) -> TemplateVariables:
    """Variables for every slot present in ``palette``."""
    variables: TemplateVariables = {}
    for slot in sorted(palette):
        variables.update(slot_variables(slot, palette[slot]))
    return variables


def derive_variables(
    definition: SchemeDefinition,
    palette: Mapping[str, str] | None = None,
    system: SchemeSystem | str | None = None,
) -> TemplateVariables:
    """Full variable bag for a scheme.

    Args:
        definition: Parsed scheme.
        palette: Palette to expand instead of ``definition.palette``
            (e.g. one with default slots filled in).
        system: Fallback system tag when the definition does not name one.

    Returns:
        Mapping of variable name to string value.
    """
    variables = scheme_variables(definition, system)
    variables.update(palette_variables(definition.palette if palette is None else palette))
    return variables
