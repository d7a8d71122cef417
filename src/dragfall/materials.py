# MIT License (see LICENSE)
"""
Drag-coefficient presets for common body shapes.

The values are typical subsonic drag coefficients at high Reynolds number
and are meant for picking a plausible Cd, not for engineering work.
"""
from __future__ import annotations
from dataclasses import dataclass

from .types import InvalidParameters


@dataclass(frozen=True)
class Material:
    """
    Named body shape with its drag coefficient.

    Attributes:
        name: Lookup key, lower case.
        drag_coefficient: Dimensionless Cd used in F = 0.5·Cd·ρ·A·v².
    """
    name: str
    drag_coefficient: float


PRESETS: dict[str, Material] = {
    m.name: m
    for m in (
        Material("sphere", 0.47),
        Material("half_sphere", 0.42),
        Material("cone", 0.50),
        Material("cube", 1.05),
        Material("streamlined", 0.04),
        Material("none", 0.0),
    )
}


def drag_coefficient_for(name: str) -> float:
    """
    Look up the drag coefficient of a named preset.

    Raises:
        InvalidParameters: If no preset with that name exists.
    """
    try:
        return PRESETS[name.lower()].drag_coefficient
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        raise InvalidParameters(f"Unknown material '{name}' (known: {known})") from None
