"""
Ornament outline library.

Each ornament kind maps to a fixed SVG outline drawn in a normalized
design space of NORMALIZED_SIZE x NORMALIZED_SIZE units.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

NORMALIZED_SIZE = 60.0


class OrnamentKind(Enum):
    HEART = "heart"
    WREATH = "wreath"
    STAR = "star"


@dataclass(frozen=True)
class OrnamentDefinition:
    kind: OrnamentKind
    path: str  # SVG path data in normalized units


ORNAMENTS: Dict[OrnamentKind, OrnamentDefinition] = {
    OrnamentKind.HEART: OrnamentDefinition(
        OrnamentKind.HEART,
        "M 10 30 C 10 10 30 10 30 20 C 30 10 50 10 50 30 "
        "C 50 45 30 55 30 55 C 30 55 10 45 10 30 Z"
    ),
    OrnamentKind.WREATH: OrnamentDefinition(
        OrnamentKind.WREATH,
        "M 50 30 A 20 20 0 1 1 49.9 30 Z M 50 30 A 12 12 0 1 0 49.9 30 Z"
    ),
    OrnamentKind.STAR: OrnamentDefinition(
        OrnamentKind.STAR,
        "M 30 5 L 37 22 L 55 22 L 40 33 L 46 50 L 30 40 "
        "L 14 50 L 20 33 L 5 22 L 23 22 Z"
    ),
}


def get_ornament(kind: OrnamentKind) -> OrnamentDefinition:
    """Look up the outline definition for an ornament kind."""
    return ORNAMENTS[OrnamentKind(kind)]


def ornament_scale_factor(scale_mm: float) -> float:
    """Uniform factor mapping the normalized outline to scale_mm."""
    return scale_mm / NORMALIZED_SIZE
