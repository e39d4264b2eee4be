"""
Unit conversion for Engraver

Millimeters are the only unit stored in the scene. Device units exist
solely at the boundary with the on-screen canvas.
"""

from dataclasses import dataclass

MM_TO_PX = 4.0


@dataclass(frozen=True)
class UnitConverter:
    """Bidirectional mm <-> device unit mapping with a fixed factor."""
    factor: float = MM_TO_PX  # device units per mm

    def __post_init__(self):
        if self.factor <= 0:
            raise ValueError(f"Unit factor must be positive, got {self.factor}")

    def to_device(self, mm: float) -> float:
        """Convert millimeters to device units."""
        return mm * self.factor

    def to_millimeters(self, device: float) -> float:
        """Convert device units to millimeters."""
        return device / self.factor
