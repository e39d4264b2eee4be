"""
Engraver Product Configuration

A product profile describes the physical board being engraved: the
canvas, the engravable region inside it and the legible font range.
Profiles are static for the lifetime of a design session.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned legal bounds (mm)."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, x: float, y: float) -> bool:
        """Check if point is inside bounds (edges included)."""
        return (self.min_x <= x <= self.max_x and
                self.min_y <= y <= self.max_y)

    def contains_box(self, min_x: float, min_y: float,
                     max_x: float, max_y: float) -> bool:
        """Check if a box lies entirely inside bounds."""
        return self.contains(min_x, min_y) and self.contains(max_x, max_y)


@dataclass(frozen=True)
class CanvasSize:
    """Physical canvas dimensions in mm."""
    width: float = 300.0
    height: float = 200.0


@dataclass(frozen=True)
class EngraveRegion:
    """
    The engravable rectangle on the product.

    All values are in millimeters. The margin insets the region on all
    four sides to produce the legal bounds.
    """
    x: float = 70.0
    y: float = 40.0
    width: float = 160.0
    height: float = 90.0
    margin: float = 5.0

    @property
    def bounds(self) -> Bounds:
        return Bounds(
            min_x=self.x + self.margin,
            min_y=self.y + self.margin,
            max_x=self.x + self.width - self.margin,
            max_y=self.y + self.height - self.margin
        )


@dataclass(frozen=True)
class ProductConfig:
    """Geometry and legibility limits of one physical product."""
    code: str = "PRKENKO_01"
    canvas: CanvasSize = field(default_factory=CanvasSize)
    region: EngraveRegion = field(default_factory=EngraveRegion)
    min_font_mm: float = 3.0
    max_font_mm: float = 40.0

    def __post_init__(self):
        if self.canvas.width <= 0 or self.canvas.height <= 0:
            raise ValueError(f"Canvas size must be positive: {self.canvas}")
        if self.region.width <= 0 or self.region.height <= 0:
            raise ValueError(f"Engrave region size must be positive: {self.region}")
        if self.region.margin < 0:
            raise ValueError(f"Engrave margin cannot be negative: {self.region.margin}")
        if not 0 < self.min_font_mm <= self.max_font_mm:
            raise ValueError(
                f"Invalid font range: {self.min_font_mm}-{self.max_font_mm} mm"
            )

    @property
    def bounds(self) -> Bounds:
        return self.region.bounds


DEFAULT_PRODUCT = ProductConfig()


def product_from_dict(data: Dict[str, Any]) -> ProductConfig:
    """Convert dictionary to ProductConfig, defaulting missing keys."""
    default = DEFAULT_PRODUCT
    canvas = data.get('canvasMm', {})
    engrave = data.get('engraveMm', {})

    return ProductConfig(
        code=data.get('code', default.code),
        canvas=CanvasSize(
            width=float(canvas.get('w', default.canvas.width)),
            height=float(canvas.get('h', default.canvas.height))
        ),
        region=EngraveRegion(
            x=float(engrave.get('x', default.region.x)),
            y=float(engrave.get('y', default.region.y)),
            width=float(engrave.get('w', default.region.width)),
            height=float(engrave.get('h', default.region.height)),
            margin=float(engrave.get('margin', default.region.margin))
        ),
        min_font_mm=float(data.get('minFontMm', default.min_font_mm)),
        max_font_mm=float(data.get('maxFontMm', default.max_font_mm))
    )


def load_product_config(filepath: str) -> ProductConfig:
    """
    Load a product profile from a JSON file.

    Args:
        filepath: Path to the profile

    Returns:
        ProductConfig built from the file
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return product_from_dict(data)
