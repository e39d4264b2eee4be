"""
Containment validation.

Checks that every item lies inside the legal engrave bounds and that
text is large enough to engrave legibly. Validation only reports; it
never corrects the scene.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from .items import (
    Item, TextItem, RectItem, CircleItem, LineItem, OrnamentItem
)
from .product import Bounds, ProductConfig


@dataclass
class ValidationResult:
    """Outcome of validating a scene."""
    ok: bool = True
    problems: List[str] = field(default_factory=list)


def within_bounds(item: Item, bounds: Bounds) -> bool:
    """Check if an item lies entirely inside the legal bounds."""
    if isinstance(item, TextItem):
        # Only the anchor is checked; text metrics belong to the renderer
        return bounds.contains(item.x, item.y)
    if isinstance(item, RectItem):
        return bounds.contains_box(item.x, item.y,
                                   item.x + item.w, item.y + item.h)
    if isinstance(item, CircleItem):
        return bounds.contains_box(item.x - item.r, item.y - item.r,
                                   item.x + item.r, item.y + item.r)
    if isinstance(item, LineItem):
        return bounds.contains_box(min(item.x, item.x2), min(item.y, item.y2),
                                   max(item.x, item.x2), max(item.y, item.y2))
    if isinstance(item, OrnamentItem):
        return bounds.contains_box(item.x, item.y,
                                   item.x + item.scale_mm, item.y + item.scale_mm)
    raise TypeError(f"Unsupported item type: {type(item).__name__}")


def validate_items(items: Iterable[Item], product: ProductConfig) -> ValidationResult:
    """
    Validate items against the product's engrave region.

    All violations are collected, in scene order.

    Args:
        items: Items in stacking order
        product: Product profile with region and font limits

    Returns:
        ValidationResult; ok is True iff problems is empty
    """
    bounds = product.bounds
    problems = []
    for item in items:
        if not within_bounds(item, bounds):
            problems.append(
                f"Item outside engrave area (type={item.type.value}, id={item.id})."
            )
        if isinstance(item, TextItem) and item.font_size_mm < product.min_font_mm:
            problems.append(
                f"Text is too small (min {product.min_font_mm:g} mm, id={item.id})."
            )
    return ValidationResult(ok=not problems, problems=problems)
