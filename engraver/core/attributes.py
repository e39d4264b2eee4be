"""
Attribute clamping and patching.

Every mutation of an item goes through apply_patch(), so numeric
attributes with a physical bound can never be stored out of range.
"""

import dataclasses
import logging
from typing import Any, Dict, Optional, Tuple

from .items import (
    Item, TextItem, RectItem, CircleItem, LineItem, OrnamentItem,
    FontStyle, TextAlign, ROTATABLE_TYPES, check_item
)
from .ornaments import OrnamentKind
from .product import ProductConfig

logger = logging.getLogger(__name__)

SHAPE_SIZE_RANGE = (1.0, 500.0)      # rect w/h, circle r
ORNAMENT_SCALE_RANGE = (5.0, 120.0)
STROKE_WIDTH_RANGE = (0.0, 5.0)
LINE_STROKE_WIDTH_RANGE = (0.1, 5.0)

_ENUM_FIELDS = {
    'font_style': FontStyle,
    'align': TextAlign,
    'kind': OrnamentKind,
}


def clamp(value: float, low: float, high: float) -> float:
    """Saturate value into [low, high]."""
    return max(low, min(high, value))


def value_range(item: Item, name: str,
                product: ProductConfig) -> Optional[Tuple[float, float]]:
    """Return the (min, max) bound of a numeric attribute, or None."""
    if name == 'stroke_width_mm':
        if isinstance(item, LineItem):
            return LINE_STROKE_WIDTH_RANGE
        return STROKE_WIDTH_RANGE
    if isinstance(item, TextItem) and name == 'font_size_mm':
        return (product.min_font_mm, product.max_font_mm)
    if isinstance(item, RectItem) and name in ('w', 'h'):
        return SHAPE_SIZE_RANGE
    if isinstance(item, CircleItem) and name == 'r':
        return SHAPE_SIZE_RANGE
    if isinstance(item, OrnamentItem) and name == 'scale_mm':
        return ORNAMENT_SCALE_RANGE
    return None


def _coerce(item: Item, name: str, value: Any, product: ProductConfig) -> Any:
    if name in _ENUM_FIELDS and value is not None:
        return _ENUM_FIELDS[name](value)
    bounds = value_range(item, name, product)
    if bounds is not None:
        return clamp(float(value), *bounds)
    return value


def apply_patch(item: Item, patch: Dict[str, Any],
                product: ProductConfig) -> Item:
    """
    Return a copy of item with patch applied and clamped.

    Args:
        item: The item to patch
        patch: Attribute name -> new value
        product: Product profile supplying the font bounds

    Returns:
        New item of the same variant

    Raises:
        AttributeError: if the patch names `id`, an attribute the
            variant does not carry, or `rotation` on a line or circle
    """
    check_item(item)
    names = {f.name for f in dataclasses.fields(item)}
    changes = {}
    for name, value in patch.items():
        if name == 'id' or name not in names or (
                name == 'rotation' and not isinstance(item, ROTATABLE_TYPES)):
            raise AttributeError(
                f"{type(item).__name__} has no patchable attribute '{name}'"
            )
        changes[name] = _coerce(item, name, value, product)
    logger.debug(f"Patching {item.type.value} {item.id}: {changes}")
    return dataclasses.replace(item, **changes)


def clamp_item(item: Item, product: ProductConfig) -> Item:
    """Return a copy of item with every bounded attribute clamped."""
    check_item(item)
    changes = {}
    for f in dataclasses.fields(item):
        if value_range(item, f.name, product) is not None:
            changes[f.name] = getattr(item, f.name)
    return apply_patch(item, changes, product)
