"""
Gesture commit resolution.

The canvas reports an interactive resize as a dimensionless scale factor
on the on-screen node. resolve_gesture() turns that factor into absolute,
clamped millimeter attributes; the caller then resets the node scale to 1.
"""

from typing import Any, Dict, Optional

from .attributes import (
    clamp, SHAPE_SIZE_RANGE, ORNAMENT_SCALE_RANGE
)
from .items import (
    Item, TextItem, RectItem, CircleItem, LineItem, OrnamentItem,
    ROTATABLE_TYPES
)
from .product import ProductConfig


def resolve_gesture(item: Item, scale_x: float, scale_y: float,
                    product: ProductConfig,
                    rotation: Optional[float] = None) -> Dict[str, Any]:
    """
    Convert a post-gesture scale factor into an attribute patch.

    Args:
        item: The item the gesture was applied to
        scale_x: Horizontal scale factor reported by the canvas
        scale_y: Vertical scale factor reported by the canvas
        product: Product profile supplying the font bounds
        rotation: Node rotation in degrees after the gesture, if any

    Returns:
        Patch of absolute attribute values (empty for lines)
    """
    uniform = max(scale_x, scale_y)

    if isinstance(item, RectItem):
        patch = {
            'w': clamp(item.w * scale_x, *SHAPE_SIZE_RANGE),
            'h': clamp(item.h * scale_y, *SHAPE_SIZE_RANGE),
        }
    elif isinstance(item, CircleItem):
        # Larger axis wins so a circle never degenerates into an ellipse
        patch = {'r': clamp(item.r * uniform, *SHAPE_SIZE_RANGE)}
    elif isinstance(item, TextItem):
        patch = {
            'font_size_mm': clamp(item.font_size_mm * uniform,
                                  product.min_font_mm, product.max_font_mm)
        }
    elif isinstance(item, OrnamentItem):
        patch = {'scale_mm': clamp(item.scale_mm * uniform, *ORNAMENT_SCALE_RANGE)}
    elif isinstance(item, LineItem):
        return {}
    else:
        raise TypeError(f"Unsupported item type: {type(item).__name__}")

    if rotation is not None and isinstance(item, ROTATABLE_TYPES):
        patch['rotation'] = rotation % 360
    return patch
