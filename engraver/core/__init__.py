"""
Engraver Core Module

Contains the core data structures:
- Items: Text, Rectangle, Circle, Line, Ornament
- Scene: Ordered item container bound to a product profile
- ProductConfig: Canvas, engrave region and font limits
- Validation and gesture resolution
"""

# Import order matters - items first, then scene
from .units import UnitConverter, MM_TO_PX
from .product import (
    Bounds, CanvasSize, EngraveRegion, ProductConfig, DEFAULT_PRODUCT,
    product_from_dict, load_product_config
)
from .ornaments import OrnamentKind, ORNAMENTS, NORMALIZED_SIZE
from .items import (
    Item, ItemType, FontStyle, TextAlign, BLACK,
    TextItem, RectItem, CircleItem, LineItem, OrnamentItem
)
from .attributes import apply_patch, clamp_item
from .validation import ValidationResult, validate_items, within_bounds
from .gestures import resolve_gesture
from .scene import Scene

__all__ = [
    'UnitConverter', 'MM_TO_PX',
    'Bounds', 'CanvasSize', 'EngraveRegion', 'ProductConfig', 'DEFAULT_PRODUCT',
    'product_from_dict', 'load_product_config',
    'OrnamentKind', 'ORNAMENTS', 'NORMALIZED_SIZE',
    'Item', 'ItemType', 'FontStyle', 'TextAlign', 'BLACK',
    'TextItem', 'RectItem', 'CircleItem', 'LineItem', 'OrnamentItem',
    'apply_patch', 'clamp_item',
    'ValidationResult', 'validate_items', 'within_bounds',
    'resolve_gesture',
    'Scene',
]
