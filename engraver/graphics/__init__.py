"""
Engraver Graphics Module

Qt canvas adapter:
- Items: QGraphicsItems for scene items, engrave region and background
- Transform: Drag and resize/rotate commits back into the scene
"""

from .items import (
    create_graphics_item, sync_graphics_item, engrave_region_item,
    background_pixmap_item
)
from .transform import commit_drag, commit_transform, item_id_of

__all__ = [
    # Items
    'create_graphics_item',
    'sync_graphics_item',
    'engrave_region_item',
    'background_pixmap_item',
    # Transform
    'commit_drag',
    'commit_transform',
    'item_id_of',
]
