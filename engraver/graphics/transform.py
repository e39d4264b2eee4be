"""
Transform commits for Engraver

Bridges finished canvas interactions back into the scene. A drag is
committed as a millimeter delta; a resize/rotate gesture is committed
as scale factors, after which the node scale is reset so the next
gesture starts from a clean baseline.
"""

import logging
from typing import Optional
from uuid import UUID

from PyQt6.QtGui import QTransform
from PyQt6.QtWidgets import QGraphicsItem

from ..core.items import Item, OrnamentItem, ROTATABLE_TYPES
from ..core.ornaments import NORMALIZED_SIZE
from ..core.scene import Scene
from ..core.units import UnitConverter
from .items import ITEM_ID_KEY, sync_graphics_item

logger = logging.getLogger(__name__)


def item_id_of(graphics_item: QGraphicsItem) -> Optional[UUID]:
    """Get the scene item id stored on a graphics item."""
    value = graphics_item.data(ITEM_ID_KEY)
    if not value:
        return None
    return UUID(str(value))


def base_scale(item: Item, converter: UnitConverter) -> float:
    """Node scale at rest for an item (ornaments are drawn scaled)."""
    if isinstance(item, OrnamentItem):
        return converter.to_device(item.scale_mm) / NORMALIZED_SIZE
    return 1.0


def commit_drag(scene: Scene, graphics_item: QGraphicsItem,
                converter: UnitConverter) -> Optional[Item]:
    """Apply the node's new position to the scene item."""
    item_id = item_id_of(graphics_item)
    item = scene.get_item(item_id) if item_id else None
    if item is None:
        logger.debug(f"Drag on graphics item without scene item: {item_id}")
        return None
    pos = graphics_item.pos()
    dx = converter.to_millimeters(pos.x()) - item.x
    dy = converter.to_millimeters(pos.y()) - item.y
    return scene.translate_item(item.id, dx, dy)


def commit_transform(scene: Scene, graphics_item: QGraphicsItem,
                     converter: UnitConverter) -> Optional[Item]:
    """
    Commit a finished resize/rotate gesture.

    Reads the node's scale factors and rotation, stores the resolved
    attributes in the scene, then resets the node to its rest scale and
    rebuilds its geometry from the updated item.
    """
    item_id = item_id_of(graphics_item)
    item = scene.get_item(item_id) if item_id else None
    if item is None:
        logger.debug(f"Transform on graphics item without scene item: {item_id}")
        return None

    t = graphics_item.transform()
    rest = base_scale(item, converter)
    scale_x = t.m11() * graphics_item.scale() / rest
    scale_y = t.m22() * graphics_item.scale() / rest

    rotation = None
    if isinstance(item, ROTATABLE_TYPES):
        rotation = graphics_item.rotation()

    updated = scene.commit_gesture(item.id, scale_x, scale_y, rotation)

    graphics_item.setTransform(QTransform())
    graphics_item.setScale(base_scale(updated, converter))
    sync_graphics_item(graphics_item, updated, converter)
    return updated
