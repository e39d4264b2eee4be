"""
Graphics Items for Engraver

Builds QGraphicsItems showing scene items on the canvas. Geometry is
converted from millimeters to device units here and nowhere else.
Each graphics item stores its scene item id in data(0).
"""

from typing import Optional

import numpy as np
from PyQt6.QtCore import QByteArray, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QImage, QPen, QPixmap
from PyQt6.QtSvg import QSvgRenderer
from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem, QGraphicsItem, QGraphicsLineItem,
    QGraphicsPixmapItem, QGraphicsRectItem, QGraphicsSimpleTextItem
)

from ..core.items import (
    Item, TextItem, RectItem, CircleItem, LineItem, OrnamentItem,
    ROTATABLE_TYPES, BLACK
)
from ..core.ornaments import NORMALIZED_SIZE, get_ornament
from ..core.product import ProductConfig
from ..core.units import UnitConverter

ITEM_ID_KEY = 0
REGION_COLOR = "#22c55e"


def _pen(item: Item, converter: UnitConverter) -> QPen:
    if item.stroke_width_mm <= 0:
        return QPen(Qt.PenStyle.NoPen)
    pen = QPen(QColor(item.stroke or BLACK))
    pen.setWidthF(converter.to_device(item.stroke_width_mm))
    return pen


def _brush(item: Item) -> QBrush:
    if item.fill_enabled:
        return QBrush(QColor(item.fill or BLACK))
    return QBrush(Qt.BrushStyle.NoBrush)


def _ornament_renderer(item: OrnamentItem) -> QSvgRenderer:
    size = NORMALIZED_SIZE
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}"'
        f' viewBox="0 0 {size} {size}"><path d="{get_ornament(item.kind).path}"'
        f' fill="none" stroke="{item.stroke or BLACK}"'
        f' stroke-width="{item.stroke_width_mm * size / item.scale_mm}" /></svg>'
    )
    return QSvgRenderer(QByteArray(svg.encode('utf-8')))


def _new_graphics_item(item: Item) -> QGraphicsItem:
    if isinstance(item, TextItem):
        return QGraphicsSimpleTextItem()
    if isinstance(item, RectItem):
        return QGraphicsRectItem()
    if isinstance(item, CircleItem):
        return QGraphicsEllipseItem()
    if isinstance(item, LineItem):
        return QGraphicsLineItem()
    if isinstance(item, OrnamentItem):
        return QGraphicsSvgItem()
    raise TypeError(f"Unsupported item type: {type(item).__name__}")


def sync_graphics_item(g: QGraphicsItem, item: Item,
                       converter: UnitConverter) -> QGraphicsItem:
    """
    Rebuild a graphics item's geometry, style and placement from a
    scene item, so its on-screen size matches the stored attributes.

    Args:
        g: Graphics item previously created for the same variant
        item: The scene item to display
        converter: mm -> device unit converter

    Returns:
        The same graphics item
    """
    d = converter.to_device

    if isinstance(item, TextItem):
        g.setText(item.text)
        font = QFont(item.font_family)
        font.setPixelSize(max(1, round(d(item.font_size_mm))))
        font.setBold(item.font_style.bold)
        font.setItalic(item.font_style.italic)
        g.setFont(font)
        g.setBrush(QBrush(QColor((item.fill or "").strip() or BLACK)))
        g.setPen(_pen(item, converter))
    elif isinstance(item, RectItem):
        g.setRect(QRectF(0, 0, d(item.w), d(item.h)))
        g.setPen(_pen(item, converter))
        g.setBrush(_brush(item))
    elif isinstance(item, CircleItem):
        r = d(item.r)
        g.setRect(QRectF(-r, -r, 2 * r, 2 * r))
        g.setPen(_pen(item, converter))
        g.setBrush(_brush(item))
    elif isinstance(item, LineItem):
        # Local coordinates relative to the first endpoint
        g.setLine(0, 0, d(item.x2 - item.x), d(item.y2 - item.y))
        g.setPen(_pen(item, converter))
    elif isinstance(item, OrnamentItem):
        renderer = _ornament_renderer(item)
        g.setSharedRenderer(renderer)
        g._renderer = renderer  # keep alive with the item
        g.setScale(d(item.scale_mm) / NORMALIZED_SIZE)
    else:
        raise TypeError(f"Unsupported item type: {type(item).__name__}")

    g.setPos(d(item.x), d(item.y))
    if isinstance(item, ROTATABLE_TYPES):
        g.setRotation(item.rotation or 0.0)
    return g


def create_graphics_item(item: Item, converter: UnitConverter) -> QGraphicsItem:
    """
    Create a movable, selectable graphics item for a scene item.

    Args:
        item: The scene item to display
        converter: mm -> device unit converter

    Returns:
        QGraphicsItem positioned at the item's anchor
    """
    g = sync_graphics_item(_new_graphics_item(item), item, converter)
    g.setData(ITEM_ID_KEY, str(item.id))
    g.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable, True)
    g.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, True)
    return g


def engrave_region_item(product: ProductConfig,
                        converter: UnitConverter) -> QGraphicsRectItem:
    """Dashed, non-interactive outline of the engrave region."""
    d = converter.to_device
    region = product.region
    g = QGraphicsRectItem(QRectF(d(region.x), d(region.y),
                                 d(region.width), d(region.height)))
    pen = QPen(QColor(REGION_COLOR))
    pen.setDashPattern([6, 4])
    g.setPen(pen)
    g.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
    return g


def background_pixmap_item(image: np.ndarray,
                           z_value: Optional[float] = -1000.0) -> QGraphicsPixmapItem:
    """Wrap an RGB uint8 array as a pixmap item behind the design."""
    image = np.asarray(image, dtype=np.uint8)
    height, width = image.shape[:2]
    bytes_per_line = 3 * width
    qimage = QImage(
        image.tobytes(),
        width, height,
        bytes_per_line,
        QImage.Format.Format_RGB888
    ).copy()
    g = QGraphicsPixmapItem(QPixmap.fromImage(qimage))
    g.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
    if z_value is not None:
        g.setZValue(z_value)
    return g
