"""
Engraver Scene

The Scene is the root container of a design session: an ordered
sequence of items (back to front), the product profile they are
constrained to, and the current selection.
"""

import dataclasses
import logging
from typing import Iterator, List, Optional, Sequence, Tuple
from uuid import UUID, uuid4

from .attributes import apply_patch, clamp_item
from .gestures import resolve_gesture
from .items import (
    Item, TextItem, RectItem, CircleItem, LineItem, OrnamentItem,
    FontStyle, TextAlign, BLACK, check_item
)
from .ornaments import OrnamentKind
from .product import ProductConfig, DEFAULT_PRODUCT
from .validation import ValidationResult, validate_items

logger = logging.getLogger(__name__)

DUPLICATE_OFFSET_MM = 5.0


class Scene:
    """
    Ordered collection of design items for one product.

    Operations addressing an item by id silently ignore ids that are
    not (or no longer) in the scene, since the canvas may still hold a
    stale selection.
    """

    def __init__(self, product: ProductConfig = DEFAULT_PRODUCT,
                 items: Sequence[Item] = ()):
        self.product = product
        self._items: List[Item] = self._prepare(items)
        self.selected_id: Optional[UUID] = None

    def _prepare(self, items: Sequence[Item]) -> List[Item]:
        """Clamp incoming items and reject repeated ids."""
        prepared = [clamp_item(check_item(it), self.product) for it in items]
        seen = set()
        for item in prepared:
            if item.id in seen:
                raise ValueError(f"Duplicate item id {item.id}")
            seen.add(item.id)
        return prepared

    # -- read ---------------------------------------------------------------

    @property
    def items(self) -> Tuple[Item, ...]:
        """Snapshot of the items in stacking order (back to front)."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def get_item(self, item_id: UUID) -> Optional[Item]:
        """Find an item by its ID."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def _index(self, item_id: UUID) -> int:
        for idx, item in enumerate(self._items):
            if item.id == item_id:
                return idx
        logger.debug(f"Ignoring unknown item id {item_id}")
        return -1

    # -- selection ----------------------------------------------------------

    def select(self, item_id: Optional[UUID]) -> None:
        """Select an item, or clear the selection with None."""
        self.selected_id = item_id

    @property
    def selected(self) -> Optional[Item]:
        if self.selected_id is None:
            return None
        return self.get_item(self.selected_id)

    # -- create -------------------------------------------------------------

    def add_item(self, item: Item) -> Item:
        """Append an item on top of the stack and select it."""
        item = clamp_item(check_item(item), self.product)
        if self.get_item(item.id) is not None:
            raise ValueError(f"Duplicate item id {item.id}")
        self._items.append(item)
        self.select(item.id)
        return item

    def add_text(self) -> TextItem:
        r = self.product.region
        return self.add_item(TextItem(
            text="Your text here",
            x=r.x + r.margin + 5,
            y=r.y + r.margin + 15,
            font_family="Inter",
            font_size_mm=10.0,
            font_style=FontStyle.NORMAL,
            align=TextAlign.LEFT,
            fill=BLACK,
            stroke_width_mm=0.0
        ))

    def add_rect(self) -> RectItem:
        r = self.product.region
        return self.add_item(RectItem(
            x=r.x + 10, y=r.y + 10, w=40.0, h=20.0,
            stroke=BLACK, stroke_width_mm=0.4,
            fill_enabled=False, fill=BLACK
        ))

    def add_circle(self) -> CircleItem:
        r = self.product.region
        return self.add_item(CircleItem(
            x=r.x + 30, y=r.y + 30, r=12.0,
            stroke=BLACK, stroke_width_mm=0.4,
            fill_enabled=False, fill=BLACK
        ))

    def add_line(self) -> LineItem:
        r = self.product.region
        return self.add_item(LineItem(
            x=r.x + 10, y=r.y + 60, x2=r.x + 90, y2=r.y + 60,
            stroke=BLACK, stroke_width_mm=0.6
        ))

    def add_ornament(self, kind: OrnamentKind) -> OrnamentItem:
        r = self.product.region
        return self.add_item(OrnamentItem(
            kind=OrnamentKind(kind),
            x=r.x + 10, y=r.y + 10, scale_mm=25.0,
            stroke=BLACK, stroke_width_mm=0.4
        ))

    # -- update -------------------------------------------------------------

    def update_item(self, item_id: UUID, **patch) -> Optional[Item]:
        """
        Apply an attribute patch to an item.

        Bounded numeric attributes are clamped before storing.

        Returns:
            The updated item, or None if the id is unknown
        """
        idx = self._index(item_id)
        if idx < 0:
            return None
        self._items[idx] = apply_patch(self._items[idx], patch, self.product)
        return self._items[idx]

    def translate_item(self, item_id: UUID, dx: float, dy: float) -> Optional[Item]:
        """Move an item by a drag delta in mm. Lines move both endpoints."""
        item = self.get_item(item_id)
        if item is None:
            logger.debug(f"Ignoring unknown item id {item_id}")
            return None
        patch = {'x': item.x + dx, 'y': item.y + dy}
        if isinstance(item, LineItem):
            patch.update(x2=item.x2 + dx, y2=item.y2 + dy)
        return self.update_item(item_id, **patch)

    def toggle_bold(self, item_id: UUID) -> Optional[Item]:
        item = self.get_item(item_id)
        if not isinstance(item, TextItem):
            return None
        style = item.font_style
        return self.update_item(item_id, font_style=style.with_bold(not style.bold))

    def toggle_italic(self, item_id: UUID) -> Optional[Item]:
        item = self.get_item(item_id)
        if not isinstance(item, TextItem):
            return None
        style = item.font_style
        return self.update_item(item_id, font_style=style.with_italic(not style.italic))

    def commit_gesture(self, item_id: UUID, scale_x: float, scale_y: float,
                       rotation: Optional[float] = None) -> Optional[Item]:
        """Translate a finished resize/rotate gesture into item attributes."""
        item = self.get_item(item_id)
        if item is None:
            logger.debug(f"Ignoring gesture on unknown item id {item_id}")
            return None
        patch = resolve_gesture(item, scale_x, scale_y, self.product, rotation)
        if not patch:
            return item
        return self.update_item(item_id, **patch)

    # -- delete / duplicate -------------------------------------------------

    def delete_item(self, item_id: UUID) -> None:
        """Remove an item from the scene."""
        idx = self._index(item_id)
        if idx < 0:
            return
        del self._items[idx]
        if self.selected_id == item_id:
            self.select(None)

    def duplicate_item(self, item_id: UUID) -> Optional[Item]:
        """Copy an item with a fresh id, offset, on top of the stack."""
        item = self.get_item(item_id)
        if item is None:
            logger.debug(f"Ignoring duplicate of unknown item id {item_id}")
            return None
        offsets = {'x': item.x + DUPLICATE_OFFSET_MM, 'y': item.y + DUPLICATE_OFFSET_MM}
        if isinstance(item, LineItem):
            offsets.update(x2=item.x2 + DUPLICATE_OFFSET_MM,
                           y2=item.y2 + DUPLICATE_OFFSET_MM)
        copy = dataclasses.replace(item, id=uuid4(), **offsets)
        return self.add_item(copy)

    def replace_items(self, items: Sequence[Item]) -> None:
        """Replace the whole scene content."""
        self._items = self._prepare(items)
        self.select(None)

    # -- z-order ------------------------------------------------------------

    def bring_to_front(self, item_id: UUID) -> None:
        """Move item to the top of the stacking order."""
        idx = self._index(item_id)
        if idx >= 0:
            self._items.append(self._items.pop(idx))

    def send_to_back(self, item_id: UUID) -> None:
        """Move item to the bottom of the stacking order."""
        idx = self._index(item_id)
        if idx >= 0:
            self._items.insert(0, self._items.pop(idx))

    # -- validation / export ------------------------------------------------

    def validate(self) -> ValidationResult:
        return validate_items(self._items, self.product)

    def export_svg(self) -> str:
        """Validate and export the scene as an SVG document string."""
        from ..io.svg_export import export_svg
        return export_svg(self._items, self.product)
