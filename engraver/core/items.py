"""
Engraver Scene Items

Defines the closed set of placeable design elements: Text, Rectangle,
Circle, Line and Ornament. All geometry is stored in millimeters.

The set is closed on purpose. Code that dispatches over items handles
every variant explicitly and raises TypeError for anything else.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union
from uuid import UUID, uuid4

from .ornaments import OrnamentKind

BLACK = "#000000"


class ItemType(Enum):
    TEXT = "text"
    RECT = "rect"
    CIRCLE = "circle"
    LINE = "line"
    ORNAMENT = "ornament"


class FontStyle(Enum):
    """Style flag-set of a text item."""
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold italic"

    @property
    def bold(self) -> bool:
        return self in (FontStyle.BOLD, FontStyle.BOLD_ITALIC)

    @property
    def italic(self) -> bool:
        return self in (FontStyle.ITALIC, FontStyle.BOLD_ITALIC)

    @classmethod
    def from_flags(cls, bold: bool, italic: bool) -> 'FontStyle':
        if bold and italic:
            return cls.BOLD_ITALIC
        if bold:
            return cls.BOLD
        if italic:
            return cls.ITALIC
        return cls.NORMAL

    def with_bold(self, bold: bool) -> 'FontStyle':
        return FontStyle.from_flags(bold, self.italic)

    def with_italic(self, italic: bool) -> 'FontStyle':
        return FontStyle.from_flags(self.bold, italic)


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def anchor(self) -> str:
        """SVG text-anchor value."""
        return {
            TextAlign.LEFT: "start",
            TextAlign.CENTER: "middle",
            TextAlign.RIGHT: "end",
        }[self]


@dataclass(frozen=True, kw_only=True)
class BaseItem:
    """Fields shared by every item variant."""
    id: UUID = field(default_factory=uuid4)
    x: float = 0.0
    y: float = 0.0
    rotation: Optional[float] = None  # degrees
    stroke: Optional[str] = None
    stroke_width_mm: float = 0.0


@dataclass(frozen=True, kw_only=True)
class TextItem(BaseItem):
    """Text anchored at (x, y)."""
    type: ClassVar[ItemType] = ItemType.TEXT

    text: str = ""
    font_family: str = "Inter"
    font_size_mm: float = 10.0
    font_style: FontStyle = FontStyle.NORMAL
    align: TextAlign = TextAlign.LEFT
    fill: Optional[str] = BLACK


@dataclass(frozen=True, kw_only=True)
class RectItem(BaseItem):
    """Rectangle; (x, y) is the top-left corner."""
    type: ClassVar[ItemType] = ItemType.RECT

    w: float = 40.0
    h: float = 20.0
    fill_enabled: bool = False
    fill: Optional[str] = BLACK


@dataclass(frozen=True, kw_only=True)
class CircleItem(BaseItem):
    """Circle; (x, y) is the center."""
    type: ClassVar[ItemType] = ItemType.CIRCLE

    r: float = 12.0
    fill_enabled: bool = False
    fill: Optional[str] = BLACK


@dataclass(frozen=True, kw_only=True)
class LineItem(BaseItem):
    """Line from (x, y) to (x2, y2). Carries no independent rotation."""
    type: ClassVar[ItemType] = ItemType.LINE

    x2: float = 0.0
    y2: float = 0.0


@dataclass(frozen=True, kw_only=True)
class OrnamentItem(BaseItem):
    """Decorative outline anchored at its top-left, sized by scale_mm."""
    type: ClassVar[ItemType] = ItemType.ORNAMENT

    kind: OrnamentKind = OrnamentKind.HEART
    scale_mm: float = 25.0


Item = Union[TextItem, RectItem, CircleItem, LineItem, OrnamentItem]

ITEM_CLASSES = (TextItem, RectItem, CircleItem, LineItem, OrnamentItem)

# Variants whose rotation is honored on canvas and in export
ROTATABLE_TYPES = (TextItem, RectItem, OrnamentItem)


def check_item(item: object) -> Item:
    """Return item unchanged, or raise TypeError for a non-item."""
    if not isinstance(item, ITEM_CLASSES):
        raise TypeError(f"Unsupported item type: {type(item).__name__}")
    return item
