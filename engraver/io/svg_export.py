"""
SVG Export for Engraver

Serializes scene items into an SVG document sized in millimeters with
a 1:1 millimeter user space, ready for laser-engraving software.
"""

import logging
from typing import Iterable, List, TYPE_CHECKING
from xml.sax.saxutils import escape

from ..core.items import (
    Item, TextItem, RectItem, CircleItem, LineItem, OrnamentItem, BLACK
)
from ..core.ornaments import get_ornament, ornament_scale_factor
from ..core.product import CanvasSize, ProductConfig
from ..core.validation import validate_items

if TYPE_CHECKING:
    from ..core.scene import Scene

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'

_ENTITIES = {'"': '&quot;', "'": '&apos;'}


class ExportBlockedError(ValueError):
    """Raised when export is requested for a scene that fails validation."""

    def __init__(self, problems: List[str]):
        super().__init__("Cannot export:\n- " + "\n- ".join(problems))
        self.problems = problems


def escape_xml(text: str) -> str:
    """Escape the five reserved XML characters."""
    return escape(text, _ENTITIES)


def fmt(value: float) -> str:
    """Format a number in shortest form, at most 4 decimals."""
    s = f"{value:.4f}".rstrip('0').rstrip('.')
    return "0" if s in ("-0", "") else s


def _stroke_attrs(item: Item) -> str:
    # Widths that round to zero are treated as no stroke
    width = fmt(item.stroke_width_mm) if item.stroke_width_mm > 0 else "0"
    if width != "0":
        stroke = escape_xml(item.stroke or BLACK)
        return f' stroke="{stroke}" stroke-width="{width}"'
    return ""


def _rotate(item: Item) -> str:
    return f"rotate({fmt(item.rotation)} {fmt(item.x)} {fmt(item.y)})"


def _fill_attr(item: Item) -> str:
    if item.fill_enabled:
        return f' fill="{escape_xml(item.fill or BLACK)}"'
    return ' fill="none"'


def item_to_svg(item: Item) -> str:
    """Serialize one item as a single SVG primitive."""
    sw = _stroke_attrs(item)

    if isinstance(item, TextItem):
        rot = f' transform="{_rotate(item)}"' if item.rotation else ""
        fill = (item.fill or "").strip() or BLACK
        style = item.font_style
        return (
            f'<text x="{fmt(item.x)}" y="{fmt(item.y)}"'
            f' font-family="{escape_xml(item.font_family)}"'
            f' font-size="{fmt(item.font_size_mm)}"'
            f' font-style="{"italic" if style.italic else "normal"}"'
            f' font-weight="{"bold" if style.bold else "normal"}"'
            f' text-anchor="{item.align.anchor}"'
            f' fill="{escape_xml(fill)}"{sw}{rot}>{escape_xml(item.text)}</text>'
        )
    if isinstance(item, RectItem):
        rot = f' transform="{_rotate(item)}"' if item.rotation else ""
        return (
            f'<rect x="{fmt(item.x)}" y="{fmt(item.y)}"'
            f' width="{fmt(item.w)}" height="{fmt(item.h)}"'
            f'{_fill_attr(item)}{sw}{rot} />'
        )
    if isinstance(item, CircleItem):
        return (
            f'<circle cx="{fmt(item.x)}" cy="{fmt(item.y)}" r="{fmt(item.r)}"'
            f'{_fill_attr(item)}{sw} />'
        )
    if isinstance(item, LineItem):
        return (
            f'<line x1="{fmt(item.x)}" y1="{fmt(item.y)}"'
            f' x2="{fmt(item.x2)}" y2="{fmt(item.y2)}"{sw} />'
        )
    if isinstance(item, OrnamentItem):
        definition = get_ornament(item.kind)
        transform = (
            f"translate({fmt(item.x)} {fmt(item.y)})"
            f" scale({fmt(ornament_scale_factor(item.scale_mm))})"
        )
        if item.rotation:
            transform = f"{_rotate(item)} {transform}"
        return (
            f'<path d="{definition.path}" fill="none"{sw}'
            f' transform="{transform}" />'
        )
    raise TypeError(f"Unsupported item type: {type(item).__name__}")


def render_svg(items: Iterable[Item], canvas: CanvasSize) -> str:
    """
    Serialize items into an SVG document string.

    Items are written in stacking order. No validation is performed;
    use export_svg() for the guarded variant.

    Args:
        items: Items in stacking order (back to front)
        canvas: Physical canvas size in mm

    Returns:
        SVG document string
    """
    w, h = fmt(canvas.width), fmt(canvas.height)
    lines = [
        f'<svg xmlns="{SVG_NS}"',
        f'  width="{w}mm"',
        f'  height="{h}mm"',
        f'  viewBox="0 0 {w} {h}">',
    ]
    lines.extend(f"  {item_to_svg(item)}" for item in items)
    lines.append('</svg>')
    return "\n".join(lines)


def export_svg(items: Iterable[Item], product: ProductConfig) -> str:
    """
    Validate items and export them as SVG.

    Raises:
        ExportBlockedError: if validation reports any problem
    """
    items = list(items)
    result = validate_items(items, product)
    if not result.ok:
        logger.warning(f"Export refused, {len(result.problems)} problem(s)")
        raise ExportBlockedError(result.problems)
    svg = render_svg(items, product.canvas)
    logger.info(f"Exported {len(items)} item(s) for product {product.code}")
    return svg


def write_svg(scene: 'Scene', filepath: str) -> None:
    """Export a Scene to an SVG file."""
    svg = scene.export_svg()
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(svg)
        f.write("\n")
