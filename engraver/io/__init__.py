"""
Engraver I/O Module

Handles vector export.
"""

from .svg_export import (
    ExportBlockedError, escape_xml, render_svg, export_svg, write_svg
)

__all__ = ['ExportBlockedError', 'escape_xml', 'render_svg', 'export_svg', 'write_svg']
