"""
Engraver - engravable vector design composer

Compose text, shapes and ornaments inside a product's engrave region
and export them as a millimeter-accurate SVG.
"""

__version__ = "0.1.0"
