#!/usr/bin/env python3
"""
Engraver - Main Entry Point

Builds the starter design for a product, validates it and exports SVG.
Run with: python -m engraver.main
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core import (
    Scene, ProductConfig, DEFAULT_PRODUCT, TextItem, FontStyle, TextAlign,
    BLACK, load_product_config
)
from .io import ExportBlockedError, write_svg

logger = logging.getLogger(__name__)


def starter_scene(product: ProductConfig = DEFAULT_PRODUCT) -> Scene:
    """Scene pre-filled with the sample dedication text."""
    region = product.region
    scene = Scene(product)
    scene.add_item(TextItem(
        text="Lenka & Tomáš",
        x=region.x + 10,
        y=region.y + 25,
        font_family="Playfair Display",
        font_size_mm=12.0,
        font_style=FontStyle.BOLD,
        align=TextAlign.LEFT,
        fill=BLACK,
        stroke_width_mm=0.0
    ))
    scene.select(None)
    return scene


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="engraver",
        description="Export the starter engraving design as SVG."
    )
    parser.add_argument("--product", help="JSON product profile")
    parser.add_argument("-o", "--output", help="SVG output file (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the engraver command."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    product = DEFAULT_PRODUCT
    if args.product:
        try:
            product = load_product_config(args.product)
        except (OSError, ValueError) as e:
            logger.error(f"Cannot load product profile {args.product}: {e}")
            return 2

    scene = starter_scene(product)
    try:
        if args.output:
            write_svg(scene, args.output)
            logger.info(f"Wrote {args.output}")
        else:
            print(scene.export_svg())
    except ExportBlockedError as e:
        for problem in e.problems:
            print(f"- {problem}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
