"""Tests for product profiles."""

import json
import os
import tempfile
import unittest

from engraver.core.product import (
    Bounds, CanvasSize, EngraveRegion, ProductConfig, DEFAULT_PRODUCT,
    product_from_dict, load_product_config
)


class TestProductConfig(unittest.TestCase):
    """Test ProductConfig and derived bounds."""

    def test_default_bounds(self):
        """Legal bounds are the region inset by the margin."""
        self.assertEqual(DEFAULT_PRODUCT.bounds, Bounds(75.0, 45.0, 225.0, 125.0))
        self.assertEqual(DEFAULT_PRODUCT.canvas, CanvasSize(300.0, 200.0))
        self.assertEqual(DEFAULT_PRODUCT.min_font_mm, 3.0)
        self.assertEqual(DEFAULT_PRODUCT.max_font_mm, 40.0)

    def test_bounds_contains_edges(self):
        bounds = Bounds(0, 0, 10, 10)
        self.assertTrue(bounds.contains(0, 0))
        self.assertTrue(bounds.contains(10, 10))
        self.assertFalse(bounds.contains(10.01, 5))
        self.assertTrue(bounds.contains_box(1, 1, 9, 9))
        self.assertFalse(bounds.contains_box(-1, 1, 9, 9))

    def test_invalid_font_range(self):
        with self.assertRaises(ValueError):
            ProductConfig(min_font_mm=10.0, max_font_mm=5.0)
        with self.assertRaises(ValueError):
            ProductConfig(min_font_mm=0.0)

    def test_invalid_sizes(self):
        with self.assertRaises(ValueError):
            ProductConfig(canvas=CanvasSize(0.0, 100.0))
        with self.assertRaises(ValueError):
            ProductConfig(region=EngraveRegion(width=-1.0))


class TestProductLoading(unittest.TestCase):
    """Test reading product profiles from dictionaries and JSON."""

    def test_partial_dict_uses_defaults(self):
        product = product_from_dict({
            'code': 'TAG_02',
            'engraveMm': {'x': 10, 'y': 10, 'w': 50, 'h': 30},
            'maxFontMm': 20,
        })
        self.assertEqual(product.code, 'TAG_02')
        self.assertEqual(product.region.margin, DEFAULT_PRODUCT.region.margin)
        self.assertEqual(product.canvas, DEFAULT_PRODUCT.canvas)
        self.assertEqual(product.bounds, Bounds(15.0, 15.0, 55.0, 35.0))
        self.assertEqual(product.max_font_mm, 20.0)

    def test_load_from_file(self):
        data = {
            'code': 'BOX_03',
            'canvasMm': {'w': 120, 'h': 80},
            'engraveMm': {'x': 10, 'y': 10, 'w': 100, 'h': 60, 'margin': 2},
            'minFontMm': 4,
            'maxFontMm': 30,
        }
        fd, path = tempfile.mkstemp(suffix='.json')
        os.close(fd)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f)
            product = load_product_config(path)
        finally:
            os.remove(path)
        self.assertEqual(product.canvas, CanvasSize(120.0, 80.0))
        self.assertEqual(product.bounds, Bounds(12.0, 12.0, 108.0, 68.0))
        self.assertEqual(product.min_font_mm, 4.0)

    def test_invalid_dict(self):
        with self.assertRaises(ValueError):
            product_from_dict({'minFontMm': 50})


if __name__ == '__main__':
    unittest.main()
