"""Tests for gesture commit resolution."""

import unittest

from engraver.core import (
    Scene, ProductConfig, DEFAULT_PRODUCT,
    TextItem, RectItem, CircleItem, LineItem, OrnamentItem,
    resolve_gesture
)


class TestResolveGesture(unittest.TestCase):
    """Per-variant scale rules."""

    def test_rect_independent_axes(self):
        patch = resolve_gesture(RectItem(w=40, h=20), 2.0, 0.5, DEFAULT_PRODUCT)
        self.assertEqual(patch, {'w': 80.0, 'h': 10.0})

    def test_rect_clamped(self):
        patch = resolve_gesture(RectItem(w=400, h=2), 2.0, 0.1, DEFAULT_PRODUCT)
        self.assertEqual(patch, {'w': 500.0, 'h': 1.0})

    def test_circle_uses_larger_axis(self):
        patch = resolve_gesture(CircleItem(r=10), 1.5, 0.5, DEFAULT_PRODUCT)
        self.assertEqual(patch, {'r': 15.0})

    def test_text_clamped_to_product_range(self):
        text = TextItem(font_size_mm=10)
        self.assertEqual(resolve_gesture(text, 2.0, 1.0, DEFAULT_PRODUCT),
                         {'font_size_mm': 20.0})
        self.assertEqual(resolve_gesture(text, 10.0, 1.0, DEFAULT_PRODUCT),
                         {'font_size_mm': 40.0})
        self.assertEqual(resolve_gesture(text, 0.1, 0.1, DEFAULT_PRODUCT),
                         {'font_size_mm': 3.0})

    def test_text_uses_product_bounds(self):
        product = ProductConfig(min_font_mm=5.0, max_font_mm=15.0)
        patch = resolve_gesture(TextItem(font_size_mm=10), 2.0, 2.0, product)
        self.assertEqual(patch, {'font_size_mm': 15.0})

    def test_ornament_clamped(self):
        ornament = OrnamentItem(scale_mm=25)
        self.assertEqual(resolve_gesture(ornament, 2.0, 1.0, DEFAULT_PRODUCT),
                         {'scale_mm': 50.0})
        self.assertEqual(resolve_gesture(ornament, 0.1, 0.1, DEFAULT_PRODUCT),
                         {'scale_mm': 5.0})
        self.assertEqual(resolve_gesture(ornament, 10.0, 10.0, DEFAULT_PRODUCT),
                         {'scale_mm': 120.0})

    def test_line_is_noop(self):
        line = LineItem(x=0, y=0, x2=10, y2=0)
        self.assertEqual(resolve_gesture(line, 3.0, 3.0, DEFAULT_PRODUCT), {})
        self.assertEqual(resolve_gesture(line, 3.0, 3.0, DEFAULT_PRODUCT, rotation=45), {})

    def test_rotation_recorded_for_rotatable(self):
        patch = resolve_gesture(RectItem(w=40, h=20), 1.0, 1.0, DEFAULT_PRODUCT,
                                rotation=-30.0)
        self.assertEqual(patch['rotation'], 330.0)

    def test_rotation_ignored_for_circle(self):
        patch = resolve_gesture(CircleItem(r=10), 1.0, 1.0, DEFAULT_PRODUCT, rotation=30)
        self.assertNotIn('rotation', patch)

    def test_unknown_type(self):
        with self.assertRaises(TypeError):
            resolve_gesture(object(), 1.0, 1.0, DEFAULT_PRODUCT)


class TestCommitGesture(unittest.TestCase):
    """Scene-level gesture commits."""

    def setUp(self):
        self.scene = Scene()

    def test_identity_commit_after_clamp_is_stable(self):
        text = self.scene.add_text()
        first = self.scene.commit_gesture(text.id, 50.0, 50.0)
        self.assertEqual(first.font_size_mm, 40.0)
        second = self.scene.commit_gesture(text.id, 1.0, 1.0)
        third = self.scene.commit_gesture(text.id, 1.0, 1.0)
        self.assertEqual(second.font_size_mm, 40.0)
        self.assertEqual(third.font_size_mm, 40.0)

    def test_identity_commit_keeps_rect(self):
        rect = self.scene.add_rect()
        self.scene.commit_gesture(rect.id, 1.3, 0.7)
        before = self.scene.get_item(rect.id)
        after = self.scene.commit_gesture(rect.id, 1.0, 1.0)
        self.assertEqual((after.w, after.h), (before.w, before.h))

    def test_line_commit_leaves_item(self):
        line = self.scene.add_line()
        self.assertEqual(self.scene.commit_gesture(line.id, 2.0, 2.0), line)

    def test_unknown_id(self):
        from uuid import uuid4
        self.assertIsNone(self.scene.commit_gesture(uuid4(), 2.0, 2.0))


if __name__ == '__main__':
    unittest.main()
