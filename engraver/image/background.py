"""
Background preview images.

Backgrounds are shown behind the design on screen only; they never
reach the exported document.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoverFit:
    """Placement of an image scaled to cover a box."""
    x: float
    y: float
    width: float
    height: float


def fit_cover(img_w: float, img_h: float, box_w: float, box_h: float) -> CoverFit:
    """
    Scale an image uniformly so it covers the box, centered.

    Parts of the image may fall outside the box.
    """
    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"Image size must be positive, got {img_w}x{img_h}")
    s = max(box_w / img_w, box_h / img_h)
    w = img_w * s
    h = img_h * s
    return CoverFit(x=(box_w - w) / 2, y=(box_h - h) / 2, width=w, height=h)


def load_background(source: Union[str, BinaryIO],
                    canvas_w: int, canvas_h: int) -> np.ndarray:
    """
    Load an image and crop it to cover the canvas.

    Args:
        source: File path or binary file object
        canvas_w: Canvas width in device pixels
        canvas_h: Canvas height in device pixels

    Returns:
        RGB image as uint8 array of shape (canvas_h, canvas_w, 3)
    """
    img = Image.open(source).convert("RGB")
    fit = fit_cover(img.width, img.height, canvas_w, canvas_h)

    scaled_w = max(canvas_w, round(fit.width))
    scaled_h = max(canvas_h, round(fit.height))
    img = img.resize((scaled_w, scaled_h), Image.Resampling.LANCZOS)

    left = (scaled_w - canvas_w) // 2
    top = (scaled_h - canvas_h) // 2
    img = img.crop((left, top, left + canvas_w, top + canvas_h))
    logger.debug(f"Background fitted to {canvas_w}x{canvas_h} px")
    return np.array(img, dtype=np.uint8)
