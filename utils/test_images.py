"""Synthetic test image generators for filter demos and benchmarks."""

from typing import Optional, Sequence

import numpy as np

from models.pixel_buffer import PixelBuffer


def generate_solid(width: int, height: int, color: Sequence[int] = (255, 0, 0)) -> PixelBuffer:
    """Single flat color - DC-only content, one distinct luma key."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:, :] = color
    return PixelBuffer.from_array(img)


def generate_corner_spike(size: int = 8, value: int = 255) -> PixelBuffer:
    """Black image with one bright top-left pixel - pure high-frequency content."""
    img = np.zeros((size, size, 3), dtype=np.uint8)
    img[0, 0] = value
    return PixelBuffer.from_array(img)


def generate_gradient(width: int = 512, height: int = 512) -> PixelBuffer:
    """Smooth diagonal color gradient - many distinct keys, reveals banding."""
    y, x = np.mgrid[0:height, 0:width]
    t = (x + y) / max(width + height - 2, 1)
    img = np.stack([40 + t * 180, 60 + t * 140, 120 + t * 100], axis=-1)
    return PixelBuffer.from_array(np.clip(img, 0, 255).astype(np.uint8))


def generate_checkerboard(size: int = 512, tile: int = 32,
                          dark: Sequence[int] = (30, 30, 30),
                          light: Sequence[int] = (220, 220, 220)) -> PixelBuffer:
    """High-contrast checkerboard - sharp edges for the block quantizer."""
    y, x = np.mgrid[0:size, 0:size]
    mask = ((y // tile + x // tile) % 2).astype(bool)
    img = np.empty((size, size, 3), dtype=np.uint8)
    img[~mask] = dark
    img[mask] = light
    return PixelBuffer.from_array(img)


def generate_noise(width: int = 256, height: int = 256, seed: int = 123) -> PixelBuffer:
    """Uniform RGB noise - far more than 256 distinct keys."""
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, (height, width, 3), dtype=np.uint8))


def generate_demo_image(key: str) -> Optional[PixelBuffer]:
    """Generate demo image by key."""
    generators = {
        "solid_red": lambda: generate_solid(512, 512, (255, 0, 0)),
        "corner_spike": lambda: generate_corner_spike(8),
        "gradient": lambda: generate_gradient(512, 512),
        "checkerboard": lambda: generate_checkerboard(512),
        "noise": lambda: generate_noise(512, 512),
    }

    if key in generators:
        return generators[key]()

    return None


DEMO_IMAGES = ("solid_red", "corner_spike", "gradient", "checkerboard", "noise")
