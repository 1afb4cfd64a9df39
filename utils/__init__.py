"""Shared utilities."""

from .metrics import compute_psnr_ssim, count_levels, Timer
from .test_images import (
    generate_solid,
    generate_corner_spike,
    generate_gradient,
    generate_checkerboard,
    generate_noise,
    generate_demo_image,
)
from .image_io import load_image, save_image

__all__ = [
    'compute_psnr_ssim',
    'count_levels',
    'Timer',
    'generate_solid',
    'generate_corner_spike',
    'generate_gradient',
    'generate_checkerboard',
    'generate_noise',
    'generate_demo_image',
    'load_image',
    'save_image',
]
