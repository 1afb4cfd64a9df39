"""Metrics: PSNR, SSIM, palette size, runtime."""

import time
from typing import Dict, Optional

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity

# skimage's default SSIM window
SSIM_MIN_SIDE = 7


def compute_psnr_ssim(reference_y: np.ndarray, filtered_y: np.ndarray) -> Dict[str, Optional[float]]:
    """
    PSNR and SSIM between two uint8 gray channels.

    PSNR is inf for identical inputs; SSIM is None when the image is
    smaller than its window.
    """
    if np.array_equal(reference_y, filtered_y):
        psnr_y = float('inf')
    else:
        psnr_y = float(peak_signal_noise_ratio(reference_y, filtered_y, data_range=255))

    ssim_y = None
    if min(reference_y.shape) >= SSIM_MIN_SIDE:
        ssim_y = float(structural_similarity(reference_y, filtered_y, data_range=255))

    return {'psnr_y': psnr_y, 'ssim_y': ssim_y}


def count_levels(gray: np.ndarray) -> int:
    """Number of distinct values in a gray channel."""
    return int(np.unique(gray).size)


class Timer:
    """Simple timer for filter runtime."""

    def __init__(self):
        self.elapsed_ms = 0.0

    def measure(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.elapsed_ms = (time.perf_counter() - start) * 1000.0
        return result
