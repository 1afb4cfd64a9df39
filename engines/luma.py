"""Luma estimation: ranking keys, display luma and channel-balanced gray."""

import math
from typing import Optional

import numpy as np

# BT.601 weights scaled by 65536, summing to 65535
RANK_WEIGHTS = (19595, 38469, 7471)
DISPLAY_WEIGHTS = (0.299, 0.587, 0.114)


def ranking_luma(red: int, green: int, blue: int) -> int:
    """Unbounded integer ranking key, 0..16,711,425. Use for ordering only."""
    return RANK_WEIGHTS[0] * int(red) + RANK_WEIGHTS[1] * int(green) + RANK_WEIGHTS[2] * int(blue)


def display_luma(red: int, green: int, blue: int) -> int:
    """BT.601 luma rounded half-up and clamped to 0..255."""
    value = DISPLAY_WEIGHTS[0] * red + DISPLAY_WEIGHTS[1] * green + DISPLAY_WEIGHTS[2] * blue
    return min(max(math.floor(value + 0.5), 0), 255)


def ranking_luma_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorised ranking_luma over an (..., 3) array, as int64."""
    channels = rgb.astype(np.int64)
    return (RANK_WEIGHTS[0] * channels[..., 0]
            + RANK_WEIGHTS[1] * channels[..., 1]
            + RANK_WEIGHTS[2] * channels[..., 2])


def display_luma_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorised display_luma over an (..., 3) array, as uint8."""
    channels = rgb.astype(np.float64)
    value = (DISPLAY_WEIGHTS[0] * channels[..., 0]
             + DISPLAY_WEIGHTS[1] * channels[..., 1]
             + DISPLAY_WEIGHTS[2] * channels[..., 2])
    return np.clip(np.floor(value + 0.5), 0, 255).astype(np.uint8)


def channel_weights(rgb: np.ndarray) -> np.ndarray:
    """Per-channel integer means normalised by the largest mean."""
    pixels = rgb.reshape(-1, 3)
    means = pixels.astype(np.uint64).sum(axis=0) // np.uint64(pixels.shape[0])
    peak = means.max()
    if peak == 0:
        return np.zeros(3, dtype=np.float64)
    return means.astype(np.float64) / float(peak)


def balanced_luma_array(rgb: np.ndarray, weights: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Channel-balanced gray: each channel divided by its relative mean weight,
    averaged, then normalised by the mean weight. Zero-weight channels
    contribute nothing; the result is truncated and saturated to 0..255.

    Pass precomputed whole-image weights when converting one band at a time.
    """
    if weights is None:
        weights = channel_weights(rgb)
    if not weights.any():
        return np.zeros(rgb.shape[:-1], dtype=np.uint8)

    channels = rgb.astype(np.float64)
    total = np.zeros(rgb.shape[:-1], dtype=np.float64)
    for c in range(3):
        if weights[c] > 0:
            total += channels[..., c] / weights[c]

    mean_weight = weights.sum() / 3.0
    gray = np.trunc((total / mean_weight) / 3.0)
    return np.clip(gray, 0, 255).astype(np.uint8)
