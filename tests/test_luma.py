"""Tests for luma formulas."""

import numpy as np
import pytest
from engines.luma import (
    balanced_luma_array,
    channel_weights,
    display_luma,
    display_luma_array,
    ranking_luma,
    ranking_luma_array,
)


@pytest.mark.parametrize("rgb,key", [
    ((0, 0, 0), 0),
    ((255, 0, 0), 4996725),
    ((0, 255, 0), 9809595),
    ((0, 0, 255), 1905105),
    ((255, 255, 255), 16711425),
])
def test_ranking_luma_values(rgb, key):
    assert ranking_luma(*rgb) == key


@pytest.mark.parametrize("rgb,gray", [
    ((0, 0, 0), 0),
    ((255, 0, 0), 76),
    ((0, 255, 0), 150),
    ((0, 0, 255), 29),
    ((255, 255, 255), 255),
    ((10, 10, 10), 10),
])
def test_display_luma_values(rgb, gray):
    assert display_luma(*rgb) == gray


def test_array_forms_match_scalar_forms():
    rng = np.random.default_rng(7)
    rgb = rng.integers(0, 256, (16, 16, 3), dtype=np.uint8)
    keys = ranking_luma_array(rgb)
    grays = display_luma_array(rgb)
    for y in range(16):
        for x in range(16):
            r, g, b = (int(c) for c in rgb[y, x])
            assert keys[y, x] == ranking_luma(r, g, b)
            assert grays[y, x] == display_luma(r, g, b)


def test_ranking_key_does_not_overflow_uint8_input():
    rgb = np.full((2, 2, 3), 255, dtype=np.uint8)
    assert ranking_luma_array(rgb).dtype == np.int64
    assert ranking_luma_array(rgb).max() == 16711425


def test_formulas_are_distinct():
    """The ranking key is unbounded; display luma stays within 0..255."""
    assert ranking_luma(255, 0, 0) != display_luma(255, 0, 0)
    assert abs(ranking_luma(200, 100, 50) / 65535 - display_luma(200, 100, 50)) <= 1


def test_channel_weights_relative_to_largest_mean():
    rgb = np.zeros((4, 4, 3), dtype=np.uint8)
    rgb[..., 0] = 200
    rgb[..., 1] = 100
    weights = channel_weights(rgb)
    assert np.allclose(weights, [1.0, 0.5, 0.0])


def test_balanced_luma_uniform_gray_is_identity():
    rgb = np.full((3, 3, 3), 90, dtype=np.uint8)
    assert np.all(balanced_luma_array(rgb) == 90)


def test_balanced_luma_black_image():
    rgb = np.zeros((3, 3, 3), dtype=np.uint8)
    assert np.all(balanced_luma_array(rgb) == 0)


def test_balanced_luma_single_channel_saturates():
    """Solid red: weights (1, 0, 0), mean weight 1/3, so 255 stays 255."""
    rgb = np.zeros((2, 2, 3), dtype=np.uint8)
    rgb[..., 0] = 255
    assert np.all(balanced_luma_array(rgb) == 255)
