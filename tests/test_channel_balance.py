"""Tests for the channel-balanced gray filter."""

import numpy as np
from engines.channel_balance import ChannelBalanceFilter
from engines.luma import balanced_luma_array
from models.pixel_buffer import PixelBuffer
from utils.test_images import generate_noise, generate_solid


def test_solid_red_saturates_to_white():
    output = ChannelBalanceFilter().filter(generate_solid(4, 4, (255, 0, 0)))
    assert np.all(output.array == 255)


def test_gray_image_is_unchanged():
    rgb = np.zeros((4, 4, 3), dtype=np.uint8)
    rgb[:2] = 40
    rgb[2:] = 200
    output = ChannelBalanceFilter().filter(PixelBuffer.from_array(rgb))
    assert np.array_equal(output.array, rgb)


def test_threaded_bands_use_whole_image_weights():
    image = generate_noise(30, 20, seed=21)
    output = ChannelBalanceFilter(workers=4).filter(image)
    assert np.array_equal(output.array[:, :, 0], balanced_luma_array(image.array))
