"""Channel-balanced grayscale filter."""

import logging

from engines.block_quantizer import gray_to_rgb
from engines.luma import balanced_luma_array, channel_weights
from engines.parallel import map_row_bands
from models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class ChannelBalanceFilter:
    """
    Gray conversion that weights each channel by its share of the image.

    Channel weights come from the whole image, so they are computed before
    the per-pixel pass. Unlike the quantizers this is not BT.601 luma.
    """

    def __init__(self, workers: int = 1):
        self.workers = workers

    def filter(self, image: PixelBuffer) -> PixelBuffer:
        if image.channels != 3:
            raise ValueError(f"Expected an RGB image, got {image.channels} channel(s)")
        rgb = image.array
        weights = channel_weights(rgb)
        logger.debug("Channel weights R=%.3f G=%.3f B=%.3f", *weights)
        gray = map_row_bands(lambda band: balanced_luma_array(band, weights), rgb, self.workers)
        return gray_to_rgb(gray)
