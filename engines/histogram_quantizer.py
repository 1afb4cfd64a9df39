"""Histogram-rank quantizer: map distinct luma ranks onto 256 ordered gray levels."""

import logging
from typing import Tuple

import numpy as np

from engines.block_quantizer import gray_to_rgb
from engines.luma import display_luma_array, ranking_luma_array
from engines.parallel import map_row_bands
from models.histogram_mapping import PALETTE_SIZE, HistogramMapping
from models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def build_mapping(keys: np.ndarray) -> HistogramMapping:
    """
    Rank the distinct keys and spread them evenly over the palette.

    With n distinct keys and inc = n / 256, the key at sorted position i
    gets level floor(i / inc), capped at 255; the largest key always lands
    on 255. At most 256 distinct keys map to their own rank (identity) and
    callers bypass binning altogether.
    """
    distinct = np.unique(keys)
    n = distinct.size
    if n <= PALETTE_SIZE:
        return HistogramMapping(distinct, np.arange(n, dtype=np.int64))

    inc = n / float(PALETTE_SIZE)
    bins = np.floor(np.arange(n, dtype=np.float64) / inc).astype(np.int64)
    np.minimum(bins, PALETTE_SIZE - 1, out=bins)
    bins[-1] = PALETTE_SIZE - 1
    return HistogramMapping(distinct, bins)


class HistogramQuantizer:
    """
    Two-pass global quantizer.

    Pass 1 collects the distinct ranking keys of the whole image and builds
    the mapping; pass 2 maps every pixel independently. The distinct-key set
    is fully built before pass 2 starts, so both passes can fan out over
    row bands when ``workers`` > 1.
    """

    def __init__(self, workers: int = 1):
        self.workers = workers

    def histogram(self, image: PixelBuffer) -> HistogramMapping:
        """Pass 1: distinct ranking keys of the image and their levels."""
        rgb = self._rgb(image)
        keys = map_row_bands(lambda band: np.unique(ranking_luma_array(band)), rgb, self.workers)
        return build_mapping(keys)

    def filter_with_mapping(self, image: PixelBuffer) -> Tuple[PixelBuffer, HistogramMapping]:
        """Quantized image plus the mapping used to produce it."""
        rgb = self._rgb(image)
        mapping = self.histogram(image)

        if mapping.bypass:
            logger.info("Already fits the palette, no compression needed: %d distinct keys",
                        mapping.distinct_count)
            gray = map_row_bands(display_luma_array, rgb, self.workers)
        else:
            logger.debug("Binning %d distinct keys into %d levels",
                         mapping.distinct_count, PALETTE_SIZE)
            gray = map_row_bands(
                lambda band: mapping.lookup(ranking_luma_array(band)).astype(np.uint8),
                rgb, self.workers,
            )
        return gray_to_rgb(gray), mapping

    def filter(self, image: PixelBuffer) -> PixelBuffer:
        """Grayscale RGB image of the same size using at most 256 levels."""
        output, _ = self.filter_with_mapping(image)
        return output

    @staticmethod
    def _rgb(image: PixelBuffer) -> np.ndarray:
        if image.channels != 3:
            raise ValueError(f"Expected an RGB image, got {image.channels} channel(s)")
        return image.array
