"""Block DCT quantizer: keep only the low-frequency quadrant of each 8x8 luma tile."""

import logging

import numpy as np

from engines.block_processor import crop, iter_row_tiles, pad_to_multiple, tile_rows
from engines.dct_engine import BLOCK_SIZE, discard_high_frequencies, get_backend, to_samples
from engines.luma import display_luma_array
from engines.parallel import run_each
from models.errors import InvalidDimension
from models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def quantize_block(block: np.ndarray, keep: int = 4, backend: str = 'matrix') -> np.ndarray:
    """Forward DCT, zero every coefficient outside the keep x keep corner, inverse (unrounded)."""
    forward, inverse = get_backend(backend)
    return inverse(discard_high_frequencies(forward(block), keep))


def gray_to_rgb(gray: np.ndarray) -> PixelBuffer:
    """Replicate a scalar channel into R, G and B."""
    return PixelBuffer.from_array(np.repeat(gray[:, :, np.newaxis], 3, axis=2))


class BlockQuantizer:
    """
    Reduces detail by discarding high spatial frequencies.

    The input is converted to display luma (0..255, see
    ``engines.luma.display_luma``) in a scalar uint8 buffer, zero-padded to a
    multiple of 8, and every 8x8 tile is transformed, truncated to its low
    ``keep`` x ``keep`` coefficients and reconstructed in place through a
    view. Reconstructed samples saturate at 0 and 255. Tiles never overlap,
    so bands of tiles can run on separate threads.
    """

    def __init__(self, keep: int = 4, backend: str = 'matrix', workers: int = 1):
        if not (1 <= keep <= BLOCK_SIZE):
            raise ValueError(f"Retained quadrant must be 1-{BLOCK_SIZE}, got {keep}")
        self._forward, self._inverse = get_backend(backend)
        self.keep = keep
        self.backend = backend
        self.workers = workers

    def quantize_tile(self, tile: PixelBuffer) -> None:
        """Low-pass one tile in place."""
        coeffs = discard_high_frequencies(self._forward(tile.array), self.keep)
        tile.array[...] = to_samples(self._inverse(coeffs), tile.dtype)

    def filter(self, image: PixelBuffer) -> PixelBuffer:
        """Grayscale RGB image of the same size with high frequencies removed."""
        if image.width < BLOCK_SIZE or image.height < BLOCK_SIZE:
            raise InvalidDimension(
                f"Block quantizer needs at least {BLOCK_SIZE}x{BLOCK_SIZE}, "
                f"got {image.width}x{image.height}"
            )
        if image.channels != 3:
            raise ValueError(f"Expected an RGB image, got {image.channels} channel(s)")

        luma = display_luma_array(image.array)
        padded, shape = pad_to_multiple(luma, BLOCK_SIZE)
        logger.debug("Block quantizer: %dx%d padded to %dx%d, keep=%d, backend=%s",
                     image.width, image.height, padded.width, padded.height,
                     self.keep, self.backend)

        def process_band(y: int) -> None:
            for tile in iter_row_tiles(padded, y, BLOCK_SIZE):
                self.quantize_tile(tile)

        run_each(process_band, tile_rows(padded, BLOCK_SIZE), self.workers)
        return gray_to_rgb(crop(padded, shape))
