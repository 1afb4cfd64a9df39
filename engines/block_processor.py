"""Block processing: padding, tiling, cropping."""

from typing import Iterator, List, Tuple

import numpy as np

from models.pixel_buffer import PixelBuffer


def padded_extent(length: int, block_size: int) -> int:
    """Smallest multiple of block_size >= length."""
    return -(-length // block_size) * block_size


def pad_to_multiple(channel: np.ndarray, block_size: int) -> Tuple[PixelBuffer, Tuple[int, int]]:
    """Zero-pad a scalar channel on the right/bottom to a multiple of block_size."""
    h, w = channel.shape
    padded = PixelBuffer.create(padded_extent(w, block_size), padded_extent(h, block_size),
                                channels=1, dtype=channel.dtype)
    padded.array[:h, :w] = channel
    return padded, (h, w)


def tile_rows(buffer: PixelBuffer, block_size: int) -> List[int]:
    """Top edge of every band of tiles."""
    return list(range(0, buffer.height, block_size))


def iter_row_tiles(buffer: PixelBuffer, y: int, block_size: int) -> Iterator[PixelBuffer]:
    """Views onto the tiles of one band, left to right."""
    for x in range(0, buffer.width, block_size):
        yield buffer.view(x, y, block_size, block_size)


def iter_tiles(buffer: PixelBuffer, block_size: int) -> Iterator[PixelBuffer]:
    """Views onto every tile, row-major."""
    for y in tile_rows(buffer, block_size):
        yield from iter_row_tiles(buffer, y, block_size)


def crop(buffer: PixelBuffer, shape: Tuple[int, int]) -> np.ndarray:
    """Copy of the top-left (h, w) region, dropping padding."""
    h, w = shape
    return buffer.view(0, 0, w, h).array.copy()
