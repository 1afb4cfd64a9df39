"""Data models for buffers, filter parameters and results."""

from .errors import InvalidDimension, OutOfBounds
from .pixel_buffer import PixelBuffer
from .filter_params import FilterParams
from .filter_result import FilterResult
from .histogram_mapping import HistogramMapping, PALETTE_SIZE

__all__ = [
    'InvalidDimension',
    'OutOfBounds',
    'PixelBuffer',
    'FilterParams',
    'FilterResult',
    'HistogramMapping',
    'PALETTE_SIZE',
]
