"""Filter result with metrics."""

from dataclasses import dataclass
from typing import Optional

from models.pixel_buffer import PixelBuffer


@dataclass
class FilterResult:
    """Results from a single filter run."""

    original_image: PixelBuffer
    filtered_image: PixelBuffer
    strategy: str

    # Palette stats
    distinct_keys: int
    output_levels: int

    # Quality vs. the display-luma rendition of the input
    psnr_y: float
    ssim_y: Optional[float]

    # Runtime
    filter_time_ms: float
