"""Filter parameters."""

from dataclasses import dataclass
from typing import Literal

STRATEGIES = ('block', 'histogram', 'balance')
DCT_BACKENDS = ('matrix', 'scipy', 'direct')


@dataclass
class FilterParams:
    """Gray palette filter parameters."""

    strategy: Literal['block', 'histogram', 'balance'] = 'histogram'
    dct_backend: Literal['matrix', 'scipy', 'direct'] = 'matrix'
    keep: int = 4
    workers: int = 1

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Strategy must be one of {STRATEGIES}, got {self.strategy!r}")
        if self.dct_backend not in DCT_BACKENDS:
            raise ValueError(f"DCT backend must be one of {DCT_BACKENDS}, got {self.dct_backend!r}")
        if not (1 <= self.keep <= 8):
            raise ValueError(f"Retained quadrant must be 1-8, got {self.keep}")
        if self.workers < 1:
            raise ValueError(f"Workers must be >= 1, got {self.workers}")
