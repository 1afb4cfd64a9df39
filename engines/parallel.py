"""Data-parallel fan-out over row bands with a thread pool."""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Tuple, TypeVar

import numpy as np

T = TypeVar('T')


def split_rows(height: int, parts: int) -> List[Tuple[int, int]]:
    """Split [0, height) into at most `parts` contiguous (start, end) bands."""
    parts = max(1, min(parts, height))
    step, extra = divmod(height, parts)
    bands = []
    start = 0
    for i in range(parts):
        end = start + step + (1 if i < extra else 0)
        bands.append((start, end))
        start = end
    return bands


def map_row_bands(func: Callable[[np.ndarray], np.ndarray], array: np.ndarray,
                  workers: int = 1) -> np.ndarray:
    """Apply a row-local func to bands of `array` and stack the results."""
    if workers <= 1 or array.shape[0] < 2:
        return func(array)
    bands = split_rows(array.shape[0], workers)
    with ThreadPoolExecutor(max_workers=workers) as ex:
        parts = list(ex.map(lambda band: func(array[band[0]:band[1]]), bands))
    return np.concatenate(parts, axis=0)


def run_each(func: Callable[[T], None], items: Iterable[T], workers: int = 1) -> None:
    """Call func on every item; exceptions from workers propagate."""
    if workers <= 1:
        for item in items:
            func(item)
        return
    with ThreadPoolExecutor(max_workers=workers) as ex:
        for _ in ex.map(func, items):
            pass
