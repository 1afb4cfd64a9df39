"""Histogram mapping from ranking keys to gray levels."""

from dataclasses import dataclass

import numpy as np

PALETTE_SIZE = 256


@dataclass(frozen=True)
class HistogramMapping:
    """
    Order-preserving map from the distinct ranking keys of one image onto
    at most 256 gray levels.

    ``keys`` is sorted ascending with duplicates removed; ``bins[i]`` is the
    level assigned to ``keys[i]``. Built fresh for every image.
    """

    keys: np.ndarray
    bins: np.ndarray

    @property
    def distinct_count(self) -> int:
        return int(self.keys.size)

    @property
    def bypass(self) -> bool:
        """True when every distinct key already fits in the palette."""
        return self.keys.size <= PALETTE_SIZE

    def lookup(self, keys: np.ndarray) -> np.ndarray:
        """Level for each key; every key must be one of ``self.keys``."""
        positions = np.searchsorted(self.keys, keys)
        return self.bins[positions]

    def boundaries(self):
        """(boundary_keys, levels): smallest key mapped to each level, ascending."""
        starts = np.flatnonzero(np.diff(self.bins, prepend=-1))
        return self.keys[starts], self.bins[starts]

    def lookup_by_boundaries(self, keys: np.ndarray) -> np.ndarray:
        """Same result as lookup() using only the boundary table."""
        boundary_keys, levels = self.boundaries()
        return levels[np.searchsorted(boundary_keys, keys, side='right') - 1]
