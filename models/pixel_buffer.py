"""Row-major pixel buffer with shared-storage views."""

import random
from typing import Iterator, Tuple, Union

import numpy as np

from models.errors import InvalidDimension, OutOfBounds

Pixel = Union[Tuple[int, int, int], int, float]


class PixelBuffer:
    """
    Fixed-size raster of RGB triplets or scalar samples.

    The backing store is a numpy array of shape (rows, stride, 3) for RGB
    buffers or (rows, stride) for scalar ones. A view holds a reference to
    the same store plus its own origin and extent, so the store stays alive
    while any buffer or view still refers to it. Element access goes
    through index translation; ``array`` is the unchecked fast path.
    """

    def __init__(self, store: np.ndarray, width: int, height: int,
                 origin_x: int = 0, origin_y: int = 0):
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"Buffer dimensions must be positive, got {width}x{height}")
        stride = store.shape[1]
        if origin_x < 0 or origin_y < 0 or origin_x + width > stride:
            raise OutOfBounds(
                f"View x-range [{origin_x}, {origin_x + width}) exceeds stride {stride}"
            )
        backing_size = store.shape[0] * stride
        if (origin_y + height) * stride > backing_size:
            raise OutOfBounds(
                f"View y-range [{origin_y}, {origin_y + height}) exceeds {store.shape[0]} rows"
            )
        self._store = store
        self._width = width
        self._height = height
        self._origin_x = origin_x
        self._origin_y = origin_y
        self._id = random.getrandbits(32)

    @classmethod
    def create(cls, width: int, height: int, channels: int = 3, dtype=np.uint8) -> 'PixelBuffer':
        """Zero-initialised owning buffer."""
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"Buffer dimensions must be positive, got {width}x{height}")
        shape = (height, width, channels) if channels > 1 else (height, width)
        return cls(np.zeros(shape, dtype=dtype), width, height)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'PixelBuffer':
        """Wrap an (H, W, 3) or (H, W) array; contiguous input is not copied."""
        array = np.asarray(array)
        if array.ndim not in (2, 3) or (array.ndim == 3 and array.shape[2] != 3):
            raise ValueError(f"Expected (H, W) or (H, W, 3) array, got shape {array.shape}")
        height, width = array.shape[:2]
        return cls(np.ascontiguousarray(array), width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def id(self) -> int:
        return self._id

    @property
    def stride(self) -> int:
        return self._store.shape[1]

    @property
    def origin(self) -> Tuple[int, int]:
        return self._origin_x, self._origin_y

    @property
    def channels(self) -> int:
        return self._store.shape[2] if self._store.ndim == 3 else 1

    @property
    def dtype(self) -> np.dtype:
        return self._store.dtype

    @property
    def is_view(self) -> bool:
        return (self._width, self._height) != self._store.shape[1::-1] or self.origin != (0, 0)

    @property
    def array(self) -> np.ndarray:
        """Numpy window onto the backing store; writes go through to it."""
        x, y = self._origin_x, self._origin_y
        return self._store[y:y + self._height, x:x + self._width]

    def shares_store(self, other: 'PixelBuffer') -> bool:
        return self._store is other._store

    def size(self) -> int:
        return self._width * self._height

    def __len__(self) -> int:
        return self.size()

    def view(self, origin_x: int, origin_y: int, width: int, height: int) -> 'PixelBuffer':
        """Sub-rectangle handle sharing this buffer's store; origin is relative to this buffer."""
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"View dimensions must be positive, got {width}x{height}")
        if (origin_x < 0 or origin_y < 0
                or origin_x + width > self._width or origin_y + height > self._height):
            raise OutOfBounds(
                f"View ({origin_x}, {origin_y}, {width}x{height}) exceeds "
                f"{self._width}x{self._height} buffer"
            )
        return PixelBuffer(self._store, width, height,
                           self._origin_x + origin_x, self._origin_y + origin_y)

    def _translate(self, index: int) -> int:
        """Flat index within this buffer -> flat index within the store."""
        return ((self._origin_y + index // self._width) * self.stride
                + self._origin_x + index % self._width)

    def _locate(self, row: int, col=None) -> Tuple[int, int]:
        if col is None:
            if not 0 <= row < self.size():
                raise OutOfBounds(f"Index {row} outside buffer of size {self.size()}")
            return divmod(self._translate(row), self.stride)
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise OutOfBounds(f"({row}, {col}) outside {self._width}x{self._height} buffer")
        return self._origin_y + row, self._origin_x + col

    def at(self, row: int, col=None) -> Pixel:
        """Element at (row, col), or at a row-major flat index when col is omitted."""
        value = self._store[self._locate(row, col)]
        if self._store.ndim == 3:
            return tuple(int(c) for c in value)
        return value.item()

    def set_at(self, row: int, col, value) -> None:
        """Write one element; pass col=None to address by flat index."""
        self._store[self._locate(row, col)] = value

    def fill(self, value) -> None:
        self.array[...] = value

    def copy(self) -> 'PixelBuffer':
        """Deep copy of exactly size() elements with a fresh identifier."""
        return PixelBuffer(self.array.copy(), self._width, self._height)

    def __iter__(self) -> Iterator[Pixel]:
        for index in range(self.size()):
            yield self.at(index)

    def __repr__(self) -> str:
        kind = 'view' if self.is_view else 'buffer'
        return (f"PixelBuffer({kind} {self._width}x{self._height}, channels={self.channels}, "
                f"origin={self.origin}, stride={self.stride}, id={self._id:#010x})")
