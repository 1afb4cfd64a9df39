"""8x8 DCT-II / IDCT with a fixed basis and selectable backends."""

import math
from typing import Callable, Dict, Tuple

import numpy as np
from scipy.fft import dctn, idctn

BLOCK_SIZE = 8


def _build_basis() -> np.ndarray:
    """C[0][j] = sqrt(1/8), C[i][j] = 0.5 * cos(i * (2j + 1) * pi / 16)."""
    basis = np.empty((BLOCK_SIZE, BLOCK_SIZE), dtype=np.float64)
    basis[0, :] = math.sqrt(0.125)
    for i in range(1, BLOCK_SIZE):
        for j in range(BLOCK_SIZE):
            basis[i, j] = 0.5 * math.cos(8 * i * (j + 0.5) * math.pi / 64.0)
    basis.setflags(write=False)
    return basis


# Computed once at import; read-only so concurrent readers are safe
DCT_BASIS = _build_basis()
DCT_BASIS_T = DCT_BASIS.T


def _check_block(block: np.ndarray) -> None:
    if block.shape != (BLOCK_SIZE, BLOCK_SIZE):
        raise ValueError(f"Expected {BLOCK_SIZE}x{BLOCK_SIZE} block, got shape {block.shape}")


def forward_dct(block: np.ndarray) -> np.ndarray:
    """Separable forward transform: F = C . B . C^T."""
    _check_block(block)
    return DCT_BASIS @ block.astype(np.float64) @ DCT_BASIS_T


def inverse_dct(coeffs: np.ndarray) -> np.ndarray:
    """Separable inverse transform: B = C^T . F . C (unrounded)."""
    _check_block(coeffs)
    return DCT_BASIS_T @ coeffs.astype(np.float64) @ DCT_BASIS


def _weight(k: int) -> float:
    return 1.0 / math.sqrt(2.0) if k == 0 else 1.0


def forward_dct_direct(block: np.ndarray) -> np.ndarray:
    """
    Reference O(n^4) evaluation of

        F[v][u] = 0.25 * w(u) * w(v) * sum_y sum_x B[y][x]
                  * cos((2x + 1) * u * pi / 16) * cos((2y + 1) * v * pi / 16)
    """
    _check_block(block)
    samples = block.astype(np.float64)
    coeffs = np.zeros((BLOCK_SIZE, BLOCK_SIZE), dtype=np.float64)
    for v in range(BLOCK_SIZE):
        for u in range(BLOCK_SIZE):
            z = 0.0
            for y in range(BLOCK_SIZE):
                for x in range(BLOCK_SIZE):
                    z += (samples[y, x]
                          * math.cos((2 * x + 1) * u * math.pi / 16.0)
                          * math.cos((2 * y + 1) * v * math.pi / 16.0))
            coeffs[v, u] = 0.25 * _weight(u) * _weight(v) * z
    return coeffs


def inverse_dct_direct(coeffs: np.ndarray) -> np.ndarray:
    """Reference O(n^4) inverse of forward_dct_direct (unrounded)."""
    _check_block(coeffs)
    block = np.zeros((BLOCK_SIZE, BLOCK_SIZE), dtype=np.float64)
    for y in range(BLOCK_SIZE):
        for x in range(BLOCK_SIZE):
            z = 0.0
            for v in range(BLOCK_SIZE):
                for u in range(BLOCK_SIZE):
                    z += (_weight(u) * _weight(v) * coeffs[v, u]
                          * math.cos((2 * x + 1) * u * math.pi / 16.0)
                          * math.cos((2 * y + 1) * v * math.pi / 16.0))
            block[y, x] = z / 4.0
    return block


def forward_dct_scipy(block: np.ndarray) -> np.ndarray:
    """2D DCT-II with orthonormal normalization."""
    _check_block(block)
    return dctn(block.astype(np.float64), type=2, norm='ortho')


def inverse_dct_scipy(coeffs: np.ndarray) -> np.ndarray:
    """2D inverse DCT (Type-III)."""
    _check_block(coeffs)
    return idctn(coeffs.astype(np.float64), type=2, norm='ortho')


Transform = Callable[[np.ndarray], np.ndarray]

BACKENDS: Dict[str, Tuple[Transform, Transform]] = {
    'matrix': (forward_dct, inverse_dct),
    'scipy': (forward_dct_scipy, inverse_dct_scipy),
    'direct': (forward_dct_direct, inverse_dct_direct),
}


def get_backend(name: str) -> Tuple[Transform, Transform]:
    """(forward, inverse) pair for a backend name."""
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown DCT backend: {name}") from None


def discard_high_frequencies(coeffs: np.ndarray, keep: int = 4) -> np.ndarray:
    """Copy of coeffs with every row or column index >= keep zeroed."""
    kept = np.zeros_like(coeffs)
    kept[:keep, :keep] = coeffs[:keep, :keep]
    return kept


def to_samples(values: np.ndarray, dtype=np.uint8) -> np.ndarray:
    """Round half-up and saturate to dtype's range; integer overflow never wraps."""
    rounded = np.floor(values + 0.5)
    if np.issubdtype(dtype, np.integer):
        rounded = np.clip(rounded, 0, np.iinfo(dtype).max)
    else:
        rounded = np.maximum(rounded, 0)
    return rounded.astype(dtype)


def encode_block(block: np.ndarray, backend: str = 'matrix') -> np.ndarray:
    """Forward transform of one tile of samples."""
    forward, _ = get_backend(backend)
    return forward(block)


def decode_block(coeffs: np.ndarray, dtype=np.uint8, backend: str = 'matrix') -> np.ndarray:
    """Inverse transform, then round and saturate to dtype."""
    _, inverse = get_backend(backend)
    return to_samples(inverse(coeffs), dtype)
