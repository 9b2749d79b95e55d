"""Operations on packed 24-bit RGB pixel buffers.

Buffers hold ``height`` rows of ``width`` pixels, three bytes (red, green,
blue) per pixel, with no padding between rows unless stated otherwise.
Every function leaves its input untouched and returns new ``bytes``.
"""

from __future__ import annotations

import numpy as np

_LUMA_RED = 0.299
_LUMA_GREEN = 0.587
_LUMA_BLUE = 0.114


def _check_dims(*dims: int) -> None:
    if any(d < 0 for d in dims):
        raise ValueError("dimensions must not be negative")


def _rows(data: bytes, row_bytes: int, height: int, stride: int | None = None) -> np.ndarray:
    """View ``height`` rows of ``row_bytes`` bytes each, rows ``stride`` bytes apart."""
    stride = row_bytes if stride is None else stride
    needed = stride * height
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    if arr.size < needed:
        raise ValueError(f"buffer holds {arr.size} bytes, at least {needed} are needed")
    return arr[:needed].reshape(height, stride)[:, :row_bytes]


def _rgb(data: bytes, width: int, height: int) -> np.ndarray:
    _check_dims(width, height)
    return _rows(data, width * 3, height).reshape(height, width, 3)


def _aligned_stride(width: int) -> int:
    bits = width * 24
    return (bits + 31) // 32 * 4


def dword_aligned(data: bytes, width: int, height: int) -> tuple[bytes, int]:
    """Copy an RGB buffer into one whose rows are padded to 4-byte multiples.

    Returns the new buffer (padding bytes are zero) and its row width in bytes.
    """
    _check_dims(width, height)
    rows = _rows(data, width * 3, height)
    stride = _aligned_stride(width)
    out = np.zeros((height, stride), dtype=np.uint8)
    out[:, : width * 3] = rows
    return out.tobytes(), stride


def unalign(data: bytes, width_pix: int, width_bytes: int, height: int) -> bytes:
    """Drop the row padding of a buffer whose rows are ``width_bytes`` apart."""
    _check_dims(width_pix, width_bytes, height)
    if width_bytes < width_pix * 3:
        raise ValueError("row width in bytes is smaller than the pixel data of a row")
    return _rows(data, width_pix * 3, height, stride=width_bytes).tobytes()


def vertical_flip(data: bytes, width_bytes: int, height: int) -> bytes:
    """Reverse the order of the ``height`` rows of ``width_bytes`` bytes each."""
    _check_dims(width_bytes, height)
    return _rows(data, width_bytes, height)[::-1].tobytes()


def swap_red_blue(data: bytes, width: int, height: int) -> bytes:
    """Exchange the red and blue byte of every pixel (RGB <-> BGR)."""
    return _rgb(data, width, height)[:, :, ::-1].tobytes()


def _luma(pixels: np.ndarray) -> np.ndarray:
    channels = pixels.astype(np.float64)
    lum = (
        _LUMA_RED * channels[:, :, 0]
        + _LUMA_GREEN * channels[:, :, 1]
        + _LUMA_BLUE * channels[:, :, 2]
    )
    return lum.astype(np.uint8)


def luminance(data: bytes, width: int, height: int) -> bytes:
    """Return a one-byte-per-pixel grey buffer holding the truncated luminance."""
    return _luma(_rgb(data, width, height)).tobytes()


def to_grayscale(data: bytes, width: int, height: int) -> bytes:
    """Return an RGB buffer with every channel set to the pixel's luminance."""
    lum = _luma(_rgb(data, width, height))
    return np.repeat(lum[:, :, np.newaxis], 3, axis=2).tobytes()