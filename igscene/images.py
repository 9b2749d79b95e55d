"""Reading and writing of JPEG images as packed 24-bit RGB buffers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from PIL import Image as _PILImage

from igscene.pixels import luminance

_READ_ERRORS = (OSError, ValueError, SyntaxError)


class ImageError(Exception):
    """Raised when a JPEG file cannot be read or written."""


def _open_jpeg(filename: str | os.PathLike[str]) -> _PILImage.Image:
    name = os.fspath(filename)
    try:
        img = _PILImage.open(name)
    except FileNotFoundError as exc:
        raise ImageError(f"cannot open file '{name}' for reading") from exc
    except _READ_ERRORS as exc:
        raise ImageError(f"error reading JPEG file '{name}': {exc}") from exc
    if img.format != "JPEG":
        img.close()
        raise ImageError(f"file '{name}' is not a JPEG image")
    return img


def read_jpeg_rgb(filename: str | os.PathLike[str]) -> tuple[bytes, int, int]:
    """Decode a JPEG file into an RGB buffer.

    Returns ``(data, width, height)``; greyscale images are expanded so that
    each pixel holds its grey value in all three channels.
    """
    with _open_jpeg(filename) as img:
        try:
            img.load()
            rgb = img if img.mode == "RGB" else img.convert("RGB")
        except _READ_ERRORS as exc:
            raise ImageError(f"error decoding JPEG file '{os.fspath(filename)}': {exc}") from exc
        width, height = rgb.size
        return rgb.tobytes(), width, height


def jpeg_dimensions(filename: str | os.PathLike[str]) -> tuple[int, int]:
    """Return ``(width, height)`` of a JPEG file without decoding its pixels."""
    with _open_jpeg(filename) as img:
        return img.size


def write_rgb_jpeg(
    filename: str | os.PathLike[str],
    data: bytes,
    width: int,
    height: int,
    color: bool = True,
    quality: int = 100,
) -> None:
    """Encode an RGB buffer as a JPEG file.

    With ``color`` false the image is stored as greyscale luminance.
    ``quality`` is clamped to the range 1..100.
    """
    if not data:
        raise ImageError("no pixel data to write")
    if width <= 0 or height <= 0:
        raise ImageError("image width and height must be positive")
    needed = width * height * 3
    if len(data) < needed:
        raise ImageError(f"buffer holds {len(data)} bytes, at least {needed} are needed")

    if color:
        img = _PILImage.frombytes("RGB", (width, height), bytes(data[:needed]))
    else:
        img = _PILImage.frombytes("L", (width, height), luminance(data, width, height))

    name = os.fspath(filename)
    try:
        img.save(name, format="JPEG", quality=max(1, min(100, int(quality))))
    except _READ_ERRORS as exc:
        raise ImageError(f"cannot write JPEG file '{name}': {exc}") from exc


@dataclass(frozen=True)
class Image:
    """An RGB image held as ``height`` rows of ``width`` three-byte pixels."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(self.data) != self.width * self.height * 3:
            raise ValueError("pixel buffer size does not match the image dimensions")

    @classmethod
    def from_file(cls, filename: str | os.PathLike[str] | Path) -> Image:
        """Load an image from a JPEG file."""
        data, width, height = read_jpeg_rgb(filename)
        return cls(width=width, height=height, data=data)

    def pixel(self, ix: int, iy: int) -> tuple[int, int, int]:
        """Return the ``(r, g, b)`` values of the pixel at column ``ix``, row ``iy``."""
        if not (0 <= ix < self.width and 0 <= iy < self.height):
            raise IndexError(f"pixel ({ix}, {iy}) outside a {self.width}x{self.height} image")
        offset = 3 * (self.width * iy + ix)
        r, g, b = self.data[offset : offset + 3]
        return r, g, b

    def save(self, filename: str | os.PathLike[str]) -> None:
        """Write the image as a colour JPEG of the highest quality."""
        write_rgb_jpeg(filename, self.data, self.width, self.height, True, 100)