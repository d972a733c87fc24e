"""Loading images into raw pixel rows ready for texture upload."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError


class ImageLoadError(Exception):
    """Raised when an image file cannot be read or decoded."""


@dataclass(frozen=True)
class LoadedImage:
    """Decoded pixels: rows of pitch bytes, blue before green before red."""

    data: bytes
    width: int
    height: int
    bits_per_pixel: int
    pitch: int


def _normalised(image: Image.Image) -> Image.Image:
    if image.mode in ("L", "RGB", "RGBA"):
        return image
    has_alpha = "A" in image.getbands() or "transparency" in image.info
    return image.convert("RGBA" if has_alpha else "RGB")


def _raw_rows(image: Image.Image) -> tuple[bytes, int]:
    if image.mode == "L":
        return image.tobytes(), 8
    if image.mode == "RGB":
        return image.tobytes("raw", "BGR"), 24
    return image.tobytes("raw", "BGRA"), 32


def load_image(image_path: str | os.PathLike[str], vertical_flip: bool = True) -> LoadedImage:
    """Decode image_path into bottom-up rows, or top-down ones when vertical_flip is set.

    Rows are padded to a multiple of four bytes.
    """
    try:
        with Image.open(image_path) as opened:
            opened.load()
            image = _normalised(opened)
            if not vertical_flip:
                image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
            raw, bits_per_pixel = _raw_rows(image)
    except (OSError, UnidentifiedImageError, ValueError) as error:
        raise ImageLoadError(f"cannot load image {os.fspath(image_path)!r}: {error}") from error

    width, height = image.size
    row_bytes = width * bits_per_pixel // 8
    pitch = (row_bytes + 3) & ~3
    if pitch != row_bytes:
        padding = bytes(pitch - row_bytes)
        raw = b"".join(
            raw[start:start + row_bytes] + padding for start in range(0, len(raw), row_bytes)
        )
    return LoadedImage(raw, width, height, bits_per_pixel, pitch)