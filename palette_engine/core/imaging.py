"""Decode adapter: turn a path, bytes, PIL image or array into a PixelBuffer.

Everything is brought to a canonical CANVAS x CANVAS RGB canvas with
cover/crop resizing (ImageOps.fit), never a stretch, so colour proportions
are not skewed by aspect-ratio distortion. Any read or decode error is
raised as DecodeFailure.
"""

import io
import os
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from palette_engine.core.errors import DecodeFailure
from palette_engine.core.types import PixelBuffer

CANVAS = 100

ImageSource = Union[PixelBuffer, np.ndarray, Image.Image, bytes, str, Path]


def describe(source: ImageSource) -> str:
    """Short human label for a source, used in reports and stderr lines."""
    if isinstance(source, (str, Path)):
        return str(source)
    if isinstance(source, bytes):
        return f'<{len(source)} bytes>'
    if isinstance(source, PixelBuffer):
        return f'<buffer {source.width}x{source.height}>'
    if isinstance(source, np.ndarray):
        return f'<array {"x".join(str(d) for d in source.shape)}>'
    if isinstance(source, Image.Image):
        return f'<image {source.width}x{source.height}>'
    return f'<{type(source).__name__}>'


def cover_resize(image: Image.Image, size: int = CANVAS) -> Image.Image:
    """Scale to cover a size x size square and centre-crop the overflow."""
    image = image.convert('RGB')
    if image.size == (size, size):
        return image
    return ImageOps.fit(image, (size, size), method=Image.Resampling.LANCZOS, centering=(0.5, 0.5))


def load_pixels(source: ImageSource, size: int = CANVAS) -> PixelBuffer:
    """Decode any supported source into a canonical PixelBuffer.

    PixelBuffers pass through untouched: they are already decoded by the caller.
    Arrays already at the canonical size are wrapped without resampling.
    """
    if isinstance(source, PixelBuffer):
        return source

    label = describe(source)

    if isinstance(source, np.ndarray):
        if source.ndim == 3 and source.shape[0] == size and source.shape[1] == size:
            return PixelBuffer.from_array(source)
        try:
            image = Image.fromarray(np.clip(source, 0, 255).astype(np.uint8))
        except (TypeError, ValueError) as e:
            raise DecodeFailure(label, f'cannot interpret array: {e}') from e
        return _to_buffer(image, label, size)

    if isinstance(source, Image.Image):
        return _to_buffer(source, label, size)

    if isinstance(source, bytes):
        return _to_buffer(_open(io.BytesIO(source), label), label, size)

    if isinstance(source, (str, Path)):
        if not os.path.isfile(source):
            raise DecodeFailure(label, 'file not found')
        return _to_buffer(_open(source, label), label, size)

    raise DecodeFailure(label, 'unsupported source type')


def _open(fp, label: str) -> Image.Image:
    try:
        return Image.open(fp)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeFailure(label, f'cannot identify image: {e}') from e


def _to_buffer(image: Image.Image, label: str, size: int) -> PixelBuffer:
    try:
        fitted = cover_resize(image, size)
    except (Image.DecompressionBombError, OSError, ValueError) as e:
        # truncated or corrupt data only surfaces when pixels are loaded
        raise DecodeFailure(label, f'cannot decode image: {e}') from e
    return PixelBuffer.from_array(np.asarray(fitted, dtype=np.uint8))
