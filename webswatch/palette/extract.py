# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Palette extraction API.

Turns an image into an ordered tuple of at most ``k`` RGB triples. The
quantization itself is delegated to ``webswatch.palette.quantize``; this
module validates inputs, loads and normalizes images, and adapts the
quantizer output to the palette shape guarantee.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageCms

from webswatch.color.rgb import RGBTriple
from webswatch.errors import ExtractionError, InvalidArgumentError
from webswatch.palette.quantize import (
    QuantizeMethod,
    quantize_kmeans,
    quantize_median_cut,
    quantize_mode,
)
from webswatch.result import Err, Ok, Result

logger = logging.getLogger(__name__)

ImageInput = Union[str, Path, Image.Image, NDArray[np.uint8]]
Palette = tuple[RGBTriple, ...]


def extract_palette(
    image: ImageInput,
    k: int,
    *,
    method: QuantizeMethod = QuantizeMethod.MEDIAN_CUT,
    max_pixels: int = 0,  # 0 = no downsampling
    seed: Optional[int] = 42,
) -> Result[Palette, ExtractionError]:
    """
    Extract ``k`` representative colors from an image.

    Args:
        image: One of:
            - Path to an image file (str or Path). Embedded ICC profiles
              are converted to sRGB.
            - A PIL image (any mode; converted to RGB).
            - NumPy array of shape (H, W, 3) with uint8 sRGB values.
        k: Number of colors wanted (the palette may be shorter if the
            image has fewer distinct colors).
        method: Quantization backend (default: median cut).
        max_pixels: Downsample larger images to about this many pixels
            before quantizing. 0 disables downsampling.
        seed: Random seed for the k-means backend.

    Returns:
        ``Ok(palette)`` with 1..k ``(r, g, b)`` triples ordered by pixel
        population (largest first), or ``Err(ExtractionError)`` when the
        image cannot be read or quantization fails.

    Raises:
        InvalidArgumentError: if ``k < 1``
    """
    if k < 1:
        raise InvalidArgumentError(f"palette size k must be >= 1, got {k}")

    try:
        rgb = _load_image(image)
    except (OSError, ValueError, TypeError, Image.DecompressionBombError) as e:
        logger.warning("Could not load image %s: %s", _describe(image), e)
        return Err(ExtractionError(message="could not read image", cause=e))

    with rgb:
        width, height = rgb.size
        if width * height == 0:
            logger.warning("Refusing to extract a palette from an empty image")
            return Err(ExtractionError(message=f"image is empty ({width}x{height})"))

        if max_pixels > 0 and width * height > max_pixels:
            scale = (max_pixels / (width * height)) ** 0.5
            size = (max(1, int(width * scale)), max(1, int(height * scale)))
            with rgb.resize(size, Image.Resampling.LANCZOS) as small:
                return _quantize_to_palette(small, k, method, seed)

        return _quantize_to_palette(rgb, k, method, seed)


def _quantize_to_palette(
    image: Image.Image,
    k: int,
    method: QuantizeMethod,
    seed: Optional[int],
) -> Result[Palette, ExtractionError]:
    """Run the quantizer and adapt its output to at most ``k`` byte triples."""
    try:
        counted = _quantize(image, k, method, seed)
    except Exception as e:
        logger.warning("Quantization (%s) failed: %s", method.value, e)
        return Err(ExtractionError(message=f"{method.value} quantization failed", cause=e))

    palette = tuple(
        (_byte(r), _byte(g), _byte(b))
        for (r, g, b), _count in counted[:k]
    )
    if not palette:
        return Err(ExtractionError(message="quantizer returned no colors"))

    logger.debug("Extracted %d/%d colors with %s", len(palette), k, method.value)
    return Ok(palette)


def _quantize(
    image: Image.Image,
    k: int,
    method: QuantizeMethod,
    seed: Optional[int],
):
    if method == QuantizeMethod.MEDIAN_CUT:
        return quantize_median_cut(image, k)

    pixels = np.asarray(image, dtype=np.uint8).reshape(-1, 3)
    if method == QuantizeMethod.KMEANS:
        return quantize_kmeans(pixels, k, seed=seed)
    return quantize_mode(pixels, k)


def _byte(value: int) -> int:
    return min(255, max(0, int(value)))


def _describe(image: ImageInput) -> str:
    if isinstance(image, (str, Path)):
        return str(image)
    return type(image).__name__


def _load_image(image: ImageInput) -> Image.Image:
    """
    Load an image from file, PIL image or array as a fresh RGB PIL image.

    Applies ICC profile conversion to sRGB if the image has an embedded
    color profile, so extracted colors match what color pickers show.
    """
    if isinstance(image, (str, Path)):
        with Image.open(image) as img:
            img.load()
            return _to_srgb(img)

    if isinstance(image, Image.Image):
        return _to_srgb(image)

    if isinstance(image, np.ndarray):
        if image.ndim != 3 or image.shape[2] != 3:
            raise ValueError(f"Expected (H, W, 3) array, got shape {image.shape}")
        if image.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {image.dtype}")
        if image.shape[0] == 0 or image.shape[1] == 0:
            raise ValueError(f"Image is empty ({image.shape[1]}x{image.shape[0]})")
        return Image.fromarray(np.ascontiguousarray(image))

    raise TypeError(f"Expected file path, PIL image or numpy array, got {type(image)}")


def _to_srgb(img: Image.Image) -> Image.Image:
    """Return an RGB copy of ``img``, converted from its ICC profile if present."""
    icc = img.info.get("icc_profile")
    if icc:
        try:
            embedded = ImageCms.ImageCmsProfile(io.BytesIO(icc))
            srgb = ImageCms.createProfile("sRGB")
            converted = ImageCms.profileToProfile(
                img.convert("RGB"), embedded, srgb, outputMode="RGB"
            )
            if converted is not None:
                return converted
        except (OSError, ImageCms.PyCMSError) as e:
            # Broken profile: fall back to a plain RGB conversion
            logger.debug("ICC conversion failed, using plain RGB: %s", e)
    return img.convert("RGB")
