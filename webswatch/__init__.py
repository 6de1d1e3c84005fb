# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Webswatch -- Color model and palette swatches for web images.

Immutable, always-clamped RGB and CMYK colors, plus a pipeline that turns a
photograph into a labeled color-palette PNG.

Quick start::

    from webswatch import RGBColor, make_palette, RenderConfig

    RGBColor(100, 50, 200).mix_with(RGBColor(0, 0, 255), 0.5).to_hex()

    config = RenderConfig(font_path="fonts/PlusJakartaSans-Bold.ttf")
    make_palette("photo.jpg", "palette.png", k=6, config=config)
"""

from __future__ import annotations

__version__ = "1.0.0"

from webswatch.color import (
    CMYKChannel,
    CMYKColor,
    DigitalColor,
    RGBChannel,
    RGBColor,
)
from webswatch.errors import (
    ExtractionError,
    InvalidArgumentError,
    PipelineError,
    RenderError,
    WebswatchError,
)
from webswatch.palette import (
    QuantizeMethod,
    RenderConfig,
    extract_palette,
    make_palette,
    render_palette,
)
from webswatch.result import Err, Ok, Result

__all__ = [
    # Colors
    "DigitalColor",
    "RGBColor",
    "CMYKColor",
    "RGBChannel",
    "CMYKChannel",
    # Palette pipeline
    "extract_palette",
    "render_palette",
    "make_palette",
    "QuantizeMethod",
    "RenderConfig",
    # Results and errors
    "Ok",
    "Err",
    "Result",
    "WebswatchError",
    "InvalidArgumentError",
    "PipelineError",
    "ExtractionError",
    "RenderError",
    # Version
    "__version__",
]
