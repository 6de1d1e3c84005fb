# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Palette extraction and swatch rendering.

Extraction is deterministic for a given image, method and seed; rendering
produces identical PNGs for identical palettes and fonts.
"""

from webswatch.palette.extract import Palette, extract_palette
from webswatch.palette.pipeline import make_palette
from webswatch.palette.quantize import QuantizeMethod
from webswatch.palette.render import (
    RenderConfig,
    SwatchLayout,
    load_bold_font,
    render_palette,
    swatch_layout,
)

__all__ = [
    "extract_palette",
    "render_palette",
    "make_palette",
    "swatch_layout",
    "load_bold_font",
    "Palette",
    "QuantizeMethod",
    "RenderConfig",
    "SwatchLayout",
]
