# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Color model for webswatch.

All color types are immutable (frozen dataclasses) and clamp every channel
into their color space's domain after each transformation.
"""

from webswatch.color.channels import CMYKChannel, RGBChannel
from webswatch.color.cmyk import CMYKColor
from webswatch.color.digital import DigitalColor
from webswatch.color.hexcodec import format_hex, parse_hex
from webswatch.color.rgb import RGBColor, RGBTriple, lerp_channel

__all__ = [
    # Contract
    "DigitalColor",
    # Channels
    "RGBChannel",
    "CMYKChannel",
    # Color types
    "RGBColor",
    "CMYKColor",
    "RGBTriple",
    # Codec / blend helpers
    "format_hex",
    "parse_hex",
    "lerp_channel",
]
