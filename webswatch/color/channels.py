# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Channel selectors for each color space.

Channels carry no data; they only name which component of a color an
operation addresses. Each color class maps every member of its channel
enum to one of its fields (checked when the class is defined).
"""

from enum import Enum


class RGBChannel(Enum):
    """Addressable channels of an RGB color."""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class CMYKChannel(Enum):
    """Addressable channels of a CMYK color."""
    CYAN = "cyan"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    KEY = "key"
