# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
RGB colors.

RGBColor is an immutable sRGB triple with channels in [0, 255]. Every
transformation returns a new instance with clamped channels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Union

import numpy as np
from PIL import ImageColor

from webswatch.color.channels import RGBChannel
from webswatch.color.digital import DigitalColor
from webswatch.color.hexcodec import format_hex, parse_hex
from webswatch.errors import InvalidArgumentError

RGBTriple = tuple[int, int, int]


def lerp_channel(a: int, b: int, ratio: float) -> int:
    """Linear interpolation truncated toward zero: ``int(a + (b - a) * ratio)``."""
    return int(a + (b - a) * ratio)


@dataclass(frozen=True, slots=True)
class RGBColor(DigitalColor[RGBChannel]):
    """
    An RGB color with red, green and blue components.

    Attributes:
        red: Intensity of the red channel (0-255)
        green: Intensity of the green channel (0-255)
        blue: Intensity of the blue channel (0-255)
    """
    red: int
    green: int
    blue: int

    channel_type: ClassVar = RGBChannel
    channel_fields: ClassVar = {
        RGBChannel.RED: "red",
        RGBChannel.GREEN: "green",
        RGBChannel.BLUE: "blue",
    }
    domain: ClassVar = (0, 255)

    # -------------------------------------------------------------------------
    # Interop
    # -------------------------------------------------------------------------

    def to_hex(self) -> str:
        """Lowercase ``#rrggbb`` string, e.g. ``"#ff00cc"``. No alpha."""
        return format_hex(self.red, self.green, self.blue)

    @classmethod
    def from_hex(cls, text: str) -> Optional[RGBColor]:
        """
        Parse a hex color string (3, 6 or 8 digits, optional ``#``).

        Returns None if the text is not a valid hex color.
        """
        triple = parse_hex(text)
        if triple is None:
            return None
        return cls(*triple)

    def to_triple(self) -> RGBTriple:
        return (self.red, self.green, self.blue)

    @classmethod
    def from_triple(cls, triple: Sequence[int]) -> RGBColor:
        r, g, b = triple
        return cls(r, g, b)

    def to_color(self) -> RGBTriple:
        """Pillow color tuple for this color."""
        return self.to_triple()

    @classmethod
    def from_color(cls, color: Union[str, Sequence[int]]) -> RGBColor:
        """
        Create an RGBColor from a Pillow color.

        Accepts a pixel tuple ``(r, g, b)`` / ``(r, g, b, a)`` or any color
        string understood by ``PIL.ImageColor.getrgb`` ("red", "#f00",
        "rgb(255, 0, 0)"). Alpha is dropped.
        """
        if isinstance(color, str):
            color = ImageColor.getrgb(color)
        return cls(color[0], color[1], color[2])

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> RGBColor:
        """
        Uniformly random color.

        Args:
            rng: Random source. Pass a seeded ``np.random.default_rng(seed)``
                for reproducible colors; a fresh generator is used otherwise.
        """
        if rng is None:
            rng = np.random.default_rng()
        r, g, b = rng.integers(0, 256, size=3)
        return cls(int(r), int(g), int(b))

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def increase_all(self, delta_r: int, delta_g: int, delta_b: int) -> RGBColor:
        """Add a (possibly negative) delta to each channel, clamped to [0, 255]."""
        return RGBColor(
            self.clamp(self.red + delta_r),
            self.clamp(self.green + delta_g),
            self.clamp(self.blue + delta_b),
        )

    def mix_with(self, other: RGBColor, ratio: float) -> RGBColor:
        """
        Blend toward ``other``.

        A ratio of 0.0 returns this color, 1.0 returns ``other``. Each
        channel is interpolated and truncated toward zero.

        Raises:
            InvalidArgumentError: if ``ratio`` is outside [0.0, 1.0]
        """
        if math.isnan(ratio) or not 0.0 <= ratio <= 1.0:
            raise InvalidArgumentError(f"ratio must be between 0.0 and 1.0, got {ratio}")
        return RGBColor(
            self.clamp(lerp_channel(self.red, other.red, ratio)),
            self.clamp(lerp_channel(self.green, other.green, ratio)),
            self.clamp(lerp_channel(self.blue, other.blue, ratio)),
        )
