# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""CMYK colors with channels expressed as percentages (0-100)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar

from webswatch.color.channels import CMYKChannel
from webswatch.color.digital import DigitalColor


@dataclass(frozen=True, slots=True)
class CMYKColor(DigitalColor[CMYKChannel]):
    """
    A CMYK color.

    Attributes:
        cyan: Cyan ink coverage (0-100)
        magenta: Magenta ink coverage (0-100)
        yellow: Yellow ink coverage (0-100)
        key: Black ink coverage (0-100)
    """
    cyan: int
    magenta: int
    yellow: int
    key: int

    channel_type: ClassVar = CMYKChannel
    channel_fields: ClassVar = {
        CMYKChannel.CYAN: "cyan",
        CMYKChannel.MAGENTA: "magenta",
        CMYKChannel.YELLOW: "yellow",
        CMYKChannel.KEY: "key",
    }
    domain: ClassVar = (0, 100)

    def adjust_all(self, transform: Callable[[int], float]) -> CMYKColor:
        """Apply ``transform`` to every channel (lighten/darken overall)."""
        return CMYKColor(
            self.clamp(transform(self.cyan)),
            self.clamp(transform(self.magenta)),
            self.clamp(transform(self.yellow)),
            self.clamp(transform(self.key)),
        )

    def __str__(self) -> str:
        return f"CMYK(c={self.cyan}%, m={self.magenta}%, y={self.yellow}%, k={self.key}%)"
