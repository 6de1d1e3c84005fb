# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Error taxonomy.

Two kinds of failure exist:

1. Validation errors are raised (``InvalidArgumentError``). They signal a
   caller bug: a blend ratio outside [0, 1], a palette size below one.
2. Pipeline errors are *returned* inside ``Err`` by stages that touch the
   outside world (decoding an image, loading a font, writing a PNG).
   They carry the stage name and the underlying cause.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class WebswatchError(Exception):
    """Base class for all raised webswatch errors."""


class InvalidArgumentError(WebswatchError, ValueError):
    """An argument violates a documented precondition."""


class ResultError(WebswatchError):
    """Raised when unwrapping an ``Err`` result."""


@dataclass(frozen=True)
class PipelineError:
    """
    A recoverable failure of one pipeline stage.

    Attributes:
        stage: Which stage failed ("extraction" or "render")
        message: Human-readable description of what went wrong
        cause: The underlying exception, if any
    """
    stage: str
    message: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        text = f"{self.stage} failed: {self.message}"
        if self.cause is not None:
            text += f" ({type(self.cause).__name__}: {self.cause})"
        return text


@dataclass(frozen=True)
class ExtractionError(PipelineError):
    """Palette extraction failed (unreadable image, quantizer failure)."""
    stage: str = "extraction"
    message: str = "could not extract palette"


@dataclass(frozen=True)
class RenderError(PipelineError):
    """Palette rendering failed (font load, drawing, encode/write)."""
    stage: str = "render"
    message: str = "could not render palette"
