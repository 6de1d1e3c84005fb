# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Explicit success/failure values for fallible pipeline stages.

Usage::

    result = extract_palette("photo.jpg", 6)
    if result.is_ok():
        colors = result.value
    else:
        print(result.error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from webswatch.errors import PipelineError, ResultError

T = TypeVar("T")
E = TypeVar("E", bound=PipelineError)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying a ``PipelineError``."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise ResultError(str(self.error)) from self.error.cause

    def unwrap_or(self, default):
        return default


Result = Union[Ok[T], Err[E]]
