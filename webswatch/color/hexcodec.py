# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Hexadecimal color codec.

Output is always lowercase ``#rrggbb``. Input accepts an optional leading
``#`` and 3, 6 or 8 hex digits, case-insensitively:

- ``rgb``       each digit is doubled (``f`` -> ``ff``)
- ``rrggbb``
- ``aarrggbb``  the leading alpha byte is discarded
"""

from __future__ import annotations

import re
from typing import Optional

_HEX_RE = re.compile(r"[0-9a-f]+")


def format_hex(r: int, g: int, b: int) -> str:
    """Format an RGB triple as lowercase ``#rrggbb``."""
    return f"#{r:02x}{g:02x}{b:02x}"


def parse_hex(text: str) -> Optional[tuple[int, int, int]]:
    """
    Parse a hex color string into an ``(r, g, b)`` triple.

    Returns None for malformed input rather than raising.
    """
    if not isinstance(text, str):
        return None
    digits = text.strip().lower()
    if digits.startswith("#"):
        digits = digits[1:]
    if not _HEX_RE.fullmatch(digits):
        return None

    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    elif len(digits) == 8:
        digits = digits[2:]
    elif len(digits) != 6:
        return None

    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )
