# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""One-shot image -> palette PNG pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from webswatch.errors import PipelineError
from webswatch.palette.extract import ImageInput, Palette, extract_palette
from webswatch.palette.quantize import QuantizeMethod
from webswatch.palette.render import FontLoader, RenderConfig, render_palette
from webswatch.result import Ok, Result


def make_palette(
    image: ImageInput,
    destination: Union[str, Path],
    k: int = 6,
    *,
    method: QuantizeMethod = QuantizeMethod.MEDIAN_CUT,
    max_pixels: int = 0,
    seed: Optional[int] = 42,
    config: Optional[RenderConfig] = None,
    font_loader: Optional[FontLoader] = None,
) -> Result[Palette, PipelineError]:
    """
    Extract a ``k``-color palette from ``image`` and render it to ``destination``.

    Returns the extracted palette on success. On failure the error's
    ``stage`` tells whether extraction or rendering failed.
    """
    extracted = extract_palette(
        image, k, method=method, max_pixels=max_pixels, seed=seed
    )
    if extracted.is_err():
        return extracted

    rendered = render_palette(
        extracted.value, destination, config, font_loader=font_loader
    )
    if rendered.is_err():
        return rendered
    return Ok(extracted.value)
