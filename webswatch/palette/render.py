# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Palette swatch rendering.

Composes a palette into a PNG of adjacent color blocks, each with its hex
code centered in a label strip below::

    ┌──────────┬──────────┬──────────┐
    │          │          │          │  block_height (100)
    │ #ff0000  │ #00ff00  │ #0000ff  │
    ├──────────┼──────────┼──────────┤
    │ #ff0000  │ #00ff00  │ #0000ff  │  label_height (40)
    └──────────┴──────────┴──────────┘
      block_width (160) per color

The label text color is fixed (``RenderConfig.text_color``); it does not
adapt to the swatch, so light swatches with white text read poorly.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from PIL import Image, ImageDraw, ImageFont

from webswatch.color.rgb import RGBColor, RGBTriple
from webswatch.errors import InvalidArgumentError, RenderError
from webswatch.result import Err, Ok, Result

logger = logging.getLogger(__name__)

FontLoader = Callable[[str, int], ImageFont.ImageFont]
Box = tuple[int, int, int, int]


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for swatch rendering."""

    # Swatch geometry in pixels
    block_width: int = 160
    block_height: int = 100
    label_height: int = 40

    # TrueType font for labels. Required at render time, not here.
    # Variable fonts are switched to their "Bold" instance.
    font_path: Optional[Union[str, Path]] = None
    font_size: int = 18

    # Fixed label color (not contrast-adaptive)
    text_color: RGBTriple = (255, 255, 255)
    background: RGBTriple = (0, 0, 0)

    def __post_init__(self) -> None:
        for name in ("block_width", "block_height", "label_height", "font_size"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidArgumentError(f"{name} must be > 0, got {value}")

    def with_font(self, font_path: Union[str, Path]) -> RenderConfig:
        """Copy of this config using ``font_path``."""
        return dataclasses.replace(self, font_path=font_path)


@dataclass(frozen=True)
class SwatchLayout:
    """Deterministic canvas geometry for ``count`` swatches."""
    count: int
    block_width: int
    block_height: int
    label_height: int

    @property
    def width(self) -> int:
        return self.count * self.block_width

    @property
    def height(self) -> int:
        return self.block_height + self.label_height

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def swatch_box(self, index: int) -> Box:
        """``(x0, y0, x1, y1)`` of the color block, end-exclusive."""
        x = index * self.block_width
        return (x, 0, x + self.block_width, self.block_height)

    def label_box(self, index: int) -> Box:
        """``(x0, y0, x1, y1)`` of the label strip, end-exclusive."""
        x = index * self.block_width
        return (x, self.block_height, x + self.block_width, self.height)


def swatch_layout(count: int, config: Optional[RenderConfig] = None) -> SwatchLayout:
    """Compute the layout for ``count`` swatches."""
    if config is None:
        config = RenderConfig()
    return SwatchLayout(
        count=count,
        block_width=config.block_width,
        block_height=config.block_height,
        label_height=config.label_height,
    )


def load_bold_font(path: str, size: int) -> ImageFont.FreeTypeFont:
    """Load a TrueType font, selecting the "Bold" instance of variable fonts."""
    font = ImageFont.truetype(path, size)
    try:
        font.set_variation_by_name(b"Bold")
    except (OSError, ValueError, NotImplementedError):
        # Static font (or no FreeType variation support): keep its own weight
        logger.debug("Font %s has no Bold variation", path)
    return font


def render_palette(
    colors: Sequence[Union[RGBTriple, RGBColor]],
    destination: Union[str, Path],
    config: Optional[RenderConfig] = None,
    *,
    font_loader: Optional[FontLoader] = None,
) -> Result[Path, RenderError]:
    """
    Render ``colors`` as labeled swatches and write a PNG to ``destination``.

    The file is written atomically: either the complete image is in place
    or ``destination`` is left untouched.

    Args:
        colors: Palette in display order, as ``(r, g, b)`` triples or RGBColor.
        destination: Output PNG path. Its directory must exist.
        config: Geometry, font and colors (default: RenderConfig()).
        font_loader: ``(path, size) -> font`` callable
            (default: load_bold_font).

    Returns:
        ``Ok(path)`` on success, ``Err(RenderError)`` if the font cannot be
        loaded or the image cannot be drawn or written.

    Raises:
        InvalidArgumentError: if ``colors`` is empty or holds an
            out-of-range triple
    """
    if config is None:
        config = RenderConfig()
    if font_loader is None:
        font_loader = load_bold_font
    if not colors:
        raise InvalidArgumentError("cannot render an empty palette")

    swatches = [c if isinstance(c, RGBColor) else RGBColor.from_triple(c) for c in colors]
    destination = Path(destination)

    if config.font_path is None:
        logger.warning("No font configured for palette rendering")
        return Err(RenderError(message="no font configured"))

    try:
        font = font_loader(str(config.font_path), config.font_size)
    except Exception as e:
        logger.warning("Could not load font %s: %s", config.font_path, e)
        return Err(RenderError(message=f"could not load font {config.font_path}", cause=e))

    layout = swatch_layout(len(swatches), config)
    try:
        with Image.new("RGB", layout.size, config.background) as canvas:
            _draw_swatches(canvas, swatches, layout, font, config.text_color)
            _write_png_atomic(canvas, destination)
    except Exception as e:
        logger.warning("Could not render palette to %s: %s", destination, e)
        return Err(RenderError(message=f"could not write {destination}", cause=e))

    logger.debug("Rendered %d swatches (%dx%d) to %s",
                 layout.count, layout.width, layout.height, destination)
    return Ok(destination)


def _draw_swatches(
    canvas: Image.Image,
    swatches: Sequence[RGBColor],
    layout: SwatchLayout,
    font: ImageFont.ImageFont,
    text_color: RGBTriple,
) -> None:
    draw = ImageDraw.Draw(canvas)

    for i, color in enumerate(swatches):
        x0, y0, x1, y1 = layout.swatch_box(i)
        # Pillow rectangle bounds are inclusive
        draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=color.to_color())

        label = color.to_hex()
        left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
        lx0, ly0, _, _ = layout.label_box(i)
        text_x = lx0 + (layout.block_width - (right - left)) // 2 - left
        text_y = ly0 + (layout.label_height - (bottom - top)) // 2 - top
        draw.text((text_x, text_y), label, fill=text_color, font=font)


def _write_png_atomic(canvas: Image.Image, destination: Path) -> None:
    """Write to a temp file beside ``destination`` and rename it into place."""
    fd, tmp_name = tempfile.mkstemp(
        dir=destination.parent, prefix=".webswatch-", suffix=".png"
    )
    os.close(fd)
    try:
        canvas.save(tmp_name, format="PNG")
        # mkstemp creates 0600; publish with the usual umask-derived mode
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, destination)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
