import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from asciishade.config import GLYPH_RESOLUTION, GLYPH_THRESHOLD

logger = logging.getLogger(__name__)

# Glyphs are drawn on a canvas this many times larger than the mask, then box-filtered down
OVERSAMPLE = 4

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/msttcorefonts/Courier_New.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


class GlyphSource(Protocol):
    resolution: int

    def glyph_mask(self, char: str) -> np.ndarray:
        """Boolean (resolution, resolution) array, True where the glyph has ink."""
        ...


def find_monospace_font() -> str | None:
    """Find a monospace font on the system, asking fontconfig as a last resort."""
    for path in _FONT_CANDIDATES:
        if Path(path).exists():
            return path
    if shutil.which("fc-match"):
        result = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout.strip()
    return None


def _load_font(font_path: str | Path | None, size: int) -> ImageFont.FreeTypeFont:
    if font_path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(str(font_path), size)


class GlyphRasterizer:
    """Renders characters into fixed-size boolean masks with a Pillow font.

    Every mask has the same shape, ``(resolution, resolution)``, whatever the
    character. Masks are memoized, so repeated lookups of a character cost a
    dict access.
    """

    def __init__(self, font_path: str | Path | None = None, resolution: int = GLYPH_RESOLUTION):
        self.resolution = resolution
        self.font_path = font_path
        self._canvas = resolution * OVERSAMPLE
        self._font = _load_font(font_path, self._canvas * 3 // 4)
        self._masks: dict[str, np.ndarray] = {}
        logger.debug("Glyph rasterizer using %s at %dx%d", font_path or "default font", resolution, resolution)

    def glyph_mask(self, char: str) -> np.ndarray:
        mask = self._masks.get(char)
        if mask is None:
            mask = self._render(char)
            self._masks[char] = mask
        return mask

    def _render(self, char: str) -> np.ndarray:
        img = Image.new("L", (self._canvas, self._canvas), 0)
        draw = ImageDraw.Draw(img)
        # Centre the ink box of the glyph on the canvas
        left, top, right, bottom = draw.textbbox((0, 0), char, font=self._font)
        x = (self._canvas - (right - left)) // 2 - left
        y = (self._canvas - (bottom - top)) // 2 - top
        draw.text((x, y), char, fill=255, font=self._font)

        small = img.resize((self.resolution, self.resolution), Image.BOX)
        mask = np.asarray(small) >= GLYPH_THRESHOLD
        mask.flags.writeable = False
        return mask
