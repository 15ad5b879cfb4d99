from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from asciishade.cache import BrightnessCache
from asciishade.geometry import brightness_grid, pad_image, split_image
from asciishade.image import RasterImage
from asciishade.matcher import BrightnessMatcher, ComparisonMode

logger = logging.getLogger(__name__)


@dataclass
class CharGrid:
    rows: list[str]  # one string per row

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __str__(self) -> str:
        return "\n".join(self.rows)


class AsciiArtRenderer:
    """Pads, partitions and reduces an image, then matches each cell to a character.

    Brightness grids go through ``cache``, so re-rendering the same image at
    the same resolution only repeats the character lookup. Pass a shared cache
    to reuse grids across renderers.
    """

    def __init__(self, matcher: BrightnessMatcher, cache: BrightnessCache | None = None, symmetric: bool = False):
        self.matcher = matcher
        self.cache = cache if cache is not None else BrightnessCache()
        self.symmetric = symmetric

    def brightness(self, image: RasterImage, resolution: int) -> np.ndarray:
        grid = self.cache.get(image, resolution, self.symmetric)
        if grid is not None:
            logger.debug("Brightness cache hit at resolution %d", resolution)
            return grid

        logger.debug("Brightness cache miss at resolution %d", resolution)
        padded = pad_image(image)
        grid = brightness_grid(split_image(padded, resolution, self.symmetric))
        self.cache.put(image, resolution, grid, self.symmetric)
        return grid

    def render(self, image: RasterImage, resolution: int, mode: ComparisonMode | None = None) -> CharGrid:
        grid = self.brightness(image, resolution)
        self.matcher.set_comparison_mode(mode)
        logger.info("Rendering %dx%d cells with %d characters", grid.shape[1], grid.shape[0], len(self.matcher))
        return CharGrid(rows=self.matcher.match_grid(grid))
