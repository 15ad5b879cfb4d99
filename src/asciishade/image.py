import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class RasterImage:
    """An immutable RGB raster.

    ``pixels`` is a read-only (height, width, 3) uint8 array. Equality and
    hashing are by identity, so an image can key a cache without hashing its
    content.
    """

    pixels: np.ndarray

    def __post_init__(self):
        pixels = np.array(self.pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected a (height, width, 3) array, got shape {pixels.shape}")
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RasterImage":
        return cls(np.asarray(image.convert("RGB")))

    @classmethod
    def open(cls, path: str | Path) -> "RasterImage":
        """Decode an image file. Pillow's errors propagate unchanged."""
        with Image.open(path) as img:
            image = cls.from_pil(img)
        logger.info("Loaded %s (%dx%d)", path, image.width, image.height)
        return image

    @classmethod
    def blank(cls, width: int, height: int, colour: tuple[int, int, int] = (255, 255, 255)) -> "RasterImage":
        return cls(np.full((height, width, 3), colour, dtype=np.uint8))

    def to_pil(self) -> Image.Image:
        return Image.fromarray(self.pixels)
