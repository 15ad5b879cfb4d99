"""Padding, partitioning and brightness reduction of raster images."""

import numpy as np

from asciishade.config import LUMA_B, LUMA_G, LUMA_R, RGB_MAX
from asciishade.image import RasterImage

LUMA_WEIGHTS = np.array([LUMA_R, LUMA_G, LUMA_B])


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n. Powers of two map to themselves."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def pad_image(image: RasterImage | None) -> RasterImage | None:
    """Grow an image to power-of-two dimensions, centred on a white canvas.

    Odd padding leaves the extra pixel on the bottom/right. ``None`` passes
    through untouched.
    """
    if image is None:
        return None

    width = next_power_of_two(image.width)
    height = next_power_of_two(image.height)
    if (width, height) == (image.width, image.height):
        return image

    canvas = np.full((height, width, 3), 255, dtype=np.uint8)
    top = (height - image.height) // 2
    left = (width - image.width) // 2
    canvas[top : top + image.height, left : left + image.width] = image.pixels
    return RasterImage(canvas)


def resolution_bounds(image: RasterImage, symmetric: bool = False) -> tuple[int, int]:
    """Smallest and largest usable column counts for an image once padded.

    A symmetric partition also cuts that many rows, so it cannot exceed the
    padded height either.
    """
    width = next_power_of_two(image.width)
    height = next_power_of_two(image.height)
    if symmetric:
        return 1, min(width, height)
    return max(1, width // height), width


def split_image(image: RasterImage, resolution: int, symmetric: bool = False) -> np.ndarray:
    """Partition an image into ``resolution`` columns of cells.

    Returns a (rows, cols, cell_h, cell_w, 3) view. Cells are square by
    default: the row count is derived from the column cell width, so a
    non-square image gives a non-square grid. ``symmetric=True`` instead cuts
    ``resolution`` rows as well.

    The resolution is not validated. Remainder pixels are dropped, and a
    resolution wider than the image fails on the zero cell width.
    """
    cell_width = image.width // resolution
    if symmetric:
        cell_height = image.height // resolution
    else:
        cell_height = cell_width
    rows = image.height // cell_height
    cols = resolution

    trimmed = image.pixels[: rows * cell_height, : cols * cell_width]
    return trimmed.reshape(rows, cell_height, cols, cell_width, 3).transpose(0, 2, 1, 3, 4)


def brightness_grid(cells: np.ndarray) -> np.ndarray:
    """Mean relative luminance in [0, 1] of every cell of a split image."""
    luminance = cells.astype(np.float64) @ LUMA_WEIGHTS
    return luminance.mean(axis=(2, 3)) / RGB_MAX


def reduce_brightness(sub_image: RasterImage | np.ndarray) -> float:
    """Mean relative luminance in [0, 1] of a single image."""
    pixels = sub_image.pixels if isinstance(sub_image, RasterImage) else np.asarray(sub_image)
    return float(brightness_grid(pixels[np.newaxis, np.newaxis])[0, 0])
