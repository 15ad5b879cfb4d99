import numpy as np
import pytest

from asciishade.geometry import (
    brightness_grid,
    next_power_of_two,
    pad_image,
    reduce_brightness,
    resolution_bounds,
    split_image,
)
from asciishade.image import RasterImage


def random_image(width, height, seed=42):
    rng = np.random.default_rng(seed)
    return RasterImage(rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8))


@pytest.mark.parametrize(("n", "expected"), [(1, 1), (2, 2), (3, 4), (5, 8), (200, 256), (256, 256), (300, 512)])
def test_next_power_of_two(n, expected):
    assert next_power_of_two(n) == expected


def test_pad_centres_original():
    image = random_image(300, 200)
    padded = pad_image(image)
    assert (padded.width, padded.height) == (512, 256)

    top, left = 28, 106
    np.testing.assert_array_equal(padded.pixels[top : top + 200, left : left + 300], image.pixels)
    assert (padded.pixels[:top] == 255).all()
    assert (padded.pixels[top + 200 :] == 255).all()
    assert (padded.pixels[:, :left] == 255).all()
    assert (padded.pixels[:, left + 300 :] == 255).all()


def test_pad_odd_difference_puts_extra_pixel_last():
    image = RasterImage.blank(5, 3, colour=(0, 0, 0))
    padded = pad_image(image)
    assert (padded.width, padded.height) == (8, 4)
    dark = (padded.pixels == 0).all(axis=2)
    rows, cols = np.nonzero(dark)
    assert (rows.min(), rows.max()) == (0, 2)
    assert (cols.min(), cols.max()) == (1, 5)


def test_pad_power_of_two_unchanged():
    image = random_image(64, 32)
    padded = pad_image(image)
    assert (padded.width, padded.height) == (64, 32)
    np.testing.assert_array_equal(padded.pixels, image.pixels)


def test_pad_none_is_none():
    assert pad_image(None) is None


def test_split_uses_square_cells_by_default():
    padded = pad_image(random_image(300, 200))
    cells = split_image(padded, 4)
    # 512 / 4 = 128 pixel cells, 256 / 128 = 2 rows
    assert cells.shape == (2, 4, 128, 128, 3)


def test_split_symmetric_cuts_resolution_rows():
    padded = pad_image(random_image(300, 200))
    cells = split_image(padded, 4, symmetric=True)
    assert cells.shape == (4, 4, 64, 128, 3)


def test_split_cell_contents():
    image = random_image(8, 4)
    cells = split_image(image, 4)
    assert cells.shape == (2, 4, 2, 2, 3)
    for row in range(2):
        for col in range(4):
            expected = image.pixels[row * 2 : row * 2 + 2, col * 2 : col * 2 + 2]
            np.testing.assert_array_equal(cells[row, col], expected)


def test_split_truncates_remainder():
    image = random_image(8, 8)
    cells = split_image(image, 3)
    # 8 // 3 = 2 pixel cells; the last two columns and rows are dropped
    assert cells.shape == (4, 3, 2, 2, 3)


def test_split_wider_than_image_fails():
    with pytest.raises(ZeroDivisionError):
        split_image(random_image(4, 4), 8)


def test_reduce_white_and_black():
    assert reduce_brightness(RasterImage.blank(4, 4)) == pytest.approx(1.0)
    assert reduce_brightness(RasterImage.blank(4, 4, colour=(0, 0, 0))) == 0.0


def test_reduce_uses_luminance_weights():
    assert reduce_brightness(RasterImage.blank(2, 2, colour=(255, 0, 0))) == pytest.approx(0.2126)
    assert reduce_brightness(RasterImage.blank(2, 2, colour=(0, 255, 0))) == pytest.approx(0.7152)
    assert reduce_brightness(RasterImage.blank(2, 2, colour=(0, 0, 255))) == pytest.approx(0.0722)


def test_reduce_averages_pixels():
    pixels = np.zeros((2, 2, 3), dtype=np.uint8)
    pixels[0] = 255
    assert reduce_brightness(pixels) == pytest.approx(0.5)


def test_brightness_grid_matches_per_cell_reduction():
    cells = split_image(pad_image(random_image(100, 60)), 8)
    grid = brightness_grid(cells)
    assert grid.shape == cells.shape[:2]
    for row in range(grid.shape[0]):
        for col in range(grid.shape[1]):
            assert grid[row, col] == pytest.approx(reduce_brightness(cells[row, col]))


def test_resolution_bounds():
    assert resolution_bounds(random_image(300, 200)) == (2, 512)
    assert resolution_bounds(random_image(100, 300)) == (1, 128)
    assert resolution_bounds(random_image(64, 64)) == (1, 64)


def test_resolution_bounds_symmetric_capped_by_height():
    assert resolution_bounds(random_image(300, 200), symmetric=True) == (1, 256)
    assert resolution_bounds(random_image(100, 300), symmetric=True) == (1, 128)
    padded = pad_image(random_image(300, 200))
    assert split_image(padded, 256, symmetric=True).shape == (256, 256, 1, 2, 3)
