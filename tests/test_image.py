import numpy as np
import pytest
from PIL import Image, UnidentifiedImageError

from asciishade.image import RasterImage


def test_from_pil_converts_to_rgb():
    image = RasterImage.from_pil(Image.new("L", (6, 4), 128))
    assert (image.width, image.height) == (6, 4)
    assert image.pixels.shape == (4, 6, 3)
    assert (image.pixels == 128).all()


def test_pixels_are_read_only_copy():
    source = np.zeros((2, 2, 3), dtype=np.uint8)
    image = RasterImage(source)
    source[0, 0] = 255
    assert (image.pixels == 0).all()
    with pytest.raises(ValueError):
        image.pixels[0, 0] = 1


def test_rejects_non_rgb_shape():
    with pytest.raises(ValueError, match="Expected a"):
        RasterImage(np.zeros((2, 2), dtype=np.uint8))


def test_equality_is_identity():
    first = RasterImage.blank(2, 2)
    second = RasterImage.blank(2, 2)
    assert first != second
    assert first == first
    assert len({first, second}) == 2


def test_open_roundtrip(tmp_path):
    path = tmp_path / "img.png"
    Image.new("RGB", (5, 3), (10, 20, 30)).save(path)
    image = RasterImage.open(path)
    assert (image.width, image.height) == (5, 3)
    assert tuple(image.pixels[1, 2]) == (10, 20, 30)
    assert image.to_pil().size == (5, 3)


def test_open_corrupt_file(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"not an image")
    with pytest.raises(UnidentifiedImageError):
        RasterImage.open(path)
