from pathlib import Path

from PIL import Image

from asciishade.charsets import RAMP
from asciishade.geometry import resolution_bounds
from asciishade.glyph_atlas import GlyphSource
from asciishade.image import RasterImage
from asciishade.matcher import BrightnessMatcher, ComparisonMode
from asciishade.pipeline import AsciiArtRenderer


def image_to_ascii(
    image: RasterImage | Image.Image | str | Path,
    charset: str = RAMP,
    resolution: int = 64,
    mode: ComparisonMode = ComparisonMode.CLOSEST_ABSOLUTE,
    glyphs: GlyphSource | None = None,
) -> str:
    """Render an image to text in one call.

    ``resolution`` is clamped to the padded image width.
    """
    if isinstance(image, Image.Image):
        image = RasterImage.from_pil(image)
    elif not isinstance(image, RasterImage):
        image = RasterImage.open(image)

    low, high = resolution_bounds(image)
    resolution = min(max(resolution, low), high)

    matcher = BrightnessMatcher(charset, glyphs=glyphs, mode=mode)
    renderer = AsciiArtRenderer(matcher)
    return str(renderer.render(image, resolution))
