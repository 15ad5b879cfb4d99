import numpy as np
import pytest

from asciishade.glyph_atlas import find_monospace_font

FONT_PATH = find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


class FakeGlyphs:
    """Glyph source with hand-picked ink: ``counts[char]`` of ten mask rows are lit.

    Raw brightness is therefore ``count / 10``. Characters without an explicit
    count light ``ord(char) % 11`` rows.
    """

    resolution = 10

    def __init__(self, counts=None):
        self.counts = dict(counts or {})
        self.calls = 0

    def glyph_mask(self, char):
        self.calls += 1
        lit = self.counts.get(char, ord(char) % 11)
        mask = np.zeros((self.resolution, self.resolution), dtype=bool)
        mask[:lit] = True
        return mask


@pytest.fixture
def fake_glyphs():
    return FakeGlyphs
