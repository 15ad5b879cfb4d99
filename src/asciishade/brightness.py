import numpy as np

from asciishade.glyph_atlas import GlyphSource


def raw_brightness(mask: np.ndarray) -> float:
    """Fraction of "on" pixels in a glyph mask, in [0, 1].

    An integer count over an integer size, so two masks with the same number
    of on pixels always give the exact same float.
    """
    return int(np.count_nonzero(mask)) / mask.size


def char_brightness(char: str, source: GlyphSource) -> float:
    return raw_brightness(source.glyph_mask(char))
