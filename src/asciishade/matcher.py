import bisect
import enum
import logging
from collections.abc import Iterable

import numpy as np

from asciishade.brightness import char_brightness
from asciishade.errors import EmptyCharsetError
from asciishade.glyph_atlas import GlyphRasterizer, GlyphSource

logger = logging.getLogger(__name__)


class ComparisonMode(enum.Enum):
    """How a brightness value picks between its floor and ceiling entries."""

    CLOSEST_HIGHER = "up"
    CLOSEST_LOWER = "down"
    CLOSEST_ABSOLUTE = "abs"


class BrightnessIndex:
    """Ordered map from a brightness value to the characters sharing it.

    Keys are kept sorted for floor/ceiling lookups; each bucket is kept sorted
    by code point so its first element is the tie-break winner.
    """

    def __init__(self):
        self._keys: list[float] = []
        self._buckets: dict[float, list[str]] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def add(self, key: float, char: str) -> None:
        bucket = self._buckets.get(key)
        if bucket is None:
            bisect.insort(self._keys, key)
            self._buckets[key] = [char]
        elif char not in bucket:
            bisect.insort(bucket, char)

    def discard(self, key: float, char: str) -> bool:
        """Remove ``char`` from the bucket at ``key``. Returns False if it wasn't there."""
        bucket = self._buckets.get(key)
        if bucket is None or char not in bucket:
            return False
        bucket.remove(char)
        if not bucket:
            del self._buckets[key]
            del self._keys[bisect.bisect_left(self._keys, key)]
        return True

    def clear(self) -> None:
        self._keys.clear()
        self._buckets.clear()

    def floor(self, value: float) -> tuple[float, list[str]] | None:
        """Entry with the largest key <= value."""
        i = bisect.bisect_right(self._keys, value)
        if i == 0:
            return None
        key = self._keys[i - 1]
        return key, self._buckets[key]

    def ceiling(self, value: float) -> tuple[float, list[str]] | None:
        """Entry with the smallest key >= value."""
        i = bisect.bisect_left(self._keys, value)
        if i == len(self._keys):
            return None
        key = self._keys[i]
        return key, self._buckets[key]

    def first_key(self) -> float | None:
        return self._keys[0] if self._keys else None

    def last_key(self) -> float | None:
        return self._keys[-1] if self._keys else None

    def items(self):
        for key in self._keys:
            yield key, self._buckets[key]

    def snapshot(self) -> dict[float, tuple[str, ...]]:
        return {key: tuple(bucket) for key, bucket in self.items()}


class BrightnessMatcher:
    """Maps normalized brightness values to characters of the active set.

    Two indices are maintained in lock-step: one keyed by raw glyph brightness
    and one keyed by brightness rescaled to [0, 1] over the set's current
    min/max. Adding a character inside the current bounds touches one bucket;
    anything that moves a bound rebuilds the normalized index.
    """

    def __init__(
        self,
        charset: Iterable[str] = (),
        glyphs: GlyphSource | None = None,
        mode: ComparisonMode = ComparisonMode.CLOSEST_ABSOLUTE,
    ):
        self.glyphs = glyphs if glyphs is not None else GlyphRasterizer()
        self.mode = mode
        self._raw = BrightnessIndex()
        self._normalized = BrightnessIndex()
        self._brightness: dict[str, float] = {}
        self._bounds: tuple[float, float] | None = None

        for char in charset:
            self._raw.add(self._raw_brightness(char), char)
        self.recompute_bounds_and_maybe_rebuild()

    def __len__(self) -> int:
        return len(self._brightness)

    def __contains__(self, char: str) -> bool:
        return char in self._brightness

    @property
    def charset(self) -> tuple[str, ...]:
        return tuple(sorted(self._brightness))

    @property
    def bounds(self) -> tuple[float, float] | None:
        """(min, max) raw brightness of the active set, or None when it is empty."""
        return self._bounds

    def raw_index(self) -> dict[float, tuple[str, ...]]:
        return self._raw.snapshot()

    def normalized_index(self) -> dict[float, tuple[str, ...]]:
        return self._normalized.snapshot()

    def set_comparison_mode(self, mode: ComparisonMode | None) -> None:
        if mode is not None:
            self.mode = mode

    def add_char(self, char: str) -> None:
        raw = self._raw_brightness(char)
        self._raw.add(raw, char)
        if not self.recompute_bounds_and_maybe_rebuild():
            self._normalized.add(self._normalize(raw), char)

    def remove_char(self, char: str) -> None:
        raw = self._brightness.get(char)
        if raw is None:
            return
        # The normalized key must be computed before the bounds move
        self._normalized.discard(self._normalize(raw), char)
        self._raw.discard(raw, char)
        del self._brightness[char]
        self.recompute_bounds_and_maybe_rebuild()

    def recompute_bounds_and_maybe_rebuild(self) -> bool:
        """Refresh the bounds from the raw index; rebuild the normalized index if they moved.

        Returns True when a rebuild happened.
        """
        if len(self._raw):
            bounds = (self._raw.first_key(), self._raw.last_key())
        else:
            bounds = None
        if bounds == self._bounds:
            return False

        logger.debug("Brightness bounds %s -> %s, rebuilding normalized index", self._bounds, bounds)
        self._bounds = bounds
        self._normalized.clear()
        for raw, bucket in self._raw.items():
            key = self._normalize(raw)
            for char in bucket:
                self._normalized.add(key, char)
        return True

    def match(self, brightness: float) -> str:
        """Best character for a normalized brightness under the current mode.

        Ties inside a bucket go to the smallest code point.
        """
        if not len(self._normalized):
            raise EmptyCharsetError()

        lower = self._normalized.floor(brightness)
        higher = self._normalized.ceiling(brightness)

        if self.mode is ComparisonMode.CLOSEST_HIGHER:
            closest = higher if higher is not None else lower
        elif self.mode is ComparisonMode.CLOSEST_LOWER:
            closest = lower if lower is not None else higher
        elif lower is None:
            closest = higher
        elif higher is None:
            closest = lower
        else:
            closest = lower if abs(lower[0] - brightness) <= abs(higher[0] - brightness) else higher

        return closest[1][0]

    def match_grid(self, grid: np.ndarray) -> list[str]:
        """Match every cell of a (rows, cols) brightness array, one string per row."""
        return ["".join(self.match(value) for value in row) for row in np.asarray(grid).tolist()]

    def _raw_brightness(self, char: str) -> float:
        raw = self._brightness.get(char)
        if raw is None:
            raw = char_brightness(char, self.glyphs)
            self._brightness[char] = raw
        return raw

    def _normalize(self, raw: float) -> float:
        low, high = self._bounds
        if high == low:
            return 0.0
        return (raw - low) / (high - low)
