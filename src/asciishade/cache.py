import logging
from collections import OrderedDict

import numpy as np

from asciishade.image import RasterImage

logger = logging.getLogger(__name__)


class BrightnessCache:
    """Memoizes brightness grids per (image, resolution, partition mode).

    Images are keyed by identity, not content: the same pixels loaded twice
    are two entries. Holding the key also keeps the image alive, so an
    identity is never reused while it is cached. With ``max_entries`` set, the
    least recently used grid is evicted first.
    """

    def __init__(self, max_entries: int | None = None):
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self._grids: OrderedDict[tuple[RasterImage, int, bool], np.ndarray] = OrderedDict()

    def __len__(self) -> int:
        return len(self._grids)

    def get(self, image: RasterImage, resolution: int, symmetric: bool = False) -> np.ndarray | None:
        key = (image, resolution, symmetric)
        grid = self._grids.get(key)
        if grid is None:
            self.misses += 1
            return None
        self._grids.move_to_end(key)
        self.hits += 1
        return grid

    def put(self, image: RasterImage, resolution: int, grid: np.ndarray, symmetric: bool = False) -> None:
        grid = np.array(grid, dtype=np.float64)
        grid.flags.writeable = False
        key = (image, resolution, symmetric)
        self._grids[key] = grid
        self._grids.move_to_end(key)
        if self.max_entries is not None:
            while len(self._grids) > self.max_entries:
                (_, evicted_res, _), _ = self._grids.popitem(last=False)
                logger.debug("Evicted brightness grid at resolution %d", evicted_res)

    def clear(self) -> None:
        self._grids.clear()
        self.hits = 0
        self.misses = 0
