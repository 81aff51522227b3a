"""
Immutable single-plane intensity image.

Pixels are stored as a read-only float32 array of shape (height, width),
indexed (row, col).  All arithmetic returns new images; nothing is ever
modified in place.
"""
from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np


ArrayLike = Union[np.ndarray, Sequence[Sequence[float]]]


def _as_grid(data: ArrayLike) -> np.ndarray:
    """Copy `data` into a fresh read-only float32 2-D array."""
    if isinstance(data, np.ndarray):
        grid = np.array(data, dtype=np.float32, copy=True)
    else:
        rows = list(data)
        lengths = {len(row) for row in rows if hasattr(row, "__len__")}
        if len(lengths) > 1:
            raise ValueError("ragged grid: every row must have the same length")
        grid = np.array(rows, dtype=np.float32)

    if grid.ndim != 2:
        raise ValueError(f"Expected 2-D grid, got shape {grid.shape}")
    if grid.shape[0] < 1 or grid.shape[1] < 1:
        raise ValueError(f"Image must be at least 1x1, got shape {grid.shape}")

    grid.flags.writeable = False
    return grid


class Image:
    """
    2-D float32 pixel grid with value semantics.

    Parameters
    ----------
    data : ndarray or nested sequence, shape (height, width)
        Pixel values.  The grid is copied; rows must all have the same length.
    """

    __slots__ = ("_data",)

    def __init__(self, data: ArrayLike):
        if data is None:
            raise TypeError("data must not be None")
        self._data = _as_grid(data)

    @classmethod
    def blank(cls, width: int, height: int) -> "Image":
        """Return a zero-filled image of the given size."""
        if width < 1 or height < 1:
            raise ValueError(f"width and height must be >= 1, got {width}x{height}")
        return cls(np.zeros((height, width), dtype=np.float32))

    @classmethod
    def impulse(
        cls,
        width: int,
        height: int,
        row: int,
        col: int,
        value: float = 1.0,
    ) -> "Image":
        """Return a blank image with a single pixel set to `value`."""
        if width < 1 or height < 1:
            raise ValueError(f"width and height must be >= 1, got {width}x{height}")
        if not (0 <= row < height and 0 <= col < width):
            raise IndexError(f"pixel ({row}, {col}) outside {width}x{height} image")
        grid = np.zeros((height, width), dtype=np.float32)
        grid[row, col] = value
        return cls(grid)

    # ------------------------------------------------------------------ #
    # Geometry
    # ------------------------------------------------------------------ #

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), numpy order."""
        return self._data.shape

    @property
    def data(self) -> np.ndarray:
        """Read-only float32 view of the pixels."""
        return self._data

    def to_array(self) -> np.ndarray:
        """Return a writable float32 copy of the pixels."""
        return self._data.copy()

    # ------------------------------------------------------------------ #
    # Pixel access
    # ------------------------------------------------------------------ #

    def get_pixel(self, row: int, col: int) -> float:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"pixel ({row}, {col}) outside {self.width}x{self.height} image"
            )
        return float(self._data[row, col])

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.get_pixel(row, col)

    # ------------------------------------------------------------------ #
    # Arithmetic / comparison
    # ------------------------------------------------------------------ #

    def subtract(self, other: "Image") -> "Image":
        """Return a new image with pixel (r, c) = self(r, c) - other(r, c)."""
        if other is None:
            raise TypeError("other must not be None")
        if other.shape != self.shape:
            raise ValueError(
                f"Cannot subtract {other.width}x{other.height} image "
                f"from {self.width}x{self.height} image"
            )
        return Image(self._data - other.data)

    def __sub__(self, other: "Image") -> "Image":
        if not isinstance(other, Image):
            return NotImplemented
        return self.subtract(other)

    def isclose(self, other: "Image", tolerance: float) -> bool:
        """
        True when both images have the same size and every pixel differs by
        at most `tolerance` (absolute).  Intended for comparisons in tests.
        """
        if tolerance < 0:
            raise ValueError("tolerance must be >= 0")
        if other is None or other.shape != self.shape:
            return False
        diff = np.abs(self._data.astype(np.float64) - other.data.astype(np.float64))
        return bool(np.all(diff <= tolerance))

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
