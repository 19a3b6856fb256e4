"""Height maps built with the diamond-square algorithm and rendered through a palette."""

from __future__ import annotations

import random
from os import PathLike
from pathlib import Path
from typing import Iterable, Protocol, Sequence

from relevo.image import Image
from relevo.palette import Palette

UNSET = -1.0
INITIAL_DISPLACEMENT = 10
CORNER_LIMIT = 21
SHADE_FACTOR = 0.7

Point = tuple[int, int]


class RandomSource(Protocol):
    """Anything that draws integers uniformly from an inclusive range."""

    def randint(self, a: int, b: int) -> int: ...


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _format(value: float) -> str:
    return f"{value:g}"


class Terrain:
    """A rectangular grid of altitudes."""

    def __init__(self, altitudes: Iterable[Sequence[float]]) -> None:
        grid = [[float(v) for v in row] for row in altitudes]
        if grid and any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("all rows of a terrain must have the same length")
        self._grid = grid

    @classmethod
    def blank(cls, size: int = 3) -> Terrain:
        """Return a square terrain of *size* rows whose altitudes are all unset (-1)."""
        if size < 0:
            raise ValueError(f"terrain size must be non-negative, got {size}")
        return cls([[UNSET] * size for _ in range(size)])

    @classmethod
    def generate(
        cls,
        exponent: int,
        roughness: float = 0.9,
        rng: RandomSource | None = None,
    ) -> Terrain:
        """Generate a square terrain of side 2**exponent + 1 by diamond-square."""
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        terrain = cls.blank(2**exponent + 1)
        terrain._fill(roughness, rng if rng is not None else random.Random())
        return terrain

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._grid)

    @property
    def columns(self) -> int:
        """Number of columns."""
        return len(self._grid[0]) if self._grid else 0

    def altitude(self, row: int, column: int) -> float:
        """Return the altitude at the given position."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(
                f"position ({row}, {column}) outside terrain of {self.rows}x{self.columns}"
            )
        return self._grid[row][column]

    # Generation

    def _fill(self, roughness: float, rng: RandomSource) -> None:
        grid = self._grid
        side = self.rows - 1
        displacement = INITIAL_DISPLACEMENT
        for row, column in ((0, 0), (0, side), (side, 0), (side, side)):
            grid[row][column] = float(rng.randint(0, CORNER_LIMIT))

        while side > 1:
            self._diamond(side, displacement, rng)
            self._square(side, displacement, rng)
            side //= 2
            displacement = int(displacement * roughness)

    def _squares(self, side: int) -> Iterable[tuple[int, int]]:
        span = (self.rows - 1) // side * side
        for top in range(0, span, side):
            for left in range(0, span, side):
                yield top, left

    def _diamond(self, side: int, displacement: int, rng: RandomSource) -> None:
        grid = self._grid
        half = side // 2
        for top, left in self._squares(side):
            deviation = rng.randint(-displacement, displacement)
            total = (
                grid[top][left]
                + grid[top][left + side]
                + grid[top + side][left]
                + grid[top + side][left + side]
            )
            grid[top + half][left + half] = abs(total / 4 + deviation)

    def _square(self, side: int, displacement: int, rng: RandomSource) -> None:
        grid = self._grid
        half = side // 2
        last_row = self.rows - 1
        last_column = self.columns - 1
        for top, left in self._squares(side):
            bottom, right = top + side, left + side
            center = (top + half, left + half)
            cy, cx = center
            edges: list[tuple[Point, Point, Point, Point, bool]] = [
                ((top, cx), (top, left), (top, right), (cy - side, cx), top == 0),
                ((bottom, cx), (bottom, left), (bottom, right), (cy + side, cx), bottom == last_row),
                ((cy, right), (top, right), (bottom, right), (cy, cx + side), right == last_column),
                ((cy, left), (top, left), (bottom, left), (cy, cx - side), left == 0),
            ]
            for target, first, second, outer, on_border in edges:
                deviation = rng.randint(-displacement, displacement)
                row, column = target
                if grid[row][column] >= 0:
                    continue
                points = [first, second, center]
                if not on_border:
                    points.append(outer)
                total = int(sum(grid[r][c] for r, c in points))
                value = _trunc_div(total, len(points)) + deviation
                grid[row][column] = float(abs(value))

    # Persistence

    def _to_text(self) -> str:
        lines = [f"{self.rows} {self.columns}"]
        lines.extend("".join(f"{_format(v)} " for v in row) for row in self._grid)
        return "\n".join(lines) + "\n"

    def save(self, path: str | PathLike[str]) -> None:
        """Write the dimensions and altitudes to *path* as text."""
        Path(path).write_text(self._to_text(), encoding="ascii")

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Terrain:
        """Read a terrain written by :meth:`save`."""
        tokens = Path(path).read_text().split()
        if len(tokens) < 2:
            raise ValueError("terrain file lacks its dimensions")
        try:
            rows, columns = int(tokens[0]), int(tokens[1])
            values = [float(t) for t in tokens[2:]]
        except ValueError as exc:
            raise ValueError(f"malformed terrain file: {exc}") from exc
        if rows < 0 or columns < 0:
            raise ValueError(f"terrain dimensions must be non-negative, got {rows}x{columns}")
        if len(values) < rows * columns:
            raise ValueError(
                f"terrain file holds {len(values)} altitudes, {rows * columns} expected"
            )
        return cls(values[r * columns : (r + 1) * columns] for r in range(rows))

    # Rendering

    def _in_shadow(self, row: int, column: int) -> bool:
        height = self._grid[row][column]
        return any(
            self._grid[row - k][column - k] > height for k in range(min(row, column) + 1)
        )

    def to_image(self, palette: Palette) -> Image:
        """Colour each cell through *palette*, darkening cells shaded from the upper left."""
        image = Image(self.rows, self.columns)
        for i, row in enumerate(self._grid):
            for j, height in enumerate(row):
                color = palette.color_for(height)
                if self._in_shadow(i, j):
                    color = color.shaded(SHADE_FACTOR)
                image.set_pixel(i, j, color)
        return image