"""RGB colours and in-memory raster images that can be written as plain PPM."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path


@dataclass(frozen=True)
class Color:
    """An RGB colour with integer channels."""

    r: int
    g: int
    b: int

    def shaded(self, factor: float) -> Color:
        """Return this colour with every channel scaled by *factor*, truncated."""
        return Color(int(self.r * factor), int(self.g * factor), int(self.b * factor))


BLACK = Color(0, 0, 0)


class Image:
    """A grid of colours addressed by row and column, initially black."""

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError(f"image dimensions must be non-negative, got {height}x{width}")
        self.height = height
        self.width = width
        self._pixels = [[BLACK] * width for _ in range(height)]

    def _check(self, row: int, column: int) -> None:
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(
                f"pixel ({row}, {column}) outside image of {self.height} rows and {self.width} columns"
            )

    def pixel(self, row: int, column: int) -> Color:
        """Return the colour at the given position."""
        self._check(row, column)
        return self._pixels[row][column]

    def set_pixel(self, row: int, column: int, color: Color) -> None:
        """Set the colour at the given position."""
        self._check(row, column)
        self._pixels[row][column] = color

    def to_ppm(self) -> str:
        """Render the image as plain-text PPM (P3), one pixel per line."""
        lines = ["P3", f"{self.width} {self.height}", "255"]
        lines.extend(f"{c.r} {c.g} {c.b}" for row in self._pixels for c in row)
        return "\n".join(lines) + "\n"

    def save(self, path: str | PathLike[str]) -> None:
        """Write the image to *path* as plain-text PPM, replacing any existing file."""
        Path(path).write_text(self.to_ppm(), encoding="ascii")