"""Colour palettes mapping altitude values to colours."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Sequence

from relevo.image import Color


class Palette:
    """Ordered thresholds, each paired with the colour used from that value upwards."""

    def __init__(
        self,
        colors: Sequence[Color] = (),
        values: Sequence[float] = (),
        count: int | None = None,
    ) -> None:
        if len(colors) != len(values):
            raise ValueError(f"{len(colors)} colours given for {len(values)} values")
        if count is None:
            count = len(values)
        if not 0 <= count <= len(values):
            raise ValueError(f"palette count {count} does not fit {len(values)} entries")
        self.colors = list(colors)
        self.values = [float(v) for v in values]
        self.count = count

    def __len__(self) -> int:
        return self.count

    def color_for(self, value: float) -> Color:
        """Return the colour of the interval whose start is the last threshold not above *value*."""
        if self.count == 0:
            raise ValueError("palette is empty")
        if self.values[0] > value:
            return self.colors[0]
        for index, threshold in enumerate(self.values[: self.count]):
            if threshold > value:
                return self.colors[index - 1]
        return self.colors[self.count - 1]


def parse_palette(text: str) -> Palette:
    """Parse palette text: a count, then ``value r g b`` groups until the data stops parsing."""
    tokens = text.split()
    if not tokens:
        return Palette()
    try:
        count = int(tokens[0])
    except ValueError:
        return Palette()

    colors: list[Color] = []
    values: list[float] = []
    rest = tokens[1:]
    for start in range(0, len(rest) - 3, 4):
        group = rest[start : start + 4]
        try:
            value = float(group[0])
            r, g, b = (int(t) for t in group[1:])
        except ValueError:
            break
        values.append(value)
        colors.append(Color(r, g, b))
    return Palette(colors, values, count)


def read_palette(path: str | PathLike[str]) -> Palette:
    """Read and parse a palette file."""
    return parse_palette(Path(path).read_text())