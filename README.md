# relevo

`relevo` builds a random terrain height map with the diamond-square
algorithm. It then paints the map as a plain-text PPM (`P3`) image. Each
pixel's colour comes from a palette of altitude bands. A pixel is darkened
when a higher cell lies on the diagonal running from it towards the upper
left.

## Installation

```
pip install .
```

## Command line

```
relevo [PALETTE] [EXPONENT] [OUTPUT] [--roughness R] [--seed N]
```

- `PALETTE`: the path of the palette file.
- `EXPONENT`: the exponent `n`. The terrain is `2**n + 1` by `2**n + 1` cells.
- `OUTPUT`: the path where the PPM image is written.
- `--roughness`: the factor applied to the random displacement after each step. The default is 0.9.
- `--seed`: an integer seed. The same seed gives the same terrain.

If you leave out any of the three positional arguments, the command asks
for it on standard input. On an error, such as an unreadable file or an
exponent that is not an integer, the command prints a message to standard
error and exits with status 1.

## Palette files

A palette file is whitespace-separated text. It starts with the number of
colours to use. Then come the entries, one per colour. Each entry gives
the altitude at which the band starts, followed by the red, green and blue
components:

```
4
0 0 0 255
5 240 220 130
10 40 160 40
18 255 255 255
```

Reading stops at the first entry that does not parse. The count must not
be larger than the number of entries read.

The colour for an altitude is chosen as follows:

- An altitude below the first value takes the first colour.
- Otherwise it takes the colour of the last band whose start is not above it.
- Anything at or above the last counted value takes the last colour.

## Library use

```python
import random

from relevo.palette import read_palette
from relevo.terrain import Terrain

palette = read_palette("palette.txt")
terrain = Terrain.generate(7, 0.9, random.Random(42))

terrain.save("terrain.txt")
terrain.to_image(palette).save("terrain.ppm")

again = Terrain.load("terrain.txt")
print(again.rows, again.columns, again.altitude(0, 0))
```

### `relevo.terrain.Terrain`

- `Terrain(altitudes)`: builds a terrain from rows of numbers.
- `Terrain.blank(size)`: gives a square grid of unset (`-1`) altitudes.
- `Terrain.generate(exponent, roughness, rng)`: runs diamond-square. `rng` is anything with a `randint(a, b)` method. It defaults to a fresh `random.Random()`.
- `rows` and `columns` are properties.
- `altitude(row, column)` raises `IndexError` outside the grid.
- `save` writes the dimensions followed by the altitudes as text. `load` reads that format back.

### `relevo.palette`

- `Palette(colors, values, count)` holds the palette. `len(palette)` is its count.
- `color_for(value)` returns the colour for an altitude.
- `parse_palette(text)` reads palette text.
- `read_palette(path)` reads a palette file.

### `relevo.image`

- `Color(r, g, b)` is an immutable colour. `shaded(factor)` scales its channels and truncates them.
- `Image(height, width)` starts black. Set pixels with `set_pixel` and read them with `pixel`.
- `to_ppm()` gives the PPM text and `save(path)` writes it.

## What it does not do

`relevo` writes images only as plain-text PPM. It has no viewer and does
not write other image formats.

## Running the tests

```
pip install .[test]
pytest
```