"""Command line entry point: generate a terrain and save it as a PPM image."""

from __future__ import annotations

import argparse
import random
import sys

from relevo.palette import read_palette
from relevo.terrain import Terrain


def _ask(value: str | None, prompt: str) -> str:
    if value is not None:
        return value
    answer = input(prompt).strip()
    if not answer:
        raise ValueError(f"no answer given to: {prompt.strip()}")
    return answer


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relevo",
        description="Generate a diamond-square terrain and save it as a PPM image.",
    )
    parser.add_argument("palette", nargs="?", help="palette file")
    parser.add_argument("exponent", nargs="?", help="terrain side is 2**exponent + 1")
    parser.add_argument("output", nargs="?", help="PPM file to write")
    parser.add_argument("--roughness", type=float, default=0.9, help="displacement decay")
    parser.add_argument("--seed", type=int, help="seed for reproducible terrains")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the generator; missing arguments are asked for on standard input."""
    args = _parser().parse_args(argv)
    try:
        palette_path = _ask(args.palette, "Palette file: ")
        exponent_text = _ask(args.exponent, "Terrain exponent: ")
        output_path = _ask(args.output, "Output image file: ")
        try:
            exponent = int(exponent_text)
        except ValueError:
            raise ValueError(f"exponent must be an integer, got {exponent_text!r}") from None
        palette = read_palette(palette_path)
        terrain = Terrain.generate(exponent, args.roughness, random.Random(args.seed))
        terrain.to_image(palette).save(output_path)
    except EOFError:
        print("relevo: input ended before all answers were given", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"relevo: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())