"""Diamond-square terrain generation, altitude palettes and shaded PPM rendering."""

__version__ = "0.1.0"

__all__ = ["__version__"]