"""Filtros espaciais sobre imagens RGB (pixel a pixel)."""
from __future__ import annotations

from .blur import blur
from .edges import SOBEL_GX, SOBEL_GY, edges
from .filters import FILTERS, apply_filter
from .grayscale import grayscale
from .reflect import reflect
from .utils import BLACK, Grid, Pixel, to_array, to_list, validate_grid
from .window import make_window

__all__ = [
    "BLACK",
    "FILTERS",
    "Grid",
    "Pixel",
    "SOBEL_GX",
    "SOBEL_GY",
    "apply_filter",
    "blur",
    "edges",
    "grayscale",
    "make_window",
    "reflect",
    "to_array",
    "to_list",
    "validate_grid",
]
