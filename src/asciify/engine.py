from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np
from PIL import Image

from asciify.charsets import BLOCK, SIMPLE
from asciify.errors import PreconditionError
from asciify.sampling import to_rgb


@dataclass
class CellGrid:
    chars: list[str]  # one string per row
    colours: np.ndarray | None  # (rows, cols, 3) uint8, or None


def traverse(pixels: np.ndarray, cell: Callable[[np.ndarray], str]) -> list[str]:
    """Build one string per pixel row: top row first, left to right within a row."""
    return ["".join(cell(pixel) for pixel in row) for row in pixels]


def ramp_indices(gray: np.ndarray, ramp_length: int) -> np.ndarray:
    """Map 0-255 intensities onto ramp positions, 0 -> first glyph and 255 -> last."""
    scaled = np.asarray(gray, dtype=np.float64) / 255.0 * (ramp_length - 1)
    return np.clip(scaled.astype(np.intp), 0, ramp_length - 1)


def map_grayscale(image: Image.Image, ramp: str = SIMPLE) -> CellGrid:
    """Pick a ramp glyph per pixel from its ITU-R 601-2 luma."""
    if not ramp:
        raise PreconditionError("Glyph ramp must not be empty")
    gray = np.asarray(to_rgb(image).convert("L"))
    indices = ramp_indices(gray, len(ramp))
    return CellGrid(chars=traverse(indices, lambda i: ramp[i]), colours=None)


def map_colour(image: Image.Image, block: str = BLOCK) -> CellGrid:
    """Every cell is the same solid glyph; intensity is carried by its RGB colour."""
    if not block:
        raise PreconditionError("Block glyph must not be empty")
    rgb = np.asarray(to_rgb(image), dtype=np.uint8)
    return CellGrid(chars=traverse(rgb, lambda _: block), colours=rgb)
