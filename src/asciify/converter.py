from pathlib import Path

from PIL import Image

from asciify.charsets import RESET, SIMPLE, foreground
from asciify.engine import CellGrid, map_colour, map_grayscale
from asciify.loader import load_image
from asciify.sampling import ASPECT_CORRECTION, compute_dimensions, prepare, resample

DEFAULT_WIDTH = 80


def _format_plain(grid: CellGrid) -> str:
    return "".join(f"{line}\n" for line in grid.chars)


def _format_colour(grid: CellGrid) -> str:
    """Prefix each glyph with its truecolor escape and reset at the end of every row."""
    out = []
    for r, line in enumerate(grid.chars):
        parts = []
        for c, char in enumerate(line):
            red, green, blue = (int(v) for v in grid.colours[r, c])
            parts.append(f"{foreground(red, green, blue)}{char}")
        parts.append(RESET)
        out.append("".join(parts) + "\n")
    # Final reset even though every row already ended with one
    out.append(RESET)
    return "".join(out)


def render(image: Image.Image, colour: bool = False, ramp: str = SIMPLE) -> str:
    """Render an already sized image, one output row per pixel row."""
    if colour:
        return _format_colour(map_colour(image))
    return _format_plain(map_grayscale(image, ramp))


def image_to_ascii(
    image: Image.Image | str | Path,
    width: int = DEFAULT_WIDTH,
    colour: bool = False,
    ramp: str = SIMPLE,
    aspect: float = ASPECT_CORRECTION,
) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(str(image))
    image = prepare(image)

    cols, rows = compute_dimensions(image.width, image.height, width, aspect)
    return render(resample(image, cols, rows), colour=colour, ramp=ramp)
