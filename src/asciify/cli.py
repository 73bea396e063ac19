import argparse
import logging
import sys
from pathlib import Path

from asciify.charsets import RAMPS
from asciify.converter import DEFAULT_WIDTH, image_to_ascii
from asciify.errors import AsciifyError
from asciify.loader import load_image
from asciify.sampling import ASPECT_CORRECTION

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciify", description="Render an image as ASCII art")
    parser.add_argument("--image", required=True, help="Path or http(s) URL of the input image")
    parser.add_argument("--output", default=None, help="Also save the ASCII art to this file (always plain text)")
    parser.add_argument(
        "--width", type=_positive_int, default=DEFAULT_WIDTH, help=f"Output width in columns (default: {DEFAULT_WIDTH})"
    )
    parser.add_argument(
        "--color", "--colour", dest="colour", action="store_true", default=False, help="Enable truecolor ANSI output"
    )
    parser.add_argument(
        "--ramp", default="simple", choices=sorted(RAMPS), help="Glyph ramp, dark to light (default: simple)"
    )
    parser.add_argument("--invert", action="store_true", default=False, help="Reverse the ramp for light backgrounds")
    parser.add_argument(
        "--aspect",
        type=float,
        default=ASPECT_CORRECTION,
        help=f"Row squash factor compensating for tall terminal cells (default: {ASPECT_CORRECTION})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug details to stderr")
    return parser


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root = logging.getLogger("asciify")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.propagate = False


def save_text(content: str, path: str | Path) -> None:
    Path(path).write_text(content, encoding="utf-8")


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    setup_logging(args.verbose)

    ramp = RAMPS[args.ramp]
    if args.invert:
        ramp = ramp[::-1]

    try:
        image = load_image(args.image)
        art = image_to_ascii(image, width=args.width, colour=args.colour, ramp=ramp, aspect=args.aspect)
    except AsciifyError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    # Rows already end in newlines
    print(art, end="")

    if args.output is None:
        return

    content = art
    if args.colour:
        logger.info("Generating plain text version for %s", args.output)
        content = image_to_ascii(image, width=args.width, colour=False, ramp=ramp, aspect=args.aspect)
    try:
        save_text(content, args.output)
    except OSError as e:
        print(f"error: could not write {args.output}: {e}", file=sys.stderr)
        sys.exit(1)
    logger.info("Saved ASCII art to %s", args.output)
