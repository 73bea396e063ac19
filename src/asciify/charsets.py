# Glyph ramps, ordered darkest -> lightest (index 0 is rendered for black)
SIMPLE = " .:!/r(l1Z4H9W8$@"

DETAILED = " `.-':_,^=;><+!rc*/z?sLTv)J7(|Fi{C}fI31tlu[neoZ5Yxjya]2ESwqkP6h9d4VpOGbUAKXHm8RD#$Bg0MNWQ%&@"

# Heavy glyphs first: reads best as dark text on a light background
DENSE = "@%#*+=-:. "

RAMPS = {
    "simple": SIMPLE,
    "detailed": DETAILED,
    "dense": DENSE,
}

# Colour mode draws every cell with the same solid glyph
BLOCK = "█"

RESET = "\033[0m"


def foreground(r: int, g: int, b: int) -> str:
    """ANSI truecolor foreground escape for an 8-bit RGB triple."""
    return f"\033[38;2;{r};{g};{b}m"
