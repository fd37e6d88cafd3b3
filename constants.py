"""
Global constants used throughout the project
"""
from localtypes import Cell
from utils.tui import bg_color_24b, bg_color_3b

WALL_GLYPH = "#"
OPEN_GLYPH = " "

# Background colors of the reference program, in assignment order
ANSI_PALETTE: tuple[str, ...] = (
    bg_color_3b(41),   # Red
    bg_color_3b(42),   # Green
    bg_color_3b(43),   # Yellow
    bg_color_3b(44),   # Blue
    bg_color_3b(45),   # Magenta
    bg_color_3b(46),   # Cyan
    bg_color_3b(100),  # Dark gray
    bg_color_3b(101),  # Light red
    bg_color_3b(102),  # Light green
    bg_color_3b(103),  # Light yellow
    bg_color_3b(104),  # Light blue
)

# Taken from the arcprize website, black left out since it reads as a wall
ARC_PALETTE: tuple[str, ...] = (
    bg_color_24b(30, 147, 255),   # Blue (#1E93FF)
    bg_color_24b(249, 60, 49),    # Red (#F93C31)
    bg_color_24b(79, 204, 48),    # Green (#4FCC30)
    bg_color_24b(255, 220, 0),    # Yellow (#FFDC00)
    bg_color_24b(153, 153, 153),  # Gray light (#999999)
    bg_color_24b(229, 58, 163),   # Magenta (#E53AA3)
    bg_color_24b(255, 133, 27),   # Orange (#FF851B)
    bg_color_24b(135, 216, 241),  # Blue light (#87D8F1)
    bg_color_24b(146, 18, 49),    # Maroon (#921231)
    bg_color_24b(85, 85, 85),     # Grey (#555555)
)

PALETTES: dict[str, tuple[str, ...]] = {
    "ansi": ANSI_PALETTE,
    "arc": ARC_PALETTE,
}

DEFAULT_PALETTE = "ansi"

REFERENCE_GRID: tuple[str, ...] = (
    "##########",
    "#        #",
    "#        #",
    "## #### ##",
    "#        #",
    "#        #",
    "# ####### ",
    "#  # #  # ",
    "#        #",
    "##########",
)

DEFAULT_WALL_CHAR = Cell.WALL.value
DEFAULT_OPEN_CHAR = Cell.OPEN.value
