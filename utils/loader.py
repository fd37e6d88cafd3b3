"""
Module used to import room grids
"""

import json
import logging
import os

from constants import DEFAULT_OPEN_CHAR, DEFAULT_WALL_CHAR, REFERENCE_GRID
from localtypes import CellGrid
from utils.grid import InvalidInputError, lines_to_grid

logger = logging.getLogger(__name__)


def reference_grid() -> CellGrid:
    return lines_to_grid(REFERENCE_GRID)


def load_text_grid(
    path: str | os.PathLike,
    wall_char: str = DEFAULT_WALL_CHAR,
    open_char: str = DEFAULT_OPEN_CHAR,
) -> CellGrid:
    """
    Read a grid drawn as text, one row per line.

    Line terminators are stripped, trailing empty lines are ignored. Trailing
    spaces are kept since they may be open cells.
    """
    with open(path, "r", encoding="utf-8") as file:
        try:
            lines = file.read().splitlines()
        except UnicodeDecodeError as error:
            raise InvalidInputError(f"{path} is not valid UTF-8 text: {error}") from error

    while lines and not lines[-1]:
        lines.pop()

    logger.debug(f"Read {len(lines)} rows from {path}")
    return lines_to_grid(lines, wall_char, open_char)


def load_json_grid(
    path: str | os.PathLike,
    wall_char: str = DEFAULT_WALL_CHAR,
    open_char: str = DEFAULT_OPEN_CHAR,
) -> CellGrid:
    """
    Read a grid stored as JSON: a list of row strings, or an object holding
    that list under the "grid" key.
    """
    with open(path, "r", encoding="utf-8") as file:
        try:
            data = json.load(file)
        except UnicodeDecodeError as error:
            raise InvalidInputError(f"{path} is not valid UTF-8 text: {error}") from error
        except json.JSONDecodeError as error:
            raise InvalidInputError(f"{path} is not valid JSON: {error}") from error

    if isinstance(data, dict):
        data = data.get("grid")

    if not isinstance(data, list) or not all(isinstance(row, str) for row in data):
        raise InvalidInputError(f"{path} does not hold a list of row strings")

    logger.debug(f"Read {len(data)} rows from {path}")
    return lines_to_grid(data, wall_char, open_char)


def load_grid(
    path: str | os.PathLike | None = None,
    wall_char: str = DEFAULT_WALL_CHAR,
    open_char: str = DEFAULT_OPEN_CHAR,
) -> CellGrid:
    """Load a grid from a .json or text file, or the reference grid if no path."""
    if path is None:
        logger.info("No grid file given, using the reference grid")
        return reference_grid()

    logger.info(f"Loading grid from {path}")
    if os.fspath(path).endswith(".json"):
        return load_json_grid(path, wall_char, open_char)
    return load_text_grid(path, wall_char, open_char)
