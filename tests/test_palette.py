"""
Tests for the rooms.palette module.
"""

import pytest

from constants import ANSI_PALETTE, REFERENCE_GRID
from localtypes import WALL_MARKER
from rooms import ColorAssignment, colorize_rooms, label, render, render_rows
from utils.grid import InvalidInputError, lines_to_grid
from utils.tui import RESET

PALETTE = ("<red>", "<green>", "<blue>")


def painted(color: str) -> str:
    return f"{color} {RESET}"


class TestColorAssignment:
    def test_assigned_in_encounter_order(self):
        assignment = ColorAssignment(PALETTE)
        assert assignment.index_of(7) == 0
        assert assignment.index_of(3) == 1
        assert assignment.index_of(7) == 0
        assert assignment.color_of(3) == "<green>"
        assert list(assignment.items()) == [(7, 0), (3, 1)]

    def test_cycles_through_palette(self):
        assignment = ColorAssignment(PALETTE)
        indices = [assignment.index_of(region_id) for region_id in range(7)]
        assert indices == [0, 1, 2, 0, 1, 2, 0]
        assert len(assignment) == 7

    def test_membership(self):
        assignment = ColorAssignment(PALETTE)
        assignment.index_of(4)
        assert 4 in assignment
        assert 5 not in assignment

    def test_empty_palette_rejected(self):
        with pytest.raises(InvalidInputError):
            ColorAssignment(())


class TestRender:
    def test_single_enclosed_room(self):
        grid = lines_to_grid(["####", "#  #", "####"])
        lines = colorize_rooms(grid, PALETTE)
        room = painted("<red>")
        assert lines == ["####", f"#{room}{room}#", "####"]

    def test_two_rooms_top_to_bottom(self):
        grid = lines_to_grid(["   ", "###", "   "])
        lines = colorize_rooms(grid, PALETTE)
        assert lines == [
            painted("<red>") * 3,
            "###",
            painted("<green>") * 3,
        ]

    def test_all_walls_have_no_color(self):
        grid = lines_to_grid(["###", "###"])
        lines = colorize_rooms(grid, PALETTE)
        assert lines == ["###", "###"]
        assert all("\033" not in line for line in lines)

    def test_fifteen_rooms_eleven_colors(self):
        grid = lines_to_grid([" #" * 15])
        lines = colorize_rooms(grid, ANSI_PALETTE)
        assert len(lines) == 1

        expected = "".join(
            painted(ANSI_PALETTE[k % len(ANSI_PALETTE)]) + "#" for k in range(15)
        )
        assert lines[0] == expected
        # Room 11 reuses the first color, room 12 the second
        cells = lines[0].split("#")[:-1]
        assert cells[11] == cells[0] == painted(ANSI_PALETTE[0])
        assert cells[12] == cells[1] == painted(ANSI_PALETTE[1])
        assert len(set(cells[:11])) == 11

    def test_colors_follow_encounter_order_not_identity(self):
        """Relabeled rooms met in the same order get the same colors."""
        labeled = [[5, WALL_MARKER, 2], [5, WALL_MARKER, 9]]
        assert render(labeled, PALETTE) == [
            f"{painted('<red>')}#{painted('<green>')}",
            f"{painted('<red>')}#{painted('<blue>')}",
        ]

    def test_room_keeps_its_color_across_rows(self):
        labeled = label(lines_to_grid(REFERENCE_GRID))
        lines = render(labeled, PALETTE)
        assert lines[1] == "#" + painted("<red>") * 8 + "#"
        assert lines[6] == "#" + painted("<red>") + "#" * 7 + painted("<green>")
        assert lines[9] == "#" * 10

    def test_one_line_per_row(self):
        lines = colorize_rooms(lines_to_grid(REFERENCE_GRID), ANSI_PALETTE)
        assert len(lines) == len(REFERENCE_GRID)
        assert all(line.count(RESET) == row.count(" ") for line, row in zip(lines, REFERENCE_GRID))

    def test_deterministic(self):
        grid = lines_to_grid(REFERENCE_GRID)
        assert colorize_rooms(grid, ANSI_PALETTE) == colorize_rooms(grid, ANSI_PALETTE)

    def test_empty_palette_rejected(self):
        with pytest.raises(InvalidInputError):
            render([[0]], ())
        with pytest.raises(InvalidInputError):
            colorize_rooms(lines_to_grid([" "]), [])

    def test_ragged_labels_rejected(self):
        with pytest.raises(InvalidInputError):
            render([[0, 0], [0]], PALETTE)


class TestRenderRows:
    def test_one_color_per_row(self):
        grid = lines_to_grid(["# ", "  ", " #", "  "])
        assert render_rows(grid, PALETTE) == [
            "#" + painted("<red>"),
            painted("<green>") * 2,
            painted("<blue>") + "#",
            painted("<red>") * 2,
        ]

    def test_walls_uncolored(self):
        assert render_rows(lines_to_grid(["##"]), PALETTE) == ["##"]

    def test_empty_palette_rejected(self):
        with pytest.raises(InvalidInputError):
            render_rows(lines_to_grid([" "]), ())
