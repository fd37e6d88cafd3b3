"""Tests for the command line entry point"""

import json

import pytest

from constants import ANSI_PALETTE, ARC_PALETTE
from main import main, select_palette
from utils.tui import RESET


class TestSelectPalette:
    def test_named(self):
        assert select_palette("ansi") == ANSI_PALETTE
        assert select_palette("arc") == ARC_PALETTE

    def test_auto(self, monkeypatch):
        monkeypatch.setenv("COLORTERM", "truecolor")
        assert select_palette("auto") == ARC_PALETTE
        monkeypatch.setenv("COLORTERM", "")
        monkeypatch.setenv("TERM", "xterm")
        assert select_palette("auto") == ANSI_PALETTE


class TestMain:
    def test_reference_grid(self, capsys):
        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 10
        assert lines[0] == "##########"
        assert lines[6] == f"#{ANSI_PALETTE[0]} {RESET}#######{ANSI_PALETTE[1]} {RESET}"

    def test_symbols(self, capsys):
        assert main(["--symbols"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[6] == "#A#######B"
        assert len(lines) == 20

    def test_rows_mode(self, capsys, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps(["  ", "  "]))
        assert main([str(path), "--mode", "rows"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"{ANSI_PALETTE[0]} {RESET}" * 2,
            f"{ANSI_PALETTE[1]} {RESET}" * 2,
        ]

    def test_custom_characters(self, capsys, tmp_path):
        path = tmp_path / "plan.txt"
        path.write_text("X.X\n")
        assert main([str(path), "--wall-char", "X", "--open-char", "."]) == 0
        assert capsys.readouterr().out == f"#{ANSI_PALETTE[0]} {RESET}#\n"

    def test_invalid_grid(self, capsys, tmp_path, caplog):
        path = tmp_path / "plan.txt"
        path.write_text("###\n#\n")
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "Row 1" in caplog.text

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.txt")]) == 1

    def test_not_utf8_grid(self, capsys, tmp_path, caplog):
        path = tmp_path / "plan.txt"
        path.write_bytes(b"#\xff#\n")
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "UTF-8" in caplog.text

    @pytest.mark.parametrize("flag", ["--symbols", "--legend"])
    def test_rows_mode_has_no_rooms(self, capsys, flag):
        with pytest.raises(SystemExit) as error:
            main(["--mode", "rows", flag])
        assert error.value.code == 2
        assert "--mode rows" in capsys.readouterr().err

    def test_unknown_palette(self):
        with pytest.raises(SystemExit):
            main(["--palette", "sepia"])
