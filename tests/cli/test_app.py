"""Tests for the command-line front end."""

import io

import pytest

from chessrules.app import main


def _play(monkeypatch: pytest.MonkeyPatch, lines: str, *args: str) -> int:
    monkeypatch.setattr("sys.stdin", io.StringIO(lines))
    return main(["play", *args])


class TestPlay:
    def test_accepts_and_rejects(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _play(monkeypatch, "e2-e4\ne2-e4\nfoo\n\n") == 0
        out = capsys.readouterr().out
        assert "4 ----P---" in out
        assert "Black to move." in out
        assert "Rejected e2-e4: no piece at origin" in out
        assert "Rejected foo: malformed move syntax" in out

    def test_fools_mate_ends_session(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        lines = "f2-f3\ne7-e5\ng2-g4\nd8-h4\na2-a3\n"
        assert _play(monkeypatch, lines) == 0
        out = capsys.readouterr().out
        assert out.rstrip().endswith("Checkmate, Black wins.")
        assert "a2-a3" not in out

    def test_quit_stops_reading(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _play(monkeypatch, "quit\ne2-e4\n") == 0
        out = capsys.readouterr().out
        assert "Black to move." not in out

    def test_check_is_reported(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        fen = "4k3/8/8/8/8/8/8/R3K3 w - - 0 1"
        assert _play(monkeypatch, "a1-a8\n", "--fen", fen) == 0
        assert "Black to move, in check." in capsys.readouterr().out

    def test_unicode_diagram(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _play(monkeypatch, "", "--unicode") == 0
        assert "8 ♜♞♝♛♚♝♞♜" in capsys.readouterr().out


class TestShow:
    def test_default_position(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["show"]) == 0
        out = capsys.readouterr().out
        assert "8 rnbqkbnr" in out
        assert "  abcdefgh" in out
        assert "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1" in out

    def test_invalid_fen_exit_code(self) -> None:
        assert main(["show", "--fen", "8/8/8/8/8/8/8/8 w"]) == 2

    def test_non_ascii_digit_fen_exit_code(self) -> None:
        assert main(["show", "--fen", "4k3/8/8/8/8/8/8/4K2\N{SUPERSCRIPT TWO} w"]) == 2

    def test_requires_subcommand(self) -> None:
        with pytest.raises(SystemExit):
            main([])
