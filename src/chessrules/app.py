"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.core.enums import GameStatus
from chessrules.core.errors import InvalidPositionError
from chessrules.core.notation import render_board
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

_STATUS_LINES: dict[GameStatus, str] = {
    GameStatus.IN_PROGRESS: "{side} to move.",
    GameStatus.CHECK: "{side} to move, in check.",
    GameStatus.CHECKMATE: "Checkmate, {winner} wins.",
    GameStatus.STALEMATE: "Stalemate.",
}


def _status_line(game: GameState) -> str:
    return _STATUS_LINES[game.status].format(
        side=str(game.side_to_move).capitalize(),
        winner=str(game.winner).capitalize(),
    )


def _show(game: GameState, unicode: bool) -> None:
    print(render_board(game.board, unicode=unicode))
    print(_status_line(game))


def cmd_show(args: argparse.Namespace) -> int:
    game = GameState(args.fen)
    print(render_board(game.board, unicode=args.unicode))
    print()
    print(game.to_fen())
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    """Read coordinate moves from stdin, one per line, until EOF or ``quit``."""
    game = GameState(args.fen)
    _show(game, args.unicode)

    for line in sys.stdin:
        text = line.strip()
        if not text:
            continue
        if text in ("quit", "exit"):
            break
        result = game.apply_text(text)
        if not result.accepted:
            print(f"Rejected {text}: {result.rejection}")
            continue
        _show(game, args.unicode)
        if game.is_game_over:
            break
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="chessrules")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("play", help="Play moves such as e2-e4 read from stdin")
    sp.add_argument("--fen", type=str, default=None)
    sp.add_argument("--unicode", action="store_true", help="Unicode piece symbols")
    sp.set_defaults(fn=cmd_play)

    ss = sub.add_parser("show", help="Show the board diagram and FEN")
    ss.add_argument("--fen", type=str, default=None)
    ss.add_argument("--unicode", action="store_true", help="Unicode piece symbols")
    ss.set_defaults(fn=cmd_show)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return int(args.fn(args))
    except InvalidPositionError as exc:
        _LOGGER.error("Invalid position: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
