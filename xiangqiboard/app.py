"""Starting position and a text front end for playing on the board."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .board import COLUMNS, Board
from .piece import PieceType, Side, is_placeholder, side_of_piece, type_of_piece

# The starting position by rows, top (black) to bottom (red); None marks an empty point.
_START: tuple[tuple[str | None, ...], ...] = (
    ("Black_Chariot1", "Black_Horse2", "Black_Elephant3", "Black_Advisor4", "Black_General",
     "Black_Advisor6", "Black_Elephant7", "Black_Horse8", "Black_Chariot9"),
    (None,) * 9,
    (None, "Black_Cannon2", None, None, None, None, None, "Black_Cannon8", None),
    ("Black_Pawn1", None, "Black_Pawn3", None, "Black_Pawn5", None, "Black_Pawn7", None, "Black_Pawn9"),
    (None,) * 9,
    (None,) * 9,
    ("Red_Soilder9", None, "Red_Soilder7", None, "Red_Soilder5", None, "Red_Soilder3", None, "Red_Soilder1"),
    (None, "Red_Cannon8", None, None, None, None, None, "Red_Cannon2", None),
    (None,) * 9,
    ("Red_Chariot9", "Red_Horse8", "Red_Bishop7", "Red_Advisor6", "Red_Chief",
     "Red_Advisor4", "Red_Bishop3", "Red_Horse2", "Red_Chariot1"),
)

_SYMBOLS = {
    PieceType.PAWN: "p",
    PieceType.SOLDIER: "p",
    PieceType.CANNON: "c",
    PieceType.CHARIOT: "r",
    PieceType.HORSE: "h",
    PieceType.ELEPHANT: "e",
    PieceType.BISHOP: "e",
    PieceType.ADVISOR: "a",
    PieceType.GENERAL: "k",
    PieceType.CHIEF: "k",
    PieceType.UNKNOWN: "?",
}


def initial_labels() -> list[str]:
    """Return the 90 label names of the starting position in row order.

    Empty points are named ``label_1``, ``label_2`` and so on, numbered in
    the same row order.
    """
    labels: list[str] = []
    empties = 0
    for row in _START:
        for name in row:
            if name is None:
                empties += 1
                labels.append(f"label_{empties}")
            else:
                labels.append(name)
    return labels


def _symbol(label: str | None) -> str:
    if label is None or is_placeholder(label):
        return "."
    symbol = _SYMBOLS[type_of_piece(label)]
    return symbol.upper() if side_of_piece(label) == Side.RED else symbol


def render(board: Board) -> str:
    """Draw the board as ten lines of nine characters.

    Red pieces are upper case, black pieces lower case, empty points dots.
    """
    rows = len(board.labels) // COLUMNS
    return "\n".join(
        "".join(_symbol(board.label_at(column, row)) for column in range(COLUMNS))
        for row in range(rows)
    )


def _show(board: Board) -> None:
    print(render(board))
    print(f"{board.rule.turn.name.capitalize()} to move")
    if board.selected is not None:
        print(f"selected: {board.selected}")


def main(argv: Sequence[str] | None = None) -> int:
    """Play on the board from standard input.

    Each line is ``COLUMN ROW`` for a left click on that point, ``right``
    to drop the selection, or ``quit``.
    """
    parser = argparse.ArgumentParser(prog="xiangqiboard", description="Play Chinese chess in the terminal.")
    parser.add_argument("--no-rules", action="store_true", help="move pieces freely, without rules")
    args = parser.parse_args(argv)

    board = Board(initial_labels())
    if args.no_rules:
        board.rule.disable()
    _show(board)

    for line in sys.stdin:
        words = line.split()
        if not words:
            continue
        command = words[0].lower()
        if command in ("q", "quit", "exit"):
            break
        if command == "right":
            board.right_click()
        elif len(words) == 2:
            try:
                column, row = (int(word) for word in words)
            except ValueError:
                print(f"invalid input: {line.strip()}", file=sys.stderr)
                continue
            board.click(board.label_at(column, row))
        else:
            print(f"invalid input: {line.strip()}", file=sys.stderr)
            continue
        _show(board)
    return 0