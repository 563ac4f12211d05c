"""Recording of moves in traditional Chinese chess notation."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .piece import Side, side_of_piece

_NUMS = ("九", "八", "七", "六", "五", "四", "三", "二", "一")

HORIZONTAL = "平"
FORWARD = "进"
BACKWARD = "退"


def column_to_string(column: int, is_red: bool) -> str:
    """Return the file numeral for a board column as seen by the given side."""
    if not 0 <= column <= 8:
        raise ValueError(f"column out of range: {column}")
    return _NUMS[column] if is_red else _NUMS[8 - column]


def direction(from_row: int, to_row: int, is_red: bool) -> str:
    """Return the direction word of a move; red plays from the bottom rows."""
    if from_row == to_row:
        return HORIZONTAL
    advancing = to_row < from_row if is_red else to_row > from_row
    return FORWARD if advancing else BACKWARD


@dataclass(frozen=True)
class Move:
    """A single move, or a move loaded back from its written notation."""

    piece: str = ""
    from_column: int = 0
    from_row: int = 0
    to_column: int = 0
    to_row: int = 0
    record: str | None = None

    @classmethod
    def from_record(cls, text: str) -> Move:
        """Build a move that carries only its written notation."""
        return cls(record=text)

    def notation(self) -> str:
        """Return the move written as piece, file, direction and file or steps."""
        if self.record is not None:
            return self.record
        is_red = side_of_piece(self.piece) == Side.RED
        way = direction(self.from_row, self.to_row, is_red)
        if way == HORIZONTAL:
            tail = column_to_string(self.to_column, is_red)
        else:
            tail = str(abs(self.from_row - self.to_row))
        return f"{self.piece}{column_to_string(self.from_column, is_red)}{way}{tail}"

    def __str__(self) -> str:
        return self.notation()


class GameRecorder:
    """History of the moves of a game."""

    def __init__(self) -> None:
        self._history: list[Move] = []

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def record_move(self, move: Move) -> None:
        """Append a move to the history."""
        self._history.append(move)

    def record(self) -> str:
        """Return the whole history, each move followed by a space."""
        return "".join(f"{move.notation()} " for move in self._history)

    def load_record(self, record: str) -> None:
        """Replace the history with the space-separated moves in ``record``."""
        self._history = [Move.from_record(text) for text in record.split(" ") if text]

    def undo_last_move(self) -> None:
        """Drop the last move, if any."""
        if self._history:
            self._history.pop()

    def save_to_file(self, filename: str | os.PathLike[str]) -> None:
        """Write the record to ``filename``; raises OSError on failure."""
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(self.record())

    def load_from_file(self, filename: str | os.PathLike[str]) -> None:
        """Replace the history with the record read from ``filename``."""
        with open(filename, encoding="utf-8") as handle:
            self.load_record(handle.read())