"""Line-of-sight and check detection on a board of named pieces."""

from __future__ import annotations

from typing import NamedTuple, Protocol


class BoardView(Protocol):
    """What the check helpers need to know about a board."""

    def is_piece(self, column: int, row: int) -> bool: ...

    def label_at(self, column: int, row: int) -> str | None: ...

    def find_by_name(self, text: str) -> list[str]: ...

    def coordinate_of_piece(self, label: str) -> tuple[int, int]: ...


class Checkers(NamedTuple):
    """Pieces giving check: red ones attack the general, black ones the chief."""

    red: list[str]
    black: list[str]


def _between(start: int, target: int) -> range:
    """Return the coordinates strictly between start and target, walking from start."""
    step = 1 if start < target else -1
    return range(start + step, target, step)


def blocking_pieces(
    board: BoardView,
    start_column: int,
    start_row: int,
    target_column: int,
    target_row: int,
) -> list[str]:
    """Return the pieces strictly between two points on one row or column.

    The pieces are listed in order from the start point towards the target.
    Raises ValueError if the points are not on a common row or column.
    """
    if start_column == target_column:
        cells = [(start_column, row) for row in _between(start_row, target_row)]
    elif start_row == target_row:
        cells = [(column, start_row) for column in _between(start_column, target_column)]
    else:
        raise ValueError("start and target are not on the same row or column")
    return [board.label_at(column, row) for column, row in cells if board.is_piece(column, row)]


def _single(board: BoardView, name: str) -> str:
    found = board.find_by_name(name)
    if not found:
        raise LookupError(f"no {name} on the board")
    return found[0]


def _in_line(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[0] == b[0] or a[1] == b[1]


def _rook_line_attackers(board: BoardView, name: str, king: tuple[int, int], screens: int) -> list[str]:
    attackers = []
    for label in board.find_by_name(name):
        pos = board.coordinate_of_piece(label)
        if _in_line(pos, king) and len(blocking_pieces(board, *pos, *king)) == screens:
            attackers.append(label)
    return attackers


def _horse_attackers(board: BoardView, name: str, king: tuple[int, int]) -> list[str]:
    attackers = []
    for label in board.find_by_name(name):
        column, row = board.coordinate_of_piece(label)
        col_diff = abs(king[0] - column)
        row_diff = abs(king[1] - row)
        if col_diff == 2 and row_diff == 1:
            leg = ((column + king[0]) // 2, row)
        elif col_diff == 1 and row_diff == 2:
            leg = (column, (row + king[1]) // 2)
        else:
            continue
        if not board.is_piece(*leg):
            attackers.append(label)
    return attackers


def _foot_attackers(board: BoardView, name: str, king: tuple[int, int], forward: int) -> list[str]:
    attackers = []
    for label in board.find_by_name(name):
        column, row = board.coordinate_of_piece(label)
        if (column == king[0] and row - king[1] == forward) or (
            row == king[1] and abs(column - king[0]) == 1
        ):
            attackers.append(label)
    return attackers


def checking_pieces(board: BoardView) -> Checkers:
    """Return the pieces of each side that currently give check.

    Raises LookupError if the general or the chief is missing.
    """
    general = board.coordinate_of_piece(_single(board, "General"))
    chief = board.coordinate_of_piece(_single(board, "Chief"))

    red = [
        *_foot_attackers(board, "Soilder", general, 1),
        *_rook_line_attackers(board, "Red_Chariot", general, 0),
        *_rook_line_attackers(board, "Red_Cannon", general, 1),
        *_horse_attackers(board, "Red_Horse", general),
    ]
    black = [
        *_foot_attackers(board, "Pawn", chief, -1),
        *_rook_line_attackers(board, "Black_Chariot", chief, 0),
        *_rook_line_attackers(board, "Black_Cannon", chief, 1),
        *_horse_attackers(board, "Black_Horse", chief),
    ]
    return Checkers(red, black)


def generals_face(board: BoardView) -> bool:
    """Return True if the general and the chief see each other with nothing between."""
    general = board.coordinate_of_piece(_single(board, "General"))
    chief = board.coordinate_of_piece(_single(board, "Chief"))
    if not _in_line(chief, general):
        return False
    return not blocking_pieces(board, *chief, *general)