"""Move legality, turn keeping and check detection for Chinese chess."""

from __future__ import annotations

from enum import Enum, auto

from .checks import BoardView, blocking_pieces, checking_pieces, generals_face
from .piece import PieceType, Side, side_of_piece, type_of_piece

# Columns on which a pawn or soldier still on its own side may not advance.
_BLOCKED_FORDING_COLUMNS = frozenset({1, 3, 5, 7})


class Check(Enum):
    """Which side, if any, is giving check."""

    RED_CHECK_BLACK = auto()
    BLACK_CHECK_RED = auto()
    NOT_CHECKING = auto()


def _on_board(column: int, row: int) -> bool:
    return 0 <= column <= 8 and 0 <= row <= 9


def _in_box(column: int, row: int, columns: range, rows: range) -> bool:
    return column in columns and row in rows


def _foot_move(
    start_column: int,
    start_row: int,
    target_column: int,
    target_row: int,
    river_rows: range,
    forward: int,
) -> bool:
    if start_row in river_rows:
        if start_column in _BLOCKED_FORDING_COLUMNS:
            return False
        return target_column == start_column and start_row + forward == target_row
    if start_column == target_column:
        return start_row + forward == target_row
    if start_row == target_row:
        return abs(start_column - target_column) == 1
    return False


class ChessRule:
    """Rules of the game for one board: whose turn it is and who is in check."""

    def __init__(
        self,
        board: BoardView,
        enabled: bool = True,
        check_flag: Check = Check.NOT_CHECKING,
    ) -> None:
        self.board = board
        self.enabled = enabled
        self.turn = Side.RED
        self.check_flag = check_flag
        self.red_check_pieces: list[str] = []
        self.black_check_pieces: list[str] = []

    def enable(self) -> None:
        """Apply the rules to the game."""
        self.enabled = True

    def disable(self) -> None:
        """Stop applying the rules to the game."""
        self.enabled = False

    def swap_turn(self) -> None:
        """Hand the turn to the other side."""
        self.turn = Side.BLACK if self.turn == Side.RED else Side.RED

    def check_move(
        self,
        label: str,
        start_column: int,
        start_row: int,
        target_column: int,
        target_row: int,
    ) -> bool:
        """Return True if moving the piece ``label`` complies with its movement rule.

        Red plays from the bottom rows (7 to 9), black from the top (0 to 2).
        Whether the move leaves one's own general in check is not judged here.
        """
        if start_column == target_column and start_row == target_row:
            return False
        side = side_of_piece(label)
        occupied = self.board.is_piece(target_column, target_row)
        if self.turn != side:
            return False
        if occupied:
            target = self.board.label_at(target_column, target_row)
            if target is not None and side_of_piece(target) == side:
                return False
        if not (_on_board(start_column, start_row) and _on_board(target_column, target_row)):
            # Points off the board are not judged and pass.
            return True

        kind = type_of_piece(label)
        sc, sr, tc, tr = start_column, start_row, target_column, target_row
        if kind == PieceType.PAWN:
            return _foot_move(sc, sr, tc, tr, range(3, 5), 1)
        if kind == PieceType.SOLDIER:
            return _foot_move(sc, sr, tc, tr, range(5, 7), -1)
        if kind == PieceType.CANNON:
            return self._cannon_move(sc, sr, tc, tr, occupied)
        if kind == PieceType.CHARIOT:
            if sc != tc and sr != tr:
                return False
            return not blocking_pieces(self.board, sc, sr, tc, tr)
        if kind == PieceType.HORSE:
            return self._horse_move(sc, sr, tc, tr)
        if kind == PieceType.ELEPHANT:
            return self._elephant_move(sc, sr, tc, tr, range(0, 5))
        if kind == PieceType.BISHOP:
            return self._elephant_move(sc, sr, tc, tr, range(5, 10))
        if kind == PieceType.ADVISOR:
            rows = range(7, 10) if side == Side.RED else range(0, 3)
            if not (_in_box(sc, sr, range(3, 6), rows) and _in_box(tc, tr, range(3, 6), rows)):
                return False
            return abs(tc - sc) == 1 and abs(tr - sr) == 1
        if kind == PieceType.GENERAL:
            return self._palace_step(sc, sr, tc, tr, range(0, 3))
        if kind == PieceType.CHIEF:
            return self._palace_step(sc, sr, tc, tr, range(7, 10))
        return True

    def _cannon_move(self, sc: int, sr: int, tc: int, tr: int, occupied: bool) -> bool:
        if sc != tc and sr != tr:
            return False
        screens = blocking_pieces(self.board, sc, sr, tc, tr)
        if not screens and not occupied:
            return True
        return len(screens) == 1 and occupied

    def _horse_move(self, sc: int, sr: int, tc: int, tr: int) -> bool:
        col_diff = abs(tc - sc)
        row_diff = abs(tr - sr)
        if col_diff == 2 and row_diff == 1:
            return not self.board.is_piece((sc + tc) // 2, sr)
        if col_diff == 1 and row_diff == 2:
            return not self.board.is_piece(sc, (sr + tr) // 2)
        return False

    def _elephant_move(self, sc: int, sr: int, tc: int, tr: int, rows: range) -> bool:
        if sr not in rows or tr not in rows:
            return False
        if abs(tc - sc) != 2 or abs(tr - sr) != 2:
            return False
        return not self.board.is_piece((sc + tc) // 2, (sr + tr) // 2)

    @staticmethod
    def _palace_step(sc: int, sr: int, tc: int, tr: int, rows: range) -> bool:
        columns = range(3, 6)
        if not (_in_box(sc, sr, columns, rows) and _in_box(tc, tr, columns, rows)):
            return False
        return abs(sc - tc) + abs(sr - tr) == 1

    def is_general_and_chief_encounter(self) -> bool:
        """Return True if the general and the chief face each other openly."""
        return generals_face(self.board)

    def update_check_flag(self) -> None:
        """Recompute which side gives check from the current board."""
        checkers = checking_pieces(self.board)
        self.red_check_pieces = list(checkers.red)
        self.black_check_pieces = list(checkers.black)
        if self.black_check_pieces:
            self.check_flag = Check.BLACK_CHECK_RED
        elif self.red_check_pieces:
            self.check_flag = Check.RED_CHECK_BLACK
        else:
            self.check_flag = Check.NOT_CHECKING