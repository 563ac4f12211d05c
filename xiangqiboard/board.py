"""The board: labels on a 9 x 10 grid, selection, clicks and moves."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from .boardstate import BoardState
from .piece import is_placeholder
from .rules import Check, ChessRule
from .piece import Side

COLUMNS = 9
ROWS = 10
POINTS = COLUMNS * ROWS

# Board width over height.
WH_RATIO = 0.90629
# Gap from the left edge to the first column, as a share of the board width.
H_RATIO = 0.07064
# Gap from the top edge to the first row, as a share of the board height.
V_RATIO = 0.06567
# Piece radius over the length of a grid side.
RL_RATIO = 0.47782

NEW_EMPTY_PREFIX = "label_newEmpty"


class Rect(NamedTuple):
    """Placement of a label on the drawn board, in pixels."""

    x: int
    y: int
    width: int
    height: int


def pos_index_to_coordinate(index: int) -> tuple[int, int]:
    """Return ``(column, row)`` of a grid position counted by rows from 0."""
    if not 0 <= index < POINTS:
        raise ValueError(f"position out of range: {index}")
    row, column = divmod(index, COLUMNS)
    return column, row


def coordinate_to_pos_index(column: int, row: int) -> int:
    """Return the grid position of ``(column, row)``."""
    return row * COLUMNS + column


class Board:
    """A Chinese chess board of named labels, one on each grid point.

    ``labels`` lists the 90 labels in row order; names starting with
    ``label`` are empty grid points, every other name is a piece.
    """

    def __init__(self, labels: Iterable[str]) -> None:
        names = list(labels)
        if len(names) != POINTS:
            raise ValueError(f"a board needs {POINTS} labels, got {len(names)}")
        self.state = BoardState(names, range(POINTS))
        self.rule = ChessRule(self)
        self.selected: str | None = None
        self.added_empty_labels: list[str] = []
        self.captured: list[str] = []
        self.side_length = 0.0
        self.radius = 0.0

    @property
    def labels(self) -> list[str]:
        return self.state.labels

    def label_at(self, column: int, row: int) -> str | None:
        """Return the label standing at the grid point, or None if there is none."""
        pos = coordinate_to_pos_index(column, row)
        for label, position in zip(self.state.labels, self.state.positions):
            if position == pos:
                return label
        return None

    def is_piece(self, column: int, row: int) -> bool:
        """Return True if a piece stands at the grid point."""
        label = self.label_at(column, row)
        return label is not None and not is_placeholder(label)

    def find_by_name(self, text: str) -> list[str]:
        """Return the labels whose names contain ``text``, ignoring case."""
        needle = text.lower()
        return [label for label in self.state.labels if needle in label.lower()]

    def index_of_label(self, label: str) -> int:
        """Return the index of ``label`` among the board's labels."""
        try:
            return self.state.labels.index(label)
        except ValueError:
            raise ValueError(f"no label named {label!r} on the board") from None

    def coordinate_of_piece(self, label: str) -> tuple[int, int]:
        """Return ``(column, row)`` of the label on the board."""
        return pos_index_to_coordinate(self.state.positions[self.index_of_label(label)])

    def geometry(self, width: int, height: int) -> dict[str, Rect]:
        """Lay the labels out on a board drawn in a ``width`` x ``height`` area.

        The board keeps its aspect ratio; pieces get squares twice the radius
        wide, empty points smaller squares centred a little off the point.
        """
        if width > height * WH_RATIO:
            width = int(height * WH_RATIO)
        else:
            height = int(width / WH_RATIO)
        self.side_length = width * (1 - 2 * H_RATIO) / 8
        self.radius = self.side_length * RL_RATIO
        side, radius = self.side_length, self.radius

        layout: dict[str, Rect] = {}
        for label, position in zip(self.state.labels, self.state.positions):
            column, row = pos_index_to_coordinate(position)
            left = width * H_RATIO + column * side
            top = height * V_RATIO + row * side
            if is_placeholder(label):
                layout[label] = Rect(
                    int(left - radius / 2), int(top - radius / 2),
                    int(radius * 1.5), int(radius * 1.5),
                )
            else:
                layout[label] = Rect(
                    int(left - radius), int(top - radius),
                    int(radius * 2), int(radius * 2),
                )
        return layout

    def select(self, label: str) -> None:
        """Mark ``label`` as the selected piece."""
        self.index_of_label(label)
        self.selected = label

    def unselect(self) -> None:
        """Clear the selection, if any."""
        self.selected = None

    def right_click(self) -> None:
        """Handle a right click on the board: drop the selection."""
        self.unselect()

    def click(self, label: str | None) -> bool:
        """Handle a left click on ``label``, or on the bare board if None.

        With nothing selected a click on a piece selects it. With a piece
        selected a click on a label tries to move the piece there; under the
        rules the move must be legal and must not leave one's own side in
        check or the two generals facing each other. Returns True if a move
        was made.
        """
        if label is None:
            self.unselect()
            return False
        if self.selected is None:
            if not is_placeholder(label):
                self.select(label)
            return False

        moving = self.selected
        target = self.coordinate_of_piece(label)
        try:
            if not self.rule.enabled:
                self.move_piece(moving, *target)
                return True
            start = self.coordinate_of_piece(moving)
            if not self.rule.check_move(moving, *start, *target):
                return False
            return self._play_checked(moving, target)
        finally:
            self.unselect()

    def _play_checked(self, moving: str, target: tuple[int, int]) -> bool:
        self.state.save()
        mover = self.rule.turn
        before = self.rule.check_flag
        self.move_piece(moving, *target)
        self.rule.swap_turn()
        self.rule.update_check_flag()
        after = self.rule.check_flag

        own_check = Check.BLACK_CHECK_RED if mover == Side.RED else Check.RED_CHECK_BLACK
        exposes = before == Check.NOT_CHECKING and after == own_check
        stays = before == own_check and after == own_check
        if exposes or stays or self.rule.is_general_and_chief_encounter():
            self.state.load()
            self.rule.swap_turn()
            return False
        return True

    def move_piece(self, label: str, column: int, row: int) -> None:
        """Move the piece ``label`` to the grid point, capturing what stands there.

        No rule is checked. A captured piece leaves the board and a new empty
        label takes the point the moving piece came from.
        """
        index = self.index_of_label(label)
        target_pos = coordinate_to_pos_index(column, row)
        if not (0 <= column < COLUMNS and 0 <= row < ROWS):
            raise ValueError(f"point off the board: ({column}, {row})")
        labels = self.state.labels
        positions = self.state.positions
        label_pos = positions[index]
        if label_pos == target_pos:
            return
        target_label = self.label_at(column, row)
        if target_label is None:
            raise ValueError(f"no label at ({column}, {row})")
        target_index = self.index_of_label(target_label)

        if not is_placeholder(target_label):
            empty = f"{NEW_EMPTY_PREFIX}{len(self.added_empty_labels)}"
            self.added_empty_labels.append(empty)
            self.captured.append(target_label)
            labels[target_index] = empty

        positions[target_index] = label_pos
        positions[index] = target_pos