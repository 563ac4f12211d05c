"""Board labels and positions with a single saved snapshot."""

from __future__ import annotations

from collections.abc import Iterable


class BoardState:
    """Labels on the board and the grid position of each, with undo of one step.

    ``labels[i]`` stands at grid position ``positions[i]`` (row * 9 + column).
    The state is saved once on creation.
    """

    def __init__(self, labels: Iterable[str], positions: Iterable[int]) -> None:
        self.labels: list[str] = list(labels)
        self.positions: list[int] = list(positions)
        if len(self.labels) != len(self.positions):
            raise ValueError("labels and positions must have the same length")
        self._saved_labels: list[str] = []
        self._saved_positions: list[int] = []
        self.save()

    def save(self) -> None:
        """Remember the current labels and positions."""
        self._saved_labels = list(self.labels)
        self._saved_positions = list(self.positions)

    def load(self) -> None:
        """Restore the labels and positions last saved."""
        self.labels = list(self._saved_labels)
        self.positions = list(self._saved_positions)