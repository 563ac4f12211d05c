"""Piece identities derived from label names."""

from __future__ import annotations

from enum import Enum, auto


class PieceType(Enum):
    """Kind of a piece; red and black pieces of the same role are distinct kinds."""

    PAWN = auto()
    SOLDIER = auto()
    CANNON = auto()
    CHARIOT = auto()
    HORSE = auto()
    ELEPHANT = auto()
    BISHOP = auto()
    ADVISOR = auto()
    GENERAL = auto()
    CHIEF = auto()
    UNKNOWN = auto()


class Side(Enum):
    """The side a piece belongs to."""

    RED = auto()
    BLACK = auto()


class Label(Enum):
    """Kind of a board label: a piece or an empty grid point."""

    PIECE = auto()
    PLACEHOLDER = auto()


# Checked in this order; the first keyword found in the name decides the type.
_TYPE_KEYWORDS: tuple[tuple[str, PieceType], ...] = (
    ("pawn", PieceType.PAWN),
    ("soilder", PieceType.SOLDIER),
    ("cannon", PieceType.CANNON),
    ("chariot", PieceType.CHARIOT),
    ("horse", PieceType.HORSE),
    ("elephant", PieceType.ELEPHANT),
    ("bishop", PieceType.BISHOP),
    ("advisor", PieceType.ADVISOR),
    ("general", PieceType.GENERAL),
    ("chief", PieceType.CHIEF),
)


def type_of_piece(name: str) -> PieceType:
    """Return the piece type named in ``name``, ignoring case."""
    lowered = name.lower()
    return next(
        (kind for keyword, kind in _TYPE_KEYWORDS if keyword in lowered),
        PieceType.UNKNOWN,
    )


def side_of_piece(name: str) -> Side:
    """Return RED if ``name`` mentions red (any case), otherwise BLACK."""
    return Side.RED if "red" in name.lower() else Side.BLACK


def is_placeholder(label: str) -> bool:
    """Return True if the label is an empty grid point rather than a piece."""
    return label.startswith("label")


def label_kind(label: str) -> Label:
    """Return the kind of a board label."""
    return Label.PLACEHOLDER if is_placeholder(label) else Label.PIECE