# xiangqiboard

A model of a Chinese chess (xiangqi) board: the 9×10 grid of pieces and
empty points, move legality for each piece, check and "flying general"
detection, a small game recorder using traditional notation, and a text
front end for playing in the terminal.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
xiangqiboard
```

prints the board in its starting position and whose turn it is, then reads
commands from standard input, one per line:

- `COLUMN ROW` — a left click on that point: selects a piece, or moves the
  selected piece there;
- `right` — a right click: drops the selection;
- `q`, `quit` or `exit` — stops.

After each command the board is printed again, with the selected piece if
there is one. Red pieces are shown in upper case, black pieces in lower case,
empty points as dots (`k` general, `a` advisor, `e` elephant, `h` horse,
`r` chariot, `c` cannon, `p` pawn).

```
xiangqiboard --no-rules
```

lets pieces be moved anywhere, without turns or rules.

## Using the library

```python
from xiangqiboard.app import initial_labels, render
from xiangqiboard.board import Board

board = Board(initial_labels())
print(render(board))

cannon = board.label_at(1, 7)            # "Red_Cannon8"
board.click(cannon)                      # select it
board.click(board.label_at(4, 7))        # move it to the centre file; returns True
print(render(board))
```

The board is addressed by `(column, row)`, columns 0–8 from left to right
and rows 0–9 from top (black's side) to bottom (red's side). Every point
holds a named label: names starting with `label` are empty points, any
other name is a piece, and its name decides its side (`Red` in the name
means red) and its type. Red moves first.

The modules:

- `xiangqiboard.piece` — `PieceType`, `Side`, `Label`, `type_of_piece`,
  `side_of_piece`, `is_placeholder`, `label_kind`.
- `xiangqiboard.boardstate` — `BoardState`: labels and their grid positions,
  with `save` and `load` of one snapshot.
- `xiangqiboard.board` — `Board`, with `label_at`, `is_piece`,
  `find_by_name`, `index_of_label`, `coordinate_of_piece`, `select`,
  `unselect`, `click`, `right_click`, `move_piece`, and `geometry`, which
  returns the pixel rectangle of every label for a board drawn in an area of
  a given size; also `pos_index_to_coordinate` and `coordinate_to_pos_index`.
- `xiangqiboard.rules` — `ChessRule` and `Check`: move legality
  (`check_move`), whose turn it is (`turn`, `swap_turn`), `enable` and
  `disable`, and `update_check_flag` for which side gives check.
- `xiangqiboard.checks` — `blocking_pieces`, `checking_pieces`,
  `generals_face`.
- `xiangqiboard.recorder` — `GameRecorder` and `Move`. A move's `notation()`
  is the piece's label name followed by file, direction and file or steps,
  e.g. `Move("Red_Cannon8", 1, 7, 4, 7).notation()` gives `Red_Cannon8八平五`.
  `record`, `load_record`, `undo_last_move`, `save_to_file` and
  `load_from_file` (UTF-8; file errors raise `OSError`).
- `xiangqiboard.app` — `initial_labels`, `render` and `main`.

When the rules are enabled, a click on a destination only moves the selected
piece if the move is legal for that piece, it is that side's turn, and the
move does not leave one's own general in check or facing the other general;
otherwise the board is restored and the selection cleared.

## What it does not do

- There is no graphical window. `Board.geometry` computes where each label
  would go, but nothing draws it; the only front end is the text one above.
- Checkmate, stalemate and the end of a game are not detected; play goes on
  until you quit.
- Moves made on a `Board` are not recorded automatically; a `GameRecorder`
  is filled only by calling `record_move`. Records loaded back from text keep
  each move as its written notation and cannot be replayed onto a board.