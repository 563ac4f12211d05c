import pytest

from xiangqiboard.piece import Side
from xiangqiboard.rules import Check, ChessRule


class FakeBoard:
    def __init__(self, pieces):
        self.pieces = dict(pieces)  # (column, row) -> name

    def is_piece(self, column, row):
        return (column, row) in self.pieces

    def label_at(self, column, row):
        return self.pieces.get((column, row))

    def find_by_name(self, text):
        return [name for name in self.pieces.values() if text.lower() in name.lower()]

    def coordinate_of_piece(self, label):
        for pos, name in self.pieces.items():
            if name == label:
                return pos
        raise KeyError(label)


def rule_for(pieces, turn=Side.RED):
    rule = ChessRule(FakeBoard(pieces))
    if turn == Side.BLACK:
        rule.swap_turn()
    return rule


def test_defaults_and_turn_swapping():
    rule = ChessRule(FakeBoard({}))
    assert rule.enabled
    assert rule.check_flag == Check.NOT_CHECKING
    assert rule.turn == Side.RED
    rule.swap_turn()
    assert rule.turn == Side.BLACK
    rule.swap_turn()
    assert rule.turn == Side.RED


def test_enable_and_disable():
    rule = ChessRule(FakeBoard({}), False, Check.RED_CHECK_BLACK)
    assert not rule.enabled
    assert rule.check_flag == Check.RED_CHECK_BLACK
    rule.enable()
    assert rule.enabled
    rule.disable()
    assert not rule.enabled


def test_same_square_is_not_a_move():
    rule = rule_for({(0, 9): "Red_Chariot1"})
    assert not rule.check_move("Red_Chariot1", 0, 9, 0, 9)


def test_wrong_turn_rejected():
    rule = rule_for({(0, 0): "Black_Chariot1"})
    assert not rule.check_move("Black_Chariot1", 0, 0, 0, 3)
    rule.swap_turn()
    assert rule.check_move("Black_Chariot1", 0, 0, 0, 3)


def test_cannot_capture_own_piece():
    rule = rule_for({(0, 9): "Red_Chariot1", (0, 7): "Red_Horse2"})
    assert not rule.check_move("Red_Chariot1", 0, 9, 0, 7)


def test_chariot_lines_and_blocking():
    pieces = {(0, 9): "Red_Chariot1"}
    rule = rule_for(pieces)
    assert rule.check_move("Red_Chariot1", 0, 9, 0, 5)
    assert rule.check_move("Red_Chariot1", 0, 9, 3, 9)
    assert not rule.check_move("Red_Chariot1", 0, 9, 1, 8)
    rule.board.pieces[(0, 7)] = "Black_Pawn1"
    assert not rule.check_move("Red_Chariot1", 0, 9, 0, 5)
    assert rule.check_move("Red_Chariot1", 0, 9, 0, 7)


def test_cannon_needs_exactly_one_screen_to_capture():
    rule = rule_for({(1, 7): "Red_Cannon2", (1, 0): "Black_Horse2"})
    assert rule.check_move("Red_Cannon2", 1, 7, 1, 3)
    assert not rule.check_move("Red_Cannon2", 1, 7, 1, 0)
    rule.board.pieces[(1, 2)] = "Black_Cannon2"
    assert rule.check_move("Red_Cannon2", 1, 7, 1, 0)
    assert not rule.check_move("Red_Cannon2", 1, 7, 1, 1)
    rule.board.pieces[(1, 4)] = "Black_Pawn3"
    assert not rule.check_move("Red_Cannon2", 1, 7, 1, 0)


def test_horse_moves_and_hobbled_leg():
    rule = rule_for({(1, 9): "Red_Horse2"})
    assert rule.check_move("Red_Horse2", 1, 9, 2, 7)
    assert rule.check_move("Red_Horse2", 1, 9, 0, 7)
    assert rule.check_move("Red_Horse2", 1, 9, 3, 8)
    assert not rule.check_move("Red_Horse2", 1, 9, 3, 7)
    rule.board.pieces[(1, 8)] = "Red_Soilder1"
    assert not rule.check_move("Red_Horse2", 1, 9, 2, 7)
    rule.board.pieces[(2, 9)] = "Red_Bishop3"
    assert not rule.check_move("Red_Horse2", 1, 9, 3, 8)


def test_soldier_before_and_after_the_river():
    rule = rule_for({(0, 6): "Red_Soilder1", (1, 6): "Red_Soilder2", (2, 4): "Red_Soilder3"})
    assert rule.check_move("Red_Soilder1", 0, 6, 0, 5)
    assert not rule.check_move("Red_Soilder1", 0, 6, 0, 7)
    assert not rule.check_move("Red_Soilder1", 0, 6, 1, 5)
    assert not rule.check_move("Red_Soilder2", 1, 6, 1, 5)
    assert rule.check_move("Red_Soilder3", 2, 4, 3, 4)
    assert rule.check_move("Red_Soilder3", 2, 4, 2, 3)
    assert not rule.check_move("Red_Soilder3", 2, 4, 2, 5)


def test_black_pawn_moves_down_the_board():
    rule = rule_for({(0, 3): "Black_Pawn1", (4, 6): "Black_Pawn5"}, Side.BLACK)
    assert rule.check_move("Black_Pawn1", 0, 3, 0, 4)
    assert not rule.check_move("Black_Pawn1", 0, 3, 0, 2)
    assert rule.check_move("Black_Pawn5", 4, 6, 5, 6)
    assert not rule.check_move("Black_Pawn5", 4, 6, 4, 5)


def test_elephant_stays_on_its_side_and_eye_can_be_blocked():
    rule = rule_for({(2, 0): "Black_Elephant3", (2, 4): "Black_Elephant7"}, Side.BLACK)
    assert rule.check_move("Black_Elephant3", 2, 0, 4, 2)
    assert not rule.check_move("Black_Elephant3", 2, 0, 3, 1)
    assert not rule.check_move("Black_Elephant7", 2, 4, 4, 6)
    rule.board.pieces[(3, 1)] = "Black_Advisor4"
    assert not rule.check_move("Black_Elephant3", 2, 0, 4, 2)


def test_bishop_stays_on_red_side():
    rule = rule_for({(2, 9): "Red_Bishop3", (2, 5): "Red_Bishop7"})
    assert rule.check_move("Red_Bishop3", 2, 9, 4, 7)
    assert rule.check_move("Red_Bishop3", 2, 9, 0, 7)
    assert not rule.check_move("Red_Bishop7", 2, 5, 4, 3)
    rule.board.pieces[(3, 8)] = "Red_Advisor4"
    assert not rule.check_move("Red_Bishop3", 2, 9, 4, 7)


def test_advisors_move_diagonally_in_palace():
    rule = rule_for({(3, 9): "Red_Advisor4", (3, 0): "Black_Advisor4"})
    assert rule.check_move("Red_Advisor4", 3, 9, 4, 8)
    assert not rule.check_move("Red_Advisor4", 3, 9, 3, 8)
    assert not rule.check_move("Red_Advisor4", 3, 9, 2, 8)
    rule.swap_turn()
    assert rule.check_move("Black_Advisor4", 3, 0, 4, 1)
    assert not rule.check_move("Black_Advisor4", 3, 0, 4, 0)


def test_general_and_chief_step_within_palace():
    rule = rule_for({(4, 9): "Red_Chief", (4, 0): "Black_General"})
    assert rule.check_move("Red_Chief", 4, 9, 4, 8)
    assert rule.check_move("Red_Chief", 4, 9, 3, 9)
    assert not rule.check_move("Red_Chief", 4, 9, 4, 7)
    assert not rule.check_move("Red_Chief", 4, 9, 3, 8)
    rule.swap_turn()
    assert rule.check_move("Black_General", 4, 0, 3, 0)
    assert not rule.check_move("Black_General", 4, 0, 4, 2)


def test_encounter_of_general_and_chief():
    rule = rule_for({(4, 0): "Black_General", (4, 9): "Red_Chief"})
    assert rule.is_general_and_chief_encounter()
    rule.board.pieces[(4, 5)] = "Red_Soilder5"
    assert not rule.is_general_and_chief_encounter()
    del rule.board.pieces[(4, 5)]
    del rule.board.pieces[(4, 0)]
    rule.board.pieces[(3, 0)] = "Black_General"
    assert not rule.is_general_and_chief_encounter()


def test_update_check_flag_red_chariot_checks_general():
    rule = rule_for({
        (4, 0): "Black_General",
        (4, 9): "Red_Chief",
        (4, 8): "Red_Advisor4",
        (0, 0): "Red_Chariot1",
    })
    rule.update_check_flag()
    assert rule.check_flag == Check.RED_CHECK_BLACK
    assert rule.red_check_pieces == ["Red_Chariot1"]
    assert rule.black_check_pieces == []
    del rule.board.pieces[(0, 0)]
    rule.update_check_flag()
    assert rule.check_flag == Check.NOT_CHECKING
    assert rule.red_check_pieces == []


def test_update_check_flag_cannon_with_screen():
    rule = rule_for({
        (4, 0): "Black_General",
        (4, 9): "Red_Chief",
        (4, 8): "Red_Advisor4",
        (4, 5): "Red_Cannon2",
        (4, 3): "Black_Pawn5",
    })
    rule.update_check_flag()
    assert rule.check_flag == Check.RED_CHECK_BLACK
    assert rule.red_check_pieces == ["Red_Cannon2"]


def test_update_check_flag_black_check_takes_precedence():
    rule = rule_for({
        (4, 0): "Black_General",
        (4, 9): "Red_Chief",
        (4, 8): "Red_Advisor4",
        (0, 0): "Red_Chariot1",
        (0, 9): "Black_Chariot1",
    })
    rule.update_check_flag()
    assert rule.check_flag == Check.BLACK_CHECK_RED
    assert rule.black_check_pieces == ["Black_Chariot1"]
    assert rule.red_check_pieces == ["Red_Chariot1"]


def test_update_check_flag_without_general_raises():
    rule = rule_for({(4, 9): "Red_Chief"})
    with pytest.raises(LookupError):
        rule.update_check_flag()