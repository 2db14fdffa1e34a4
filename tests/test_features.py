from loa.core import Board, Move
from loa.features import BOARD_CHANNELS, build_board_tensor


def test_initial_board_tensor_counts():
    tensor = build_board_tensor(Board())

    assert tensor.shape == (BOARD_CHANNELS, 8, 8)
    assert tensor[0].sum() == 12
    assert tensor[1].sum() == 12
    assert tensor[2].sum() == 0
    # b1 is black: row 0 (bottom), column 1
    assert tensor[0, 0, 1] == 1.0
    assert tensor[1, 1, 0] == 1.0


def test_side_to_move_plane():
    board = Board()
    board.make_move(Move.parse("b1-b3"))
    tensor = build_board_tensor(board)
    assert tensor[2].sum() == 64
    assert tensor[0, 2, 1] == 1.0
    assert tensor[0, 0, 1] == 0.0
