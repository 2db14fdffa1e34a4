from typing import Dict

import numpy as np
import pytest

from loa.core import BOARD_SIZE, WIN_VALUE, Board, Move, Piece, sq
from loa.search import AlphaBetaSearch, SearchConfig, find_best_move


def make_board(pieces: Dict[str, Piece], turn: Piece = Piece.BLACK) -> Board:
    contents = [[Piece.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for name, piece in pieces.items():
        square = sq(name)
        contents[square.row][square.col] = piece
    return Board(contents, turn)


def deterministic(depth: int) -> AlphaBetaSearch:
    return AlphaBetaSearch(SearchConfig(depth=depth, tiebreak_range=0), rng=np.random.default_rng(0))


@pytest.mark.parametrize("depth", [1, 2])
def test_finds_connecting_move_for_black(depth: int) -> None:
    board = make_board({"a1": Piece.BLACK, "b1": Piece.BLACK, "d1": Piece.BLACK, "a8": Piece.WHITE, "h8": Piece.WHITE})
    result = deterministic(depth).search(board)
    assert result.move == Move.parse("d1-c2")
    assert result.value == WIN_VALUE


def test_finds_connecting_move_for_white() -> None:
    board = make_board(
        {"a1": Piece.WHITE, "b1": Piece.WHITE, "d1": Piece.WHITE, "a8": Piece.BLACK, "h8": Piece.BLACK},
        Piece.WHITE,
    )
    result = deterministic(1).search(board)
    assert result.move == Move.parse("d1-c2")


def test_equal_scores_prefer_last_enumerated_move() -> None:
    board = Board()
    scores = []
    for move in board.legal_moves():
        child = board.copy()
        child.make_move(move)
        scores.append((move, child.heuristic(Piece.BLACK, 0)))
    best = max(score for _, score in scores)
    best_moves = [move for move, score in scores if score == best]
    assert len(best_moves) >= 2

    result = deterministic(1).search(board)
    assert result.move == best_moves[-1]
    assert result.move != best_moves[0]
    assert result.value == best


@pytest.mark.parametrize("opening", [[], ["b1-b3"]])
def test_root_maximizes_for_either_colour(opening) -> None:
    board = Board()
    for text in opening:
        board.make_move(Move.parse(text))
    side = board.turn
    scores = []
    for move in board.legal_moves():
        child = board.copy()
        child.make_move(move)
        scores.append(child.heuristic(side, 0))

    result = deterministic(1).search(board)
    assert result.value == max(scores)


def test_search_does_not_mutate_board() -> None:
    board = Board()
    board.make_move(Move.parse("b1-b3"))
    before = board.copy()
    result = deterministic(2).search(board)
    assert board == before
    assert board.moves == before.moves
    assert result.move in board.legal_moves()


def test_pruning_skips_part_of_tree() -> None:
    board = Board()
    full = 1
    for move in board.legal_moves():
        child = board.copy()
        child.make_move(move)
        full += 1 + len(child.legal_moves())
    search = AlphaBetaSearch(SearchConfig(depth=2, tiebreak_range=50), rng=np.random.default_rng(11))
    result = search.search(board)
    assert 0 < result.nodes < full


def test_seeded_search_is_reproducible() -> None:
    board = Board()
    config = SearchConfig(depth=2, tiebreak_range=50)
    first = AlphaBetaSearch(config, rng=np.random.default_rng(7)).search(board)
    second = AlphaBetaSearch(config, rng=np.random.default_rng(7)).search(board)
    assert first.move == second.move
    assert first.value == second.value


def test_terminal_position_has_no_move() -> None:
    board = make_board({"b1": Piece.BLACK, "c1": Piece.BLACK, "a5": Piece.WHITE, "h5": Piece.WHITE}, Piece.WHITE)
    result = deterministic(2).search(board)
    assert result.move is None
    assert result.nodes == 0
    assert find_best_move(board, depth=2) is None


def test_find_best_move_returns_legal_move() -> None:
    board = Board()
    move = find_best_move(board, depth=1, rng=np.random.default_rng(3))
    assert move in board.legal_moves()


def test_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        deterministic(1).search(Board(), depth=0)
