import numpy as np

from loa.core import Board, Piece
from loa.evaluation import EvaluationResult, describe_winner, evaluate_players, play_game
from loa.players import MachinePlayer, RandomPlayer
from loa.search import SearchConfig


def test_random_player_picks_legal_move():
    board = Board()
    player = RandomPlayer(np.random.default_rng(0))
    assert player.choose_move(board) in board.legal_moves()


def test_play_game_respects_move_limit():
    record = play_game(
        RandomPlayer(np.random.default_rng(0)),
        RandomPlayer(np.random.default_rng(1)),
        move_limit=5,
    )
    assert 0 < record.length <= 10
    assert record.winner in (Piece.BLACK, Piece.WHITE, Piece.EMPTY)


def test_play_game_replays_on_fresh_board():
    board = Board()
    record = play_game(
        MachinePlayer(SearchConfig(depth=1), rng=np.random.default_rng(2)),
        RandomPlayer(np.random.default_rng(3)),
        board=board,
        move_limit=3,
    )
    replay = Board()
    for move in record.moves:
        replay.make_move(move)
    assert replay == board
    assert record.moves == board.moves


def test_evaluate_random_vs_random_small():
    result = evaluate_players(
        RandomPlayer(),
        RandomPlayer(),
        episodes=2,
        move_limit=5,
        seed=0,
    )
    assert result.games_played == 2
    assert result.black_wins + result.white_wins + result.draws == 2
    assert result.average_length > 0


def test_winrates():
    result = EvaluationResult(games_played=4, black_wins=3, white_wins=1, draws=0, average_length=20.0)
    assert result.winrate_black() == 0.75
    assert result.winrate_white() == 0.25


def test_describe_winner_labels():
    assert describe_winner(None) == "undecided"
    assert describe_winner(Piece.EMPTY) == "tie"
    assert describe_winner(Piece.BLACK) == "Black"
