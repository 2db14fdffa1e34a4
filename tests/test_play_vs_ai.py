import json
from pathlib import Path

from loa.core import Piece

from scripts.play_vs_ai import describe_winner, replay_logged_game


def create_sample_log(path: Path) -> None:
    moves = [
        {"move_index": 0, "actor": "human", "side": "Black", "move": "b1-b3", "capture": False},
        {"move_index": 1, "actor": "ai", "side": "White", "move": "a2-c2", "capture": False},
    ]
    log = {"metadata": {}, "moves": moves}
    path.write_text(json.dumps(log))


def test_replay_logged_game(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path)
    summary = replay_logged_game(log_path, verbose=False)
    assert summary["moves"] == 2
    assert summary["result"] == "undecided"
    board = summary["board"]
    assert board[2][1] == int(Piece.BLACK)
    assert board[1][2] == int(Piece.WHITE)
    assert board[0][1] == int(Piece.EMPTY)


def test_replay_honours_logged_move_limit(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path)
    data = json.loads(log_path.read_text())
    data["metadata"]["move_limit"] = 1
    log_path.write_text(json.dumps(data))
    assert replay_logged_game(log_path, verbose=False)["result"] == "tie"


def test_describe_winner():
    assert describe_winner(None) == "undecided"
    assert describe_winner(Piece.EMPTY) == "tie"
    assert describe_winner(Piece.WHITE) == "White"
