import pytest

from treasurehunt.game import (
    IMG_SIZE,
    XK_ESCAPE,
    XK_RIGHT,
    XK_UP,
    Direction,
    Game,
    key_to_direction,
    move_message,
)

SIMPLE = ["11111", "1PCE1", "11111"]


def test_key_to_direction_letters_and_arrows():
    assert key_to_direction("w") is Direction.UP
    assert key_to_direction(ord("d")) is Direction.RIGHT
    assert key_to_direction(XK_UP) is Direction.UP
    assert key_to_direction(XK_RIGHT) is Direction.RIGHT


def test_key_to_direction_unknown():
    assert key_to_direction("x") is None
    assert key_to_direction(XK_ESCAPE) is None


def test_move_message_format():
    assert move_message(3) == "\033[H\033[2J\033[38;5;217mMoves counter : 3\n\033[0m"


def test_initial_state():
    game = Game(SIMPLE)
    assert game.player == (1, 1)
    assert game.collectibles == 1
    assert game.steps == 0
    assert game.running is True


def test_last_player_is_used():
    game = Game(["1111", "1PP1", "1111"])
    assert game.player == (1, 2)


def test_window_size():
    game = Game(SIMPLE)
    assert game.window_size() == (len(SIMPLE[0]) * IMG_SIZE, len(SIMPLE) * IMG_SIZE)


def test_wall_blocks():
    game = Game(SIMPLE)
    assert game.move(Direction.UP) is False
    assert game.steps == 0
    assert game.player == (1, 1)


def test_check_next_tile():
    game = Game(SIMPLE)
    assert game.check_next_tile(Direction.RIGHT, "C") is True
    assert game.check_next_tile(Direction.LEFT, "1") is True
    assert game.check_next_tile(Direction.RIGHT, "E") is False


def test_collect_and_win(capsys):
    game = Game(SIMPLE)
    assert game.move(Direction.RIGHT) is True
    assert game.collected == 1
    assert game.can_exit is True
    assert game.rows[1] == "10PE1"
    assert "Moves counter : 1" in capsys.readouterr().out
    assert game.move(Direction.RIGHT) is True
    assert game.won is True
    assert game.running is False
    assert game.steps == 2


def test_locked_exit_blocks():
    game = Game(["111111", "1PEC01", "111111"])
    assert game.move(Direction.RIGHT) is False
    assert game.player == (1, 1)
    assert game.steps == 0


def test_handle_key_moves_and_escape():
    game = Game(SIMPLE)
    game.handle_key(XK_RIGHT)
    assert game.player == (1, 2)
    game.handle_key(XK_ESCAPE)
    assert game.running is False
    assert game.won is False


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        Game([])