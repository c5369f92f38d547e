import io

import pytest

from embkit.games import GuessGame, Hint, PasswordMachine, PasswordState, main


def _feed(machine, digits):
    state = machine.state
    for digit in digits:
        state = machine.enter(digit)
    return state


def test_machine_starts_idle():
    machine = PasswordMachine()
    assert machine.state is PasswordState.IDLE
    assert machine.door is None


def test_first_password_opens_door_one():
    machine = PasswordMachine()
    assert _feed(machine, [3, 6, 5, 7, 9]) is PasswordState.OPEN_DOOR1
    assert machine.door == 1


def test_second_password_opens_door_two():
    machine = PasswordMachine()
    assert _feed(machine, [3, 6, 5, 8, 1]) is PasswordState.OPEN_DOOR2
    assert machine.door == 2


def test_progress_states():
    machine = PasswordMachine()
    assert machine.enter(3) is PasswordState.FIRST_DIGIT
    assert machine.enter(6) is PasswordState.SECOND_DIGIT
    assert machine.enter(5) is PasswordState.THIRD_DIGIT
    assert machine.enter(7) is PasswordState.FOURTH_DIGIT


@pytest.mark.parametrize(
    "digits",
    [[4], [3, 7], [3, 6, 4], [3, 6, 5, 6], [3, 6, 5, 7, 1], [3, 6, 5, 8, 9]],
)
def test_wrong_digit_gives_error(digits):
    machine = PasswordMachine()
    assert _feed(machine, digits) is PasswordState.ERROR
    assert machine.door is None


def test_error_restarts_attempt():
    machine = PasswordMachine()
    _feed(machine, [3, 1])
    assert machine.enter(3) is PasswordState.FIRST_DIGIT
    assert _feed(machine, [6, 5, 8, 1]) is PasswordState.OPEN_DOOR2


def test_open_door_rejects_more_digits_until_reset():
    machine = PasswordMachine()
    _feed(machine, [3, 6, 5, 7, 9])
    with pytest.raises(RuntimeError):
        machine.enter(3)
    machine.reset()
    assert machine.state is PasswordState.IDLE


def test_guess_hints():
    game = GuessGame(500)
    assert game.guess(100) is Hint.TOO_LOW
    assert game.guess(900) is Hint.TOO_HIGH
    assert game.guess(500) is Hint.CORRECT
    assert game.attempts == 3


def test_random_secret_in_range():
    for _ in range(50):
        assert 0 <= GuessGame().secret < 1000


def test_main_password_door_one(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n6\n5\n7\n9\n"))
    assert main(["password"]) == 0
    assert "Congratulations, you opened door number 1." in capsys.readouterr().out


def test_main_password_retry(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n6\n5\n8\n1\n"))
    assert main(["password"]) == 0
    out = capsys.readouterr().out
    assert "Incorrect password. Try again." in out
    assert "Congratulations, you opened door number 2." in out


def test_main_password_out_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["password"]) == 1


def test_main_guess_eventually_correct(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\ny\n800\ny\n42\n"))
    assert main(["guess", "--secret", "42"]) == 0
    out = capsys.readouterr().out
    assert "Too low. Try again" in out
    assert "Too high. Try again" in out
    assert "Excellent! You guessed the number!" in out


def test_main_guess_give_up(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\nn\n"))
    assert main(["guess", "--secret", "42"]) == 0
    assert "Game over" in capsys.readouterr().out


def test_main_guess_invalid_number(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main(["guess", "--secret", "42"]) == 2