"""A door password state machine and a number guessing game."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum, auto

_DOOR_ONE_FOURTH, _DOOR_ONE_FIFTH = 7, 9
_DOOR_TWO_FOURTH, _DOOR_TWO_FIFTH = 8, 1
_PREFIX = (3, 6, 5)


class PasswordState(Enum):
    """Progress through the password: how many digits have been accepted."""

    IDLE = auto()
    FIRST_DIGIT = auto()
    SECOND_DIGIT = auto()
    THIRD_DIGIT = auto()
    FOURTH_DIGIT = auto()
    OPEN_DOOR1 = auto()
    OPEN_DOOR2 = auto()
    ERROR = auto()


_PREFIX_STATES = (
    PasswordState.IDLE,
    PasswordState.FIRST_DIGIT,
    PasswordState.SECOND_DIGIT,
    PasswordState.THIRD_DIGIT,
)
_OPEN_STATES = (PasswordState.OPEN_DOOR1, PasswordState.OPEN_DOOR2)


class PasswordMachine:
    """Accepts digits one at a time; 36579 opens door 1 and 36581 opens door 2."""

    def __init__(self) -> None:
        self._state = PasswordState.IDLE
        self._fourth: int | None = None

    @property
    def state(self) -> PasswordState:
        """The current state."""
        return self._state

    @property
    def door(self) -> int | None:
        """The number of the opened door, or None while closed."""
        if self._state is PasswordState.OPEN_DOOR1:
            return 1
        if self._state is PasswordState.OPEN_DOOR2:
            return 2
        return None

    def reset(self) -> None:
        """Return to the idle state, forgetting any digits entered."""
        self._state = PasswordState.IDLE
        self._fourth = None

    def enter(self, digit: int) -> PasswordState:
        """Feed one digit and return the resulting state.

        After an error the next digit starts a new attempt.
        """
        if self._state in _OPEN_STATES:
            raise RuntimeError("door is already open; call reset() first")
        if self._state is PasswordState.ERROR:
            self.reset()

        if self._state in _PREFIX_STATES[:3]:
            position = _PREFIX_STATES.index(self._state)
            if digit == _PREFIX[position]:
                self._state = _PREFIX_STATES[position + 1]
            else:
                self._state = PasswordState.ERROR
        elif self._state is PasswordState.THIRD_DIGIT:
            if digit in (_DOOR_ONE_FOURTH, _DOOR_TWO_FOURTH):
                self._fourth = digit
                self._state = PasswordState.FOURTH_DIGIT
            else:
                self._state = PasswordState.ERROR
        elif self._state is PasswordState.FOURTH_DIGIT:
            if self._fourth == _DOOR_ONE_FOURTH and digit == _DOOR_ONE_FIFTH:
                self._state = PasswordState.OPEN_DOOR1
            elif self._fourth == _DOOR_TWO_FOURTH and digit == _DOOR_TWO_FIFTH:
                self._state = PasswordState.OPEN_DOOR2
            else:
                self._state = PasswordState.ERROR
        return self._state


class Hint(Enum):
    """Outcome of a guess."""

    TOO_LOW = "low"
    TOO_HIGH = "high"
    CORRECT = "correct"


class GuessGame:
    """Guess a secret number; a random one below 1000 is chosen if none is given."""

    def __init__(self, secret: int | None = None) -> None:
        self._secret = random.randrange(1000) if secret is None else secret
        self._attempts = 0

    @property
    def secret(self) -> int:
        """The number to be guessed."""
        return self._secret

    @property
    def attempts(self) -> int:
        """How many guesses have been made."""
        return self._attempts

    def guess(self, number: int) -> Hint:
        """Compare a guess with the secret."""
        self._attempts += 1
        if number < self._secret:
            return Hint.TOO_LOW
        if number > self._secret:
            return Hint.TOO_HIGH
        return Hint.CORRECT


_WELCOME = (
    "\nThis is a password state machine.\n"
    " Please enter digit per digit to open door 1 or door 2."
)
_PROMPTS = {
    PasswordState.IDLE: " Enter first digit: ",
    PasswordState.ERROR: " Enter first digit: ",
    PasswordState.FIRST_DIGIT: "Enter second digit: ",
    PasswordState.SECOND_DIGIT: "Enter third digit: ",
    PasswordState.THIRD_DIGIT: "Enter fourth digit: ",
    PasswordState.FOURTH_DIGIT: "Enter fifth digit: ",
}


def _read_digit(prompt: str) -> int:
    text = input(prompt)
    try:
        return int(text)
    except ValueError:
        return -1


def _play_password() -> int:
    machine = PasswordMachine()
    while True:
        if machine.state in (PasswordState.IDLE, PasswordState.ERROR):
            print(_WELCOME)
        state = machine.enter(_read_digit(_PROMPTS[machine.state]))
        if state is PasswordState.ERROR:
            print("Incorrect password. Try again.")
        elif machine.door is not None:
            print(f"Congratulations, you opened door number {machine.door}.")
            return 0


def _play_guess(secret: int | None) -> int:
    game = GuessGame(secret)
    print("I have a number between 1 and 1000. \nCan you guess my number? "
          "\nPlease type your first guess.")
    hint = game.guess(int(input()))
    while hint is not Hint.CORRECT:
        print("Incorrect number. \nWould you like to play again ( y or n)")
        if input().strip().lower() != "y":
            print("Game over")
            return 0
        print("Too low. Try again" if hint is Hint.TOO_LOW else "Too high. Try again")
        hint = game.guess(int(input("Enter your guess: ")))
    print("Excellent! You guessed the number!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Play the password machine or the guessing game on the console."""
    parser = argparse.ArgumentParser(prog="embkit-games")
    sub = parser.add_subparsers(dest="game", required=True)
    sub.add_parser("password", help="open a door by entering a password")
    guess = sub.add_parser("guess", help="guess a number below 1000")
    guess.add_argument("--secret", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        if args.game == "password":
            return _play_password()
        return _play_guess(args.secret)
    except EOFError:
        print("\nNo more input.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid number: {exc}", file=sys.stderr)
        return 2