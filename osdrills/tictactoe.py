"""Tic-tac-toe against a computer that follows a fixed priority sequence."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator

EMPTY = "_"
COMPUTER = "X"
PLAYER = "O"

DIGITS = "123456789"

COMPUTER_WIN_MESSAGE = (
    "\n\n\033[0;31mWINNER WINNER CHICKEN DINNER!\nComputer won!\033[0m\n\n"
    "MOON TRANSFER WILL START IN 3... 2... 1...\n"
)
PLAYER_WIN_MESSAGE = "\n\n\033[0;32mHuman kind dignity is saved!\nYou won!\033[0m\n\n"
DRAW_MESSAGE = "\n\n\033[0;33mDRAW!\033[0m\n\nEARTH IS STILL YOURS... (for now)\n"
GOODBYE_MESSAGE = "Unexpected behavior - GOODBYE"

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class InvalidSequenceError(ValueError):
    """Raised when the computer's move sequence is not a permutation of 1-9."""


def validate_input(text: str) -> None:
    """Check that ``text`` holds each digit 1-9 exactly once."""
    seen: set[str] = set()
    for char in text:
        if char not in DIGITS:
            raise InvalidSequenceError(
                "Invalid input - input should be between 1 and 9\n"
                f"got: {char}, ascii: {ord(char)}"
            )
        if char in seen:
            raise InvalidSequenceError(f"Invalid input - duplicate number {char}")
        seen.add(char)
    for digit in DIGITS:
        if digit not in seen:
            raise InvalidSequenceError(f"Invalid input - missing number {digit}")


class Board:
    """A 3x3 board addressed by cells 1-9, row by row."""

    def __init__(self) -> None:
        self.cells = [[EMPTY] * 3 for _ in range(3)]

    @staticmethod
    def _position(cell: int) -> tuple[int, int]:
        if not 1 <= cell <= 9:
            raise ValueError("Invalid input - input should be between 1 and 9")
        return divmod(cell - 1, 3)

    def is_free(self, cell: int) -> bool:
        """Return whether ``cell`` is still empty."""
        row, col = self._position(cell)
        return self.cells[row][col] == EMPTY

    def place(self, cell: int, mark: str) -> tuple[int, int]:
        """Put ``mark`` on ``cell`` and return its (row, column)."""
        row, col = self._position(cell)
        if self.cells[row][col] != EMPTY:
            raise ValueError("Cell already taken")
        self.cells[row][col] = mark
        return row, col

    def is_win(self, row: int, col: int) -> bool:
        """Return whether the mark at (row, col) completes a line."""
        cells = self.cells
        if cells[row][0] == cells[row][1] == cells[row][2]:
            return True
        if cells[0][col] == cells[1][col] == cells[2][col]:
            return True
        if row == col and cells[0][0] == cells[1][1] == cells[2][2]:
            return True
        if row + col == 2 and cells[0][2] == cells[1][1] == cells[2][0]:
            return True
        return False

    def render(self) -> str:
        """Return the board as three text lines."""
        return "".join("".join(f"{mark} " for mark in row) + "\n" for row in self.cells)


def computer_move(board: Board, moves: Iterator[str]) -> tuple[int, int]:
    """Play the first still-free cell from ``moves``; return its (row, column)."""
    for char in moves:
        cell = int(char)
        if board.is_free(cell):
            return board.place(cell, COMPUTER)
    raise InvalidSequenceError("no free cell left in the move sequence")


def _scan_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else None


def _user_move(
    board: Board,
    read_move: Callable[[], str | None],
    write: Callable[[str], object],
) -> tuple[int, int]:
    while True:
        write("Enter your move: (1-9)\n")
        token = read_move()
        value = None if token is None else _scan_int(token)
        if value is None:
            write(GOODBYE_MESSAGE + "\n")
            raise EOFError(GOODBYE_MESSAGE)
        if not 1 <= value <= 9:
            write("Invalid input - input should be between 1 and 9\n")
            continue
        if not board.is_free(value):
            write("Cell already taken\n")
            continue
        row, col = board.place(value, PLAYER)
        write(f"You played: ({row}, {col})\n")
        return row, col


def play(
    sequence: str,
    read_move: Callable[[], str | None],
    write: Callable[[str], object],
) -> str:
    """Play one game; return "computer", "player" or "draw".

    ``read_move`` returns the player's next token or None at end of input,
    which ends the game with EOFError.
    """
    validate_input(sequence)
    board = Board()
    moves = iter(sequence)
    for round_number in range(9):
        write(board.render())
        write("\n")
        if round_number % 2 == 0:
            row, col = computer_move(board, moves)
            write(f"Computer played: ({row}, {col})\n")
            if board.is_win(row, col):
                write(board.render())
                write(COMPUTER_WIN_MESSAGE)
                return "computer"
        else:
            row, col = _user_move(board, read_move, write)
            if board.is_win(row, col):
                write(board.render())
                write(PLAYER_WIN_MESSAGE)
                return "player"
    write(board.render())
    write("\n")
    write(DRAW_MESSAGE)
    return "draw"


def _write_flushed(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Play against the sequence given on the command line, reading moves from stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: ttt <numbers>")
        return 1
    try:
        validate_input(args[0])
    except InvalidSequenceError as error:
        print(error)
        return 1

    tokens = (token for line in sys.stdin for token in line.split())
    try:
        play(args[0], lambda: next(tokens, None), _write_flushed)
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())