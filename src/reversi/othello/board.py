from __future__ import annotations

from copy import deepcopy
from typing import Iterable, Optional

from reversi import config
from reversi.othello.piece import BLACK, COLORS, WHITE, Piece

SIZE = 8

Pos = tuple[int, int]
Grid = list[list[Optional[Piece]]]

ROW_CHARS = {
    "B": BLACK,
    "W": WHITE,
    ".": None,
    "-": None,
    " ": None,
}


def empty_grid() -> Grid:
    return [[None] * SIZE for _ in range(SIZE)]


class InvalidMove(Exception):
    pass


class PositionOutOfBounds(ValueError):
    pass


class Board:
    """
    Board holds an 8x8 grid of pieces and implements the rules of the game.
    Positions are (row, col) tuples, both zero-indexed.
    """

    DIRS: tuple[Pos, ...] = (
        (0, 1),
        (1, 1),
        (1, 0),
        (1, -1),
        (0, -1),
        (-1, -1),
        (-1, 0),
        (-1, 1),
    )

    def __init__(self, grid: Optional[Grid] = None) -> None:
        if grid is None:
            grid = empty_grid()
            grid[3][4] = Piece(BLACK)
            grid[4][3] = Piece(BLACK)
            grid[3][3] = Piece(WHITE)
            grid[4][4] = Piece(WHITE)

        self.grid = grid

    @classmethod
    def empty(cls) -> Board:
        return cls(empty_grid())

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        if len(rows) != SIZE:
            raise ValueError(f"Expected {SIZE} rows, got {len(rows)}")

        board = cls.empty()

        for row, line in enumerate(rows):
            if len(line) != SIZE:
                raise ValueError(f'Row {row} has invalid length "{len(line)}"')

            for col, char in enumerate(line):
                try:
                    color = ROW_CHARS[char.upper()]
                except KeyError:
                    raise ValueError(f'Invalid square "{char}" in row {row}')

                if color is not None:
                    board.grid[row][col] = Piece(color)

        return board

    def copy(self) -> Board:
        return deepcopy(self)

    def is_valid_pos(self, pos: Pos) -> bool:
        row, col = pos
        return 0 <= row < SIZE and 0 <= col < SIZE

    def _check_pos(self, pos: Pos) -> None:
        if not self.is_valid_pos(pos):
            raise PositionOutOfBounds(f"Position {pos} is not on the board")

    def get_piece(self, pos: Pos) -> Optional[Piece]:
        self._check_pos(pos)
        row, col = pos
        return self.grid[row][col]

    def is_occupied(self, pos: Pos) -> bool:
        return self.get_piece(pos) is not None

    def is_mine(self, pos: Pos, color: str) -> bool:
        if not self.is_valid_pos(pos):
            return False

        piece = self.get_piece(pos)
        if piece is None:
            return False
        return piece.color == color

    def positions_to_flip(
        self, pos: Pos, color: str, direction: Pos
    ) -> Optional[list[Pos]]:
        """
        Follows `direction` away from `pos`, collecting pieces of the opposite color.
        Returns the collected positions when the run is closed by a piece of `color`,
        or None when it runs off the board, hits an empty square or is empty.
        """
        self._check_pos(pos)

        dr, dc = direction
        row, col = pos
        run: list[Pos] = []

        while True:
            row, col = row + dr, col + dc
            current = (row, col)

            if not self.is_valid_pos(current):
                return None

            piece = self.get_piece(current)

            if piece is None:
                return None

            if piece.color == color:
                if not run:
                    return None
                return run

            run.append(current)

    def _all_positions_to_flip(self, pos: Pos, color: str) -> list[Pos]:
        flipped: list[Pos] = []
        for direction in self.DIRS:
            run = self.positions_to_flip(pos, color, direction)
            if run is not None:
                flipped += run
        return flipped

    def valid_move(self, pos: Pos, color: str) -> bool:
        assert color in COLORS

        if not self.is_valid_pos(pos) or self.is_occupied(pos):
            return False

        for direction in self.DIRS:
            if self.positions_to_flip(pos, color, direction) is not None:
                return True
        return False

    def valid_moves(self, color: str) -> list[Pos]:
        return [
            (row, col)
            for row in range(SIZE)
            for col in range(SIZE)
            if self.valid_move((row, col), color)
        ]

    def has_move(self, color: str) -> bool:
        return len(self.valid_moves(color)) > 0

    def is_over(self) -> bool:
        return not (self.has_move(BLACK) or self.has_move(WHITE))

    def place_piece(self, pos: Pos, color: str) -> list[Pos]:
        if not self.valid_move(pos, color):
            raise InvalidMove(f"{color} cannot move to {pos}")

        flipped = self._all_positions_to_flip(pos, color)

        row, col = pos
        self.grid[row][col] = Piece(color)

        for flip_pos in flipped:
            piece = self.get_piece(flip_pos)
            assert piece is not None
            piece.flip()

        return flipped

    def count(self, color: str) -> int:
        assert color in COLORS

        return sum(
            1 for line in self.grid for piece in line if piece and piece.color == color
        )

    def count_discs(self) -> int:
        return self.count(BLACK) + self.count(WHITE)

    def count_empties(self) -> int:
        return SIZE * SIZE - self.count_discs()

    def __str__(self) -> str:
        empty = config.empty_token()
        lines = []
        for line in self.grid:
            lines.append("".join(str(piece) if piece else empty for piece in line))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({self.as_rows()})"

    def show(self) -> None:
        print("  a b c d e f g h")
        for row, line in enumerate(str(self).split("\n")):
            print("{} {}".format(row + 1, " ".join(line)))

    def as_rows(self) -> list[str]:
        return [
            "".join(str(piece) if piece else "." for piece in line)
            for line in self.grid
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_rows() == other.as_rows()

    @classmethod
    def pos_to_field(cls, pos: Pos) -> str:
        row, col = pos
        if row not in range(SIZE) or col not in range(SIZE):
            raise ValueError(f"Position {pos} is not on the board")
        return "abcdefgh"[col] + "12345678"[row]

    @classmethod
    def positions_to_fields(cls, positions: Iterable[Pos]) -> str:
        return " ".join(cls.pos_to_field(pos) for pos in positions)

    @classmethod
    def field_to_pos(cls, field: str) -> Pos:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return (row, col)
