from __future__ import annotations

from typing import Optional

from reversi import config
from reversi.othello.board import Board, Pos
from reversi.othello.piece import BLACK, WHITE, opponent

PASS_FIELDS = ["--", "ps"]


class Game:
    def __init__(self) -> None:
        self.board = Board()
        self.turn = BLACK
        self.moves: list[Pos] = []

    @classmethod
    def from_fields(cls, string: str) -> Game:
        game = Game()

        for word in string.split():
            if word[0].isdigit():
                continue

            # Passes are applied automatically
            if word.lower() in PASS_FIELDS:
                continue

            game.do_move(Board.field_to_pos(word))

        return game

    def do_move(self, pos: Pos) -> list[Pos]:
        flipped = self.board.place_piece(pos, self.turn)
        self.moves.append(pos)

        if config.verbose():
            print(
                f"{self.turn} plays {Board.pos_to_field(pos)}, "
                f"flipping {len(flipped)}"
            )

        next_turn = opponent(self.turn)

        if self.board.has_move(next_turn):
            self.turn = next_turn
        elif not self.board.is_over() and config.verbose():
            print(f"{next_turn} has no moves and passes")

        return flipped

    def valid_moves(self) -> list[Pos]:
        return self.board.valid_moves(self.turn)

    def is_over(self) -> bool:
        return self.board.is_over()

    def get_score(self) -> tuple[int, int]:
        return self.board.count(BLACK), self.board.count(WHITE)

    def get_winner(self) -> Optional[str]:
        if not self.is_over():
            return None

        black, white = self.get_score()

        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return None

    def fields(self) -> str:
        return Board.positions_to_fields(self.moves)
