import typer
from typing import Optional

from reversi import config
from reversi.othello.board import Board, InvalidMove
from reversi.othello.game import Game

QUIT_INPUTS = ["q", "quit"]


class Play:
    def __init__(self, game: Optional[Game] = None) -> None:
        if game is None:
            game = Game()

        self.game = game

    def show_state(self) -> None:
        self.game.board.show()
        moves = Board.positions_to_fields(self.game.valid_moves())
        print(f"{self.game.turn} to move, options: {moves}")

    def read_move(self) -> bool:
        """Prompts until a move was applied. Returns False when the player quits."""
        while True:
            answer: str = typer.prompt(f"{self.game.turn}").strip()

            if answer.lower() in QUIT_INPUTS:
                return False

            try:
                self.game.do_move(Board.field_to_pos(answer))
            except (ValueError, InvalidMove) as e:
                print(f"Invalid move: {e}")
                continue

            return True

    def show_result(self) -> None:
        black, white = self.game.get_score()
        winner = self.game.get_winner()

        self.game.board.show()
        print(f"Score: black {black} - white {white}")

        if winner is None:
            print("Draw")
        else:
            print(f"Winner: {winner}")

    def __call__(self) -> None:
        try:
            config.empty_token()
        except ValueError as e:
            print(f"Invalid configuration: {e}")
            raise typer.Exit(code=1)

        while not self.game.is_over():
            self.show_state()
            if not self.read_move():
                print(f"Stopped after moves: {self.game.fields()}")
                return

        self.show_result()
