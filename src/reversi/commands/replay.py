import typer

from reversi import config
from reversi.othello.board import InvalidMove
from reversi.othello.game import Game


class Replay:
    def __init__(self, moves: list[str]) -> None:
        self.moves = moves

    def __call__(self) -> None:
        try:
            config.empty_token()
        except ValueError as e:
            print(f"Invalid configuration: {e}")
            raise typer.Exit(code=1)

        try:
            game = Game.from_fields(" ".join(self.moves))
        except (ValueError, InvalidMove) as e:
            print(f"Could not replay moves: {e}")
            raise typer.Exit(code=1)

        game.board.show()

        black, white = game.get_score()

        if game.is_over():
            print("Game over")
        else:
            print(f"{game.turn} to move")

        print(f"Score: black {black} - white {white}")
