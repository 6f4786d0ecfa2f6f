import typer

from reversi.commands.play import Play
from reversi.commands.replay import Replay


def play_command() -> None:
    Play()()


def replay_command(
    moves: list[str] = typer.Argument(..., help="Fields to play, e.g. d3 c5"),
) -> None:
    Replay(moves)()


def play() -> None:
    typer.run(play_command)


def replay() -> None:
    typer.run(replay_command)
