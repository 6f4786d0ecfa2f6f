from __future__ import annotations

BLACK = "black"
WHITE = "white"

COLORS = (BLACK, WHITE)


def opponent(color: str) -> str:
    assert color in COLORS
    if color == BLACK:
        return WHITE
    return BLACK


class Piece:
    def __init__(self, color: str) -> None:
        if color not in COLORS:
            raise ValueError(f'Invalid color "{color}"')

        self.color = color

    def opp_color(self) -> str:
        return opponent(self.color)

    def flip(self) -> None:
        self.color = self.opp_color()

    def __str__(self) -> str:
        if self.color == WHITE:
            return "W"
        return "B"

    def __repr__(self) -> str:
        return f"Piece({self.color!r})"
