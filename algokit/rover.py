"""A rover moving on a grid under a string of commands."""

from __future__ import annotations

from enum import Enum
from typing import Union


class Heading(Enum):
    """Compass direction the rover faces."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def left(self) -> "Heading":
        """The heading after a quarter turn to the left."""
        order = list(Heading)
        return order[(order.index(self) - 1) % len(order)]

    @property
    def right(self) -> "Heading":
        """The heading after a quarter turn to the right."""
        order = list(Heading)
        return order[(order.index(self) + 1) % len(order)]

    @property
    def delta(self) -> tuple[int, int]:
        """The change of position for one step forward."""
        return _DELTAS[self]


_DELTAS = {
    Heading.N: (0, 1),
    Heading.S: (0, -1),
    Heading.E: (1, 0),
    Heading.W: (-1, 0),
}


class Rover:
    """A rover with a position and a heading."""

    def __init__(self, x: int, y: int, heading: Union[Heading, str]) -> None:
        self.x = x
        self.y = y
        self.heading = Heading(heading)

    def process(self, commands: str) -> None:
        """Follow ``commands``: L and R turn, any other character moves forward."""
        for command in commands:
            if command == "L":
                self.heading = self.heading.left
            elif command == "R":
                self.heading = self.heading.right
            else:
                dx, dy = self.heading.delta
                self.x += dx
                self.y += dy

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.heading.value}"

    def __repr__(self) -> str:
        return f"Rover({self.x!r}, {self.y!r}, {self.heading.value!r})"