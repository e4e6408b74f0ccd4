"""Maze grids: loading from text, locating start and exit, and rendering."""

from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, TextIO

START = "S"
EXIT = "E"
WALL = "#"
DEFAULT_PENALTY = 20

_HEADER = re.compile(r"\s*(\d+)\s+(\d+)\s*")


class MazeError(ValueError):
    """Raised when a maze cannot be read or is missing its start or exit."""


@dataclass(frozen=True)
class Position:
    """A cell in the maze, as row ``i`` and column ``j``."""

    i: int
    j: int


def find_start_and_exit(grid: Iterable[str]) -> tuple[Position, Position]:
    """Return the positions of ``S`` and ``E``; the last occurrence of each wins."""
    start = exit_ = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == START:
                start = Position(i, j)
            if cell == EXIT:
                exit_ = Position(i, j)
    if start is None or exit_ is None:
        raise MazeError("maze must contain both a start 'S' and an exit 'E'")
    return start, exit_


@dataclass
class Maze:
    """A rectangular maze with its start, exit and collision penalty."""

    grid: tuple[str, ...]
    penalty: int = DEFAULT_PENALTY
    start: Position = field(init=False)
    exit: Position = field(init=False)

    def __post_init__(self) -> None:
        self.grid = tuple(self.grid)
        widths = {len(row) for row in self.grid}
        if len(widths) > 1:
            raise MazeError("all maze rows must have the same length")
        self.start, self.exit = find_start_and_exit(self.grid)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def is_open(self, position: Position) -> bool:
        """Return True if the position lies inside the maze and is not a wall."""
        return (
            0 <= position.i < self.rows
            and 0 <= position.j < self.cols
            and self.grid[position.i][position.j] != WALL
        )

    def render(self) -> str:
        """Return the grid as text, one line per row."""
        return "".join(f"{row}\n" for row in self.grid)

    def describe(self) -> str:
        """Return the grid followed by its dimensions and key positions."""
        return (
            self.render()
            + "=== LABIRINTO CARREGADO ===\n"
            + f"\nDimensoes: {self.rows}x{self.cols}\n"
            + f"Posicao inicial (S): ({self.start.i}, {self.start.j})\n"
            + f"Posicao destino (E): ({self.exit.i}, {self.exit.j})\n"
        )


def read_grid(stream: TextIO, rows: int, cols: int) -> tuple[str, ...]:
    """Read ``rows`` lines of exactly ``cols`` characters from ``stream``."""
    grid = []
    for number in range(rows):
        row = stream.read(cols)
        if len(row) < cols:
            raise MazeError(f"unexpected end of input in row {number}")
        terminator = stream.read(1)
        if terminator not in ("\n", ""):
            raise MazeError(f"row {number} is longer than {cols} characters")
        grid.append(row)
    return tuple(grid)


def parse_maze(text: str, penalty: int = DEFAULT_PENALTY) -> Maze:
    """Build a maze from text holding a ``rows cols`` header and the grid."""
    header = _HEADER.match(text)
    if header is None:
        raise MazeError("invalid maze header: expected '<rows> <cols>'")
    rows, cols = int(header.group(1)), int(header.group(2))
    grid = read_grid(io.StringIO(text[header.end():]), rows, cols)
    return Maze(grid, penalty)


def load_maze(path: str | Path, penalty: int = DEFAULT_PENALTY) -> Maze:
    """Read and parse a maze file."""
    with open(path, encoding="utf-8") as handle:
        return parse_maze(handle.read(), penalty)