"""A bounded sequence of moves."""

from __future__ import annotations

from typing import Iterable, Iterator


class PathFullError(OverflowError):
    """Raised when a move is appended to a path that is already full."""


class MovePath:
    """An ordered list of single-character moves with a fixed capacity."""

    __slots__ = ("capacity", "_moves")

    def __init__(self, capacity: int, moves: Iterable[str] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._moves: list[str] = []
        for move in moves:
            self.append(move)

    def append(self, move: str) -> None:
        """Add a move at the end, raising PathFullError when out of room."""
        if not isinstance(move, str) or len(move) != 1:
            raise ValueError(f"a move must be a single character, got {move!r}")
        if self.is_full():
            raise PathFullError(f"path already holds {self.capacity} moves")
        self._moves.append(move)

    def is_empty(self) -> bool:
        return not self._moves

    def is_full(self) -> bool:
        return len(self._moves) >= self.capacity

    def format(self) -> str:
        """Return the moves as ``[C, B, E]``."""
        return "[" + ", ".join(self._moves) + "]"

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[str]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> str:
        return self._moves[index]

    def __str__(self) -> str:
        return "".join(self._moves)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MovePath):
            return NotImplemented
        return self.capacity == other.capacity and self._moves == other._moves

    def __repr__(self) -> str:
        return f"MovePath(capacity={self.capacity}, moves={str(self)!r})"