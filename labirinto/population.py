"""Random move populations: creation, simulation in a maze and fitness."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from labirinto.maze import Maze, Position
from labirinto.path import MovePath

BASE_FITNESS = 1000


class Move(str, Enum):
    """A single step: up (C), down (B), left (E) or right (D)."""

    UP = "C"
    DOWN = "B"
    LEFT = "E"
    RIGHT = "D"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}

_MOVES = tuple(Move)


@dataclass
class Individual:
    """A candidate solution: a path of moves and its fitness."""

    path: MovePath
    fitness: int = 0

    @property
    def length(self) -> int:
        return len(self.path)


@dataclass(frozen=True)
class SimulationResult:
    """Where an individual ended up and how many times it hit a wall."""

    final: Position
    collisions: int


def random_move(rng: Optional[random.Random] = None) -> Move:
    """Return one of the four moves chosen uniformly at random."""
    return (rng or random).choice(_MOVES)


def manhattan_distance(a: Position, b: Position) -> int:
    """Return the grid distance between two positions."""
    return abs(a.i - b.i) + abs(a.j - b.j)


def simulate_moves(maze: Maze, individual: Individual) -> SimulationResult:
    """Walk the individual's path from the start; blocked steps count as collisions."""
    current = maze.start
    collisions = 0
    for step in individual.path:
        try:
            move = Move(step)
        except ValueError:
            continue
        di, dj = move.delta
        candidate = Position(current.i + di, current.j + dj)
        if maze.is_open(candidate):
            current = candidate
        else:
            collisions += 1
    return SimulationResult(current, collisions)


def compute_fitness(maze: Maze, individual: Individual) -> int:
    """Compute, store and return the individual's fitness (never negative)."""
    result = simulate_moves(maze, individual)
    distance = manhattan_distance(result.final, maze.exit)
    fitness = BASE_FITNESS - distance - result.collisions * maze.penalty
    individual.fitness = max(fitness, 0)
    return individual.fitness


def create_population(
    maze: Maze, size: int, rng: Optional[random.Random] = None
) -> list[Individual]:
    """Create ``size`` individuals with random paths of length in [d, 2d].

    ``d`` is the Manhattan distance from start to exit.
    """
    if size < 0:
        raise ValueError("population size must not be negative")
    rng = rng or random.Random()
    distance = manhattan_distance(maze.start, maze.exit)
    population = []
    for _ in range(size):
        length = distance + rng.randrange(distance + 1)
        path = MovePath(length, (random_move(rng).value for _ in range(length)))
        individual = Individual(path)
        compute_fitness(maze, individual)
        population.append(individual)
    return population


def format_population(population: Iterable[Individual]) -> str:
    """Return a listing of every individual's path length and moves."""
    return "".join(
        f"Individuo {number}:\n"
        f"  Tamanho do caminho: {individual.length}\n"
        f"  Caminho: {individual.path.format()}\n\n"
        for number, individual in enumerate(population, start=1)
    )


def simulate_population(
    maze: Maze, population: Iterable[Individual]
) -> list[SimulationResult]:
    """Simulate every individual and return the results in order."""
    return [simulate_moves(maze, individual) for individual in population]


def simulation_report(maze: Maze, population: Iterable[Individual]) -> str:
    """Return a report of each individual's final position, fitness and status."""
    population = list(population)
    lines = [
        "\n=== Simulacao da Populacao (com Fitness) ===\n",
        f"Posicao inicial (S): ({maze.start.i}, {maze.start.j})\n",
        f"Posicao destino (E): ({maze.exit.i}, {maze.exit.j})\n",
        f"Penalidade por colisao: {maze.penalty}\n\n",
    ]
    results = simulate_population(maze, population)
    for number, (individual, result) in enumerate(zip(population, results), start=1):
        final = result.final
        if final == maze.exit:
            status = "Sucesso (atingiu o destino)"
        else:
            status = f"Falha (distancia: {manhattan_distance(final, maze.exit)})"
        lines.append(
            f"Individuo {number:03d}\n"
            f"Posicao final: ({final.i}, {final.j})\n"
            f"Fitness: {individual.fitness}\n"
            f"Status: {status}\n\n"
        )
    return "".join(lines)