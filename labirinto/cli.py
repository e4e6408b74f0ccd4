"""Command line entry: load a maze, build a random population and simulate it."""

from __future__ import annotations

import argparse
import io
import random
import re
import sys
from typing import Optional, Sequence

from labirinto.maze import DEFAULT_PENALTY, Maze, MazeError, read_grid
from labirinto.population import (
    create_population,
    format_population,
    simulation_report,
)

_HEADER = re.compile(r"\s*(\d+)\s+(\d+)\s*")
_PROMPT = "Quantos individuos deseja que tenha na primeira populacao?"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labirinto",
        description="Generate random move populations and evaluate them in a maze.",
    )
    parser.add_argument("maze", nargs="?", default="labirinto.txt", help="maze file")
    parser.add_argument("-p", "--population", type=int, help="population size")
    parser.add_argument("--penalty", type=int, default=DEFAULT_PENALTY)
    parser.add_argument("--seed", type=int, help="random seed")
    return parser


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)

    try:
        with open(args.maze, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return _error("Erro: Nao foi possivel abrir o arquivo do labirinto")

    header = _HEADER.match(text)
    if header is None:
        return _error("Erro: Formato invalido do arquivo")
    rows, cols = int(header.group(1)), int(header.group(2))

    try:
        grid = read_grid(io.StringIO(text[header.end():]), rows, cols)
    except MazeError:
        return _error("Erro ao carregar labirinto do arquivo")

    try:
        maze = Maze(grid, args.penalty)
    except MazeError:
        return _error("Erro: Falha ao criar contexto do labirinto")

    print(maze.describe(), end="")

    size = args.population
    if size is None:
        print(_PROMPT, end="", flush=True)
        try:
            size = int(input().strip())
        except (EOFError, ValueError):
            return _error("Erro: Tamanho de populacao invalido")
    if size < 0:
        return _error("Erro: Tamanho de populacao invalido")

    population = create_population(maze, size, random.Random(args.seed))
    print(format_population(population), end="")
    print(simulation_report(maze, population), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())