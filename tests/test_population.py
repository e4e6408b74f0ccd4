import random

import pytest

from labirinto.maze import Maze, Position
from labirinto.path import MovePath
from labirinto.population import (
    BASE_FITNESS,
    Individual,
    Move,
    SimulationResult,
    compute_fitness,
    create_population,
    format_population,
    manhattan_distance,
    random_move,
    simulate_moves,
    simulate_population,
    simulation_report,
)

GRID = ("S..", ".#.", "..E")


@pytest.fixture
def maze():
    return Maze(GRID, 20)


def individual(moves):
    return Individual(MovePath(len(moves), moves))


@pytest.mark.parametrize(
    "move, expected",
    [
        (Move("C"), Position(0, 1)),
        (Move("B"), Position(2, 1)),
        (Move("E"), Position(1, 0)),
        (Move("D"), Position(1, 2)),
    ],
)
def test_move_directions(move, expected):
    open_maze = Maze(("...", ".SE", "..."), 20)
    result = simulate_moves(open_maze, individual(move.value))
    assert result == SimulationResult(expected, 0)


def test_random_move_in_set():
    rng = random.Random(5)
    moves = {random_move(rng) for _ in range(200)}
    assert moves == set(Move)


def test_manhattan_distance_symmetric():
    a, b = Position(0, 0), Position(2, 2)
    assert manhattan_distance(a, b) == manhattan_distance(b, a)
    assert manhattan_distance(a, a) == 0


def test_simulate_reaches_exit(maze):
    result = simulate_moves(maze, individual("DDBB"))
    assert result == SimulationResult(Position(2, 2), 0)


def test_simulate_wall_collision(maze):
    result = simulate_moves(maze, individual("BD"))
    assert result.final == Position(1, 0)
    assert result.collisions == 1


def test_simulate_border_collision(maze):
    result = simulate_moves(maze, individual("CE"))
    assert result.final == maze.start
    assert result.collisions == 2


def test_simulate_skips_unknown_moves(maze):
    result = simulate_moves(maze, individual("DXD"))
    assert result.final == Position(0, 2)
    assert result.collisions == 0


def test_fitness_at_exit_is_base(maze):
    ind = individual("DDBB")
    assert compute_fitness(maze, ind) == BASE_FITNESS
    assert ind.fitness == BASE_FITNESS


def test_fitness_never_negative():
    heavy = Maze(GRID, 5000)
    ind = individual("C")
    assert compute_fitness(heavy, ind) == 0


def test_fitness_decreases_with_collisions(maze):
    clean = individual("DD")
    bumped = individual("DDD")
    compute_fitness(maze, clean)
    compute_fitness(maze, bumped)
    assert bumped.fitness < clean.fitness


def test_create_population_sizes_and_fitness(maze):
    population = create_population(maze, 25, random.Random(3))
    assert len(population) == 25
    distance = manhattan_distance(maze.start, maze.exit)
    for ind in population:
        assert distance <= ind.length <= 2 * distance
        assert ind.path.is_full()
        stored = ind.fitness
        assert compute_fitness(maze, ind) == stored


def test_create_population_is_reproducible(maze):
    first = create_population(maze, 5, random.Random(42))
    second = create_population(maze, 5, random.Random(42))
    assert [str(i.path) for i in first] == [str(i.path) for i in second]


def test_create_population_rejects_negative(maze):
    with pytest.raises(ValueError):
        create_population(maze, -1)


def test_format_population():
    text = format_population([individual("CB")])
    assert text == "Individuo 1:\n  Tamanho do caminho: 2\n  Caminho: [C, B]\n\n"


def test_simulate_population_order(maze):
    results = simulate_population(maze, [individual("DDBB"), individual("BD")])
    assert [r.final for r in results] == [Position(2, 2), Position(1, 0)]


def test_simulation_report(maze):
    success = individual("DDBB")
    compute_fitness(maze, success)
    failure = individual("C")
    report = simulation_report(maze, [success, failure])
    assert "Penalidade por colisao: 20\n" in report
    assert "Individuo 001\n" in report
    assert "Individuo 002\n" in report
    assert "Status: Sucesso (atingiu o destino)" in report
    assert "Status: Falha (distancia: 4)" in report