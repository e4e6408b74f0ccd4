# labirinto

labirinto loads a maze from a text file and fills it with a population of
individuals. Each individual is a random sequence of moves. Every individual is
walked through the maze and scored by how close to the exit it stopped and how
often it hit a wall.

## Maze file

The first line gives the number of rows and the number of columns. The grid
follows, one row per line. Each row must be exactly as many characters as the
column count and end with a newline (the last row may end at the end of the
file). `#` is a wall. `S` marks the start and `E` marks the exit. The maze must
contain both. If either appears more than once, the last one wins.

```
6 10
##########
#S   #   #
# ## # # #
#  #   # #
##   #  E#
##########
```

Whitespace after the header numbers is skipped, so the first grid row must not
begin with spaces.

## Running

```
labirinto [maze] [-p N] [--penalty P] [--seed SEED]
```

- `maze`: the maze file. The default is `labirinto.txt` in the current directory.
- `-p`, `--population`: the number of individuals. If you leave it out, the
  command asks for it on standard input.
- `--penalty`: the fitness penalty for each collision. The default is 20.
- `--seed`: a seed for the random generator, so that runs can be repeated.

The command prints the maze, its size and where the start and exit are. It then
prints each individual's path length and moves, followed by a simulation
report. The report gives each individual's final position and fitness. It says
whether the individual reached the exit, and if not, its Manhattan distance from
the exit.

The command prints an error message and exits with status 1 in these cases: the
file cannot be opened, the header is invalid, the grid is short or malformed,
the start or exit is missing, or the population size is not a non-negative
integer.

## Scoring

Moves are `C` (up), `B` (down), `E` (left) and `D` (right). Let `d` be the
Manhattan distance from the start to the exit. Each path has a random length
between `d` and `2·d`, inclusive.

A move into a wall or off the grid counts as a collision, and the individual
stays where it is. Characters that are not moves are skipped. Fitness is:

```
max(0, 1000 - distance_to_exit - collisions * penalty)
```

## Library use

```python
import random
from labirinto.maze import parse_maze
from labirinto.population import create_population, format_population, simulation_report

maze = parse_maze("3 3\nS  \n # \n  E\n", penalty=20)
population = create_population(maze, 5, random.Random(1))
print(format_population(population))
print(simulation_report(maze, population))
```

- `labirinto.maze` provides these names:
  - `Maze`: holds `grid`, `penalty`, `start`, `exit`, `rows` and `cols`, with
    the methods `is_open`, `render` and `describe`.
  - `Position`
  - `MazeError`
  - `find_start_and_exit`
  - `read_grid`
  - `parse_maze`
  - `load_maze`
- `labirinto.path` provides `MovePath`, a sequence of single-character moves
  with a fixed capacity. Appending past the capacity raises `PathFullError`.
- `labirinto.population` provides these names:
  - `Move`
  - `Individual`
  - `SimulationResult`
  - `random_move`
  - `manhattan_distance`
  - `simulate_moves`
  - `compute_fitness`, which stores the fitness on the individual and returns it
  - `create_population`
  - `simulate_population`
  - `format_population`
  - `simulation_report`

## What it does not do

The package builds and scores one population only. It has no selection,
crossover or mutation, and it does not breed further generations.