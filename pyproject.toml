[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labirinto"
version = "0.1.0"
description = "Random move populations walked through a text maze and scored by distance to the exit and wall collisions"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "random-walk", "population", "fitness", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labirinto = "labirinto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["labirinto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
