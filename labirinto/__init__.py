"""Random move populations walked through a text maze and scored by fitness."""

__version__ = "0.1.0"