"""Solutions to the 2024 Advent of Code puzzles, days 1 to 20, and tools to fetch their inputs."""

__version__ = "0.1.0"