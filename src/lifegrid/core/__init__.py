"""Core simulation logic."""

from .grid import CellState, Grid, InvalidCoordinate, InvalidDimension, NEIGHBOR_OFFSETS
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = [
    "CellState",
    "Grid",
    "InvalidCoordinate",
    "InvalidDimension",
    "NEIGHBOR_OFFSETS",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
]
