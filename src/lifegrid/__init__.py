"""Conway's Game of Life on a fixed, hard-edged grid."""

__version__ = "0.1.0"

from .core.grid import CellState, Grid, InvalidCoordinate, InvalidDimension, NEIGHBOR_OFFSETS
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

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
