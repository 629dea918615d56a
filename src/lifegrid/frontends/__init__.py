"""Frontend interfaces for the simulation."""

from .cli import CLIGameOfLife, dump, format_grid

__all__ = ["CLIGameOfLife", "dump", "format_grid"]
