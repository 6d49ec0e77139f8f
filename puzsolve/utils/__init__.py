"""
Utility functions for puzsolve.

This module provides logging setup and terminal rendering helpers shared by the
command line front end and the interactive models.
"""

from puzsolve.utils.logging import configure_logging, get_logger
from puzsolve.utils.util import coloring_str, render_board, render_table

__all__ = [
    "coloring_str",
    "configure_logging",
    "get_logger",
    "render_board",
    "render_table",
]
