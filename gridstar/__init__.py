"""A* shortest paths on obstacle grids."""

from gridstar.search import Cell, Grid, PathFinder, SearchConfig, find_path

__all__ = ["Cell", "Grid", "PathFinder", "SearchConfig", "find_path"]
