"""Shortest paths on GraphML graphs, a force-directed layout, and plot-ready data output."""

__version__ = "0.1.0"
__all__ = ["__version__"]