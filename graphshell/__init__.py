"""Directed, undirected and activity graphs, graph algorithms and an interactive command shell."""

__version__ = "0.1.0"