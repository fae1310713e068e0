"""Bellman-Ford single-source shortest paths over edge lists and METIS-partitioned graphs."""

__version__ = "0.1.0"