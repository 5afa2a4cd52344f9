"""Shortest city routes with Dijkstra's algorithm, cycle detection, and the graph, queue, linked list and hash table behind them."""

__version__ = "0.1.0"