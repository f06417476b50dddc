"""Graphs with BFS/DFS traversal, dense PageRank, and PageRank timing benchmarks."""

__version__ = "0.1.0"
__all__ = ["graph", "pagerank", "bench"]