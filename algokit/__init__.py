"""Classic algorithms and data structures in plain Python: arrays, heaps, searching,
number theory, bits, strings, recursion, greedy methods, trees, graphs,
backtracking, dynamic programming, stacks, linked lists, shortest paths and flow."""

__version__ = "0.1.0"