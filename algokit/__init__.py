"""Classic algorithms and data structures: lists, trees, arrays, searching, DP, heaps, graphs and thread coordination."""

__version__ = "0.1.0"