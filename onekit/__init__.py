"""Random helpers, a priority queue, accumulator lists, dynamic arrays and a scapegoat-tree key:value store."""

__version__ = "0.1.0"