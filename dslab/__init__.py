"""Classic data structures and algorithms: lists, stacks, queues, heaps, hash tables, trees, graphs, polynomials and expressions."""

__version__ = "0.1.0"