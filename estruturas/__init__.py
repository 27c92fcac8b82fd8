"""Classic data structures and algorithms: searching, matrices, lists, stacks, queues, trees, heaps and hash tables."""

__version__ = "0.1.0"