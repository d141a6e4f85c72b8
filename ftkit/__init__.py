"""C-style string, memory, list and I/O helpers, and a threaded dining philosophers simulation."""

__version__ = "0.1.0"