"""Two-stack integer sorting with a limited move set, and a move checker."""

__version__ = "0.1.0"