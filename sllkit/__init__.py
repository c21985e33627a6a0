"""Singly linked list toolkit: build, edit, search, transform and compare node chains."""

__version__ = "0.1.0"
__all__ = ["cli", "compare", "core", "search", "transform"]