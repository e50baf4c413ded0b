"""A simple and lightweight in-memory fuzzy search engine with a book search demo."""

__version__ = "0.2.5"
__all__ = ["cli", "engine", "similarity"]