"""Interactive book title search over a JSON list of titles."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Optional, Union

from .engine import SimSearch

PAGE_SIZE = 15


class BookSearcher:
    """Fuzzy search over a collection of book titles."""

    def __init__(self, titles: Iterable[str]) -> None:
        self.engine = SimSearch()
        for title in titles:
            self.engine.insert(title, title)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "BookSearcher":
        """Load titles from a JSON file holding an array of strings."""
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
            raise ValueError(f"{path}: expected a JSON array of strings")
        return cls(data)

    def suggestions(self, text: str) -> list[str]:
        """Return titles matching ``text``, most relevant first."""
        return self.engine.search(text)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Search for a book title.")
    parser.add_argument("path", nargs="?", default="books.json", help="JSON list of titles")
    parser.add_argument("--page-size", type=int, default=PAGE_SIZE)
    args = parser.parse_args(argv)

    try:
        searcher = BookSearcher.load(args.path)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print("Try typing 'old man'")
    while True:
        try:
            query = input("> Search for a book: ")
        except EOFError:
            break
        for title in searcher.suggestions(query)[: args.page_size]:
            print(f"  {title}")
    return 0