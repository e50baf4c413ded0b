"""In-memory fuzzy search engine over tokenized entries."""

from __future__ import annotations

import dataclasses
import math
import sys
from collections import defaultdict
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Optional

from .similarity import jaro_winkler, levenshtein_within

_NO_MATCH = -sys.float_info.max


@dataclass(frozen=True)
class SearchOptions:
    """Options that configure tokenizing and scoring.

    ``threshold``: only tokens scoring strictly above it contribute to results.
    ``levenshtein``: score by Levenshtein distance over UTF-8 bytes instead of
    Jaro-Winkler similarity.
    """

    case_sensitive: bool = False
    stop_whitespace: bool = True
    stop_words: tuple[str, ...] = ()
    threshold: float = 0.8
    levenshtein: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "stop_words", tuple(self.stop_words))

    def replace(self, **kwargs) -> "SearchOptions":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **kwargs)


class SimSearch:
    """Fuzzy search engine mapping ids to searchable content.

    Ids are not searchable themselves; they must be hashable and orderable,
    since equally scored results are ordered by id.
    """

    def __init__(self, options: Optional[SearchOptions] = None) -> None:
        self.options = options if options is not None else SearchOptions()
        self._next_num = 0
        self._ids: dict[Hashable, int] = {}
        self._reverse_ids: dict[int, Hashable] = {}
        self._forward: dict[int, list[str]] = {}
        self._reverse: dict[str, list[int]] = {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimSearch):
            return NotImplemented
        return (
            self.options == other.options
            and self._next_num == other._next_num
            and self._ids == other._ids
            and self._reverse_ids == other._reverse_ids
            and self._forward == other._forward
            and self._reverse == other._reverse
        )

    def insert(self, id: Hashable, content: str) -> None:
        """Insert an entry; inserting an existing id replaces its content."""
        self.insert_tokens(id, [content])

    def insert_tokens(self, id: Hashable, tokens: Iterable[str]) -> None:
        """Insert an entry from pre-split tokens, which are tokenized further."""
        self.delete(id)

        num = self._next_num
        self._next_num += 1
        self._ids[id] = num
        self._reverse_ids[num] = id

        entry_tokens = sorted(self.tokenize(tokens))
        for token in entry_tokens:
            self._reverse.setdefault(token, []).append(num)
        self._forward[num] = entry_tokens

    def search(self, pattern: str) -> list:
        """Return ids matching ``pattern``, most relevant first."""
        return self.search_tokens([pattern])

    def search_tokens(self, pattern_tokens: Iterable[str]) -> list:
        """Return ids matching the pattern tokens, most relevant first."""
        options = self.options
        token_scores: dict[str, float] = {}

        for pattern_token in sorted(self.tokenize(pattern_tokens)):
            for token in self._reverse:
                score = self._score(token, pattern_token)
                if score > options.threshold:
                    token_scores[token] = score

        result_scores: dict[int, float] = defaultdict(float)
        for token, score in token_scores.items():
            for num in self._reverse[token]:
                result_scores[num] += score

        ranked = sorted(
            ((score, self._reverse_ids[num]) for num, score in result_scores.items()),
            key=lambda pair: (-pair[0], pair[1]),
        )
        return [id for _, id in ranked]

    def delete(self, id: Hashable) -> None:
        """Remove the entry with ``id``; unknown ids are ignored."""
        num = self._ids.pop(id, None)
        if num is None:
            return
        for token in self._forward.pop(num):
            self._reverse[token] = [n for n in self._reverse[token] if n != num]
        del self._reverse_ids[num]

    def tokenize(self, tokens: Iterable[str]) -> list[str]:
        """Split tokens according to the options, dropping empty ones."""
        options = self.options
        result = [token if options.case_sensitive else token.lower() for token in tokens]

        if options.stop_whitespace:
            result = [part for token in result for part in token.split()]

        for stop_word in options.stop_words:
            result = [part for token in result for part in _split_on(token, stop_word)]

        return [token for token in result if token]

    def _score(self, token: str, pattern_token: str) -> float:
        options = self.options
        if not options.levenshtein:
            return jaro_winkler(token, pattern_token)

        token_bytes = token.encode("utf-8")
        pattern_bytes = pattern_token.encode("utf-8")
        length = max(len(token_bytes), len(pattern_bytes))
        limit = max(math.ceil((1.0 - options.threshold) * length), 0)
        distance = levenshtein_within(token_bytes, pattern_bytes, limit)
        if distance is None:
            return _NO_MATCH
        return 1.0 - (distance / length if length else 0.0)


def _split_on(token: str, separator: str) -> list[str]:
    if separator == "":
        return list(token)
    return token.split(separator)