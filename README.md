# simsearch

A simple and lightweight fuzzy search engine that works in memory, searching
for similar strings. It needs nothing beyond the Python standard library.

## Installation

```
pip install simsearch
```

## Usage

Entries are inserted under an id of your choosing. Searching returns the ids
ranked by relevance, best first.

```python
from simsearch.engine import SimSearch, SearchOptions

engine = SimSearch()  # or SimSearch(SearchOptions(...))

engine.insert(1, "Things Fall Apart")
engine.insert(2, "The Old Man and the Sea")
engine.insert(3, "James Joyce")

assert engine.search("thngs") == [1]
assert engine.search("thngs apa") == [1]
```

Content and patterns are split into tokens. You can also supply tokens
yourself; each one is split further by the same rules:

```python
engine.insert_tokens("Arya Stark", ["Arya Stark", "a fictional character"])
engine.search_tokens(["thngs", "apa"])
```

`engine.tokenize(tokens)` returns the tokens exactly as the engine would index
or search them.

Inserting with an existing id replaces that entry's content, and
`engine.delete(id)` removes it; deleting an unknown id does nothing. Ids
themselves are not searchable, so add them to the content if you want to find
entries by id. Ids must be hashable, and orderable as well, because results
with equal scores are ordered by id.

### Options

`SearchOptions` is a frozen dataclass controlling tokenizing and scoring.
Derive a changed copy with `replace`:

```python
options = SearchOptions().replace(stop_words=["/", "\\"])
engine = SimSearch(options)
engine.insert(1, "the old/man/and/the sea")
assert engine.search("old") == [1]
```

| Option            | Default | Meaning                                                        |
|-------------------|---------|----------------------------------------------------------------|
| `case_sensitive`  | `False` | Keep case; otherwise tokens and patterns are lower-cased.      |
| `stop_whitespace` | `True`  | Split content and patterns on any whitespace.                  |
| `stop_words`      | `()`    | Extra separators to split tokens on (stored as a tuple).       |
| `threshold`       | `0.8`   | Only token matches scoring strictly above this are counted.    |
| `levenshtein`     | `False` | Score with normalised Levenshtein distance over UTF-8 bytes instead of Jaro-Winkler. |

Scores range from 0 to 1. For each indexed token the best-matching pattern
token is not tracked separately: a token's score is the last one above the
threshold, and an entry's relevance is the sum of the scores of its matching
tokens. Ties are broken by id order.

With `levenshtein=True`, strings are compared as UTF-8 bytes, so non-ASCII
text scores lower than its character count would suggest.

### Similarity functions

The scoring functions are available on their own in `simsearch.similarity`:

- `jaro(a, b)` – Jaro similarity between 0.0 and 1.0.
- `jaro_winkler(a, b)` – Jaro similarity boosted by a common prefix.
- `levenshtein_within(a, b, k)` – the edit distance when it is at most `k`,
  otherwise `None`.

They accept any sequences, such as `str` or `bytes`.

## Book search demo

The package installs a small interactive command that searches a JSON file
holding an array of book title strings:

```
simsearch-books books.json
```

The path defaults to `books.json` in the current directory, and
`--page-size N` (default 15) limits how many matches are printed. Type part of
a title, typos allowed, and the closest matches are listed; end input
(Ctrl-D) to quit. A missing file or one that is not an array of strings is
reported on standard error with exit status 1.

The same search is available from Python through `simsearch.cli.BookSearcher`:

```python
from simsearch.cli import BookSearcher

searcher = BookSearcher.load("books.json")
print(searcher.suggestions("old man"))

searcher = BookSearcher(["The Old Man and the Sea", "Things Fall Apart"])
```

## What it does not do

The index lives only in memory: there is no way to save an engine to disk or
load one back. The demo is a plain line-by-line prompt, without
as-you-type completion.