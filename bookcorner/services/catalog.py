"""Author-oriented filtering, ordering and grouping for books and wishlist entries.

All comparisons go through :func:`fold`, so "Bénédict, Alexandra" sorts next to
"Benedict" and matches the letter ``B`` or the search ``bene``.
"""

import unicodedata
from collections.abc import Iterable
from itertools import groupby
from typing import Protocol, TypeVar

from bookcorner.id import make_id


class Authored(Protocol):
    title: str
    author: str


T = TypeVar("T", bound=Authored)


def fold(value: str) -> str:
    """Lowercase and drop combining accents."""
    decomposed = unicodedata.normalize("NFD", value.lower())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def author_sort_key(name: str) -> tuple[str, str]:
    return fold(name), name


def name_key(title: str, author: str) -> int:
    """Lookup key shared by every spelling of a title/author pair."""
    return make_id(fold(title), fold(author))


def author_id(name: str) -> int:
    return make_id(fold(name))


def author_matches(author: str, prefix: str) -> bool:
    return fold(author).startswith(fold(prefix.strip()))


def filter_by_author(
    items: Iterable[T],
    query: str | None = None,
    letter: str | None = None,
) -> list[T]:
    """Keep items whose author starts with ``query``, or else with ``letter``.

    A non-blank query wins over the letter; with neither, everything is kept.
    """
    if query and query.strip():
        return [item for item in items if author_matches(item.author, query)]
    if letter:
        return [item for item in items if author_matches(item.author, letter)]
    return list(items)


def sort_by_author(items: Iterable[T]) -> list[T]:
    return sorted(items, key=lambda item: (author_sort_key(item.author), fold(item.title)))


def group_by_author(items: Iterable[T]) -> list[tuple[str, list[T]]]:
    ordered = sort_by_author(items)
    return [(author, list(group)) for author, group in groupby(ordered, key=lambda item: item.author)]


def matching_authors(names: Iterable[str], prefix: str | None = None) -> list[str]:
    """Distinct author names in collation order, optionally prefix-filtered."""
    distinct = {name for name in names if name}
    if prefix and prefix.strip():
        distinct = {name for name in distinct if author_matches(name, prefix)}
    return sorted(distinct, key=author_sort_key)
