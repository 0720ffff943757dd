"""Read and write the library catalog as CSV."""

import csv
import io
from collections.abc import Iterable
from dataclasses import dataclass

from bookcorner.models import Book

EXPORT_COLUMNS = ["author", "title", "added_by", "average_rating", "total_reviews", "loaned_to"]


@dataclass
class CatalogRow:
    line: int
    title: str
    author: str
    added_by: str | None


def _header_key(raw: str | None) -> str:
    """Map "Added By", " added_by " and "ADDED-BY" to ``added_by``."""
    if not raw:
        return ""
    return raw.strip().lower().replace(" ", "_").replace("-", "_")


def _cell(row: dict, key: str) -> str:
    value = row.get(key)
    return value.strip() if isinstance(value, str) else ""


def parse_catalog_csv(content: str) -> list[CatalogRow]:
    """Parse catalog CSV text into rows.

    Blank cells come back as empty strings so the importer can report the
    line; rows that are entirely empty are dropped.
    """
    content = content.lstrip("\ufeff")
    reader = csv.DictReader(io.StringIO(content))
    rows = []
    for line, raw in enumerate(reader, start=2):
        row = {_header_key(k): v for k, v in raw.items() if k is not None}
        title = _cell(row, "title")
        author = _cell(row, "author")
        added_by = _cell(row, "added_by") or None
        if not (title or author or added_by):
            continue
        rows.append(CatalogRow(line=line, title=title, author=author, added_by=added_by))
    return rows


def render_catalog_csv(books: Iterable[Book]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(EXPORT_COLUMNS)
    for book in books:
        writer.writerow([
            book.author,
            book.title,
            book.added_by,
            f"{book.average_rating:.2f}",
            book.total_reviews,
            book.loaned_to or "",
        ])
    return buf.getvalue()
