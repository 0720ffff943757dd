import hashlib
import re


def _normalize(value: str | int) -> str:
    s = str(value).casefold()
    s = re.sub(r"[\W_]", "", s)
    return s[:50]


def make_id(*parts: str | int) -> int:
    """Stable integer key for a book, wishlist entry or favourite author.

    Parts are casefolded and stripped of punctuation and whitespace, in any
    script, so "Dune" / "dune " and "Толстой" / "толстой" map to the same key
    while "Толстой" and "Достоевский" do not. Callers fold accents first when
    they want "Bénédict" and "Benedict" to collide.
    """
    key = ":".join(_normalize(p) for p in parts)
    return int(hashlib.sha256(key.encode()).hexdigest()[:15], 16)
