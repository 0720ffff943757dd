from fastmcp import FastMCP

from bookcorner.mcp.client import LibraryClient
from bookcorner.mcp.tools.discovery import (
    browse_authors as _browse_authors,
    get_book as _get_book,
    search_books as _search_books,
)
from bookcorner.mcp.tools.favorites import toggle_favorite_author as _toggle_favorite_author
from bookcorner.mcp.tools.importing import import_catalog as _import_catalog
from bookcorner.mcp.tools.library import add_book as _add_book
from bookcorner.mcp.tools.loans import (
    lend_book as _lend_book,
    list_loans as _list_loans,
    return_book as _return_book,
)
from bookcorner.mcp.tools.profile import library_profile as _library_profile
from bookcorner.mcp.tools.reviews import get_reviews as _get_reviews, review_book as _review_book
from bookcorner.mcp.tools.wishlist import (
    add_to_wishlist as _add_to_wishlist,
    browse_wishlist as _browse_wishlist,
)


def create_mcp_server(client: LibraryClient) -> FastMCP:
    mcp = FastMCP(
        name="bookcorner",
        instructions=(
            "Bookcorner is a shared household library. Use these tools to find "
            "books by author, add books and reader reviews, track who borrowed "
            "which book, keep a wishlist, and flag favourite authors. Books are "
            "identified by title and author."
        ),
    )

    @mcp.tool()
    async def search_books(
        query: str | None = None,
        letter: str | None = None,
        favorites_only: bool = False,
        limit: int = 200,
    ) -> list[dict]:
        """List books ordered by author. `query` matches the start of the author
        name ignoring accents and case; `letter` picks authors by first letter."""
        return await _search_books(client, query=query, letter=letter, favorites_only=favorites_only, limit=limit)

    @mcp.tool()
    async def browse_authors(prefix: str | None = None, source: str = "all") -> list[str]:
        """List known authors (source: books, wishlist or all), optionally by prefix."""
        return await _browse_authors(client, prefix=prefix, source=source)

    @mcp.tool()
    async def get_book(title: str, author: str) -> dict:
        """Get a book with its average rating, loan status and reviews."""
        return await _get_book(client, title=title, author=author)

    @mcp.tool()
    async def add_book(
        title: str,
        author: str,
        added_by: str,
        rating: int | None = None,
        comment: str | None = None,
        reviewer_name: str | None = None,
    ) -> dict:
        """Add a book to the library, optionally with a first review (rating 1-5
        and/or comment). The reviewer defaults to whoever added the book."""
        return await _add_book(
            client, title=title, author=author, added_by=added_by,
            rating=rating, comment=comment, reviewer_name=reviewer_name,
        )

    @mcp.tool()
    async def review_book(
        title: str,
        author: str,
        reviewer_name: str,
        rating: int | None = None,
        comment: str | None = None,
    ) -> dict:
        """Rate (1-5) and/or comment on a book. A reviewer's second review of
        the same book updates the first one."""
        return await _review_book(
            client, title=title, author=author, reviewer_name=reviewer_name,
            rating=rating, comment=comment,
        )

    @mcp.tool()
    async def get_reviews(min_rating: int | None = None, limit: int = 50) -> list[dict]:
        """List recent reviews across the library, optionally by minimum rating."""
        return await _get_reviews(client, min_rating=min_rating, limit=limit)

    @mcp.tool()
    async def lend_book(title: str, author: str, loaned_to: str) -> dict:
        """Record that a book was lent to someone."""
        return await _lend_book(client, title=title, author=author, loaned_to=loaned_to)

    @mcp.tool()
    async def return_book(title: str, author: str) -> dict:
        """Record that a lent book came back."""
        return await _return_book(client, title=title, author=author)

    @mcp.tool()
    async def list_loans() -> list[dict]:
        """List books currently lent out, oldest loan first."""
        return await _list_loans(client)

    @mcp.tool()
    async def add_to_wishlist(title: str, author: str, added_by: str) -> dict:
        """Put a book on the household wishlist."""
        return await _add_to_wishlist(client, title=title, author=author, added_by=added_by)

    @mcp.tool()
    async def browse_wishlist(query: str | None = None, letter: str | None = None) -> list[dict]:
        """Show the wishlist grouped by author."""
        return await _browse_wishlist(client, query=query, letter=letter)

    @mcp.tool()
    async def toggle_favorite_author(name: str) -> dict:
        """Flag an author as favourite, or unflag them if already flagged."""
        return await _toggle_favorite_author(client, name=name)

    @mcp.tool()
    async def library_profile() -> dict:
        """Overview of the library: counts, favourite authors, rating
        distribution, top rated books and most active reviewers."""
        return await _library_profile(client)

    @mcp.tool()
    async def import_catalog(
        file_path: str | None = None,
        csv_content: str | None = None,
    ) -> dict:
        """Import books from a CSV with author, title and optional added_by
        columns. Provide a file_path on disk or the csv_content itself."""
        return await _import_catalog(client, file_path=file_path, csv_content=csv_content)

    return mcp
