"""Tests for MCP tools. Each test gets a LibraryClient backed by the test
httpx client fixture, seeds data via the API, then calls the tool function
directly."""

import pytest
from bookcorner.mcp.client import LibraryClient
from bookcorner.mcp.tools.discovery import browse_authors, get_book, search_books
from bookcorner.mcp.tools.favorites import toggle_favorite_author
from bookcorner.mcp.tools.importing import import_catalog
from bookcorner.mcp.tools.library import add_book
from bookcorner.mcp.tools.loans import lend_book, list_loans, return_book
from bookcorner.mcp.tools.profile import library_profile
from bookcorner.mcp.tools.reviews import get_reviews, review_book
from bookcorner.mcp.tools.wishlist import add_to_wishlist, browse_wishlist


@pytest.fixture
def lib(client):
    return LibraryClient(client)


# --- search / discovery ---

@pytest.mark.asyncio
async def test_search_books_by_query(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire")
    await add_book(lib, title="Le Murder Club du jeudi", author="Osman, Richard", added_by="Claire")
    result = await search_books(lib, query="osm")
    assert [b["title"] for b in result] == ["Le Murder Club du jeudi"]


@pytest.mark.asyncio
async def test_search_books_by_letter(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire")
    await add_book(lib, title="Le Murder Club du jeudi", author="Osman, Richard", added_by="Claire")
    result = await search_books(lib, letter="F")
    assert [b["author"] for b in result] == ["Fellowes, Julian"]


@pytest.mark.asyncio
async def test_search_books_bad_letter_returns_empty(lib):
    assert await search_books(lib, letter="??") == []


@pytest.mark.asyncio
async def test_browse_authors(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire")
    await add_to_wishlist(lib, title="Une funeste croisière", author="Fellowes, Jessica", added_by="Marc")
    assert await browse_authors(lib, prefix="fell") == ["Fellowes, Jessica", "Fellowes, Julian"]
    assert await browse_authors(lib, source="books") == ["Fellowes, Julian"]


@pytest.mark.asyncio
async def test_get_book_found(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire")
    result = await get_book(lib, title="belgravia", author="Fellowes, Julian")
    assert result["title"] == "Belgravia"
    assert "reviews" in result


@pytest.mark.asyncio
async def test_get_book_not_found(lib):
    result = await get_book(lib, title="Nonexistent", author="Nobody")
    assert result["error"] is True
    assert result["status"] == 404


# --- add_book ---

@pytest.mark.asyncio
async def test_add_book_with_review(lib):
    result = await add_book(
        lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire",
        rating=4, comment="Très bien",
    )
    assert result["total_reviews"] == 1
    assert result["average_rating"] == 4
    assert result["reviews"][0]["reviewer_name"] == "Claire"


@pytest.mark.asyncio
async def test_add_book_duplicate(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire")
    result = await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Marc")
    assert result["status"] == 409


# --- reviews ---

@pytest.mark.asyncio
async def test_review_book_creates_then_updates(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire")

    first = await review_book(lib, title="Belgravia", author="Fellowes, Julian", reviewer_name="Marc", rating=3)
    assert first["rating"] == 3

    second = await review_book(
        lib, title="Belgravia", author="Fellowes, Julian", reviewer_name="Marc", comment="Finalement très bien",
    )
    assert second["id"] == first["id"]
    assert second["rating"] == 3
    assert second["comment"] == "Finalement très bien"

    book = await get_book(lib, title="Belgravia", author="Fellowes, Julian")
    assert book["total_reviews"] == 1


@pytest.mark.asyncio
async def test_review_unknown_book(lib):
    result = await review_book(lib, title="Nope", author="Nobody", reviewer_name="Marc", rating=3)
    assert result["status"] == 404


@pytest.mark.asyncio
async def test_get_reviews_min_rating(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire", rating=5)
    await add_book(lib, title="Crème anglaise", author="Clanchy, Kate", added_by="Claire", rating=2)
    result = await get_reviews(lib, min_rating=4)
    assert [r["book_title"] for r in result] == ["Belgravia"]


# --- loans ---

@pytest.mark.asyncio
async def test_lend_and_return(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire")

    lent = await lend_book(lib, title="Belgravia", author="Fellowes, Julian", loaned_to="Sophie")
    assert lent["loaned_to"] == "Sophie"
    loans = await list_loans(lib)
    assert [(loan["title"], loan["loaned_to"]) for loan in loans] == [("Belgravia", "Sophie")]

    back = await return_book(lib, title="Belgravia", author="Fellowes, Julian")
    assert back["loaned_to"] is None
    assert await list_loans(lib) == []


@pytest.mark.asyncio
async def test_tools_reach_renamed_book(lib):
    book = await add_book(lib, title="Dnue", author="Herbert, Frank", added_by="Claire")
    await lib.put(f"/api/books/{book['id']}", json={"title": "Dune"})

    lent = await lend_book(lib, title="Dune", author="Herbert, Frank", loaned_to="Sophie")
    assert lent["id"] == book["id"]
    reviewed = await review_book(lib, title="Dune", author="Herbert, Frank", reviewer_name="Marc", rating=5)
    assert reviewed["book_id"] == book["id"]

    missing = await return_book(lib, title="Dnue", author="Herbert, Frank")
    assert missing["error"] is True
    assert missing["status"] == 404


@pytest.mark.asyncio
async def test_get_book_with_slash_in_title(lib):
    await add_book(lib, title="AC/DC: la biographie", author="Masino, Susan", added_by="Claire")
    result = await get_book(lib, title="AC/DC: la biographie", author="Masino, Susan")
    assert result["title"] == "AC/DC: la biographie"


# --- wishlist ---

@pytest.mark.asyncio
async def test_wishlist_tools(lib):
    await add_to_wishlist(lib, title="Le chant du cygne", author="Dennison, Hannah", added_by="Marc")
    await add_to_wishlist(lib, title="Un Noël mortel", author="Dennison, Hannah", added_by="Marc")
    groups = await browse_wishlist(lib)
    assert len(groups) == 1
    assert groups[0]["author"] == "Dennison, Hannah"
    assert len(groups[0]["items"]) == 2


# --- favorites ---

@pytest.mark.asyncio
async def test_toggle_favorite_author(lib):
    on = await toggle_favorite_author(lib, name="Colgan, Jenny")
    assert on == {"name": "Colgan, Jenny", "is_favorite": True}
    assert await lib.get("/api/favorites") == ["Colgan, Jenny"]

    off = await toggle_favorite_author(lib, name="Colgan, Jenny")
    assert off["is_favorite"] is False
    assert await lib.get("/api/favorites") == []


@pytest.mark.asyncio
async def test_toggle_favorite_author_with_reserved_characters(lib):
    for name in ("Goscinny/Uderzo", "Who? Me"):
        on = await toggle_favorite_author(lib, name=name)
        assert on == {"name": name, "is_favorite": True}
    assert sorted(await lib.get("/api/favorites")) == ["Goscinny/Uderzo", "Who? Me"]

    off = await toggle_favorite_author(lib, name="Goscinny/Uderzo")
    assert off["is_favorite"] is False
    assert await lib.get("/api/favorites") == ["Who? Me"]


# --- profile ---

@pytest.mark.asyncio
async def test_library_profile(lib):
    await add_book(lib, title="Belgravia", author="Fellowes, Julian", added_by="Claire", rating=5)
    await add_book(lib, title="Crème anglaise", author="Clanchy, Kate", added_by="Claire", rating=3)
    await add_book(lib, title="Meurtres au paradis", author="Thorogood, Robert", added_by="Marc")
    await review_book(lib, title="Crème anglaise", author="Clanchy, Kate", reviewer_name="Marc", rating=5)
    await toggle_favorite_author(lib, name="Thorogood, Robert")

    profile = await library_profile(lib)
    assert profile["total_books"] == 3
    assert profile["total_reviews"] == 3
    assert profile["favorite_authors"] == ["Thorogood, Robert"]
    assert profile["rating_distribution"] == {"5": 2, "3": 1}
    assert [b["title"] for b in profile["top_rated"]] == ["Belgravia", "Crème anglaise"]
    assert profile["most_active_reviewers"][0] == {"name": "Claire", "reviews": 2}


# --- import ---

@pytest.mark.asyncio
async def test_import_catalog_from_content(lib):
    csv_content = "author,title\nKinsey T.E.,Meurtres en bord de mer\nHannah H.Y.,Petits crimes et jardins secrets\n"
    result = await import_catalog(lib, csv_content=csv_content)
    assert result["books_created"] == 2
    assert len(await search_books(lib)) == 2


@pytest.mark.asyncio
async def test_import_catalog_from_file(lib, tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text("author,title,added_by\nOsman Richard,Le Murder Club du jeudi,Marc\n", encoding="utf-8")
    result = await import_catalog(lib, file_path=str(path))
    assert result["books_created"] == 1


@pytest.mark.asyncio
async def test_import_catalog_missing_input(lib):
    result = await import_catalog(lib)
    assert result["error"] is True

    result = await import_catalog(lib, file_path="/nonexistent/catalog.csv")
    assert "File not found" in result["detail"]
