from bookcorner.mcp.client import LibraryClient


async def add_book(
    client: LibraryClient,
    title: str,
    author: str,
    added_by: str,
    rating: int | None = None,
    comment: str | None = None,
    reviewer_name: str | None = None,
) -> dict:
    body: dict = {"title": title, "author": author, "added_by": added_by}
    if rating is not None or comment:
        body["review"] = {"rating": rating, "comment": comment, "reviewer_name": reviewer_name}
    return await client.post("/api/books", json=body)
