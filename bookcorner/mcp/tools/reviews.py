from bookcorner.mcp.client import LibraryClient
from bookcorner.mcp.tools.discovery import get_book


async def review_book(
    client: LibraryClient,
    title: str,
    author: str,
    reviewer_name: str,
    rating: int | None = None,
    comment: str | None = None,
) -> dict:
    book = await get_book(client, title, author)
    if client.is_error(book):
        return book
    key = book["id"]

    body: dict = {"reviewer_name": reviewer_name}
    if rating is not None:
        body["rating"] = rating
    if comment is not None:
        body["comment"] = comment

    result = await client.post(f"/api/books/{key}/reviews", json=body)

    # Same reviewer again: update their review instead
    if isinstance(result, dict) and result.get("status") == 409:
        existing = await client.get(f"/api/books/{key}/reviews")
        if client.is_error(existing):
            return existing
        mine = next((r for r in existing if r["reviewer_name"] == reviewer_name), None)
        if mine is None:
            return result
        body.pop("reviewer_name")
        result = await client.put(f"/api/reviews/{mine['id']}", json=body)

    return result


async def get_reviews(
    client: LibraryClient,
    min_rating: int | None = None,
    limit: int = 50,
) -> list[dict]:
    params: dict = {"limit": limit}
    if min_rating is not None:
        params["min_rating"] = min_rating
    result = await client.get("/api/reviews", params=params)
    if client.is_error(result):
        return []
    return result
