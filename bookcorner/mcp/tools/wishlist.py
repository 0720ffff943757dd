from bookcorner.mcp.client import LibraryClient


async def add_to_wishlist(client: LibraryClient, title: str, author: str, added_by: str) -> dict:
    return await client.post("/api/wishlist", json={"title": title, "author": author, "added_by": added_by})


async def browse_wishlist(
    client: LibraryClient,
    query: str | None = None,
    letter: str | None = None,
) -> list[dict]:
    params = {}
    if query:
        params["q"] = query
    if letter:
        params["letter"] = letter
    result = await client.get("/api/wishlist/by-author", params=params)
    if client.is_error(result):
        return []
    return result
