from bookcorner.mcp.client import LibraryClient


async def search_books(
    client: LibraryClient,
    query: str | None = None,
    letter: str | None = None,
    favorites_only: bool = False,
    limit: int = 200,
    offset: int = 0,
) -> list[dict]:
    params: dict = {"limit": limit, "offset": offset}
    if query:
        params["q"] = query
    if letter:
        params["letter"] = letter
    if favorites_only:
        params["favorites_only"] = "true"
    result = await client.get("/api/books", params=params)
    if client.is_error(result):
        return []
    return result


async def browse_authors(
    client: LibraryClient,
    prefix: str | None = None,
    source: str = "all",
) -> list[str]:
    params = {"source": source}
    if prefix:
        params["prefix"] = prefix
    result = await client.get("/api/authors", params=params)
    if client.is_error(result):
        return []
    return result


async def get_book(client: LibraryClient, title: str, author: str) -> dict:
    return await client.get("/api/books/lookup", params={"title": title, "author": author})
