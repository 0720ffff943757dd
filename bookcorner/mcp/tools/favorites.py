from urllib.parse import quote

from bookcorner.mcp.client import LibraryClient


async def toggle_favorite_author(client: LibraryClient, name: str) -> dict:
    path = f"/api/favorites/{quote(name, safe='')}"
    status = await client.get(path)
    if client.is_error(status):
        return status
    if status["is_favorite"]:
        result = await client.delete(path)
    else:
        result = await client.post("/api/favorites", json={"name": name})
    if client.is_error(result):
        return result
    return {"name": name, "is_favorite": not status["is_favorite"]}
