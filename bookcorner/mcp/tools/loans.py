from bookcorner.mcp.client import LibraryClient
from bookcorner.mcp.tools.discovery import get_book


async def lend_book(client: LibraryClient, title: str, author: str, loaned_to: str) -> dict:
    book = await get_book(client, title, author)
    if client.is_error(book):
        return book
    return await client.post(f"/api/books/{book['id']}/loan", json={"loaned_to": loaned_to})


async def return_book(client: LibraryClient, title: str, author: str) -> dict:
    book = await get_book(client, title, author)
    if client.is_error(book):
        return book
    return await client.post(f"/api/books/{book['id']}/return")


async def list_loans(client: LibraryClient) -> list[dict]:
    result = await client.get("/api/loans")
    if client.is_error(result):
        return []
    return [
        {"title": b["title"], "author": b["author"], "loaned_to": b["loaned_to"], "loaned_at": b["loaned_at"]}
        for b in result
    ]
