from pathlib import Path

from bookcorner.mcp.client import LibraryClient


async def import_catalog(
    client: LibraryClient,
    file_path: str | None = None,
    csv_content: str | None = None,
) -> dict:
    if file_path:
        p = Path(file_path).expanduser()
        if not p.exists():
            return {"error": True, "detail": f"File not found: {file_path}"}
        csv_content = p.read_text(encoding="utf-8")
    if not csv_content:
        return {"error": True, "detail": "Provide either file_path or csv_content"}
    files = {"file": ("catalog.csv", csv_content.encode(), "text/csv")}
    return await client.upload("/api/import/books", files=files)
