from httpx import AsyncClient, Response


class LibraryClient:
    """Calls the bookcorner API and turns responses into plain tool results.

    4xx answers come back as ``{"error": True, "status": ..., "detail": ...}``
    so a tool can report them; 5xx answers raise.
    """

    def __init__(self, http: AsyncClient) -> None:
        self.http = http

    async def get(self, path: str, **kwargs) -> dict | list:
        return self._handle(await self.http.get(path, **kwargs))

    async def post(self, path: str, **kwargs) -> dict | list:
        return self._handle(await self.http.post(path, **kwargs))

    async def put(self, path: str, **kwargs) -> dict | list:
        return self._handle(await self.http.put(path, **kwargs))

    async def delete(self, path: str, **kwargs) -> dict | list:
        return self._handle(await self.http.delete(path, **kwargs))

    async def upload(self, path: str, files: dict, **kwargs) -> dict | list:
        return self._handle(await self.http.post(path, files=files, **kwargs))

    @staticmethod
    def is_error(result: dict | list) -> bool:
        return isinstance(result, dict) and bool(result.get("error"))

    def _handle(self, resp: Response) -> dict | list:
        if resp.status_code == 204:
            return {"ok": True}
        if resp.status_code >= 500:
            raise RuntimeError(f"Server error {resp.status_code}: {resp.text}")
        if resp.status_code >= 400:
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            return {"error": True, "status": resp.status_code, "detail": detail}
        return resp.json()
