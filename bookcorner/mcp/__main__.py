import logging
import subprocess
import sys
from pathlib import Path

from httpx import ASGITransport, AsyncClient

from bookcorner.app import create_app
from bookcorner.config import DB_PATH, LOG_LEVEL
from bookcorner.mcp.client import LibraryClient
from bookcorner.mcp.server import create_mcp_server

logger = logging.getLogger("bookcorner.mcp")


def run_migrations():
    """Run Alembic migrations before starting the MCP server."""
    Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)

    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        capture_output=False,
    )
    if result.returncode != 0:
        logger.error("Database migration failed with exit code %d", result.returncode)
        sys.exit(1)


def main():
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_migrations()

    app = create_app()
    transport = ASGITransport(app=app)
    http = AsyncClient(transport=transport, base_url="http://localhost")
    client = LibraryClient(http)
    mcp = create_mcp_server(client)
    logger.info("Serving bookcorner MCP tools over stdio (db: %s)", DB_PATH)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
