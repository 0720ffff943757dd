import os
from pathlib import Path

DB_PATH = os.environ.get("BOOKCORNER_DB_PATH", str(Path.cwd() / "bookcorner.db"))
DATABASE_URL = f"sqlite+aiosqlite:///{DB_PATH}"

LOG_LEVEL = os.environ.get("BOOKCORNER_LOG_LEVEL", "INFO").upper()

# Owner recorded on books that arrive without one (catalog imports)
DEFAULT_ADDED_BY = os.environ.get("BOOKCORNER_DEFAULT_ADDED_BY", "Bibliothèque")

API_TITLE = "Bookcorner"
