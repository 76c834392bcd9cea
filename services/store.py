# services/store.py
import copy
import json
import os

from loguru import logger

from services.models import Database
from utils.exceptions import StorageError


def _dumps(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class JsonFileStore:
    """Load/save the whole database from a single JSON file."""

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> Database:
        """Return the stored Database; raises StorageError if missing or malformed."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as exc:
            logger.error("Database file not found: {}", self.path)
            raise StorageError(f"database file not found: {self.path}", self.path) from exc
        except json.JSONDecodeError as exc:
            logger.error("Database file is not valid JSON: {} ({})", self.path, exc)
            raise StorageError(f"invalid JSON in {self.path}: {exc}", self.path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read database file {}: {}", self.path, exc)
            raise StorageError(f"cannot read {self.path}: {exc}", self.path) from exc

        try:
            return Database.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Malformed database in {}: {!r}", self.path, exc)
            raise StorageError(f"malformed database in {self.path}: {exc!r}", self.path) from exc

    def save(self, db: Database):
        """Overwrite the file with the full database, indented."""
        try:
            text = _dumps(db.to_dict())
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Could not write database file {}: {}", self.path, exc)
            raise StorageError(f"cannot write {self.path}: {exc}", self.path) from exc

    def init_db(self):
        """Create an empty database file, creating folders if needed. Never overwrites."""
        if self.exists():
            return
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        except OSError as exc:
            raise StorageError(f"cannot create folder for {self.path}: {exc}", self.path) from exc
        self.save(Database())
        logger.info("Initialized empty database at {}", self.path)


class InMemoryStore:
    """Store double that keeps a serialized snapshot instead of a file."""

    def __init__(self, db: Database | None = None):
        self._data = (db or Database()).to_dict()

    def load(self) -> Database:
        return Database.from_dict(copy.deepcopy(self._data))

    def save(self, db: Database):
        self._data = copy.deepcopy(db.to_dict())
