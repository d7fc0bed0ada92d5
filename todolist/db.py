"""The to-do list kept in memory and mirrored to a file store."""

import hashlib
import time

from todolist.records import Record, RecordStatus
from todolist.storage import DB_FILE_PATH, TMP_FILE_PATH, FileStore


def short_hash(value: str) -> str:
    """Hash a string into a short eight-character hex key."""
    return hashlib.blake2b(value.encode("utf-8"), digest_size=8).hexdigest()[:8]


class ToDoList:
    """A collection of to-do records keyed by short hashes."""

    def __init__(self, store: FileStore):
        self.store = store
        self._records: dict[str, Record] = store.load()

    @classmethod
    def load(cls, path: str = DB_FILE_PATH, tmp_path: str = TMP_FILE_PATH) -> "ToDoList":
        """Open the list stored at ``path``."""
        return cls(FileStore(path, tmp_path))

    def in_progress(self) -> list[tuple[str, Record]]:
        """Return the records that are still in progress."""
        return [
            (key, record)
            for key, record in self._records.items()
            if record.status is RecordStatus.IN_PROGRESS
        ]

    def count_by_status(self, status: RecordStatus) -> int:
        """Count the records with the given status."""
        return sum(1 for record in self._records.values() if record.status is status)

    def add(self, content: str) -> str:
        """Add a new in-progress record and return its key."""
        key = short_hash(f"{content}{time.time_ns()}")
        record = Record(int(time.time()), content, RecordStatus.IN_PROGRESS)
        self._records[key] = record
        self.store.add(key, record)
        return key

    def _get(self, action: str, key: str) -> Record:
        try:
            return self._records[key]
        except KeyError:
            raise KeyError(f"[{action} {key} failed] Key is not exist") from None

    def edit(self, key: str, content: str) -> None:
        """Replace the content of a record."""
        record = self._get("Edit", key)
        record.content = content
        self.store.edit(key, record)

    def check(self, key: str) -> None:
        """Mark a record as done."""
        record = self._get("Check", key)
        record.status = RecordStatus.DONE
        self.store.edit(key, record)

    def delete(self, key: str) -> None:
        """Soft-delete a record."""
        record = self._get("Delete", key)
        record.status = RecordStatus.DELETED
        self.store.edit(key, record)