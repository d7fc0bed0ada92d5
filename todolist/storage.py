"""Line-oriented file storage for to-do records."""

import os
import re
from typing import Iterator

from todolist.records import Record, RecordStatus

SEPARATOR = "|||"
DB_FILE_PATH = "./data/db"
TMP_FILE_PATH = "./data/tmp"

_U64_MAX = 2**64 - 1
_TIMESTAMP = re.compile(r"\+?[0-9]+")


class StorageError(Exception):
    """Raised when the data file holds malformed content."""


def _format_line(key: str, record: Record) -> str:
    return SEPARATOR.join((key, str(int(record.timestamp)), record.content, str(record.status)))


def _parse_timestamp(text: str, line_num: int) -> int:
    if _TIMESTAMP.fullmatch(text):
        value = int(text)
        if value <= _U64_MAX:
            return value
    raise StorageError(f"[Line {line_num}] Invalid timestamp: {text}")


class FileStore:
    """Stores records one per line as ``key|||timestamp|||content|||status``."""

    def __init__(self, path: str = DB_FILE_PATH, tmp_path: str = TMP_FILE_PATH):
        self.path = path
        self.tmp_path = tmp_path

    def _lines(self) -> Iterator[str]:
        with open(self.path, encoding="utf-8", newline="\n") as handle:
            for raw in handle:
                line = raw[:-1] if raw.endswith("\n") else raw
                yield line[:-1] if line.endswith("\r") else line

    def load(self) -> dict[str, Record]:
        """Read every record, creating the file if it does not exist."""
        open(self.path, "a", encoding="utf-8").close()
        records: dict[str, Record] = {}
        for line_num, line in enumerate(self._lines(), start=1):
            fields = line.split(SEPARATOR)
            if len(fields) < 4:
                raise StorageError(
                    f"[Line {line_num}] Not enough fields: expected 4, got {len(fields)}"
                )
            key, raw_time, content, raw_status = fields[:4]
            timestamp = _parse_timestamp(raw_time, line_num)
            try:
                status = RecordStatus.parse(raw_status)
            except ValueError as err:
                raise StorageError(str(err)) from None
            records[key] = Record(timestamp, content, status)
        return records

    def add(self, key: str, record: Record) -> None:
        """Append one record to the file."""
        with open(self.path, "a", encoding="utf-8", newline="\n") as handle:
            handle.write(_format_line(key, record) + "\n")

    def edit(self, key: str, record: Record) -> None:
        """Rewrite the lines starting with ``key`` with the given record."""
        with open(self.tmp_path, "w", encoding="utf-8", newline="\n") as out:
            for line in self._lines():
                if line.startswith(key):
                    out.write(_format_line(key, record) + "\n")
                else:
                    out.write(line + "\n")
        os.replace(self.tmp_path, self.path)