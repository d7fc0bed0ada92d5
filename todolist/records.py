"""To-do record model."""

from dataclasses import dataclass
from enum import Enum


class RecordStatus(Enum):
    """Lifecycle state of a to-do record."""

    IN_PROGRESS = "In Progress"
    DONE = "Done"
    DELETED = "Deleted"

    @classmethod
    def parse(cls, text: str) -> "RecordStatus":
        """Parse the stored text form of a status."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown status: {text}") from None

    def __str__(self) -> str:
        return self.value


@dataclass
class Record:
    """A to-do item: creation time (UNIX seconds), content and status."""

    timestamp: int
    content: str
    status: RecordStatus = RecordStatus.IN_PROGRESS