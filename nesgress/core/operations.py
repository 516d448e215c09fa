"""
Operation records and the nesting stack.

The stack is deliberately unlocked: ProgressDisplay owns it and calls every
method while holding its own lock.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


logger = logging.getLogger(__name__)


@dataclass
class OperationRecord:
    """One tracked unit of work."""
    label: str
    depth: int
    started_at: float = field(default_factory=time.monotonic)
    persistent: bool = False
    accomplishments: List[str] = field(default_factory=list)

    def elapsed_ms(self, now: Optional[float] = None) -> int:
        """Whole milliseconds since the record was pushed."""
        now = time.monotonic() if now is None else now
        return int((now - self.started_at) * 1000)

    def log(self, text: str):
        """Append an accomplishment; ignored on transient records."""
        if self.persistent:
            self.accomplishments.append(text)


class OperationStack:
    """
    Ordered stack of in-flight operations, innermost last.

    entries[i].depth == i always holds: records above a removed one move
    down a level.
    """

    def __init__(self):
        self.entries: List[OperationRecord] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __iter__(self) -> Iterator[OperationRecord]:
        return iter(list(self.entries))

    def labels(self) -> List[str]:
        return [record.label for record in self.entries]

    def push(self, label: str, persistent: bool = False) -> OperationRecord:
        """
        Push a new record at depth = current length.

        Args:
            label: Display text
            persistent: True for records created by start_persistent

        Returns:
            The new record
        """
        record = OperationRecord(label=label, depth=len(self.entries), persistent=persistent)
        self.entries.append(record)
        return record

    def top(self) -> Optional[OperationRecord]:
        return self.entries[-1] if self.entries else None

    def top_persistent(self) -> Optional[OperationRecord]:
        for record in reversed(self.entries):
            if record.persistent:
                return record
        return None

    def find(self, label: str, persistent: bool = False) -> Optional[int]:
        """
        Index of the innermost record with this label and persistence flag.

        Duplicate labels resolve to the most recently pushed match.
        """
        for index in range(len(self.entries) - 1, -1, -1):
            record = self.entries[index]
            if record.label == label and record.persistent == persistent:
                return index
        return None

    def pop(self, label: str, persistent: bool = False) -> Optional[OperationRecord]:
        """
        Remove the innermost record matching label.

        Returns:
            The matched record, or None when nothing matched (stack untouched)
        """
        index = self.find(label, persistent)
        if index is None:
            return None
        return self._remove_at(index)

    def pop_top(self, persistent: bool = False) -> Optional[OperationRecord]:
        """
        Remove the record an unlabelled completion refers to.

        Transient completions only take the top, and only if it is transient.
        Persistent completions take the innermost persistent record.
        """
        if not self.entries:
            return None
        if not persistent:
            if self.entries[-1].persistent:
                return None
            return self.entries.pop()
        record = self.top_persistent()
        if record is None:
            return None
        return self._remove_at(record.depth)

    def update_label(self, new_label: str) -> bool:
        """Relabel the top record. Returns False when the stack is empty."""
        if not self.entries:
            return False
        self.entries[-1].label = new_label
        return True

    def clear(self) -> int:
        """Discard everything. Returns the number of records dropped."""
        count = len(self.entries)
        self.entries.clear()
        return count

    def _remove_at(self, index: int) -> OperationRecord:
        record = self.entries.pop(index)
        for position in range(index, len(self.entries)):
            self.entries[position].depth = position
        if index < len(self.entries):
            logger.debug(
                f"Completed '{record.label}' with {len(self.entries) - index} operation(s) still running above it"
            )
        return record
