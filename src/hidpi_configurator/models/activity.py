"""Recent activity records."""
from __future__ import annotations

import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Deque, Iterator, List

DEFAULT_ACTIVITY_LIMIT = 10


class Severity(str, Enum):
    INFO = "info"
    NOTICE = "notice"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class ActivityRecord:
    """A single immutable entry in the activity log."""

    title: str
    description: str
    icon_tag: str
    severity: Severity
    timestamp: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def formatted_timestamp(self) -> str:
        return self.timestamp.strftime("%b %d, %Y at %H:%M")


class ActivityLog:
    """Bounded newest-first log; the oldest record is evicted on overflow."""

    def __init__(self, limit: int = DEFAULT_ACTIVITY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("activity limit must be at least 1")
        self._records: Deque[ActivityRecord] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._records.maxlen or 0

    def add(self, record: ActivityRecord) -> None:
        self._records.appendleft(record)

    def records(self) -> List[ActivityRecord]:
        return list(self._records)

    def latest(self) -> ActivityRecord | None:
        return self._records[0] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ActivityRecord]:
        return iter(list(self._records))
