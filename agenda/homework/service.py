"""In-memory record store for homework items."""
import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, Optional, Union

from agenda.errors import RecordNotFoundError
from .models import HomeworkRecord, record_key
from .priority import classify

logger = logging.getLogger(__name__)

# Demo data every fresh process starts with
BOOTSTRAP_RECORDS = [
    {
        "name": "a2-shortstack",
        "course": "Webware",
        "dueDate": "2021-09-09T11:59:00-0400",
        "subDate": "2021-09-08T11:59:00-0400",
    },
    {
        "name": "CSS Grid Garden",
        "course": "Webware",
        "dueDate": "2021-09-09T11:59:00-0400",
        "subDate": "2021-09-09T09:00:00-0400",
    },
    {
        "name": "Project 2",
        "course": "Mobile Computing",
        "dueDate": "2021-09-17T23:59:00-0400",
        "subDate": "2021-09-10T23:59:00-0400",
    },
]


class RecordStore:
    """Homework records keyed by submission date.

    Every write recomputes the record's priority. All access goes through a
    single lock because FastAPI runs synchronous endpoints on a thread pool.
    """

    def __init__(self, records: Optional[Iterable[HomeworkRecord]] = None):
        self._records: Dict[str, HomeworkRecord] = {}
        self._lock = threading.Lock()
        if records is not None:
            self.seed(records)

    def seed(self, records: Iterable[HomeworkRecord]) -> None:
        for record in records:
            self.upsert(record)

    def list(self) -> Dict[str, HomeworkRecord]:
        """Snapshot of the record set in insertion order."""
        with self._lock:
            return dict(self._records)

    def get(self, sub_date: Union[datetime, str]) -> HomeworkRecord:
        key = record_key(sub_date)
        with self._lock:
            try:
                return self._records[key]
            except KeyError:
                raise RecordNotFoundError(key)

    def upsert(self, record: HomeworkRecord) -> HomeworkRecord:
        """Store ``record`` under its submission date, replacing any record
        already there, and return it with its derived priority."""
        stored = record.model_copy(
            update={"priority": classify(record.due_date, record.sub_date)}
        )
        key = stored.key
        with self._lock:
            replaced = key in self._records
            self._records[key] = stored
        logger.info(
            f"{'Replaced' if replaced else 'Added'} homework {stored.name!r} "
            f"at {key} with priority {stored.priority.value}"
        )
        return stored

    def remove(self, sub_date: Union[datetime, str]) -> HomeworkRecord:
        """Delete the record submitted at ``sub_date``.

        Raises:
            RecordNotFoundError: if no record has that submission date.
        """
        key = record_key(sub_date)
        with self._lock:
            try:
                removed = self._records.pop(key)
            except KeyError:
                raise RecordNotFoundError(key)
        logger.info(f"Removed homework {removed.name!r} at {key}")
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, sub_date) -> bool:
        key = record_key(sub_date)
        with self._lock:
            return key in self._records


def bootstrap_store() -> RecordStore:
    """Build a store pre-seeded with the demo records."""
    return RecordStore(HomeworkRecord.model_validate(r) for r in BOOTSTRAP_RECORDS)


record_store = bootstrap_store()


def get_record_store() -> RecordStore:
    """Dependency to get the process-wide record store."""
    return record_store
