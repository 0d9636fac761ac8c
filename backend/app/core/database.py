import logging
import threading
from typing import Tuple

from app.api.registration.models import AttendeeRecord
from app.core.config import DATABASE_FILE, SEED_SAMPLE_DATABASE
from app.utils.spreadsheet import load_attendees

logger = logging.getLogger(__name__)


class AttendeeDirectory:
    """
    In-memory attendee directory backed by a spreadsheet.

    Records live in an immutable tuple. Reload builds a new tuple and swaps
    the reference, so a reader holding a snapshot never sees a mix of the
    old and new rows.
    """

    def __init__(self, path: str, seed_sample: bool = True):
        self.path = path
        self.seed_sample = seed_sample
        self._records: Tuple[AttendeeRecord, ...] = ()
        self._reload_lock = threading.Lock()

    def snapshot(self) -> Tuple[AttendeeRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> int:
        return self.reload()

    def reload(self) -> int:
        with self._reload_lock:
            records = load_attendees(self.path, seed_sample=self.seed_sample)
            self._records = records
        logger.info("Attendee directory now holds %d records", len(records))
        return len(records)


directory = AttendeeDirectory(DATABASE_FILE, seed_sample=SEED_SAMPLE_DATABASE)


def get_directory() -> AttendeeDirectory:
    return directory
