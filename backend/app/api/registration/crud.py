from typing import Optional, Tuple
from app.api.registration.models import AttendeeRecord
from app.core.database import AttendeeDirectory


def find_attendee(
    directory: AttendeeDirectory, identifier: str
) -> Optional[AttendeeRecord]:
    """First record whose SAP ID equals the trimmed identifier, in load order."""
    wanted = identifier.strip()
    for attendee in directory.snapshot():
        if str(attendee.identifier) == wanted:
            return attendee
    return None


def list_attendees(directory: AttendeeDirectory) -> Tuple[AttendeeRecord, ...]:
    return directory.snapshot()
