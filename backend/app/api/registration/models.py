from dataclasses import dataclass
from typing import Union

from app.core.errors import RegistrationError

Assignment = Union[str, int]


@dataclass(frozen=True)
class AttendeeRecord:
    name: str
    identifier: str
    assignment: Assignment
    department: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "department": self.department,
            "identifier": self.identifier,
            "assignment": self.assignment,
        }


@dataclass(frozen=True)
class Assigned:
    assignment: Assignment
    name: str
    department: str
    message: str

    status_code = 200

    def to_payload(self) -> dict:
        # the wire name stays "tableNo" even for role labels
        return {
            "success": True,
            "tableNo": self.assignment,
            "name": self.name,
            "department": self.department,
            "message": self.message,
        }


@dataclass(frozen=True)
class Rejected:
    reason: str
    status_code: int

    @classmethod
    def from_error(cls, error: RegistrationError) -> "Rejected":
        return cls(reason=error.message, status_code=error.status_code)

    def to_payload(self) -> dict:
        return {"success": False, "message": self.reason}


RegistrationOutcome = Union[Assigned, Rejected]
