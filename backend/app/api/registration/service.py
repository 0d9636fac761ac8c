import logging
from app.api.registration import crud, schemas
from app.api.registration.models import Assigned, Rejected, RegistrationOutcome
from app.core import config
from app.core.database import AttendeeDirectory
from app.core.errors import (
    InternalError,
    NotFoundError,
    RegistrationError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _require_identifier(identifier) -> str:
    if identifier is None or not str(identifier).strip():
        raise ValidationError("Please enter your SAP ID")
    return str(identifier)


def register(
    directory: AttendeeDirectory, payload: schemas.RegistrationRequest
) -> RegistrationOutcome:
    """
    Look up the submitted SAP ID and turn the result into an outcome.
    Never raises; every failure becomes a Rejected with its status code.
    """
    identifier = payload.identifier
    try:
        identifier = _require_identifier(identifier)
        attendee = crud.find_attendee(directory, identifier)
        if attendee is None:
            raise NotFoundError()
    except RegistrationError as e:
        logger.info(
            "Registration failed for SAP ID %r: %s", identifier, e.message
        )
        return Rejected.from_error(e)
    except Exception:
        logger.exception("Registration error for SAP ID %r", identifier)
        return Rejected.from_error(InternalError())

    logger.info(
        "Registration: %s (SAP: %s) -> %s",
        attendee.name,
        identifier.strip(),
        attendee.assignment,
    )
    return Assigned(
        assignment=attendee.assignment,
        name=attendee.name,
        department=attendee.department or "",
        message=config.WELCOME_MESSAGE,
    )


def reload(directory: AttendeeDirectory) -> int:
    return directory.reload()
