import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from app.api.registration import crud, schemas, service
from app.core import config
from app.core.database import AttendeeDirectory, get_directory

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registration"])


def require_diagnostics():
    if not config.ENABLE_DIAGNOSTICS:
        raise HTTPException(status_code=404, detail="Not Found")


@router.post(
    "/register",
    responses={
        200: {"model": schemas.RegistrationSuccess},
        400: {"model": schemas.RegistrationFailure},
        404: {"model": schemas.RegistrationFailure},
        500: {"model": schemas.RegistrationFailure},
    },
)
def register(
    payload: schemas.RegistrationRequest,
    directory: AttendeeDirectory = Depends(get_directory),
):
    outcome = service.register(directory, payload)
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_payload())


@router.get(
    "/attendees",
    response_model=schemas.AttendeesOut,
    dependencies=[Depends(require_diagnostics)],
)
def get_attendees(directory: AttendeeDirectory = Depends(get_directory)):
    """
    Debug view of the whole directory. Unauthenticated: disable with
    ENABLE_DIAGNOSTICS=false outside internal deployments.
    """
    attendees = crud.list_attendees(directory)
    return {
        "total": len(attendees),
        "attendees": [attendee.to_dict() for attendee in attendees],
    }


@router.post(
    "/reload-database",
    response_model=schemas.ReloadOut,
    dependencies=[Depends(require_diagnostics)],
)
def reload_database(directory: AttendeeDirectory = Depends(get_directory)):
    try:
        count = service.reload(directory)
    except Exception:
        logger.exception("Failed to reload attendee database")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Failed to reload database"},
        )
    return {
        "success": True,
        "message": "Database reloaded successfully",
        "count": count,
    }
