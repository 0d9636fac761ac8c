import logging
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core import config
from app.core.database import directory
from app.core.errors import RegistrationError, ValidationError
from app.api.registration.routes import router as registration_router
from app.api.pages.routes import router as pages_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

JSON_API_PATHS = {"/register"}


app = FastAPI(title="QR Event Registration")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(registration_router)
app.include_router(pages_router)


@app.exception_handler(RegistrationError)
async def registration_error_handler(request: Request, exc: RegistrationError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # /register answers {success, message} even for bodies it cannot parse
    if request.url.path not in JSON_API_PATHS:
        return await request_validation_exception_handler(request, exc)
    logger.info("Malformed registration request: %s", exc.errors())
    return await registration_error_handler(
        request, ValidationError("Please enter a valid SAP ID")
    )


@app.get("/health")
async def health_check():
    return JSONResponse(content={"ok": True})


@app.on_event("startup")
async def startup():
    count = directory.load()
    logger.info("QR registration server ready: %d attendees from %s", count, directory.path)
