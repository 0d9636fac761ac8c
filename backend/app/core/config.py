import os
from dotenv import load_dotenv

load_dotenv()

BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_FILE = os.getenv("DATABASE_FILE") or os.path.join(BACKEND_DIR, "database.xlsx")
SEED_SAMPLE_DATABASE = _env_flag("SEED_SAMPLE_DATABASE", True)

WELCOME_MESSAGE = os.getenv(
    "WELCOME_MESSAGE",
    "Registration successful! Welcome to the Digital Workshop 2026!",
)

# unset means the form pages call the registration API in-process
REGISTRATION_API_URL = os.getenv("REGISTRATION_API_URL") or None

ENABLE_DIAGNOSTICS = _env_flag("ENABLE_DIAGNOSTICS", True)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
