"""
Form controller for the registration page.

Validates the SAP ID before anything leaves the page, posts it to the
registration API and turns the answer into a navigation to the result page.
All failures after validation end up in the single ``error`` parameter.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import urlencode

import httpx

from app.core.errors import SubmissionInProgress, TransportError, ValidationError

logger = logging.getLogger(__name__)

MIN_IDENTIFIER_LENGTH = 4
INLINE_ERROR_SECONDS = 5.0
REGISTER_PATH = "/register"
RESULT_PATH = "/result"
ERROR_PATH = "/error"
GENERIC_FAILURE = "Registration failed. Please try again."

_NON_DIGITS = re.compile(r"[^0-9]")


def sanitize_identifier(raw: Optional[str]) -> str:
    """Drop everything that is not a digit, the same way the input does while typing."""
    return _NON_DIGITS.sub("", raw or "")


def validate_identifier(raw: Optional[str]) -> str:
    identifier = sanitize_identifier(raw)
    if not identifier:
        raise ValidationError("Please enter your SAP ID")
    if len(identifier) < MIN_IDENTIFIER_LENGTH:
        raise ValidationError("Please enter a valid SAP ID")
    return identifier


@dataclass(frozen=True)
class NavigationResult:
    path: str
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        if not self.params:
            return self.path
        return f"{self.path}?{urlencode(self.params)}"

    @classmethod
    def success(cls, payload: dict) -> "NavigationResult":
        def text(key):
            value = payload.get(key)
            return "" if value is None else str(value)

        return cls(
            RESULT_PATH,
            {
                "tableNo": text("tableNo"),
                "name": text("name"),
                "department": text("department"),
                "message": text("message"),
            },
        )

    @classmethod
    def failure(cls, message: str) -> "NavigationResult":
        return cls(ERROR_PATH, {"error": message})


@dataclass(frozen=True)
class InlineError:
    message: str
    dismiss_after: float = INLINE_ERROR_SECONDS


@dataclass(frozen=True)
class FormSubmission:
    identifier: str = ""
    navigation: Optional[NavigationResult] = None
    inline_error: Optional[InlineError] = None


class FormController:
    """One registration form. At most one request in flight at a time."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.submitting = False

    async def submit(self, raw_identifier: Optional[str]) -> FormSubmission:
        if self.submitting:
            raise SubmissionInProgress()

        try:
            identifier = validate_identifier(raw_identifier)
        except ValidationError as e:
            logger.debug("Form validation failed: %s", e.message)
            return FormSubmission(
                identifier=sanitize_identifier(raw_identifier),
                inline_error=InlineError(e.message),
            )

        self.submitting = True
        try:
            navigation = await self._post(identifier)
        finally:
            self.submitting = False
        return FormSubmission(identifier=identifier, navigation=navigation)

    async def _post(self, identifier: str) -> NavigationResult:
        data = {"name": "", "mobile": "", "department": "", "identifier": identifier}
        try:
            response = await self.client.post(REGISTER_PATH, json=data)
            result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Registration request failed: %s", e)
            return NavigationResult.failure(TransportError().message)

        if response.is_success and isinstance(result, dict):
            return NavigationResult.success(result)

        message = result.get("message") if isinstance(result, dict) else None
        return NavigationResult.failure(message or GENERIC_FAILURE)
