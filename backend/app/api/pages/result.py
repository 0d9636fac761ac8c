"""
Result page state machine.

The page starts in LOADING and moves exactly once, to SUCCESS or ERROR,
depending on the navigation parameters it was opened with.
"""
import enum
import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

REVEAL_DELAY_MS = 300

DEFAULT_LABEL = "Your Assigned Table"
ROLE_LABEL = "Your Role"
HOST_MARKER = "🎯 Host"
COORDINATOR_MARKER = "🎓 Coordinator"

INVALID_DATA_MESSAGE = "Invalid registration data. Please try again."
RENDER_FAILURE_MESSAGE = "Unable to display registration result."

_TEAM_PREFIX = re.compile(r"^Team\s+", re.IGNORECASE)


class ResultState(str, enum.Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


TRANSITIONS = {
    ResultState.LOADING: {ResultState.SUCCESS, ResultState.ERROR},
    ResultState.SUCCESS: set(),
    ResultState.ERROR: set(),
}


@dataclass(frozen=True)
class AssignmentDisplay:
    label: str
    value: str
    is_role: bool


@dataclass(frozen=True)
class ResultView:
    state: ResultState = ResultState.LOADING
    assignment: Optional[AssignmentDisplay] = None
    name: str = ""
    department: str = ""
    message: str = ""
    error: str = ""
    reveal_delay_ms: int = 0

    def transition(self, state: ResultState, **fields) -> "ResultView":
        if state not in TRANSITIONS[self.state]:
            raise ValueError(f"Cannot go from {self.state.value} to {state.value}")
        return ResultView(state=state, reveal_delay_ms=REVEAL_DELAY_MS, **fields)

    def fail(self, message: str) -> "ResultView":
        return self.transition(ResultState.ERROR, error=message)


def capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def display_assignment(assignment: str) -> AssignmentDisplay:
    lowered = assignment.lower()
    if "host" in lowered:
        return AssignmentDisplay(ROLE_LABEL, HOST_MARKER, True)
    if "coordinator" in lowered:
        return AssignmentDisplay(ROLE_LABEL, COORDINATOR_MARKER, True)
    return AssignmentDisplay(DEFAULT_LABEL, _TEAM_PREFIX.sub("Table ", assignment, count=1), False)


def resolve_result(params: Mapping[str, str]) -> ResultView:
    view = ResultView()
    try:
        error = params.get("error")
        if error:
            return view.fail(error)

        table_no = params.get("tableNo")
        name = params.get("name")
        # "role" may be present but the assignment text decides the display
        if not table_no or not name:
            return view.fail(INVALID_DATA_MESSAGE)

        return view.transition(
            ResultState.SUCCESS,
            assignment=display_assignment(table_no),
            name=capitalize_words(name),
            department=params.get("department") or "",
            message=params.get("message") or "",
        )
    except Exception:
        logger.exception("Error displaying result")
        return view.fail(RENDER_FAILURE_MESSAGE)
