"""Shell-side application state.

AppState is an immutable value; every transition builds a new one and the
session swaps it in whole. Only one analysis may be in flight at a time.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from textlens import gateway
from textlens.errors import AnalysisInProgressError, InputError, user_message
from textlens.models import AnalysisResult, ViewId
from textlens.views import ViewSpec, select_view

log = logging.getLogger(__name__)

Analyzer = Callable[[str], Awaitable[AnalysisResult]]


class Status(str, Enum):
    IDLE = "idle"
    BUSY = "busy"
    SUCCESS = "success"
    ERROR = "error"


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Status = Status.IDLE
    result: AnalysisResult | None = None
    error: str = ""
    active_view: ViewId = ViewId.REFINED
    elapsed_s: float = 0.0

    @property
    def is_busy(self) -> bool:
        return self.status is Status.BUSY


# ── Transitions ──


def begin(state: AppState) -> AppState:
    # The previous result is dropped on every attempt, win or lose.
    return state.model_copy(
        update={"status": Status.BUSY, "result": None, "error": "", "elapsed_s": 0.0}
    )


def succeed(state: AppState, result: AnalysisResult, elapsed_s: float = 0.0) -> AppState:
    return state.model_copy(
        update={
            "status": Status.SUCCESS,
            "result": result,
            "error": "",
            "active_view": ViewId.REFINED,
            "elapsed_s": elapsed_s,
        }
    )


def fail(state: AppState, message: str, elapsed_s: float = 0.0) -> AppState:
    return state.model_copy(
        update={"status": Status.ERROR, "result": None, "error": message, "elapsed_s": elapsed_s}
    )


def reject_input(state: AppState, message: str) -> AppState:
    # Nothing was attempted: keep status and the current result.
    return state.model_copy(update={"error": message})


def choose_view(state: AppState, view_id: ViewId | str) -> AppState:
    return state.model_copy(update={"active_view": ViewId(view_id)})


class AnalysisSession:
    """Owns the single current AppState and serializes analysis runs."""

    def __init__(self, analyzer: Analyzer | None = None):
        self._analyze = analyzer or gateway.analyze
        self._state = AppState()

    @property
    def state(self) -> AppState:
        return self._state

    async def run(self, text: str) -> AppState:
        """Analyze `text` and return the resulting state.

        Raises AnalysisInProgressError if another run has not finished.
        Blank text only sets the error; the previous result stays.
        Analysis failures are recorded in the state, not raised.
        """
        # No await between the check and the transition, so this is atomic
        # on a single event loop.
        if self._state.is_busy:
            raise AnalysisInProgressError("An analysis is already in flight")
        if not isinstance(text, str) or not text.strip():
            self._state = reject_input(self._state, InputError.user_message)
            return self._state
        self._state = begin(self._state)

        t0 = time.monotonic()
        try:
            result = await self._analyze(text)
        except Exception as e:
            log.warning("Analysis failed: %s: %s", type(e).__name__, e)
            self._state = fail(self._state, user_message(e), round(time.monotonic() - t0, 2))
        else:
            self._state = succeed(self._state, result, round(time.monotonic() - t0, 2))
        return self._state

    def select(self, view_id: ViewId | str) -> AppState:
        self._state = choose_view(self._state, view_id)
        return self._state

    def current_view(self, view_id: ViewId | str | None = None) -> ViewSpec | None:
        """ViewSpec for `view_id` (default: the active view), or None without a result."""
        if self._state.result is None:
            return None
        return select_view(self._state.result, view_id or self._state.active_view)
