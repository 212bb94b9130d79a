# nextup/client/timer.py
import asyncio
from enum import Enum
from typing import Callable, Optional

from nextup.core.config import settings
from nextup.core.logging import logger

Recorder = Callable[[int, int], None]


class Phase(str, Enum):
    READY = "ready"
    PRESENTATION = "presentation"
    QA = "qa"
    COMPLETE = "complete"


class TimerStateError(Exception):
    """Raised when a transition is not valid from the current phase."""


class PresentationTimer:
    """
    Two-phase countdown for one presentation: the talk, then Q&A.

    Elapsed time is derived from the countdown (configured length minus
    what is left), so time spent paused is never counted. A countdown that
    reaches zero during the presentation just stops; moving to Q&A is always
    an explicit advance_to_qa(). When Q&A reaches zero the timer completes
    and submits the full record.

    The recorder receives (presentation_seconds, qa_seconds). It is called
    with qa_seconds=0 on the move to Q&A, and again with both durations when
    Q&A ends. Recorder errors propagate after the transition is applied.
    """

    def __init__(
        self,
        recorder: Optional[Recorder] = None,
        presentation_minutes: int = settings.PRESENTATION_MINUTES,
        qa_minutes: int = settings.QA_MINUTES,
        warning_seconds: int = settings.WARNING_SECONDS,
    ):
        self.recorder = recorder
        self.presentation_minutes = presentation_minutes
        self.qa_minutes = qa_minutes
        self.warning_seconds = warning_seconds

        self.phase = Phase.READY
        self.remaining_seconds = 0
        self.running = False
        self.recorded_presentation_seconds = 0
        self.recorded_qa_seconds = 0
        self._qa_started = False

    @property
    def presentation_length(self) -> int:
        return self.presentation_minutes * 60

    @property
    def qa_length(self) -> int:
        return self.qa_minutes * 60

    @property
    def warning_active(self) -> bool:
        return self.phase == Phase.PRESENTATION and self.remaining_seconds <= self.warning_seconds

    def _clear_counters(self) -> None:
        self.recorded_presentation_seconds = 0
        self.recorded_qa_seconds = 0
        self._qa_started = False

    def _record(self, presentation_seconds: int, qa_seconds: int) -> None:
        if self.recorder is None:
            return
        logger.bind(phase=self.phase.value).debug(
            f"Recording {presentation_seconds}s presentation, {qa_seconds}s Q&A"
        )
        self.recorder(max(0, presentation_seconds), max(0, qa_seconds))

    def start(self) -> None:
        """Begin a new presentation, or resume a paused phase."""
        if self.running:
            return
        if self.phase in (Phase.READY, Phase.COMPLETE):
            self.phase = Phase.PRESENTATION
            self.remaining_seconds = self.presentation_length
            self._clear_counters()
        self.running = True

    def pause(self) -> None:
        self.running = False

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if not self.running:
            return
        if self.remaining_seconds > 0:
            self.remaining_seconds -= 1
        if self.remaining_seconds > 0:
            return

        self.running = False
        if self.phase == Phase.QA:
            self.recorded_qa_seconds = self.qa_length
            self._qa_started = False
            self.phase = Phase.COMPLETE
            self._record(self.recorded_presentation_seconds, self.recorded_qa_seconds)

    def advance_to_qa(self) -> None:
        if self.phase != Phase.PRESENTATION:
            raise TimerStateError("Q&A transition is only available during presentation phase.")

        self.recorded_presentation_seconds = self.presentation_length - self.remaining_seconds
        self.phase = Phase.QA
        self.remaining_seconds = self.qa_length
        self._qa_started = True
        self.running = True
        self._record(self.recorded_presentation_seconds, 0)

    def reset(self) -> None:
        """Return to ready, submitting the full record if Q&A was under way."""
        pending = None
        if self.phase == Phase.QA and self._qa_started:
            self.recorded_qa_seconds = self.qa_length - self.remaining_seconds
            pending = (self.recorded_presentation_seconds, self.recorded_qa_seconds)

        self.running = False
        self.phase = Phase.READY
        self.remaining_seconds = 0
        self._clear_counters()

        if pending is not None:
            self._record(*pending)

    async def run(self, interval: float = 1.0) -> None:
        """Tick once per interval until paused or stopped at zero."""
        while self.running:
            await asyncio.sleep(interval)
            self.tick()

    def formatted_remaining(self) -> str:
        minutes, seconds = divmod(max(0, self.remaining_seconds), 60)
        return f"{minutes:02d}:{seconds:02d}"
