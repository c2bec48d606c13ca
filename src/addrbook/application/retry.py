"""Bounded retry policy for interactive flows.

Every field prompt in create and edit, every search disambiguation, and the
delete confirmation run under one RetryController. Each invalid input uses an
attempt; when the ceiling is reached the operation is cancelled without asking.
Before that, the user picks "1" (try again) or "2" (cancel). Any other answer
is asked again and does not use an attempt.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 4

T = TypeVar("T")


class RetryChoice(Enum):
    TRY_AGAIN = 1
    CANCEL = 2


class RetryState(Enum):
    ATTEMPTING = "attempting"
    SUCCESS = "success"
    CANCELLED = "cancelled"


def parse_retry_choice(answer: str | None) -> RetryChoice | None:
    """Map "1"/"2" to a choice; anything else is None."""
    text = (answer or "").strip()
    if text == str(RetryChoice.TRY_AGAIN.value):
        return RetryChoice.TRY_AGAIN
    if text == str(RetryChoice.CANCEL.value):
        return RetryChoice.CANCEL
    return None


class RetryController:
    """Attempt counter for one guarded operation.

    choose(attempts, max_attempts) is called to ask the user whether to try
    again; it returns the raw answer. on_unrecognized(answer) is called for
    answers that are neither choice, before asking again.
    """

    def __init__(
        self,
        choose: Callable[[int, int], str],
        *,
        max_attempts: int = MAX_ATTEMPTS,
        on_unrecognized: Callable[[str], None] | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self._choose = choose
        self._on_unrecognized = on_unrecognized
        self.max_attempts = max_attempts
        self.attempts = 0
        self.state = RetryState.ATTEMPTING

    @property
    def cancelled(self) -> bool:
        return self.state is RetryState.CANCELLED

    def record_failure(self) -> RetryChoice:
        """Count one invalid input and decide whether to go on."""
        if self.state is not RetryState.ATTEMPTING:
            raise RuntimeError(f"Retry controller already finished ({self.state.value}).")
        self.attempts += 1
        if self.attempts >= self.max_attempts:
            logger.info("Cancelled after %d attempts", self.attempts)
            self.state = RetryState.CANCELLED
            return RetryChoice.CANCEL
        while True:
            answer = self._choose(self.attempts, self.max_attempts)
            choice = parse_retry_choice(answer)
            if choice is RetryChoice.TRY_AGAIN:
                return choice
            if choice is RetryChoice.CANCEL:
                self.state = RetryState.CANCELLED
                return choice
            if self._on_unrecognized is not None:
                self._on_unrecognized(answer)

    def succeed(self) -> None:
        if self.state is RetryState.ATTEMPTING:
            self.state = RetryState.SUCCESS

    def guard(self, step: Callable[[], T | None]) -> T | None:
        """Run step until it returns a value (success) or the controller cancels.

        step returns None for invalid input. Returns the step's value, or None
        when cancelled.
        """
        while self.state is RetryState.ATTEMPTING:
            value = step()
            if value is not None:
                self.succeed()
                return value
            self.record_failure()
        return None
