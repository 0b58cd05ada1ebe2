"""IdAck exception hierarchy."""

from __future__ import annotations


class IdAckError(Exception):
    """Base exception for all IdAck errors."""


class StateStoreError(IdAckError):
    """State store access failed. The invocation must be rolled back."""

    def __init__(self, message: str, scope: str | None = None) -> None:
        self.scope = scope
        super().__init__(message)


class StateReadError(StateStoreError):
    """Reading the state map failed."""


class StateWriteError(StateStoreError):
    """Writing the state map failed."""


class SessionError(IdAckError):
    """Process session was used incorrectly."""


class ProcessorFailedError(IdAckError):
    """A trigger finished with a failure result."""

    def __init__(self, reason: str, cause: Exception | None = None) -> None:
        self.reason = reason
        self.cause = cause
        super().__init__(f"Processor trigger failed: {reason}")
