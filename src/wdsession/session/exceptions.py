from __future__ import annotations

from typing import Any, Optional

from .types import RawFailure


class SessionError(Exception):
    """Base class for every failure surfaced while establishing a session."""

    def __init__(self, message: str, *, failure: Optional[RawFailure] = None):
        super().__init__(message)
        self.message = message
        self.failure = failure


class CapabilityError(SessionError):
    """Raised when capabilities are invalid or known to break a session. Never retried."""


class TransportError(SessionError):
    """Raised when the remote end could not be reached or its response could not be read."""

    def __init__(
        self,
        message: str,
        *,
        name: str = "TransportError",
        code: Optional[str] = None,
        failure: Optional[RawFailure] = None,
    ):
        super().__init__(message, failure=failure)
        self.name = name
        self.code = code

    def to_failure(self) -> RawFailure:
        if self.failure is not None:
            return self.failure
        return RawFailure(message=self.message, name=self.name, code=self.code)


class ProtocolError(SessionError):
    """Raised when a reachable remote end answers the new-session request unsuccessfully."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        body: Any = None,
        failure: Optional[RawFailure] = None,
    ):
        super().__init__(message, failure=failure)
        self.status = status
        self.body = body


class CommandCollisionError(ValueError):
    """Raised when two active command tables contribute the same command name."""
