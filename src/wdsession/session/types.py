"""Plain records shared by the session-establishment components."""

from __future__ import annotations

import errno
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

CapabilitySet = Dict[str, Any]


@dataclass
class ConnectionCoordinates:
    """Where the remote end lives. Every field is independently overridable."""

    protocol: str = "http"
    hostname: str = "localhost"
    port: Optional[int] = 4444
    path: str = "/"

    def base_url(self) -> str:
        return f"{self.protocol}://{self.hostname}:{self.port}{self.path}"

    def session_url(self) -> str:
        path = (self.path or "").rstrip("/")
        return f"{self.protocol}://{self.hostname}:{self.port}{path}/session"

    @classmethod
    def from_any(cls, value: Union["ConnectionCoordinates", Mapping[str, Any], None]) -> "ConnectionCoordinates":
        if isinstance(value, ConnectionCoordinates):
            return value
        if not value:
            return cls()
        defaults = cls()
        return cls(
            protocol=value.get("protocol", defaults.protocol),
            hostname=value.get("hostname", defaults.hostname),
            port=value.get("port", defaults.port),
            path=value.get("path", defaults.path),
        )


@dataclass(frozen=True)
class RawFailure:
    message: str
    name: str = "Error"
    code: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "RawFailure":
        failure = getattr(exc, "failure", None)
        if isinstance(failure, RawFailure):
            return failure
        message = getattr(exc, "message", None)
        if not isinstance(message, str):
            message = str(exc)
        name = getattr(exc, "name", None)
        if not isinstance(name, str) or not name:
            name = exc.__class__.__name__
        code = getattr(exc, "code", None)
        if code is None and isinstance(exc, OSError) and exc.errno in errno.errorcode:
            code = errno.errorcode[exc.errno]
        return cls(message=message, name=name, code=str(code) if code is not None else None)


@dataclass(frozen=True)
class SessionResult:
    session_id: str
    capabilities: CapabilitySet
    requested_capabilities: CapabilitySet = field(default_factory=dict)


@dataclass(frozen=True)
class TransportResponse:
    status: Optional[int]
    body: Any
