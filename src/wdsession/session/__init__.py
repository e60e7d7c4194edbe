"""
Session establishment: capability negotiation, the new-session exchange and
failure diagnosis.
"""

from .bootstrapper import SessionBootstrapper, start_session
from .capability_normalizer import STANDARD_CAPABILITIES, normalize_capabilities
from .capability_validator import validate_capabilities
from .direct_connect import resolve_direct_connect
from .error_diagnostics import DIAGNOSTIC_RULES, diagnose
from .exceptions import (
    CapabilityError,
    CommandCollisionError,
    ProtocolError,
    SessionError,
    TransportError,
)
from .response_classifier import BENIGN_NOT_FOUND_PATTERNS, is_successful_response
from .transport import RequestsTransport, Transport
from .types import ConnectionCoordinates, RawFailure, SessionResult, TransportResponse

__all__ = [
    "BENIGN_NOT_FOUND_PATTERNS",
    "CapabilityError",
    "CommandCollisionError",
    "ConnectionCoordinates",
    "DIAGNOSTIC_RULES",
    "ProtocolError",
    "RawFailure",
    "RequestsTransport",
    "STANDARD_CAPABILITIES",
    "SessionBootstrapper",
    "SessionError",
    "SessionResult",
    "Transport",
    "TransportError",
    "TransportResponse",
    "diagnose",
    "is_successful_response",
    "normalize_capabilities",
    "resolve_direct_connect",
    "start_session",
    "validate_capabilities",
]
