"""
wdsession: session establishment and protocol negotiation for WebDriver clients.
"""

from wdsession.config import RemoteConfig
from wdsession.protocol import (
    CommandDescriptor,
    DriverProfile,
    detect_driver_profile,
    select_command_vocabulary,
)
from wdsession.session import (
    CapabilityError,
    CommandCollisionError,
    ConnectionCoordinates,
    ProtocolError,
    RawFailure,
    RequestsTransport,
    SessionBootstrapper,
    SessionError,
    SessionResult,
    TransportError,
    diagnose,
    is_successful_response,
    normalize_capabilities,
    resolve_direct_connect,
    start_session,
    validate_capabilities,
)

__version__ = "0.1.0"

__all__ = [
    "CapabilityError",
    "CommandCollisionError",
    "CommandDescriptor",
    "ConnectionCoordinates",
    "DriverProfile",
    "ProtocolError",
    "RawFailure",
    "RemoteConfig",
    "RequestsTransport",
    "SessionBootstrapper",
    "SessionError",
    "SessionResult",
    "TransportError",
    "detect_driver_profile",
    "diagnose",
    "is_successful_response",
    "normalize_capabilities",
    "resolve_direct_connect",
    "select_command_vocabulary",
    "start_session",
    "validate_capabilities",
]
