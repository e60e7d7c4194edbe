"""Orchestrates the POST-new-session exchange."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from .capability_normalizer import normalize_capabilities, to_envelope
from .capability_validator import validate_capabilities
from .direct_connect import resolve_direct_connect
from .error_diagnostics import diagnose
from .exceptions import CapabilityError, ProtocolError, TransportError
from .logging_utils import log_session_event
from .response_classifier import is_successful_response
from .transport import RequestsTransport, Transport
from .types import CapabilitySet, ConnectionCoordinates, RawFailure, SessionResult

logger = logging.getLogger(__name__)


def _flat_capabilities(capabilities: Mapping[str, Any]) -> Mapping[str, Any]:
    return to_envelope(capabilities)["alwaysMatch"]


def _check_serializable(capabilities: CapabilitySet) -> None:
    try:
        json.dumps(capabilities)
    except (TypeError, ValueError) as exc:
        raise CapabilityError(f"Capabilities are not JSON serializable: {exc}") from exc


def _protocol_failure(body: Any) -> RawFailure:
    value = body.get("value") if isinstance(body, Mapping) else None
    if not isinstance(value, Mapping):
        value = {}
    error = value.get("error")
    message = value.get("message") or (str(error) if error else "")
    return RawFailure(message=str(message), name=str(error) if error else "ProtocolError")


def _extract_session(body: Mapping[str, Any], requested: CapabilitySet) -> tuple[Optional[str], CapabilitySet]:
    value = body.get("value")
    if not isinstance(value, Mapping):
        value = {}
    session_id = value.get("sessionId") or body.get("sessionId")
    if "capabilities" in value:
        capabilities = value.get("capabilities") or requested
    elif "sessionId" in body and value:
        # JSONWire: the capabilities are the value itself
        capabilities = dict(value)
    else:
        capabilities = requested
    return (str(session_id) if session_id else None), capabilities


class SessionBootstrapper:
    """
    Establishes one WebDriver session per ``start`` call.

    Every failure is diagnosed before it is raised; capability problems are
    raised before any network activity.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.transport = transport or RequestsTransport()
        self.headers: Dict[str, str] = dict(headers or {})

    def prepare(
        self,
        coordinates: ConnectionCoordinates,
        capabilities: CapabilitySet,
    ) -> tuple[ConnectionCoordinates, Dict[str, Any]]:
        """Normalize, validate and resolve coordinates without touching the network."""
        try:
            normalized = normalize_capabilities(capabilities)
            validate_capabilities(normalized)
            _check_serializable(normalized)
        except CapabilityError as exc:
            failure = RawFailure.from_exception(exc)
            raise CapabilityError(diagnose(failure, coordinates), failure=failure) from exc

        resolved = resolve_direct_connect(coordinates, _flat_capabilities(capabilities or {}))
        return resolved, {"capabilities": normalized}

    def start(
        self,
        coordinates: ConnectionCoordinates,
        capabilities: CapabilitySet,
    ) -> SessionResult:
        coordinates = ConnectionCoordinates.from_any(coordinates)
        capabilities = capabilities or {}
        resolved, request_body = self.prepare(coordinates, capabilities)
        url = resolved.session_url()

        always_match = request_body["capabilities"]["alwaysMatch"]
        log_session_event(
            logger,
            level=logging.INFO,
            event="session_request",
            url=url,
            browser=always_match.get("browserName"),
            bidi=bool(always_match.get("webSocketUrl")),
        )
        logger.debug("new session request body: %s", json.dumps(request_body, default=str))

        try:
            response = self.transport.send("POST", url, self.headers, request_body)
        except TransportError as exc:
            failure = exc.to_failure()
            self._log_failure(url, failure)
            raise TransportError(
                diagnose(failure, resolved),
                name=failure.name,
                code=failure.code,
                failure=failure,
            ) from exc
        except (OSError, ValueError) as exc:
            failure = RawFailure.from_exception(exc)
            self._log_failure(url, failure)
            raise TransportError(
                diagnose(failure, resolved),
                name=failure.name,
                code=failure.code,
                failure=failure,
            ) from exc

        body = response.body if isinstance(response.body, Mapping) else {}
        if not is_successful_response(response.status, body):
            failure = _protocol_failure(body)
            self._log_failure(url, failure, status=response.status)
            raise ProtocolError(
                diagnose(failure, resolved),
                status=response.status,
                body=response.body,
                failure=failure,
            )

        session_id, agreed = _extract_session(body, capabilities)
        if not session_id:
            failure = RawFailure(
                message="Remote end accepted the new session request but returned no session id",
                name="ProtocolError",
            )
            self._log_failure(url, failure, status=response.status)
            raise ProtocolError(
                diagnose(failure, resolved),
                status=response.status,
                body=response.body,
                failure=failure,
            )

        log_session_event(
            logger,
            level=logging.INFO,
            event="session_created",
            session_id=session_id,
            browser=agreed.get("browserName") if isinstance(agreed, Mapping) else None,
        )
        return SessionResult(
            session_id=session_id,
            capabilities=agreed,
            requested_capabilities=request_body["capabilities"],
        )

    @staticmethod
    def _log_failure(url: str, failure: RawFailure, status: Optional[int] = None) -> None:
        log_session_event(
            logger,
            level=logging.ERROR,
            event="session_failed",
            url=url,
            status=status,
            name=failure.name,
            code=failure.code,
            message=failure.message,
        )


def start_session(
    coordinates: ConnectionCoordinates,
    capabilities: CapabilitySet,
    *,
    transport: Optional[Transport] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> SessionResult:
    """Establish a session at ``coordinates`` for ``capabilities``."""
    return SessionBootstrapper(transport, headers=headers).start(coordinates, capabilities)
