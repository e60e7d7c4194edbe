"""
Turn opaque session-creation failures into actionable messages.

Rules are ``(predicate, formatter)`` pairs evaluated top to bottom; the first
matching predicate wins. Add driver quirks by appending to ``DIAGNOSTIC_RULES``.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from .types import ConnectionCoordinates, RawFailure

GENERIC_FAILURE_MESSAGE = "See wdsession logs for more information."

VENDOR_PREFIX_HINT = (
    '\nMake sure to add vendor prefix like "goog:", "appium:", "moz:", etc to non W3C capabilities.'
    "\nSee more https://www.w3.org/TR/webdriver/#capabilities"
)

_INVALID_HOSTNAME_PATTERN = re.compile(r"Bad Request - Invalid Hostname.*HTTP Error 400", re.IGNORECASE | re.DOTALL)
_ILLEGAL_W3C_KEYS_PATTERN = re.compile(r"Illegal key values seen in w3c capabilities:\s*(\[[^\]]*\])")
_SAUCE_UNAUTHORIZED_PATTERN = re.compile(r"failed serving request .*Unauthorized", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class DiagnosticRule:
    name: str
    matches: Callable[[RawFailure, Optional[ConnectionCoordinates]], bool]
    render: Callable[[RawFailure, Optional[ConnectionCoordinates]], str]


def _connection_url(coordinates: Optional[ConnectionCoordinates]) -> str:
    coords = coordinates or ConnectionCoordinates()
    return f"{coords.protocol}://{coords.hostname}:{coords.port}{coords.path}"


def _render_econnrefused(failure: RawFailure, coordinates: Optional[ConnectionCoordinates]) -> str:
    return (
        f'Unable to connect to "{_connection_url(coordinates)}", make sure browser driver is '
        "running on that address.\nIt seems like the service failed to start or is rejecting "
        "any connections."
    )


def _render_illegal_keys(failure: RawFailure, coordinates: Optional[ConnectionCoordinates]) -> str:
    match = _ILLEGAL_W3C_KEYS_PATTERN.search(failure.message)
    keys = match.group(1) if match else "[]"
    return f"Illegal key values seen in w3c capabilities: {keys}" + VENDOR_PREFIX_HINT


def _is_sauce_region_issue(failure: RawFailure, coordinates: Optional[ConnectionCoordinates]) -> bool:
    if coordinates is None or not coordinates.hostname:
        return False
    return bool(_SAUCE_UNAUTHORIZED_PATTERN.search(failure.message)) and "ondemand" in str(coordinates.hostname)


DIAGNOSTIC_RULES: List[DiagnosticRule] = [
    DiagnosticRule(
        name="unhandled_request",
        matches=lambda failure, _: "unhandled request" in failure.message,
        render=lambda failure, _: (
            failure.message
            + "\nThe browser driver couldn't start the session. "
            'Make sure you have set the "path" correctly!'
        ),
    ),
    DiagnosticRule(
        name="connection_refused",
        matches=lambda failure, _: failure.code == "ECONNREFUSED",
        render=_render_econnrefused,
    ),
    DiagnosticRule(
        name="selenium_standalone_path",
        matches=lambda failure, _: "routes to this help page" in failure.message,
        render=lambda failure, _: (
            "It seems you are running a Selenium Standalone server and point to a wrong path. "
            "Please set `path: '/wd/hub'` in your session configuration!"
        ),
    ),
    DiagnosticRule(
        name="driver_root_path",
        matches=lambda failure, _: "HTTP method not allowed" in failure.message,
        render=lambda failure, _: "Make sure to set `path: '/'` in your session configuration!",
    ),
    DiagnosticRule(
        name="invalid_hostname",
        matches=lambda failure, _: bool(_INVALID_HOSTNAME_PATTERN.search(failure.message)),
        render=lambda failure, _: (
            "Run edge driver on 127.0.0.1 instead of localhost, ex: --host=127.0.0.1, "
            "or set `hostname: '127.0.0.1'` in your session configuration"
        ),
    ),
    DiagnosticRule(
        name="illegal_w3c_keys",
        matches=lambda failure, _: bool(_ILLEGAL_W3C_KEYS_PATTERN.search(failure.message)),
        render=_render_illegal_keys,
    ),
    DiagnosticRule(
        name="empty_body",
        matches=lambda failure, _: failure.message == "Response has empty body",
        render=lambda failure, _: (
            "Make sure to connect to valid hostname:port or the port is not in use."
            "\nIf you use a grid server" + VENDOR_PREFIX_HINT
        ),
    ),
    DiagnosticRule(
        name="sauce_region",
        matches=_is_sauce_region_issue,
        render=lambda failure, _: (
            "Session request was not authorized because you either did provide a wrong access key "
            "or tried to run in a region that has not been enabled for your user. If you have "
            "registered a free trial account it is connected to a specific region. Ensure this "
            "region is set in your configuration."
        ),
    ),
]


def diagnose(failure: RawFailure, coordinates: Optional[ConnectionCoordinates] = None) -> str:
    """Return an actionable message for ``failure``. Never raises."""
    if not isinstance(failure.message, str):
        failure = dataclasses.replace(failure, message=str(failure.message or ""))
    if coordinates is not None and not isinstance(coordinates, ConnectionCoordinates):
        coordinates = ConnectionCoordinates.from_any(coordinates)
    for rule in DIAGNOSTIC_RULES:
        if rule.matches(failure, coordinates):
            return rule.render(failure, coordinates)
    return failure.message or GENERIC_FAILURE_MESSAGE
