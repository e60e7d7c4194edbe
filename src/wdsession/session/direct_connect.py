"""Apply Appium direct-connect endpoint overrides to connection coordinates."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Tuple

from .logging_utils import log_session_event
from .types import ConnectionCoordinates

logger = logging.getLogger(__name__)

# (capability key, coordinate field), applied together or not at all.
DIRECT_CONNECT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("appium:directConnectProtocol", "protocol"),
    ("appium:directConnectHost", "hostname"),
    ("appium:directConnectPort", "port"),
    ("appium:directConnectPath", "path"),
)


def has_direct_connect(capabilities: Mapping[str, Any]) -> bool:
    # Presence, not truthiness: an empty path is a valid override.
    return all(key in capabilities for key, _ in DIRECT_CONNECT_FIELDS)


def resolve_direct_connect(
    coordinates: ConnectionCoordinates,
    capabilities: Mapping[str, Any],
) -> ConnectionCoordinates:
    """Return a copy of ``coordinates`` with direct-connect overrides, if all are present."""
    if not capabilities or not has_direct_connect(capabilities):
        return dataclasses.replace(coordinates)

    overrides = {field: capabilities[key] for key, field in DIRECT_CONNECT_FIELDS}
    resolved = dataclasses.replace(coordinates, **overrides)
    log_session_event(
        logger,
        level=logging.INFO,
        event="direct_connect",
        original=coordinates.base_url(),
        resolved=resolved.base_url(),
    )
    return resolved
