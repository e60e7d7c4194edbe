"""Decide whether a raw new-session (or command) response is a protocol success."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

# Driver phrasings of "element not found". Command logic needs these bodies
# intact to raise a typed not-found error, so they never count as failures.
BENIGN_NOT_FOUND_PATTERNS: Tuple[str, ...] = (
    "no such element",
    "could not be located on the page",
    "unable to find element",
)


def _matches_benign_pattern(text: Any, patterns: Tuple[str, ...]) -> bool:
    if text is None:
        return False
    lowered = str(text).lower()
    return any(pattern in lowered for pattern in patterns)


def is_successful_response(
    status: Optional[int],
    body: Any,
    *,
    benign_patterns: Optional[Tuple[str, ...]] = None,
) -> bool:
    """
    Classify a response by its body first and its HTTP status last.

    Args:
        status: HTTP status code, or None when the transport does not expose one.
        body: Parsed JSON body, expected shape ``{"status"?: int, "value"?: {...}}``.
        benign_patterns: Overrides ``BENIGN_NOT_FOUND_PATTERNS``.

    Returns:
        True for success, including benign not-found errors.
    """
    if not isinstance(body, Mapping):
        body = {}
    value = body.get("value")
    if not isinstance(value, Mapping):
        value = {}

    patterns = BENIGN_NOT_FOUND_PATTERNS if benign_patterns is None else benign_patterns
    error = value.get("error")
    if _matches_benign_pattern(value.get("message"), patterns) or _matches_benign_pattern(error, patterns):
        return True

    legacy_status = body.get("status")
    if legacy_status is not None:
        return legacy_status == 0

    if error:
        return False

    if status is not None:
        return 200 <= status < 300

    return True
