"""Reject capability combinations that are well-formed but break sessions."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from .exceptions import CapabilityError
from .types import CapabilitySet

CapabilityRule = Callable[[Mapping[str, Any]], Optional[str]]


def _iter_alternatives(capabilities: Mapping[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yield every flat capability set a (possibly enveloped) input can resolve to."""
    if "alwaysMatch" not in capabilities and "firstMatch" not in capabilities:
        yield dict(capabilities)
        return

    always = capabilities.get("alwaysMatch") or {}
    first_match = capabilities.get("firstMatch") or [{}]
    for entry in first_match:
        merged = dict(always)
        merged.update(entry or {})
        yield merged


def _check_chrome_incognito(capabilities: Mapping[str, Any]) -> Optional[str]:
    chrome_options = capabilities.get("goog:chromeOptions")
    if not isinstance(chrome_options, Mapping):
        return None
    args = chrome_options.get("args") or []
    if isinstance(args, str):
        args = [args]
    for arg in args:
        if not isinstance(arg, str):
            continue
        flag = arg[2:] if arg.startswith("--") else arg
        if "incognito" in flag:
            return (
                'Please remove "incognito" from `"goog:chromeOptions".args` as it is not supported '
                "running Chrome with WebDriver. WebDriver sessions are always incognito mode and "
                "do not persist across browser sessions."
            )
    return None


CAPABILITY_RULES: List[CapabilityRule] = [
    _check_chrome_incognito,
]


def validate_capabilities(capabilities: CapabilitySet) -> None:
    """Raise CapabilityError for the first rule any capability alternative violates."""
    for alternative in _iter_alternatives(capabilities or {}):
        for rule in CAPABILITY_RULES:
            message = rule(alternative)
            if message:
                raise CapabilityError(message)
