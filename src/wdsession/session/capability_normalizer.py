"""Migrate capabilities into the W3C ``alwaysMatch``/``firstMatch`` envelope."""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List, Mapping

from .exceptions import CapabilityError
from .types import CapabilitySet

STANDARD_CAPABILITIES = frozenset(
    {
        "browserName",
        "browserVersion",
        "platformName",
        "acceptInsecureCerts",
        "pageLoadStrategy",
        "proxy",
        "timeouts",
        "unhandledPromptBehavior",
        "strictFileInteractability",
        "webSocketUrl",
        "setWindowRect",
    }
)

ENFORCE_CLASSIC_CAPABILITY = "wdio:enforceWebDriverClassic"
_BIDI_UNSUPPORTED_BROWSERS = frozenset({"safari"})


def is_enveloped(capabilities: Mapping[str, Any]) -> bool:
    return "alwaysMatch" in capabilities or "firstMatch" in capabilities


def is_vendor_capability(key: str) -> bool:
    return ":" in key


def is_standard_capability(key: str) -> bool:
    return key in STANDARD_CAPABILITIES


def find_invalid_capabilities(capabilities: Mapping[str, Any]) -> List[str]:
    return [
        key
        for key in capabilities
        if not is_standard_capability(key) and not is_vendor_capability(key)
    ]


def invalid_capabilities_message(invalid_keys: Iterable[str]) -> str:
    quoted = ", ".join(f'"{key}"' for key in invalid_keys)
    return (
        f"Invalid or unsupported WebDriver capabilities found ({quoted}). "
        "Ensure to only use valid W3C WebDriver capabilities "
        "(see https://w3c.github.io/webdriver/#capabilities)."
    )


def to_envelope(capabilities: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Wrap flat capabilities as ``alwaysMatch``; copy an existing envelope.

    Keys sitting beside ``alwaysMatch``/``firstMatch`` are folded into
    ``alwaysMatch``; keys already present there win.
    """
    if is_enveloped(capabilities):
        always = {key: value for key, value in capabilities.items() if key not in ("alwaysMatch", "firstMatch")}
        always.update(capabilities.get("alwaysMatch") or {})
        first_match = capabilities.get("firstMatch") or []
        return {
            "alwaysMatch": copy.deepcopy(always),
            "firstMatch": [copy.deepcopy(dict(entry or {})) for entry in first_match],
        }
    return {"alwaysMatch": copy.deepcopy(dict(capabilities)), "firstMatch": []}


def _effective_browser_name(envelope: Mapping[str, Any]) -> str:
    name = envelope["alwaysMatch"].get("browserName")
    if name is None:
        for entry in envelope["firstMatch"]:
            if entry.get("browserName") is not None:
                name = entry["browserName"]
                break
    return str(name or "")


def wants_bidi(envelope: Mapping[str, Any]) -> bool:
    """WebSocket (bidi) opt-in decision for an already enveloped capability set."""
    if _effective_browser_name(envelope).lower() in _BIDI_UNSUPPORTED_BROWSERS:
        return False
    if envelope["alwaysMatch"].get(ENFORCE_CLASSIC_CAPABILITY) is True:
        return False
    return True


def normalize_capabilities(capabilities: CapabilitySet) -> CapabilitySet:
    """
    Return a new W3C envelope for ``capabilities`` with the bidi decision applied.

    Raises:
        CapabilityError: if any key in ``alwaysMatch`` or a ``firstMatch`` entry is
            neither a standard capability nor vendor-prefixed. The message names
            every offending key, sorted.
    """
    envelope = to_envelope(capabilities or {})

    invalid = set(find_invalid_capabilities(envelope["alwaysMatch"]))
    for entry in envelope["firstMatch"]:
        invalid.update(find_invalid_capabilities(entry))
    if invalid:
        raise CapabilityError(invalid_capabilities_message(sorted(invalid)))

    for entry in envelope["firstMatch"]:
        entry.pop("webSocketUrl", None)

    if wants_bidi(envelope):
        envelope["alwaysMatch"]["webSocketUrl"] = True
    else:
        envelope["alwaysMatch"].pop("webSocketUrl", None)
    return envelope
