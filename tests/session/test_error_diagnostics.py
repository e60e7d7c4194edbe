"""
Tests for failure diagnosis.

Each rule is exercised with the raw message a real driver or grid produces.
"""

import pytest

from wdsession.session.error_diagnostics import DIAGNOSTIC_RULES, GENERIC_FAILURE_MESSAGE, diagnose
from wdsession.session.types import ConnectionCoordinates, RawFailure


def failure(message, **kwargs):
    return RawFailure(message=message, **kwargs)


# ============================================================
# Fallbacks
# ============================================================

class TestFallback:

    def test_unchanged_message(self):
        assert diagnose(failure("foobar")) == "foobar"

    def test_more_info_if_no_message(self):
        assert diagnose(failure("")) == GENERIC_FAILURE_MESSAGE
        assert diagnose(failure("")) == "See wdsession logs for more information."

    def test_non_string_message_never_raises(self):
        assert diagnose(RawFailure(message=None)) == GENERIC_FAILURE_MESSAGE

    def test_rules_are_ordered_and_named(self):
        names = [rule.name for rule in DIAGNOSTIC_RULES]
        assert names[0] == "unhandled_request"
        assert names[-1] == "sauce_region"
        assert len(set(names)) == len(names)


# ============================================================
# Rules
# ============================================================

class TestRules:

    def test_unhandled_request(self):
        message = diagnose(failure("unhandled request"))
        assert 'Make sure you have set the "path" correctly!' in message
        assert message.startswith("unhandled request")

    def test_econnrefused(self):
        message = diagnose(
            failure("ECONNREFUSED 127.0.0.1:4444", name="Some Error", code="ECONNREFUSED"),
            ConnectionCoordinates(protocol="https", hostname="foobar", port=1234, path="/foo/bar"),
        )
        assert 'Unable to connect to "https://foobar:1234/foo/bar"' in message

    def test_econnrefused_accepts_mapping_coordinates(self):
        message = diagnose(
            failure("connect failed", code="ECONNREFUSED"),
            {"protocol": "http", "hostname": "grid", "port": 4444, "path": "/wd/hub"},
        )
        assert "http://grid:4444/wd/hub" in message

    def test_selenium_standalone_path(self):
        message = diagnose(failure("Whoops! The URL specified routes to this help page."))
        assert "set `path: '/wd/hub'` in" in message

    def test_driver_root_path(self):
        assert "set `path: '/'` in" in diagnose(failure("HTTP method not allowed"))

    def test_edge_localhost(self):
        message = diagnose(failure("Bad Request - Invalid Hostname 400 <br> HTTP Error 400"))
        assert "127.0.0.1 instead of localhost" in message

    def test_illegal_w3c_keys(self):
        message = diagnose(failure("Illegal key values seen in w3c capabilities: [chromeOptions]"))
        assert "[chromeOptions]" in message
        assert "add vendor prefix" in message

    def test_empty_body(self):
        message = diagnose(failure("Response has empty body"))
        assert "valid hostname:port or the port is not in use" in message
        assert "add vendor prefix" in message

    def test_empty_body_requires_exact_message(self):
        assert diagnose(failure("Response has empty body!")) == "Response has empty body!"

    def test_sauce_region(self):
        message = diagnose(
            failure("unknown error: failed serving request POST /wd/hub/session: Unauthorized"),
            ConnectionCoordinates(hostname="https://ondemand.eu-central-1.saucelabs.com"),
        )
        assert "Ensure this region is set in your configuration" in message

    def test_sauce_region_needs_ondemand_host(self):
        raw = "unknown error: failed serving request POST /wd/hub/session: Unauthorized"
        assert diagnose(failure(raw), ConnectionCoordinates(hostname="localhost")) == raw
        assert diagnose(failure(raw)) == raw


# ============================================================
# Ordering
# ============================================================

@pytest.mark.parametrize("message,expected", [
    ("unhandled request: HTTP method not allowed", 'set the "path" correctly'),
    ("routes to this help page; HTTP method not allowed", "/wd/hub"),
])
def test_first_match_wins(message, expected):
    assert expected in diagnose(failure(message))


def test_econnrefused_beats_later_rules():
    message = diagnose(failure("Response has empty body", code="ECONNREFUSED"), ConnectionCoordinates())
    assert message.startswith('Unable to connect to "http://localhost:4444/"')
