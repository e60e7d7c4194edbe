"""
Tests for command vocabulary composition.

Tests cover:
- Base table selection (W3C vs JSONWire)
- Extension tables gated by profile flags
- Declared overrides vs. collisions
"""

import pytest

from wdsession.protocol.descriptors import build_table
from wdsession.protocol.environment import DriverProfile
from wdsession.protocol.tables import (
    CHROMIUM_TABLE,
    EXTENSION_TABLES,
    GECKO_TABLE,
    JSONWIRE_TABLE,
    MOBILE_TABLE,
    WEBDRIVER_TABLE,
    CommandTable,
)
from wdsession.protocol.vocabulary import (
    check_table_compatibility,
    compose_tables,
    select_command_vocabulary,
)
from wdsession.session.exceptions import CommandCollisionError


# ============================================================
# Profiles
# ============================================================

class TestSelectCommandVocabulary:

    def test_webdriver(self):
        vocabulary = select_command_vocabulary(DriverProfile(isW3C=True))
        assert "performActions" in vocabulary
        assert "sendKeys" not in vocabulary
        assert "sendCommand" not in vocabulary
        assert "lock" not in vocabulary
        assert vocabulary["performActions"] is WEBDRIVER_TABLE.commands["performActions"]

    def test_jsonwire(self):
        vocabulary = select_command_vocabulary(DriverProfile(isW3C=False))
        assert "performActions" not in vocabulary
        assert "positionClick" in vocabulary
        assert vocabulary["executeScript"].endpoint == "/session/:sessionId/execute"

    def test_chromium_on_jsonwire(self):
        vocabulary = select_command_vocabulary(DriverProfile(isW3C=False, isChromium=True))
        assert "sendCommand" in vocabulary
        assert "getElementValue" in vocabulary
        assert vocabulary["elementSendKeys"] is CHROMIUM_TABLE.commands["elementSendKeys"]
        assert "lock" not in vocabulary

    def test_gecko(self):
        vocabulary = select_command_vocabulary(DriverProfile(isW3C=True, isFirefox=True))
        assert "setMozContext" in vocabulary
        assert "installAddOn" in vocabulary
        assert vocabulary["elementSendKeys"] is GECKO_TABLE.commands["elementSendKeys"]
        assert "lock" not in vocabulary

    def test_mobile(self):
        vocabulary = select_command_vocabulary(DriverProfile(isW3C=True, isMobile=True))
        for name in ("performActions", "sendKeys", "lock", "getNetworkConnection"):
            assert name in vocabulary
        assert vocabulary["performActions"] is MOBILE_TABLE.commands["performActions"]

    def test_mobile_chrome(self):
        vocabulary = select_command_vocabulary(DriverProfile(isW3C=True, isChromium=True, isMobile=True))
        for name in ("sendCommand", "performActions", "sendKeys", "lock", "getNetworkConnection"):
            assert name in vocabulary

    def test_sauce(self):
        vocabulary = select_command_vocabulary(DriverProfile(isW3C=True, isSauce=True))
        assert "getPageLogs" in vocabulary

    def test_selenium_standalone(self):
        vocabulary = select_command_vocabulary(DriverProfile(isW3C=True, isSeleniumStandalone=True))
        assert "getDownloadableFiles" in vocabulary
        assert "getPageLogs" not in vocabulary

    def test_reserved_flags_accepted(self):
        plain = select_command_vocabulary(DriverProfile(isW3C=True))
        flagged = select_command_vocabulary(DriverProfile(isW3C=True, isIOS=True, isAndroid=True))
        assert flagged.keys() == plain.keys()

    def test_mapping_profile(self):
        vocabulary = select_command_vocabulary({"isW3C": True, "isMobile": True, "unknownFlag": True})
        assert "lock" in vocabulary

    def test_every_flag_combination_composes(self):
        check_table_compatibility()

    def test_chromium_and_firefox_is_impossible(self):
        with pytest.raises(ValueError):
            DriverProfile(isChromium=True, isFirefox=True)


# ============================================================
# Composition rules
# ============================================================

class TestComposeTables:

    def test_undeclared_base_override_collides(self):
        rogue = CommandTable(
            name="rogue",
            flag="isSauce",
            commands=build_table({"getTitle": ("GET", "/session/:sessionId/rogue/title")}),
        )
        with pytest.raises(CommandCollisionError, match='"getTitle"'):
            compose_tables([WEBDRIVER_TABLE, rogue])

    def test_extensions_never_override_each_other(self):
        with pytest.raises(CommandCollisionError, match='"elementSendKeys"'):
            compose_tables([WEBDRIVER_TABLE, CHROMIUM_TABLE, GECKO_TABLE])

    def test_override_missing_from_base_simply_adds(self):
        vocabulary = compose_tables([JSONWIRE_TABLE, MOBILE_TABLE])
        assert vocabulary["performActions"] is MOBILE_TABLE.commands["performActions"]

    def test_extension_tables_are_flag_gated(self):
        for table in EXTENSION_TABLES:
            assert table.flag in DriverProfile.__dataclass_fields__
