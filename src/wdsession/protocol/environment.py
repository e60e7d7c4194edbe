"""Derive the driver profile flags that select a session's command vocabulary."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

_IOS_PATTERN = re.compile(r"ios|iphone|ipad", re.IGNORECASE)
_ANDROID_PATTERN = re.compile(r"android", re.IGNORECASE)
_CHROMIUM_BROWSERS = frozenset({"chrome", "chromium", "googlechrome", "msedge", "microsoftedge", "edge"})
_APPIUM_MARKERS = (
    "appium:automationName",
    "appium:deviceName",
    "appium:appiumVersion",
    "automationName",
    "deviceName",
    "appiumVersion",
)


@dataclass(frozen=True)
class DriverProfile:
    """Fixed for the lifetime of a session once derived."""

    isW3C: bool = False
    isChromium: bool = False
    isFirefox: bool = False
    isMobile: bool = False
    isSauce: bool = False
    isSeleniumStandalone: bool = False
    isIOS: bool = False
    isAndroid: bool = False

    def __post_init__(self) -> None:
        if self.isChromium and self.isFirefox:
            raise ValueError("A session cannot be both Chromium and Firefox")

    @classmethod
    def from_flags(cls, flags: Mapping[str, Any]) -> "DriverProfile":
        known = cls.__dataclass_fields__
        return cls(**{name: bool(value) for name, value in flags.items() if name in known})


def _flat(capabilities: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if not capabilities:
        return {}
    if "alwaysMatch" in capabilities:
        return capabilities.get("alwaysMatch") or {}
    return capabilities


def _text(capabilities: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = capabilities.get(key)
        if value:
            return str(value)
    return ""


def is_w3c(capabilities: Mapping[str, Any]) -> bool:
    if not capabilities:
        return False
    is_appium = any(capabilities.get(key) for key in _APPIUM_MARKERS)
    has_w3c_caps = bool(
        capabilities.get("platformName")
        and capabilities.get("browserVersion")
        and (capabilities.get("platformVersion") or "setWindowRect" in capabilities)
    )
    has_webdriver_flag = bool(capabilities.get("ms:experimental-webdriver"))
    return has_w3c_caps or is_appium or has_webdriver_flag


def is_chromium(capabilities: Mapping[str, Any]) -> bool:
    if capabilities.get("goog:chromeOptions") or capabilities.get("ms:edgeOptions"):
        return True
    browser_name = _text(capabilities, "browserName").replace(" ", "").lower()
    return browser_name in _CHROMIUM_BROWSERS


def is_firefox(capabilities: Mapping[str, Any]) -> bool:
    if _text(capabilities, "browserName").lower() == "firefox":
        return True
    return any(str(key).startswith("moz:") for key in capabilities)


def is_ios(capabilities: Mapping[str, Any]) -> bool:
    platform_name = _text(capabilities, "platformName", "appium:platformName")
    device_name = _text(capabilities, "appium:deviceName", "deviceName")
    return bool(_IOS_PATTERN.search(platform_name) or _IOS_PATTERN.search(device_name))


def is_android(capabilities: Mapping[str, Any]) -> bool:
    platform_name = _text(capabilities, "platformName", "appium:platformName")
    browser_name = _text(capabilities, "browserName")
    return bool(_ANDROID_PATTERN.search(platform_name) or _ANDROID_PATTERN.search(browser_name))


def is_mobile(capabilities: Mapping[str, Any]) -> bool:
    browser_name = _text(capabilities, "browserName")
    if is_ios(capabilities) or is_android(capabilities):
        return True
    if _IOS_PATTERN.search(browser_name):
        return True
    return any(
        capabilities.get(key)
        for key in ("appium:app", "appium:bundleId", "appium:appPackage", "appium:deviceName", "app", "deviceName")
    )


def is_sauce(capabilities: Mapping[str, Any], hostname: Optional[str] = None) -> bool:
    sauce_options = capabilities.get("sauce:options")
    if isinstance(sauce_options, Mapping) and sauce_options.get("extendedDebugging"):
        return True
    if capabilities.get("extendedDebugging"):
        return True
    return bool(hostname) and "saucelabs" in str(hostname).lower()


def is_selenium_standalone(capabilities: Mapping[str, Any]) -> bool:
    if capabilities.get("webdriver.remote.sessionid"):
        return True
    return any(str(key).startswith("se:") for key in capabilities)


def detect_driver_profile(
    capabilities: Optional[Mapping[str, Any]],
    requested_capabilities: Optional[Mapping[str, Any]] = None,
    *,
    hostname: Optional[str] = None,
) -> DriverProfile:
    """
    Build a DriverProfile from the capabilities the server agreed to.

    Requested capabilities fill in vendor options the server does not echo
    back (``sauce:options`` for example).
    """
    agreed = dict(_flat(requested_capabilities))
    agreed.update(_flat(capabilities))

    chromium = is_chromium(agreed)
    return DriverProfile(
        isW3C=is_w3c(agreed),
        isChromium=chromium,
        isFirefox=not chromium and is_firefox(agreed),
        isMobile=is_mobile(agreed),
        isSauce=is_sauce(agreed, hostname),
        isSeleniumStandalone=is_selenium_standalone(agreed),
        isIOS=is_ios(agreed),
        isAndroid=is_android(agreed),
    )
