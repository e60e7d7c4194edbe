"""
Command tables, one per driver family.

Rows are ``name -> (method, endpoint, body parameters, description)``.
Each extension table is gated by a single ``DriverProfile`` flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

from .descriptors import CommandDescriptor, build_table


@dataclass(frozen=True)
class CommandTable:
    name: str
    commands: Dict[str, CommandDescriptor]
    # DriverProfile attribute enabling this table; None for base tables.
    flag: Optional[str] = None
    # Base-table commands this table deliberately replaces.
    overrides: FrozenSet[str] = field(default_factory=frozenset)


WEBDRIVER_TABLE = CommandTable(
    name="webdriver",
    commands=build_table(
        {
            "newSession": ("POST", "/session", ("capabilities",), "Create a new session."),
            "deleteSession": ("DELETE", "/session/:sessionId"),
            "status": ("GET", "/status"),
            "getTimeouts": ("GET", "/session/:sessionId/timeouts"),
            "setTimeouts": ("POST", "/session/:sessionId/timeouts", ("implicit", "pageLoad", "script")),
            "getUrl": ("GET", "/session/:sessionId/url"),
            "navigateTo": ("POST", "/session/:sessionId/url", ("url",)),
            "back": ("POST", "/session/:sessionId/back"),
            "forward": ("POST", "/session/:sessionId/forward"),
            "refresh": ("POST", "/session/:sessionId/refresh"),
            "getTitle": ("GET", "/session/:sessionId/title"),
            "getWindowHandle": ("GET", "/session/:sessionId/window"),
            "closeWindow": ("DELETE", "/session/:sessionId/window"),
            "switchToWindow": ("POST", "/session/:sessionId/window", ("handle",)),
            "createWindow": ("POST", "/session/:sessionId/window/new", ("type",)),
            "getWindowHandles": ("GET", "/session/:sessionId/window/handles"),
            "switchToFrame": ("POST", "/session/:sessionId/frame", ("id",)),
            "switchToParentFrame": ("POST", "/session/:sessionId/frame/parent"),
            "getWindowRect": ("GET", "/session/:sessionId/window/rect"),
            "setWindowRect": ("POST", "/session/:sessionId/window/rect", ("x", "y", "width", "height")),
            "maximizeWindow": ("POST", "/session/:sessionId/window/maximize"),
            "minimizeWindow": ("POST", "/session/:sessionId/window/minimize"),
            "fullscreenWindow": ("POST", "/session/:sessionId/window/fullscreen"),
            "findElement": ("POST", "/session/:sessionId/element", ("using", "value")),
            "findElements": ("POST", "/session/:sessionId/elements", ("using", "value")),
            "findElementFromElement": ("POST", "/session/:sessionId/element/:elementId/element", ("using", "value")),
            "findElementsFromElement": ("POST", "/session/:sessionId/element/:elementId/elements", ("using", "value")),
            "getActiveElement": ("GET", "/session/:sessionId/element/active"),
            "isElementSelected": ("GET", "/session/:sessionId/element/:elementId/selected"),
            "getElementAttribute": ("GET", "/session/:sessionId/element/:elementId/attribute/:name"),
            "getElementProperty": ("GET", "/session/:sessionId/element/:elementId/property/:name"),
            "getElementCSSValue": ("GET", "/session/:sessionId/element/:elementId/css/:propertyName"),
            "getElementText": ("GET", "/session/:sessionId/element/:elementId/text"),
            "getElementTagName": ("GET", "/session/:sessionId/element/:elementId/name"),
            "getElementRect": ("GET", "/session/:sessionId/element/:elementId/rect"),
            "isElementEnabled": ("GET", "/session/:sessionId/element/:elementId/enabled"),
            "elementClick": ("POST", "/session/:sessionId/element/:elementId/click"),
            "elementClear": ("POST", "/session/:sessionId/element/:elementId/clear"),
            "elementSendKeys": ("POST", "/session/:sessionId/element/:elementId/value", ("text",)),
            "getPageSource": ("GET", "/session/:sessionId/source"),
            "executeScript": ("POST", "/session/:sessionId/execute/sync", ("script", "args")),
            "executeAsyncScript": ("POST", "/session/:sessionId/execute/async", ("script", "args")),
            "getAllCookies": ("GET", "/session/:sessionId/cookie"),
            "addCookie": ("POST", "/session/:sessionId/cookie", ("cookie",)),
            "deleteAllCookies": ("DELETE", "/session/:sessionId/cookie"),
            "getNamedCookie": ("GET", "/session/:sessionId/cookie/:name"),
            "deleteCookie": ("DELETE", "/session/:sessionId/cookie/:name"),
            "performActions": ("POST", "/session/:sessionId/actions", ("actions",), "W3C Actions."),
            "releaseActions": ("DELETE", "/session/:sessionId/actions"),
            "dismissAlert": ("POST", "/session/:sessionId/alert/dismiss"),
            "acceptAlert": ("POST", "/session/:sessionId/alert/accept"),
            "getAlertText": ("GET", "/session/:sessionId/alert/text"),
            "sendAlertText": ("POST", "/session/:sessionId/alert/text", ("text",)),
            "takeScreenshot": ("GET", "/session/:sessionId/screenshot"),
            "takeElementScreenshot": ("GET", "/session/:sessionId/element/:elementId/screenshot"),
            "printPage": ("POST", "/session/:sessionId/print", ("orientation", "scale", "background")),
        }
    ),
)

JSONWIRE_TABLE = CommandTable(
    name="jsonwire",
    commands=build_table(
        {
            "newSession": ("POST", "/session", ("desiredCapabilities",), "Create a new session."),
            "deleteSession": ("DELETE", "/session/:sessionId"),
            "status": ("GET", "/status"),
            "getSessions": ("GET", "/sessions"),
            "setTimeouts": ("POST", "/session/:sessionId/timeouts", ("type", "ms")),
            "setAsyncTimeout": ("POST", "/session/:sessionId/timeouts/async_script", ("ms",)),
            "setImplicitTimeout": ("POST", "/session/:sessionId/timeouts/implicit_wait", ("ms",)),
            "getUrl": ("GET", "/session/:sessionId/url"),
            "navigateTo": ("POST", "/session/:sessionId/url", ("url",)),
            "back": ("POST", "/session/:sessionId/back"),
            "forward": ("POST", "/session/:sessionId/forward"),
            "refresh": ("POST", "/session/:sessionId/refresh"),
            "getTitle": ("GET", "/session/:sessionId/title"),
            "getWindowHandle": ("GET", "/session/:sessionId/window_handle"),
            "getWindowHandles": ("GET", "/session/:sessionId/window_handles"),
            "switchToWindow": ("POST", "/session/:sessionId/window", ("name",)),
            "closeWindow": ("DELETE", "/session/:sessionId/window"),
            "switchToFrame": ("POST", "/session/:sessionId/frame", ("id",)),
            "switchToParentFrame": ("POST", "/session/:sessionId/frame/parent"),
            "getWindowSize": ("GET", "/session/:sessionId/window/:windowHandle/size"),
            "setWindowSize": ("POST", "/session/:sessionId/window/:windowHandle/size", ("width", "height")),
            "maximizeWindow": ("POST", "/session/:sessionId/window/:windowHandle/maximize"),
            "findElement": ("POST", "/session/:sessionId/element", ("using", "value")),
            "findElements": ("POST", "/session/:sessionId/elements", ("using", "value")),
            "findElementFromElement": ("POST", "/session/:sessionId/element/:elementId/element", ("using", "value")),
            "findElementsFromElement": ("POST", "/session/:sessionId/element/:elementId/elements", ("using", "value")),
            "getActiveElement": ("POST", "/session/:sessionId/element/active"),
            "isElementSelected": ("GET", "/session/:sessionId/element/:elementId/selected"),
            "isElementDisplayed": ("GET", "/session/:sessionId/element/:elementId/displayed"),
            "getElementAttribute": ("GET", "/session/:sessionId/element/:elementId/attribute/:name"),
            "getElementCSSValue": ("GET", "/session/:sessionId/element/:elementId/css/:propertyName"),
            "getElementText": ("GET", "/session/:sessionId/element/:elementId/text"),
            "getElementTagName": ("GET", "/session/:sessionId/element/:elementId/name"),
            "getElementLocation": ("GET", "/session/:sessionId/element/:elementId/location"),
            "getElementSize": ("GET", "/session/:sessionId/element/:elementId/size"),
            "isElementEnabled": ("GET", "/session/:sessionId/element/:elementId/enabled"),
            "elementClick": ("POST", "/session/:sessionId/element/:elementId/click"),
            "elementClear": ("POST", "/session/:sessionId/element/:elementId/clear"),
            "elementSendKeys": ("POST", "/session/:sessionId/element/:elementId/value", ("value",)),
            "elementSubmit": ("POST", "/session/:sessionId/element/:elementId/submit"),
            "getPageSource": ("GET", "/session/:sessionId/source"),
            "executeScript": ("POST", "/session/:sessionId/execute", ("script", "args")),
            "executeAsyncScript": ("POST", "/session/:sessionId/execute_async", ("script", "args")),
            "getAllCookies": ("GET", "/session/:sessionId/cookie"),
            "addCookie": ("POST", "/session/:sessionId/cookie", ("cookie",)),
            "deleteAllCookies": ("DELETE", "/session/:sessionId/cookie"),
            "deleteCookie": ("DELETE", "/session/:sessionId/cookie/:name"),
            "moveToElement": ("POST", "/session/:sessionId/moveto", ("element", "xoffset", "yoffset")),
            "buttonDown": ("POST", "/session/:sessionId/buttondown", ("button",)),
            "buttonUp": ("POST", "/session/:sessionId/buttonup", ("button",)),
            "positionClick": ("POST", "/session/:sessionId/click", ("button",)),
            "positionDoubleClick": ("POST", "/session/:sessionId/doubleclick"),
            "dismissAlert": ("POST", "/session/:sessionId/dismiss_alert"),
            "acceptAlert": ("POST", "/session/:sessionId/accept_alert"),
            "getAlertText": ("GET", "/session/:sessionId/alert_text"),
            "sendAlertText": ("POST", "/session/:sessionId/alert_text", ("text",)),
            "takeScreenshot": ("GET", "/session/:sessionId/screenshot"),
            "getLogTypes": ("GET", "/session/:sessionId/log/types"),
            "getLogs": ("POST", "/session/:sessionId/log", ("type",)),
        }
    ),
)

CHROMIUM_TABLE = CommandTable(
    name="chromium",
    flag="isChromium",
    overrides=frozenset({"elementSendKeys"}),
    commands=build_table(
        {
            "sendCommand": ("POST", "/session/:sessionId/goog/cdp/execute", ("cmd", "params"), "Chrome DevTools Protocol command."),
            "sendCommandAndGetResult": ("POST", "/session/:sessionId/goog/cdp/execute", ("cmd", "params")),
            "getElementValue": ("GET", "/session/:sessionId/element/:elementId/value"),
            "elementSendKeys": ("POST", "/session/:sessionId/element/:elementId/value", ("text", "value")),
            "isAlertOpen": ("GET", "/session/:sessionId/alert_open"),
            "isAutoReporting": ("GET", "/session/:sessionId/autoreport"),
            "setAutoReporting": ("POST", "/session/:sessionId/autoreport", ("enabled",)),
            "isLoading": ("GET", "/session/:sessionId/is_loading"),
            "takeHeapSnapshot": ("GET", "/session/:sessionId/chromium/heap_snapshot"),
            "getNetworkConditions": ("GET", "/session/:sessionId/chromium/network_conditions"),
            "setNetworkConditions": ("POST", "/session/:sessionId/chromium/network_conditions", ("network_conditions", "network_name")),
            "deleteNetworkConditions": ("DELETE", "/session/:sessionId/chromium/network_conditions"),
            "launchChromeApp": ("POST", "/session/:sessionId/chromium/launch_app", ("id",)),
            "getCastSinks": ("GET", "/session/:sessionId/goog/cast/get_sinks"),
            "selectCastSink": ("POST", "/session/:sessionId/goog/cast/set_sink_to_use", ("sinkName",)),
            "startCastTabMirroring": ("POST", "/session/:sessionId/goog/cast/start_tab_mirroring", ("sinkName",)),
            "stopCasting": ("POST", "/session/:sessionId/goog/cast/stop_casting", ("sinkName",)),
            "shutdown": ("POST", "/shutdown"),
        }
    ),
)

GECKO_TABLE = CommandTable(
    name="gecko",
    flag="isFirefox",
    overrides=frozenset({"elementSendKeys"}),
    commands=build_table(
        {
            "getMozContext": ("GET", "/session/:sessionId/moz/context"),
            "setMozContext": ("POST", "/session/:sessionId/moz/context", ("context",), "Switch between chrome and content context."),
            "installAddOn": ("POST", "/session/:sessionId/moz/addon/install", ("addon", "temporary")),
            "uninstallAddOn": ("POST", "/session/:sessionId/moz/addon/uninstall", ("id",)),
            "fullPageScreenshot": ("GET", "/session/:sessionId/moz/screenshot/full"),
            "elementSendKeys": ("POST", "/session/:sessionId/element/:elementId/value", ("text",)),
        }
    ),
)

MOBILE_TABLE = CommandTable(
    name="mobile",
    flag="isMobile",
    overrides=frozenset({"performActions"}),
    commands=build_table(
        {
            "sendKeys": ("POST", "/session/:sessionId/keys", ("value",), "Send keys to the active element."),
            "performActions": ("POST", "/session/:sessionId/actions", ("actions",)),
            "touchPerform": ("POST", "/session/:sessionId/touch/perform", ("actions",)),
            "multiTouchPerform": ("POST", "/session/:sessionId/touch/multi/perform", ("actions", "elementId")),
            "getContexts": ("GET", "/session/:sessionId/contexts"),
            "getAppiumContext": ("GET", "/session/:sessionId/context"),
            "switchAppiumContext": ("POST", "/session/:sessionId/context", ("name",)),
            "getOrientation": ("GET", "/session/:sessionId/orientation"),
            "setOrientation": ("POST", "/session/:sessionId/orientation", ("orientation",)),
            "getGeoLocation": ("GET", "/session/:sessionId/location"),
            "setGeoLocation": ("POST", "/session/:sessionId/location", ("location",)),
            "getNetworkConnection": ("GET", "/session/:sessionId/network_connection"),
            "setNetworkConnection": ("POST", "/session/:sessionId/network_connection", ("type",)),
            "lock": ("POST", "/session/:sessionId/appium/device/lock", ("seconds",)),
            "unlock": ("POST", "/session/:sessionId/appium/device/unlock"),
            "isLocked": ("POST", "/session/:sessionId/appium/device/is_locked"),
            "shake": ("POST", "/session/:sessionId/appium/device/shake"),
            "hideKeyboard": ("POST", "/session/:sessionId/appium/device/hide_keyboard", ("strategy", "key", "keyCode", "keyName")),
            "isKeyboardShown": ("GET", "/session/:sessionId/appium/device/is_keyboard_shown"),
            "pressKeyCode": ("POST", "/session/:sessionId/appium/device/press_keycode", ("keycode", "metastate", "flags")),
            "installApp": ("POST", "/session/:sessionId/appium/device/install_app", ("appPath", "options")),
            "removeApp": ("POST", "/session/:sessionId/appium/device/remove_app", ("appId", "bundleId")),
            "isAppInstalled": ("POST", "/session/:sessionId/appium/device/app_installed", ("appId", "bundleId")),
            "activateApp": ("POST", "/session/:sessionId/appium/device/activate_app", ("appId", "bundleId")),
            "terminateApp": ("POST", "/session/:sessionId/appium/device/terminate_app", ("appId", "bundleId")),
            "background": ("POST", "/session/:sessionId/appium/app/background", ("seconds",)),
            "getDeviceTime": ("GET", "/session/:sessionId/appium/device/system_time"),
            "getSettings": ("GET", "/session/:sessionId/appium/settings"),
            "updateSettings": ("POST", "/session/:sessionId/appium/settings", ("settings",)),
            "executeDriverScript": ("POST", "/session/:sessionId/appium/execute_driver", ("script", "type", "timeout")),
        }
    ),
)

SAUCE_TABLE = CommandTable(
    name="saucelabs",
    flag="isSauce",
    commands=build_table(
        {
            "getPageLogs": ("GET", "/session/:sessionId/sauce/ondemand/log/:type", (), "Extended debugging logs."),
            "sauceThrottleNetwork": ("POST", "/session/:sessionId/sauce/ondemand/throttle/network", ("condition",)),
            "throttleCPU": ("POST", "/session/:sessionId/sauce/ondemand/throttle/cpu", ("rate",)),
            "interceptRequest": ("POST", "/session/:sessionId/sauce/ondemand/intercept", ("rule",)),
            "assertPerformance": ("POST", "/session/:sessionId/sauce/ondemand/performance/:type", ("name", "metrics")),
            "jankinessCheck": ("POST", "/session/:sessionId/sauce/ondemand/performance/scroll"),
            "mockRequest": ("POST", "/session/:sessionId/sauce/ondemand/mock", ("url", "filterOptions")),
        }
    ),
)

SELENIUM_TABLE = CommandTable(
    name="selenium",
    flag="isSeleniumStandalone",
    commands=build_table(
        {
            "file": ("POST", "/session/:sessionId/se/file", ("file",), "Upload a zipped file to the node."),
            "getDownloadableFiles": ("GET", "/session/:sessionId/se/files"),
            "download": ("POST", "/session/:sessionId/se/files", ("name",)),
            "deleteDownloadableFiles": ("DELETE", "/session/:sessionId/se/files"),
            "getHubConfig": ("GET", "/grid/api/hub"),
            "gridTestSession": ("GET", "/grid/api/testsession?session=:session"),
            "gridProxyDetails": ("GET", "/grid/api/proxy"),
            "manageSeleniumHubLifecycle": ("POST", "/extra/LifecycleServlet?action=:action"),
            "queryGrid": ("POST", "/graphql", ("query",)),
        }
    ),
)

BASE_TABLES = (WEBDRIVER_TABLE, JSONWIRE_TABLE)

# Merge order; tables gated by mutually exclusive flags never share a name.
EXTENSION_TABLES = (
    CHROMIUM_TABLE,
    GECKO_TABLE,
    MOBILE_TABLE,
    SAUCE_TABLE,
    SELENIUM_TABLE,
)
