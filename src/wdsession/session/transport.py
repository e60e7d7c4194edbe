"""Blocking HTTP transport for the new-session exchange, built on requests."""

from __future__ import annotations

import base64
import errno
import json
import logging
from typing import Any, Dict, Mapping, Optional, Protocol

import requests

from .exceptions import TransportError
from .types import TransportResponse

logger = logging.getLogger(__name__)

USER_AGENT = "wdsession/0.1 (python-requests)"

DEFAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json; charset=utf-8",
    "Accept": "application/json",
    "Connection": "keep-alive",
    "User-Agent": USER_AGENT,
}


class Transport(Protocol):
    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        json_body: Any,
    ) -> TransportResponse:
        ...


def basic_auth_header(user: Optional[str], key: Optional[str]) -> Dict[str, str]:
    if not user or not key:
        return {}
    token = base64.b64encode(f"{user}:{key}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def _is_connection_refused(exc: BaseException) -> bool:
    seen: set[int] = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, ConnectionRefusedError):
            return True
        if isinstance(current, OSError) and current.errno == errno.ECONNREFUSED:
            return True
        if "connection refused" in str(current).lower():
            return True
        nested = current.args[0] if current.args and isinstance(current.args[0], BaseException) else None
        current = getattr(current, "reason", None) or nested or current.__cause__ or current.__context__
    return False


def _translate_request_exception(exc: requests.RequestException, url: str) -> TransportError:
    if isinstance(exc, (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema, requests.exceptions.InvalidURL)):
        return TransportError(f"Invalid URL: {url} ({exc})", name=exc.__class__.__name__, code="ERR_INVALID_URL")
    if isinstance(exc, requests.exceptions.Timeout):
        return TransportError(f"Request to {url} timed out ({exc})", name=exc.__class__.__name__, code="ETIMEDOUT")
    if isinstance(exc, requests.exceptions.ConnectionError) and _is_connection_refused(exc):
        return TransportError(f"ECONNREFUSED {url}", name=exc.__class__.__name__, code="ECONNREFUSED")
    return TransportError(str(exc) or exc.__class__.__name__, name=exc.__class__.__name__)


def parse_response_body(response: requests.Response) -> Any:
    text = response.text or ""
    if not text.strip():
        raise TransportError("Response has empty body", name="EmptyResponseError")
    try:
        return json.loads(text)
    except ValueError:
        # Plain-text driver errors are surfaced as the failure message.
        raise TransportError(text.strip(), name="ResponseParseError") from None


class RequestsTransport:
    """Sends exactly one request per call. Retries belong to the caller."""

    def __init__(
        self,
        *,
        timeout: Optional[float] = 120.0,
        verify: bool = True,
        headers: Optional[Mapping[str, str]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.verify = verify
        self.headers = dict(DEFAULT_HEADERS)
        self.headers.update(headers or {})
        self._session = session

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        json_body: Any,
    ) -> TransportResponse:
        request_headers = dict(self.headers)
        request_headers.update(headers or {})
        data = json.dumps(json_body) if json_body is not None else None
        sender = self._session or requests
        try:
            response = sender.request(
                method.upper(),
                url,
                headers=request_headers,
                data=data,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.RequestException as exc:
            raise _translate_request_exception(exc, url) from exc

        logger.debug("%s %s -> %s", method.upper(), url, response.status_code)
        body = parse_response_body(response)
        return TransportResponse(status=response.status_code, body=body)
