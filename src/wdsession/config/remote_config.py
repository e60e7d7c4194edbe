from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator

from wdsession.session.transport import basic_auth_header
from wdsession.session.types import ConnectionCoordinates
from wdsession.util.file_utils import from_json_or_yaml

VALID_PROTOCOLS = {"http", "https"}
LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "silent": logging.CRITICAL + 1,
}


class RemoteConfig(BaseModel):
    """Connection and session options for one remote end."""

    protocol: str = Field("http", description="http or https.")
    hostname: str = Field("localhost", description="Host of the driver or grid.")
    port: Optional[int] = Field(4444, description="Port of the driver or grid.")
    path: str = Field("/", description="Base path the WebDriver endpoints live under.")
    user: Optional[str] = Field(None, description="Cloud provider user name.")
    key: Optional[str] = Field(None, description="Cloud provider access key.")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra request headers.")
    connection_timeout: float = Field(120.0, gt=0, description="Transport timeout in seconds.")
    strict_ssl: bool = Field(True, description="Verify TLS certificates.")
    log_level: str = Field("info", description="One of trace, debug, info, warn, error, silent.")
    capabilities: Dict[str, Any] = Field(default_factory=dict, description="Requested capabilities.")

    @field_validator("protocol")
    @classmethod
    def _check_protocol(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in VALID_PROTOCOLS:
            raise ValueError(f"protocol must be one of: {', '.join(sorted(VALID_PROTOCOLS))}")
        return normalized

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith("/"):
            value = "/" + value
        return value

    @field_validator("port")
    @classmethod
    def _check_port(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(LOG_LEVELS))}")
        return normalized

    @classmethod
    def from_file(cls, config_path: Union[str, Path], /, **overrides: Any) -> "RemoteConfig":
        data = from_json_or_yaml(config_path)
        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)

    def coordinates(self) -> ConnectionCoordinates:
        return ConnectionCoordinates(
            protocol=self.protocol,
            hostname=self.hostname,
            port=self.port,
            path=self.path,
        )

    def logging_level(self) -> int:
        return LOG_LEVELS[self.log_level]

    def request_headers(self) -> Dict[str, str]:
        headers = basic_auth_header(self.user, self.key)
        headers.update(self.headers)
        return headers
