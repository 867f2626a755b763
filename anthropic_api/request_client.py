"""Authenticated JSON transport shared by every endpoint facade."""
from __future__ import annotations

import time
from typing import Any, Dict, Mapping, Optional

import httpx

from utils.config import load_settings
from utils.logging import configure_logger, get_logger

LOGGER_NAME = "anthropic_api.request_client"
API_KEY_HEADER = "x-api-key"
API_VERSION_HEADER = "anthropic-version"
API_VERSION = "2023-06-01"


class ClientError(Exception):
    """Generic failure talking to the API."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class TransportError(ClientError):
    """Raised when the request never produced a response (connect, DNS, TLS, timeout)."""


class DeserializationError(ClientError):
    """Raised when the response body does not parse into the expected shape."""


class RequestClient:
    """POSTs JSON bodies with the fixed authentication headers attached.

    The HTTP status code is not inspected: an error response
    with a JSON body is handed to the deserializer like any other, and only
    transport and parse failures are reported.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str,
        settings: Optional[Dict[str, Any]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.settings = settings or load_settings()
        log_cfg = self._section("logging")
        if log_cfg.get("stream", False):
            self.logger = configure_logger(
                LOGGER_NAME,
                level=log_cfg.get("level", "INFO"),
                json_output=log_cfg.get("json_output", True),
            )
        else:
            self.logger = get_logger(LOGGER_NAME, level=log_cfg.get("level"))
        timeout = float(self._section("http").get("timeout_sec", 60))
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)

    def _section(self, name: str) -> Dict[str, Any]:
        values = self.settings.get(name)
        return values if isinstance(values, dict) else {}

    def _headers(self) -> Dict[str, str]:
        return {
            "content-type": "application/json",
            API_KEY_HEADER: self.api_key,
            API_VERSION_HEADER: API_VERSION,
        }

    async def post(self, path: str, body: Mapping[str, Any], response_type: Any = None) -> Any:
        """Send ``body`` to ``base_url + path`` and deserialize the reply.

        With ``response_type`` left as ``None`` the decoded JSON value is
        returned unchanged. Otherwise it is converted through
        ``response_type.from_dict`` when available, or by passing the
        decoded object as keyword arguments.
        """
        url = f"{self.base_url}{path}"
        start = time.perf_counter()
        try:
            response = await self.http_client.post(url, json=body, headers=self._headers())
        except httpx.HTTPError as exc:
            self.logger.debug(
                "path=%s transport failure latency_ms=%.2f",
                path,
                (time.perf_counter() - start) * 1000,
            )
            raise TransportError(f"POST {path} failed: {exc}") from exc

        status = response.status_code
        self.logger.debug(
            "path=%s status=%s latency_ms=%.2f",
            path,
            status,
            (time.perf_counter() - start) * 1000,
        )
        try:
            payload = response.json()
        except ValueError as exc:
            raise DeserializationError("Invalid JSON response", status=status) from exc
        return self._deserialize(payload, response_type, status)

    def _deserialize(self, payload: Any, response_type: Any, status: int) -> Any:
        if response_type is None:
            return payload
        try:
            from_dict = getattr(response_type, "from_dict", None)
            if from_dict is not None:
                return from_dict(payload)
            if not isinstance(payload, Mapping):
                raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
            return response_type(**payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise DeserializationError(
                f"Response does not match {getattr(response_type, '__name__', response_type)}: {exc}",
                status=status,
            ) from exc

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()
