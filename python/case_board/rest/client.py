from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from ..errors import RequestFailed
from ..logging import get_logger, request_log_fields
from .env import DEFAULT_TIMEOUT_SECONDS, CaseBoardConfig, resolve_api_base_url

_BODY_SNIPPET_LIMIT = 500


class CaseBoardRestClient:
    """Async JSON client for the case board REST API.

    Every request goes to ``base_url + path`` exactly once. Non-2xx responses
    raise :class:`RequestFailed`; there is no retry.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if not base_url or not base_url.strip():
            raise ValueError("base_url is required")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self.base_url = resolve_api_base_url(base_url.strip())
        self.timeout_seconds = float(timeout_seconds)
        self.logger = get_logger(logger)
        self._owns_client = http_client is None
        self._http = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(timeout=self.timeout_seconds)
        )

    @classmethod
    def from_config(
        cls,
        config: CaseBoardConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "CaseBoardRestClient":
        return cls(
            config.base_url,
            timeout_seconds=config.timeout_seconds,
            http_client=http_client,
            logger=logger,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "CaseBoardRestClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _build_headers(self, headers: Optional[Mapping[str, str]]) -> httpx.Headers:
        merged = httpx.Headers({"Content-Type": "application/json"})
        if headers:
            merged.update(headers)
        return merged

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        json_data: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        request_headers = self._build_headers(headers)
        self.logger.debug(
            "case board request",
            extra=request_log_fields(method, url, request_headers),
        )

        response = await self._http.request(
            method,
            url,
            headers=request_headers,
            json=json_data,
        )

        if not response.is_success:
            self.logger.warning(
                "API error %s for %s %s", response.status_code, method, url
            )
            raise RequestFailed(
                response.status_code, url, response.text[:_BODY_SNIPPET_LIMIT]
            )

        self.logger.debug(
            "case board response",
            extra={"method": method, "url": url, "status_code": response.status_code},
        )
        if response.status_code == 204 and method.upper() != "GET":
            return None
        return response.json()

    async def get_json(
        self,
        path: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self.request_json("GET", path, headers=headers)

    async def put_json(
        self,
        path: str,
        json_data: Any,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self.request_json("PUT", path, json_data=json_data, headers=headers)
