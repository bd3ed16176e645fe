from __future__ import annotations

from typing import Any

import httpx

from clients.users_api_sdk.config import SDKConfig
from clients.users_api_sdk.errors import ApiError


class HttpClient:
    """Single-shot JSON client: no retries and no request timeout."""

    def __init__(self, config: SDKConfig, client: httpx.Client | None = None) -> None:
        self.config = config
        self._client = client or httpx.Client(
            base_url=config.base_url,
            timeout=None,
            verify=config.verify_ssl,
        )

    def request(
        self,
        method: str,
        path: str,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        normalized_path = path.lstrip("/")
        try:
            response = self._client.request(
                method=method,
                url=normalized_path,
                json=json_body,
                headers=dict(headers or {}),
            )
        except httpx.TransportError as exc:
            raise ApiError.network(exc) from exc

        if response.status_code >= 400:
            raise ApiError.from_http_response(response)

        try:
            return response.json()
        except ValueError:
            return None
