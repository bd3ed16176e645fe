from __future__ import annotations

from dataclasses import dataclass

import httpx

TRACE_HEADERS = ("X-Trace-ID", "X-Request-Id")
MAX_BODY_CHARS = 200


@dataclass
class ApiError(Exception):
    """A failed call to the users endpoint, either at the transport or the HTTP level."""

    code: str
    message: str
    status_code: int | None = None
    trace_id: str | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "ApiError":
        # The endpoint has no error envelope; keep a bounded slice of the raw body.
        body = response.text.strip()[:MAX_BODY_CHARS]
        return cls(
            code=f"HTTP_{response.status_code}",
            message=body or response.reason_phrase or "HTTP request failed",
            status_code=response.status_code,
            trace_id=next((response.headers[name] for name in TRACE_HEADERS if name in response.headers), None),
        )

    @classmethod
    def network(cls, exc: httpx.TransportError) -> "ApiError":
        return cls(code="NETWORK_ERROR", message=f"{type(exc).__name__}: {exc}")
