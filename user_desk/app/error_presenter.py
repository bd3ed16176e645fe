from __future__ import annotations

from typing import Any

from clients.users_api_sdk.errors import ApiError


def build_error_payload(action: str, error: Exception) -> dict[str, Any]:
    """Diagnostic view of a failure; goes to the log, never to the user."""
    if isinstance(error, ApiError):
        return {
            "action": action,
            "code": error.code,
            "status_code": error.status_code,
            "message": error.message,
        }
    return {
        "action": action,
        "code": "INTERNAL_ERROR",
        "status_code": None,
        "message": f"{type(error).__name__}: {error}",
    }
