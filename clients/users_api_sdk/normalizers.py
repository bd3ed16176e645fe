from __future__ import annotations

from typing import Any

DEPARTMENT_PLACEHOLDER = "N/A"


def split_full_name(name: str | None) -> tuple[str, str]:
    parts = (name or "").split(" ")
    first_name = parts[0]
    last_name = parts[1] if len(parts) > 1 else ""
    return first_name, last_name


def normalize_remote_user(item: dict[str, Any]) -> dict[str, Any]:
    first_name, last_name = split_full_name(_to_text(item.get("name")))
    return {
        "id": item.get("id"),
        "firstName": first_name,
        "lastName": last_name,
        "email": _to_text(item.get("email")),
        "department": DEPARTMENT_PLACEHOLDER,
    }


def normalize_user_listing(payload: Any) -> list[dict[str, Any]]:
    if not isinstance(payload, list):
        return []
    return [normalize_remote_user(item) for item in payload if isinstance(item, dict)]


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
