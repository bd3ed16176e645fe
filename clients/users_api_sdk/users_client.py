from __future__ import annotations

from typing import Any

from clients.users_api_sdk.http_client import HttpClient
from clients.users_api_sdk.normalizers import normalize_user_listing

USERS_PATH = "/users"


class UsersClient:
    def __init__(self, http_client: HttpClient) -> None:
        self.http_client = http_client

    def fetch_all(self) -> list[dict[str, Any]]:
        payload = self.http_client.request("GET", USERS_PATH)
        return normalize_user_listing(payload)

    def create(self, user_payload: dict[str, Any]) -> Any:
        return self.http_client.request("POST", USERS_PATH, json_body=user_payload)

    def update(self, user_id: int | str, user_payload: dict[str, Any]) -> Any:
        return self.http_client.request("PUT", f"{USERS_PATH}/{user_id}", json_body=user_payload)

    def delete(self, user_id: int | str) -> Any:
        return self.http_client.request("DELETE", f"{USERS_PATH}/{user_id}")
