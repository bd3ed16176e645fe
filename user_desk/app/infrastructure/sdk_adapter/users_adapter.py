from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from clients.users_api_sdk.users_client import UsersClient

from user_desk.app.domain.models.user_record import RecordId, UserRecord


@dataclass(frozen=True)
class RemoteResult:
    action: str
    record_id: RecordId | None
    ok: bool
    data: Any = None
    error: Exception | None = None


class RemoteUsersAdapter:
    """Boundary over UsersClient: every call settles into a RemoteResult, none raise."""

    def __init__(self, users_client: UsersClient) -> None:
        self.users = users_client

    def fetch_all(self) -> RemoteResult:
        return self._settle("fetch", None, lambda: [UserRecord.from_payload(item) for item in self.users.fetch_all()])

    def create(self, record: UserRecord) -> RemoteResult:
        return self._settle("create", record.record_id, lambda: self.users.create(record.to_payload()))

    def update(self, record: UserRecord) -> RemoteResult:
        return self._settle(
            "update",
            record.record_id,
            lambda: self.users.update(record.record_id, record.to_payload()),
        )

    def delete(self, record_id: RecordId) -> RemoteResult:
        return self._settle("delete", record_id, lambda: self.users.delete(record_id))

    @staticmethod
    def _settle(action: str, record_id: RecordId | None, call: Any) -> RemoteResult:
        try:
            data = call()
        except Exception as error:  # noqa: BLE001
            return RemoteResult(action=action, record_id=record_id, ok=False, error=error)
        return RemoteResult(action=action, record_id=record_id, ok=True, data=data)
