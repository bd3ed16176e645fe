from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

RecordId = int | str


@dataclass(frozen=True)
class UserRecord:
    record_id: RecordId
    first_name: str
    last_name: str
    email: str
    department: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "UserRecord":
        return cls(
            record_id=payload.get("id"),
            first_name=str(payload.get("firstName") or ""),
            last_name=str(payload.get("lastName") or ""),
            email=str(payload.get("email") or ""),
            department=str(payload.get("department") or ""),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "department": self.department,
        }


@dataclass(frozen=True)
class FormData:
    record_id: RecordId | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    department: str = ""

    @classmethod
    def from_record(cls, record: UserRecord) -> "FormData":
        return cls(
            record_id=record.record_id,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            department=record.department,
        )

    def with_fields(self, **fields: Any) -> "FormData":
        return replace(self, **fields)

    def to_record(self, record_id: RecordId) -> UserRecord:
        return UserRecord(
            record_id=record_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            department=self.department,
        )
