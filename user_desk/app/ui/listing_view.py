from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from user_desk.app.domain.models.user_record import UserRecord

EMPTY_VALUE = ""


@dataclass(frozen=True)
class ColumnDef:
    key: str
    label: str
    width: int = 120


USER_COLUMNS: tuple[ColumnDef, ...] = (
    ColumnDef("id", "ID", 110),
    ColumnDef("firstName", "First Name"),
    ColumnDef("lastName", "Last Name"),
    ColumnDef("email", "Email", 200),
    ColumnDef("department", "Department"),
)


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, str):
        return value.strip()
    return str(value)


def row_values(record: UserRecord, columns: tuple[ColumnDef, ...] = USER_COLUMNS) -> tuple[str, ...]:
    payload = record.to_payload()
    return tuple(normalize_value(payload.get(column.key)) for column in columns)
