from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from user_desk.app.domain.models.user_record import FormData


EMAIL_REGEX = re.compile(r"\S+@\S+\.\S+")

REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("first_name", "First Name is required."),
    ("last_name", "Last Name is required."),
    ("email", "Email is required."),
    ("department", "Department is required."),
)
INVALID_EMAIL_MESSAGE = "Please enter a valid email address."


@dataclass
class FormResult:
    values: dict[str, Any]
    field_errors: dict[str, str]

    @property
    def first_invalid_field(self) -> str | None:
        return next(iter(self.field_errors), None)

    @property
    def message(self) -> str | None:
        field = self.first_invalid_field
        return self.field_errors[field] if field else None

    @property
    def is_valid(self) -> bool:
        return len(self.field_errors) == 0


def _is_blank(value: str | None) -> bool:
    return not (value or "").strip()


def validate_user_form(form: FormData) -> FormResult:
    """Return the first failing rule only; later rules are not evaluated."""
    values = {
        "first_name": form.first_name,
        "last_name": form.last_name,
        "email": form.email,
        "department": form.department,
    }
    for field, message in REQUIRED_FIELDS:
        if _is_blank(values[field]):
            return FormResult(values=values, field_errors={field: message})

    if not EMAIL_REGEX.search(form.email):
        return FormResult(values=values, field_errors={"email": INVALID_EMAIL_MESSAGE})

    return FormResult(values=values, field_errors={})
