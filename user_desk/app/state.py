from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from user_desk.app.domain.models.user_record import FormData, RecordId, UserRecord
from user_desk.app.ui.pagination import PageWindow, build_page_window, next_page, prev_page

CREATE_MODE = "create"
UPDATE_MODE = "update"
SUBMIT_LABELS = {CREATE_MODE: "Add User", UPDATE_MODE: "Update User"}


@dataclass
class UsersState:
    """Single owner of the view state; every write goes through a named operation."""

    page_size: int = 5
    users: list[UserRecord] = field(default_factory=list)
    form: FormData = field(default_factory=FormData)
    editing_id: RecordId | None = None
    page: int = 1

    @property
    def submit_mode(self) -> str:
        return UPDATE_MODE if self.editing_id is not None else CREATE_MODE

    @property
    def submit_label(self) -> str:
        return SUBMIT_LABELS[self.submit_mode]

    def load(self, records: list[UserRecord]) -> None:
        self.users = list(records)

    def set_form(self, **fields: Any) -> None:
        self.form = self.form.with_fields(**fields)

    def clear_form(self) -> None:
        self.form = FormData()

    def begin_edit(self, record: UserRecord) -> None:
        self.editing_id = record.record_id
        self.form = FormData.from_record(record)

    def finish_edit(self) -> None:
        self.editing_id = None
        self.clear_form()

    def apply_create(self, record: UserRecord) -> None:
        self.users = [*self.users, record]

    def apply_update(self, record: UserRecord) -> None:
        self.users = [record if user.record_id == record.record_id else user for user in self.users]

    def apply_delete(self, record_id: RecordId) -> None:
        self.users = [user for user in self.users if user.record_id != record_id]

    def set_page(self, page: int) -> None:
        self.page = max(1, int(page))

    def next_page(self) -> None:
        self.page = next_page(self.page, len(self.users), self.page_size)

    def prev_page(self) -> None:
        self.page = prev_page(self.page)

    def page_window(self) -> PageWindow:
        return build_page_window(len(self.users), self.page_size, self.page)

    def current_page_rows(self) -> list[UserRecord]:
        window = self.page_window()
        return self.users[window.start : window.end]
