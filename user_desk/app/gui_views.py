from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from user_desk import APP_NAME, APP_VERSION
from user_desk.app.domain.models.user_record import RecordId, UserRecord
from user_desk.app.state import UsersState
from user_desk.app.ui.components.notifier import ERROR, Notification
from user_desk.app.ui.listing_view import USER_COLUMNS, row_values

FORM_FIELDS: tuple[tuple[str, str], ...] = (
    ("first_name", "First Name"),
    ("last_name", "Last Name"),
    ("email", "Email"),
    ("department", "Department"),
)
TOAST_COLORS = {ERROR: ("#fdecea", "#b00020")}
DEFAULT_TOAST_COLORS = ("#e8f5e9", "#1b5e20")


class UsersWindow:
    def __init__(
        self,
        root: tk.Tk,
        *,
        on_field_change: Callable[[str, str], None],
        on_submit: Callable[[], None],
        on_edit: Callable[[UserRecord], None],
        on_delete: Callable[[RecordId], None],
        on_prev: Callable[[], None],
        on_next: Callable[[], None],
    ) -> None:
        self.root = root
        root.title(f"{APP_NAME} {APP_VERSION} - User Management")
        root.geometry("820x460")

        self._on_field_change = on_field_change
        self._on_submit = on_submit
        self._on_edit = on_edit
        self._on_delete = on_delete
        self._rows_by_iid: dict[str, UserRecord] = {}
        self._syncing = False

        frame = tk.Frame(root, padx=16, pady=16)
        frame.pack(fill="both", expand=True)

        self._toasts = tk.Frame(root)
        self._toasts.place(relx=1.0, rely=0.0, anchor="ne", x=-8, y=8)

        tk.Label(frame, text="User Management", font=("TkDefaultFont", 14, "bold")).pack(pady=(0, 10))

        form = tk.Frame(frame)
        form.pack(fill="x")
        self.field_vars: dict[str, tk.StringVar] = {}
        for index, (name, label) in enumerate(FORM_FIELDS):
            var = tk.StringVar(value="")
            var.trace_add("write", lambda *_args, field=name: self._field_changed(field))
            self.field_vars[name] = var
            cell = tk.Frame(form)
            cell.grid(row=index // 2, column=index % 2, sticky="ew", padx=4, pady=4)
            tk.Label(cell, text=label, anchor="w").pack(fill="x")
            tk.Entry(cell, textvariable=var, width=36).pack(fill="x")
        form.columnconfigure(0, weight=1)
        form.columnconfigure(1, weight=1)

        self.submit_label = tk.StringVar(value="Add User")
        tk.Button(frame, textvariable=self.submit_label, command=self._on_submit).pack(anchor="w", pady=(8, 12))

        tk.Label(frame, text="User List", font=("TkDefaultFont", 12, "bold"), anchor="w").pack(fill="x")
        self.table = ttk.Treeview(frame, columns=[column.key for column in USER_COLUMNS], show="headings", height=5)
        for column in USER_COLUMNS:
            self.table.heading(column.key, text=column.label)
            self.table.column(column.key, width=column.width, anchor="w")
        self.table.pack(fill="both", expand=True)

        actions = tk.Frame(frame)
        actions.pack(fill="x", pady=(6, 0))
        self.edit_button = tk.Button(actions, text="Edit", width=10, command=self._edit_selected)
        self.edit_button.pack(side="left", padx=(0, 6))
        self.delete_button = tk.Button(actions, text="Delete", width=10, command=self._delete_selected)
        self.delete_button.pack(side="left")

        pager = tk.Frame(frame)
        pager.pack(fill="x", pady=(10, 0))
        self.prev_button = tk.Button(pager, text="Previous", width=10, command=on_prev)
        self.prev_button.pack(side="left")
        self.page_value = tk.StringVar(value="")
        tk.Label(pager, textvariable=self.page_value).pack(side="left", expand=True)
        self.next_button = tk.Button(pager, text="Next", width=10, command=on_next)
        self.next_button.pack(side="right")

    def render(self, state: UsersState) -> None:
        self._syncing = True
        try:
            for name, _label in FORM_FIELDS:
                value = getattr(state.form, name)
                if self.field_vars[name].get() != value:
                    self.field_vars[name].set(value)
        finally:
            self._syncing = False
        self.submit_label.set(state.submit_label)

        self.table.delete(*self.table.get_children())
        self._rows_by_iid = {}
        window = state.page_window()
        for offset, record in enumerate(state.current_page_rows()):
            iid = f"row-{window.start + offset}"
            self._rows_by_iid[iid] = record
            self.table.insert("", "end", iid=iid, values=row_values(record))

        self.prev_button.configure(state="normal" if window.has_prev else "disabled")
        self.next_button.configure(state="normal" if window.has_next else "disabled")
        self.page_value.set(f"Page {window.page} of {max(1, window.total_pages)}")

    def render_notifications(self, notifications: list[Notification]) -> None:
        for widget in self._toasts.winfo_children():
            widget.destroy()
        for notification in notifications:
            background, foreground = TOAST_COLORS.get(notification.level, DEFAULT_TOAST_COLORS)
            tk.Label(
                self._toasts,
                text=notification.message,
                bg=background,
                fg=foreground,
                padx=10,
                pady=6,
                anchor="w",
            ).pack(fill="x", pady=(0, 4))

    def _field_changed(self, name: str) -> None:
        if self._syncing:
            return
        self._on_field_change(name, self.field_vars[name].get())

    def _selected_record(self) -> UserRecord | None:
        selection = self.table.selection()
        if not selection:
            return None
        return self._rows_by_iid.get(selection[0])

    def _edit_selected(self) -> None:
        record = self._selected_record()
        if record is not None:
            self._on_edit(record)

    def _delete_selected(self) -> None:
        record = self._selected_record()
        if record is not None:
            self._on_delete(record.record_id)
