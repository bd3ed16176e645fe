from __future__ import annotations

import tkinter as tk

from user_desk.app.gui_controller import UsersController
from user_desk.app.gui_views import UsersWindow
from user_desk.app.infrastructure.tasks.task_runner import ThreadedTaskRunner
from user_desk.app.ui.components.notifier import Notification


class GuiApp:
    def __init__(
        self,
        controller: UsersController | None = None,
        *,
        window_cls: type[UsersWindow] = UsersWindow,
    ) -> None:
        self.controller = controller or UsersController()
        self.root = tk.Tk()
        self.controller.set_runner(ThreadedTaskRunner(self.root))
        self.window = window_cls(
            self.root,
            on_field_change=self.controller.update_field,
            on_submit=self.controller.submit,
            on_edit=self.controller.edit,
            on_delete=self.controller.delete,
            on_prev=self.controller.prev_page,
            on_next=self.controller.next_page,
        )
        self.controller.subscribe(self.refresh)
        self.controller.notifier.subscribe(self._on_notification)
        self.refresh()
        self.controller.load_users()

    def run(self) -> None:
        self.root.mainloop()

    def refresh(self) -> None:
        self.window.render(self.controller.state)

    def _on_notification(self, notification: Notification | None) -> None:
        notifier = self.controller.notifier
        self.window.render_notifications(notifier.active())
        if notification is not None:
            self.root.after(notifier.duration_ms, lambda: notifier.dismiss(notification.notification_id))


def run_gui_app() -> None:
    app = GuiApp()
    app.run()
