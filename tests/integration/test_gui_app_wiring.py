from __future__ import annotations

from user_desk.app.domain.models.user_record import UserRecord
from user_desk.app.gui_app import GuiApp
from user_desk.app.state import UsersState
from user_desk.app.ui.components.notifier import Notifier


class FakeTk:
    def __init__(self) -> None:
        self.scheduled: list[tuple[int, object]] = []

    def after(self, delay_ms: int, callback) -> None:  # noqa: ANN001
        self.scheduled.append((delay_ms, callback))

    def mainloop(self) -> None:
        return

    def destroy(self) -> None:
        return


class FakeWindow:
    def __init__(self, root, **handlers) -> None:  # noqa: ANN001, ANN003
        self.root = root
        self.handlers = handlers
        self.renders: list[dict] = []
        self.toasts: list[list[str]] = []

    def render(self, state: UsersState) -> None:
        self.renders.append(
            {
                "label": state.submit_label,
                "rows": [user.record_id for user in state.current_page_rows()],
                "has_prev": state.page_window().has_prev,
                "has_next": state.page_window().has_next,
            }
        )

    def render_notifications(self, notifications) -> None:  # noqa: ANN001
        self.toasts.append([item.message for item in notifications])


class FakeController:
    def __init__(self) -> None:
        self.state = UsersState(page_size=5)
        self.notifier = Notifier(duration_ms=3000)
        self.runner = None
        self.loaded = 0
        self._listeners = []

    def set_runner(self, runner) -> None:  # noqa: ANN001
        self.runner = runner

    def subscribe(self, listener) -> None:  # noqa: ANN001
        self._listeners.append(listener)

    def load_users(self) -> None:
        self.loaded += 1
        self.state.load([UserRecord(index, "U", str(index), f"u{index}@x.com", "N/A") for index in range(1, 8)])
        for listener in self._listeners:
            listener()

    def update_field(self, name: str, value: str) -> None:
        self.state.set_form(**{name: value})

    def submit(self) -> None:
        return

    def edit(self, record: UserRecord) -> None:
        self.state.begin_edit(record)
        for listener in self._listeners:
            listener()

    def delete(self, record_id) -> None:  # noqa: ANN001
        return

    def next_page(self) -> None:
        self.state.next_page()
        for listener in self._listeners:
            listener()

    def prev_page(self) -> None:
        self.state.prev_page()


def _app(monkeypatch) -> GuiApp:  # noqa: ANN001
    monkeypatch.setattr("user_desk.app.gui_app.tk.Tk", FakeTk)
    return GuiApp(controller=FakeController(), window_cls=FakeWindow)


def test_startup_renders_and_fetches_once(monkeypatch) -> None:
    app = _app(monkeypatch)

    assert app.controller.loaded == 1
    assert app.window.renders[0]["rows"] == []
    assert app.window.renders[-1]["rows"] == [1, 2, 3, 4, 5]
    assert app.window.renders[-1]["has_prev"] is False
    assert app.window.renders[-1]["has_next"] is True
    assert app.controller.runner.root is app.root


def test_window_handlers_route_to_controller(monkeypatch) -> None:
    app = _app(monkeypatch)

    app.window.handlers["on_next"]()
    assert app.window.renders[-1]["rows"] == [6, 7]
    assert app.window.renders[-1]["has_next"] is False

    app.window.handlers["on_edit"](app.controller.state.users[5])
    assert app.window.renders[-1]["label"] == "Update User"

    app.window.handlers["on_field_change"]("email", "new@x.com")
    assert app.controller.state.form.email == "new@x.com"


def test_notifications_render_and_schedule_dismissal(monkeypatch) -> None:
    app = _app(monkeypatch)

    toast = app.controller.notifier.success("User added successfully!")

    assert app.window.toasts[-1] == ["User added successfully!"]
    delay, dismiss = app.root.scheduled[-1]
    assert delay == 3000
    dismiss()
    assert app.window.toasts[-1] == []
    assert app.controller.notifier.active() == []
    assert toast.notification_id == 1
