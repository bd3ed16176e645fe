from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass

from clients.users_api_sdk.errors import ApiError
from clients.users_api_sdk.http_client import HttpClient
from clients.users_api_sdk.users_client import UsersClient

from user_desk.app.application.settlements import SettlementLedger
from user_desk.app.config import AppConfig
from user_desk.app.domain.models.user_record import RecordId, UserRecord
from user_desk.app.error_presenter import build_error_payload
from user_desk.app.infrastructure.ids.record_id_factory import RecordIdFactory
from user_desk.app.infrastructure.logging.logger import get_logger, log_action
from user_desk.app.infrastructure.sdk_adapter.users_adapter import RemoteResult, RemoteUsersAdapter
from user_desk.app.infrastructure.tasks.task_runner import ImmediateTaskRunner, TaskRunner
from user_desk.app.state import CREATE_MODE, UsersState
from user_desk.app.ui.components.notifier import Notifier
from user_desk.app.ui.forms import validate_user_form

MODULE = "users"


@dataclass(frozen=True)
class ActionOutcome:
    action: str
    success: bool
    message: str | None
    error_kind: str | None = None
    record_id: RecordId | None = None


class UsersController:
    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        http_client: HttpClient | None = None,
        adapter: RemoteUsersAdapter | None = None,
        state: UsersState | None = None,
        notifier: Notifier | None = None,
        runner: TaskRunner | None = None,
        id_factory: RecordIdFactory | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        if adapter is None:
            http_client = http_client or HttpClient(self.config.sdk)
            adapter = RemoteUsersAdapter(UsersClient(http_client))
        self.adapter = adapter
        self.state = state or UsersState(page_size=self.config.page_size)
        self.notifier = notifier or Notifier(duration_ms=self.config.toast_duration_ms)
        self.runner: TaskRunner = runner or ImmediateTaskRunner()
        self.id_factory = id_factory or RecordIdFactory()
        self.logger = logger or get_logger("user_desk.users", self.config.log_level)
        self.ledger = SettlementLedger()
        self.last_outcome: ActionOutcome | None = None
        self._listeners: list[Callable[[], None]] = []

    def set_runner(self, runner: TaskRunner) -> None:
        self.runner = runner

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def load_users(self) -> None:
        sequence = self.ledger.issue(None)
        self.runner.submit(self.adapter.fetch_all, lambda result: self._on_fetched(result, sequence))

    def update_field(self, name: str, value: str) -> None:
        self.state.set_form(**{name: value})

    def submit(self) -> None:
        result = validate_user_form(self.state.form)
        action = self.state.submit_mode
        if not result.is_valid:
            self.notifier.error(result.message or "")
            self._record(ActionOutcome(action=action, success=False, message=result.message, error_kind="validation"))
            log_action(self.logger, MODULE, action, self.state.editing_id, None, "rejected", "VALIDATION_ERROR")
            return

        if action == CREATE_MODE:
            record = self.state.form.to_record(self.id_factory.new_id())
            sequence = self.ledger.issue(record.record_id)
            self.runner.submit(lambda: self.adapter.create(record), lambda res: self._on_created(res, record, sequence))
            return

        record = self.state.form.to_record(self.state.editing_id)
        sequence = self.ledger.issue(record.record_id)
        self.runner.submit(lambda: self.adapter.update(record), lambda res: self._on_updated(res, record, sequence))

    def edit(self, record: UserRecord) -> None:
        self.state.begin_edit(record)
        self._emit()

    def delete(self, record_id: RecordId) -> None:
        sequence = self.ledger.issue(record_id)
        self.runner.submit(
            lambda: self.adapter.delete(record_id),
            lambda res: self._on_deleted(res, record_id, sequence),
        )

    def next_page(self) -> None:
        self.state.next_page()
        self._emit()

    def prev_page(self) -> None:
        self.state.prev_page()
        self._emit()

    def _on_fetched(self, result: RemoteResult, sequence: int) -> None:
        self.ledger.settle(None, sequence)
        if not self._check(result):
            return
        self.state.load(result.data or [])
        self._record(ActionOutcome(action="fetch", success=True, message=None))

    def _on_created(self, result: RemoteResult, record: UserRecord, sequence: int) -> None:
        self._warn_if_stale(result, sequence)
        if not self._check(result):
            return
        self.state.apply_create(record)
        self.state.clear_form()
        self._succeed(result, record.record_id)

    def _on_updated(self, result: RemoteResult, record: UserRecord, sequence: int) -> None:
        self._warn_if_stale(result, sequence)
        if not self._check(result):
            return
        self.state.apply_update(record)
        self.state.finish_edit()
        self._succeed(result, record.record_id)

    def _on_deleted(self, result: RemoteResult, record_id: RecordId, sequence: int) -> None:
        self._warn_if_stale(result, sequence)
        if not self._check(result):
            return
        self.state.apply_delete(record_id)
        self._succeed(result, record_id)

    def _check(self, result: RemoteResult) -> bool:
        if result.ok:
            return True
        error = result.error or RuntimeError("unknown failure")
        payload = build_error_payload(result.action, error)
        trace_id = error.trace_id if isinstance(error, ApiError) else None
        log_action(self.logger, MODULE, result.action, result.record_id, trace_id, "failure", payload["code"])
        self.logger.warning(json.dumps(payload, default=str))
        message = self.notifier.notify_failure(result.action).message
        self._record(
            ActionOutcome(action=result.action, success=False, message=message, error_kind="remote", record_id=result.record_id)
        )
        return False

    def _succeed(self, result: RemoteResult, record_id: RecordId) -> None:
        log_action(self.logger, MODULE, result.action, record_id, None, "success")
        notification = self.notifier.notify_success(result.action)
        self._record(
            ActionOutcome(
                action=result.action,
                success=True,
                message=notification.message if notification else None,
                record_id=record_id,
            )
        )

    def _warn_if_stale(self, result: RemoteResult, sequence: int) -> None:
        if self.ledger.settle(result.record_id, sequence):
            return
        # Applied regardless: settlements land in arrival order.
        log_action(self.logger, MODULE, result.action, result.record_id, None, "stale_settlement")

    def _record(self, outcome: ActionOutcome) -> None:
        self.last_outcome = outcome
        self._emit()

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener()
