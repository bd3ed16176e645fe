from __future__ import annotations

import os
from dataclasses import dataclass

from clients.users_api_sdk.config import SDKConfig


DEFAULT_PAGE_SIZE = 5
DEFAULT_TOAST_DURATION_MS = 5000


@dataclass(frozen=True)
class AppConfig:
    sdk: SDKConfig
    page_size: int
    toast_duration_ms: int
    log_level: str

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "AppConfig":
        # SDKConfig.from_env loads the .env file; the app settings below see it too.
        sdk = SDKConfig.from_env(env_file)
        config = cls(
            sdk=sdk,
            page_size=int(os.getenv("USER_DESK_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))),
            toast_duration_ms=int(os.getenv("USER_DESK_TOAST_DURATION_MS", str(DEFAULT_TOAST_DURATION_MS))),
            log_level=os.getenv("USER_DESK_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not self.sdk.base_url:
            raise ValueError("USER_DESK_BASE_URL must not be empty")
        if self.page_size < 1:
            raise ValueError("USER_DESK_PAGE_SIZE must be >= 1")
        if self.toast_duration_ms <= 0:
            raise ValueError("USER_DESK_TOAST_DURATION_MS must be greater than 0")
        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"USER_DESK_LOG_LEVEL not supported: {self.log_level}")
