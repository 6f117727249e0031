from __future__ import annotations

import os
from pathlib import Path

from objcreate.config.env_loader import load_env_file

PREFIX = "OBJCREATE_"


class CreatorConfig:
    """Environment-based settings for wiring an ObjectCreator.

    Precedence, lowest first: process environment, the optional settings
    file, explicit overrides.

        OBJCREATE_LOG_IMPL         pretty | memory          [default: pretty]
        OBJCREATE_LOG_LEVEL        DEBUG | INFO | WARN | ERROR [default: WARN]
        OBJCREATE_METRICS_IMPL     noop | memory | prometheus [default: noop]
        OBJCREATE_PROMETHEUS_PORT  port for /metrics, 0 disables [default: 0]
    """

    def __init__(
        self,
        overrides: dict[str, str] | None = None,
        env_file: str | Path | None = None,
    ) -> None:
        self._env = dict(os.environ)
        if env_file is not None:
            self._env.update(load_env_file(env_file))
        if overrides:
            self._env.update(overrides)

    def get(self, key: str, default: str = "") -> str:
        return self._env.get(key, default)

    @property
    def log_impl(self) -> str:
        return self.get(PREFIX + "LOG_IMPL", "pretty")

    @property
    def log_level(self) -> str:
        return self.get(PREFIX + "LOG_LEVEL", "WARN").upper()

    @property
    def metrics_impl(self) -> str:
        return self.get(PREFIX + "METRICS_IMPL", "noop")

    @property
    def prometheus_port(self) -> int:
        raw = self.get(PREFIX + "PROMETHEUS_PORT", "0")
        try:
            return int(raw) if raw else 0
        except ValueError:
            raise ValueError(f"{PREFIX}PROMETHEUS_PORT must be an integer, got '{raw}'") from None

    def __repr__(self) -> str:
        shown = {k: v for k, v in self._env.items() if k.startswith(PREFIX)}
        return f"CreatorConfig({shown})"
