"""Settings read from the environment."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from .actions import INIT

ENV_PREFIX = "TEXTUAL_DISPATCH_"

_TRUTHY = {"1", "true", "yes", "on"}


class StoreSettings(BaseModel):
    """
    Runtime settings for stores and the counter app.

    Attributes:
        init_type: Type of the action dispatched by ``Store.bootstrap()``.
        strict: Reject dispatches issued while a dispatch is running.
        log_level: Level used by ``configure_logging``.
    """

    model_config = ConfigDict(frozen=True)

    init_type: str = INIT
    strict: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StoreSettings:
        """Build settings from ``TEXTUAL_DISPATCH_*`` variables."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        init_type = env.get(f"{ENV_PREFIX}INIT_TYPE")
        if init_type:
            values["init_type"] = init_type

        strict = env.get(f"{ENV_PREFIX}STRICT")
        if strict is not None:
            values["strict"] = strict.strip().lower() in _TRUTHY

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level

        return cls(**values)


def configure_logging(settings: StoreSettings) -> None:
    """Configure root logging for the app entry point."""
    logging.basicConfig(level=settings.log_level)
