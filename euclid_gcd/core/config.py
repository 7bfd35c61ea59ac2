"""Configuration for euclid-gcd."""

from __future__ import annotations

import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

ENV_PREFIX = "EUCLID_GCD_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GcdConfig(BaseModel):
    """Configuration for GCD computation and the CLI."""

    # Level for the CLI's log handler
    log_level: str = "WARNING"

    # gcd(0, 0) returns 0 when true, raises DegenerateInputError when false
    allow_zero_pair: bool = True

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got: {value!r}"
            )
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GcdConfig:
        """
        Build a config from environment variables.

        Reads ``EUCLID_GCD_LOG_LEVEL`` and ``EUCLID_GCD_ALLOW_ZERO_PAIR``.
        When no mapping is passed, a ``.env`` file is loaded into
        ``os.environ`` first.

        Args:
            environ: Mapping to read from instead of os.environ

        Returns:
            GcdConfig with unset variables left at their defaults
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        values: dict[str, str] = {}
        for field in ("log_level", "allow_zero_pair"):
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw is not None and raw.strip():
                values[field] = raw.strip()

        return cls.model_validate(values)
