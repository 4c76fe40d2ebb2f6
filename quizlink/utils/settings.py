"""Runtime settings for the QuizLink host, read from the environment."""

from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from quizlink.constants.network_constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PUBLIC_ORIGIN,
)
from quizlink.constants.quiz_constants import QR_URL_MAX_LENGTH

_ENV_PREFIX = "QUIZLINK_"


class AppSettings(BaseModel):
    """Settings for the HTTP host and the links it produces."""

    host: str = Field(DEFAULT_HOST, min_length=1)
    port: int = Field(DEFAULT_PORT, gt=0, le=65535)
    public_origin: str = Field(DEFAULT_PUBLIC_ORIGIN, description="Origin that share links point at.")
    compress_links: bool = True
    qr_max_url_length: int = Field(QR_URL_MAX_LENGTH, gt=0)
    log_level: str = "INFO"

    @field_validator("public_origin")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    """Build settings from ``QUIZLINK_*`` variables, keeping defaults for the rest.

    Blank variables count as unset. Values are coerced and checked by
    ``AppSettings``; anything it rejects is raised as ``ValueError``.
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}
    for field_name in AppSettings.model_fields:
        raw = env.get(_ENV_PREFIX + field_name.upper())
        if raw is not None and raw.strip():
            data[field_name] = raw.strip()

    try:
        return AppSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid {_ENV_PREFIX}* configuration: {exc}") from exc
