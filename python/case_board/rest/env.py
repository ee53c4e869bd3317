from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_BASE_URL = "http://localhost:3000"
API_PATH_SUFFIX = "/api/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0


def resolve_api_base_url(raw: str) -> str:
    """Return ``raw`` with exactly one trailing ``/api/v1``.

    A single trailing slash is dropped first, so ``http://x/`` and
    ``http://x/api/v1/`` both resolve cleanly.
    """
    base = raw[:-1] if raw.endswith("/") else raw
    if base.endswith(API_PATH_SUFFIX):
        return base
    return f"{base}{API_PATH_SUFFIX}"


@dataclass(frozen=True)
class CaseBoardConfig:
    base_url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @staticmethod
    def from_raw(
        raw_base_url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "CaseBoardConfig":
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        return CaseBoardConfig(
            base_url=resolve_api_base_url(raw_base_url),
            timeout_seconds=float(timeout_seconds),
        )


def _env_value(environ: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = environ.get(name)
        if value is not None and value.strip():
            return value.strip()
    return None


def api_base_url_from_env(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    raw = _env_value(env, "CASE_BOARD_API_BASE_URL", "API_BASE_URL")
    return resolve_api_base_url(raw or DEFAULT_API_BASE_URL)


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> CaseBoardConfig:
    env = os.environ if environ is None else environ
    raw_timeout = _env_value(env, "CASE_BOARD_TIMEOUT_SECONDS")
    timeout_seconds = DEFAULT_TIMEOUT_SECONDS
    if raw_timeout is not None:
        try:
            timeout_seconds = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"CASE_BOARD_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
            ) from None
    raw_base_url = _env_value(env, "CASE_BOARD_API_BASE_URL", "API_BASE_URL")
    return CaseBoardConfig.from_raw(
        raw_base_url or DEFAULT_API_BASE_URL,
        timeout_seconds=timeout_seconds,
    )
