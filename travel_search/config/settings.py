"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from travel_search.shared.exceptions import ConfigError

_logger = logging.getLogger("travel-search.config")

_TRUTHY = {"1", "true", "yes", "on"}
_DEFAULT_SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "seed_v1.json"
_DEFAULT_LOCATION_LIMIT = 10
_DEFAULT_LLM_TIMEOUT = 30.0

DEFAULT_CLASS_MULTIPLIERS: dict[str, float] = {
    "economy": 1.0,
    "business": 2.0,
    "first": 3.0,
}
CLASS_TIER_ORDER = ("economy", "business", "first")


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def docs_enabled() -> bool:
    return _is_enabled(os.getenv("ENABLE_DOCS"))


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [item.strip() for item in raw.split(",") if item.strip()] or ["*"]


def seed_data_file() -> Path:
    raw = os.getenv("SEED_DATA_FILE", "").strip()
    return Path(raw) if raw else _DEFAULT_SEED_FILE


def location_suggestion_limit() -> int:
    raw = os.getenv("LOCATION_SUGGESTION_LIMIT", "").strip()
    if not raw:
        return _DEFAULT_LOCATION_LIMIT
    try:
        value = int(raw)
    except ValueError:
        _logger.warning("LOCATION_SUGGESTION_LIMIT=%r is not an integer, using %d", raw, _DEFAULT_LOCATION_LIMIT)
        return _DEFAULT_LOCATION_LIMIT
    return max(1, value)


def llm_timeout_seconds() -> float:
    raw = os.getenv("LLM_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return _DEFAULT_LLM_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        _logger.warning("LLM_TIMEOUT_SECONDS=%r is not a number, using %.0f", raw, _DEFAULT_LLM_TIMEOUT)
        return _DEFAULT_LLM_TIMEOUT
    if value <= 0:
        _logger.warning("LLM_TIMEOUT_SECONDS=%r must be positive, using %.0f", raw, _DEFAULT_LLM_TIMEOUT)
        return _DEFAULT_LLM_TIMEOUT
    return value


def resolve_class_multipliers() -> dict[str, float]:
    """Parse ``CLASS_MULTIPLIERS`` (``economy=1,business=2.5,first=4``) over the defaults."""
    table = dict(DEFAULT_CLASS_MULTIPLIERS)
    raw = os.getenv("CLASS_MULTIPLIERS", "")
    for item in raw.split(","):
        if not item.strip():
            continue
        name, sep, value = item.partition("=")
        name = name.strip().lower()
        if not sep or name not in table:
            _logger.warning("Ignoring malformed CLASS_MULTIPLIERS entry: %r", item)
            continue
        try:
            multiplier = float(value)
        except ValueError:
            _logger.warning("Ignoring non-numeric CLASS_MULTIPLIERS entry: %r", item)
            continue
        if multiplier < 0:
            raise ConfigError("CLASS_MULTIPLIERS", f"negative multiplier for {name}")
        table[name] = multiplier

    tiers = [table[name] for name in CLASS_TIER_ORDER]
    if tiers != sorted(tiers):
        raise ConfigError("CLASS_MULTIPLIERS", f"multipliers must not decrease by class tier: {table}")
    return table


def resolve_llm_provider() -> str:
    if is_configured(os.getenv("DASHSCOPE_API_KEY")):
        return "dashscope"
    if is_configured(os.getenv("OPENAI_API_KEY")):
        return "openai"
    if is_configured(os.getenv("LLM_API_KEY")):
        return "llm_compatible"
    return "disabled"


class ProviderSnapshot(BaseModel):
    repository_backend: str = Field(default="memory")
    location_provider: str = Field(default="mock")
    llm_provider: str = Field(default="disabled")
    class_multipliers: dict[str, float] = Field(default_factory=dict)


def resolve_provider_snapshot(
    *,
    repository_backend: str,
    location_provider: str,
    class_multipliers: dict[str, float],
) -> ProviderSnapshot:
    return ProviderSnapshot(
        repository_backend=repository_backend,
        location_provider=location_provider,
        llm_provider=resolve_llm_provider(),
        class_multipliers=dict(class_multipliers),
    )


__all__ = [
    "CLASS_TIER_ORDER",
    "DEFAULT_CLASS_MULTIPLIERS",
    "ProviderSnapshot",
    "cors_origins",
    "docs_enabled",
    "is_configured",
    "llm_timeout_seconds",
    "location_suggestion_limit",
    "resolve_class_multipliers",
    "resolve_llm_provider",
    "resolve_provider_snapshot",
    "seed_data_file",
]
