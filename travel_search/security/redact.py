"""Scrub API keys out of log lines and error strings.

OpenAI SDK errors can echo request headers or the key prefix; everything that
reaches a log passes through :func:`redact_sensitive` first.
"""

from __future__ import annotations

import re

_REDACTED = "***REDACTED***"

_KEY_VALUE_RE = re.compile(
    r"(?i)(?P<prefix>[\"']?\b(?:api[_-]?key|token|secret|password)[\"']?\s*[:=]\s*[\"']?)(?P<value>[^\"'&,\s}]+)"
)
_AUTH_HEADER_RE = re.compile(r"(?i)(?P<prefix>\bauthorization\s*:\s*(?:bearer|basic)\s+)(?P<value>[^\s,;]+)")
_BEARER_RE = re.compile(r"(?i)(?P<prefix>\bbearer\s+)(?P<value>[A-Za-z0-9._~+/=-]+)")
_PROVIDER_KEY_RE = re.compile(r"\bsk-[A-Za-z0-9_-]{8,}\b")


def _mask(pattern: re.Pattern[str], text: str) -> str:
    return pattern.sub(lambda m: f"{m.group('prefix')}{_REDACTED}", text)


def redact_sensitive(text: str) -> str:
    if not text:
        return text
    redacted = str(text)
    for pattern in (_KEY_VALUE_RE, _AUTH_HEADER_RE, _BEARER_RE):
        redacted = _mask(pattern, redacted)
    return _PROVIDER_KEY_RE.sub(_REDACTED, redacted)


__all__ = ["redact_sensitive"]
