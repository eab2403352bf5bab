"""结构化日志: JSON line 格式，输出前统一脱敏"""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional

from travel_search.security.redact import redact_sensitive


class StructuredLogger:
    """Writes one JSON object per line; secrets are scrubbed before output."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            out = self._output or sys.stderr
            out.write(redact_sensitive(line) + "\n")
            out.flush()
        except (OSError, TypeError, ValueError) as exc:
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")

    def op_start(self, operation: str, **extra: Any) -> float:
        """Emit the start event and return the start time for the matching ``op_end``."""
        started_at = time.time()
        self._emit({"event": "op_start", "op": operation, **extra})
        return started_at

    def op_end(
        self,
        operation: str,
        started_at: float,
        *,
        result_count: Optional[int] = None,
        **extra: Any,
    ) -> None:
        duration_ms = round((time.time() - started_at) * 1000, 1)
        payload: dict[str, Any] = {"event": "op_end", "op": operation, "duration_ms": duration_ms}
        if result_count is not None:
            payload["result_count"] = result_count
        self._emit({**payload, **extra})

    def llm_call(self, operation: str, **extra: Any) -> None:
        self._emit({"event": "llm_call", "op": operation, **extra})

    def error(self, operation: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "op": operation, "error": error, **extra})

    def warning(self, operation: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "op": operation, "message": message, **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger
