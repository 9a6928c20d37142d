"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional, TextIO


class StructuredLogger:
    """JSON line logger bound to one trace id and one output stream."""

    def __init__(self, trace_id: Optional[str] = None, output: Optional[TextIO] = None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except Exception as exc:
            # Last-resort fallback to avoid silent logger failures.
            try:
                fallback = {
                    "event": "logger_internal_error",
                    "trace_id": self.trace_id,
                    "timestamp": time.time(),
                    "error": str(exc),
                }
                sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
                sys.stderr.flush()
            except Exception:
                return

    def event(self, name: str, **extra: Any) -> None:
        self._emit({"event": name, **extra})

    def operation_rejected(self, index: int, op: Optional[str], issues: list[dict[str, Any]], **extra: Any) -> None:
        self._emit({"event": "operation_rejected", "index": index, "op": op, "issues": issues, **extra})

    def warning(self, scope: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "scope": scope, "message": message, **extra})


def get_logger(trace_id: Optional[str] = None, output: Optional[TextIO] = None) -> StructuredLogger:
    return StructuredLogger(trace_id=trace_id, output=output)


__all__ = ["StructuredLogger", "get_logger"]
