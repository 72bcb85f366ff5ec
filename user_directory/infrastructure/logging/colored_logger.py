"""Console tracing for remote user operations.

Each operation gets its own colour so interleaved load/create/update/delete
calls stay readable in a dev terminal. Colours are dropped when the
``NO_COLOR`` environment variable is set.
"""

import logging
import os
import time
from contextlib import contextmanager
from typing import Any, Iterator, NamedTuple

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_GRAY = "\033[90m"
_OK = "\033[92m"
_FAIL = "\033[91m"


class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class OperationStage:
    """One stage per remote operation, plus a catch-all for failures."""

    LOAD = Stage("LOAD", "\033[92m", "📥")
    CREATE = Stage("CREATE", "\033[94m", "➕")
    UPDATE = Stage("UPDATE", "\033[93m", "✏️")
    DELETE = Stage("DELETE", "\033[95m", "🗑️")
    ERROR = Stage("ERROR", _FAIL, "❌")


class OperationLogger:
    """Logs the start, outcome and duration of each remote call.

    Usage:
        log = OperationLogger("UserRecordCache")
        with log.timed_step(OperationStage.DELETE, "Deleting user", id=user_id):
            await store.delete_user(user_id)
    """

    def __init__(self, component_name: str, colors: bool | None = None):
        self._logger = logging.getLogger(component_name)
        self._colors = "NO_COLOR" not in os.environ if colors is None else colors

    def _paint(self, text: str, *codes: str) -> str:
        if not self._colors or not codes:
            return text
        return "".join(codes) + text + _RESET

    def _context(self, fields: dict[str, Any]) -> str:
        if not fields:
            return ""
        pairs = ", ".join(f"{key}={value!r}" for key, value in fields.items())
        return " " + self._paint(f"[{pairs}]", _GRAY)

    def _tag(self, stage: Stage, bold: bool = False) -> str:
        codes = (stage.color, _BOLD) if bold else (stage.color,)
        return self._paint(f"{stage.icon} {stage.label:<6}", *codes)

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(
            "%s %s%s", self._tag(stage, bold=True), self._paint(message, stage.color), self._context(fields)
        )

    def step_complete(self, stage: Stage, message: str, elapsed: float, **fields: Any) -> None:
        self._logger.info(
            "%s %s %s%s",
            self._tag(stage),
            self._paint(f"done: {message}", _OK),
            self._paint(f"({elapsed * 1000:.0f} ms)", _DIM),
            self._context(fields),
        )

    def step_error(self, stage: Stage, message: str, error: BaseException | None = None) -> None:
        reason = f": {type(error).__name__}: {error}" if error is not None else ""
        self._logger.error(
            "%s %s", self._tag(OperationStage.ERROR, bold=True), self._paint(f"{stage.label} {message}{reason}", _FAIL)
        )

    def detail(self, message: str, **fields: Any) -> None:
        self._logger.debug("    %s%s", self._paint(message, _GRAY), self._context(fields))

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any) -> Iterator[None]:
        """Wrap one remote call; failures are logged and re-raised unchanged."""
        self.step_start(stage, message, **fields)
        started = time.perf_counter()
        try:
            yield
        except Exception as exc:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - started:.2f}s", error=exc)
            raise
        self.step_complete(stage, message, time.perf_counter() - started, **fields)
