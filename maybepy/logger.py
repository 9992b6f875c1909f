from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Dict, Optional, TypeVar

from .maybe import Maybe

T = TypeVar("T")

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Writes container traces to stderr, as text or as JSON lines."""

    def __init__(self, name: str = "maybepy", level: str = "INFO", json_output: bool = False):
        self.name = name
        self.threshold = _LEVELS.get(level.upper(), _LEVELS["INFO"])
        self.json_output = json_output

    def set_level(self, level: str) -> None:
        self.threshold = _LEVELS.get(level.upper(), self.threshold)

    @property
    def level_name(self) -> str:
        return next((k for k, v in _LEVELS.items() if v == self.threshold), "INFO")

    def is_enabled(self, level: str) -> bool:
        return _LEVELS[level] >= self.threshold

    def debug(self, label: str, **fields: Any) -> None:
        if self.is_enabled("DEBUG"):
            print(self.format("DEBUG", label, fields), file=sys.stderr)

    def format(self, level: str, label: str, fields: Dict[str, Any]) -> str:
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        if self.json_output:
            record = {"ts": ts, "name": self.name, "level": level, "label": label, **fields}
            return json.dumps(record, separators=(",", ":"), default=repr)
        extras = "".join(f" {k}={v}" for k, v in fields.items())
        return f"[{ts}] {self.name} {level}: {label}{extras}"


default_logger = ConsoleLogger()


def traced(m: Maybe[T], label: str, logger: Optional[ConsoleLogger] = None) -> Maybe[T]:
    """Log whether `m` holds a value at DEBUG level and return it unchanged."""
    log = logger or default_logger
    if log.is_enabled("DEBUG"):
        m.match(
            some=lambda v: log.debug(label, state="some", value=repr(v)),
            none=lambda: log.debug(label, state="none"),
        )
    return m
