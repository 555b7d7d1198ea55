"""Structured Logging — JSON and text formatters carrying mutation context.

Invariants:
    - Every record includes timestamp, level, logger name, and message
    - Mutation fields (operation, state, entity, key, outcome, affected_rows, error_code)
      are surfaced by both formats when present, and omitted when absent
    - setup_logging replaces its own handler on repeat calls (no duplicate lines)

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

MUTATION_FIELDS = (
    "operation", "state", "entity", "key", "outcome", "affected_rows",
    "error_code", "path",
)

_HANDLER_NAME = "pharmadb"


def mutation_fields(record: logging.LogRecord) -> dict:
    """The mutation context attached to `record` through `extra=`."""
    return {
        name: record.__dict__[name]
        for name in MUTATION_FIELDS
        if record.__dict__.get(name) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shipping in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **mutation_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class MutationTextFormatter(logging.Formatter):
    """Human-readable lines with mutation context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = mutation_fields(record)
        if fields:
            line += " [" + " ".join(f"{k}={v}" for k, v in fields.items()) + "]"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the pharmadb handler on the root logger."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else MutationTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
