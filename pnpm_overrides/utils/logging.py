"""Centralized logging configuration using Loguru.

Console output is meant for humans reading a GitHub Actions log; the optional
NDJSON mode emits one JSON object per record for log shippers.

Usage:
    from pnpm_overrides.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if PNPM_OVERRIDES_LOG_LEVEL=DEBUG

Environment Variables:
    PNPM_OVERRIDES_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    PNPM_OVERRIDES_LOG_JSON: 0|1 (default: 0, human-readable)
    PNPM_OVERRIDES_LOG_FILE: path to log file (optional)
    PNPM_OVERRIDES_REQUEST_ID: correlation ID, defaults to GITHUB_RUN_ID
"""

import json
import os
import sys
import uuid

from loguru import logger

# Remove default handler
logger.remove()

# Pino-style numeric levels
NUMERIC_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "SUCCESS": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_log_level = os.environ.get("PNPM_OVERRIDES_LOG_LEVEL", "INFO").upper()
_json_mode = os.environ.get("PNPM_OVERRIDES_LOG_JSON", "0") == "1"
_log_file = os.environ.get("PNPM_OVERRIDES_LOG_FILE")
_request_id = (
    os.environ.get("PNPM_OVERRIDES_REQUEST_ID")
    or os.environ.get("GITHUB_RUN_ID")
    or str(uuid.uuid4())
)


def _to_json_line(record) -> str:
    """Serialize a loguru record as a single NDJSON line."""
    payload = {
        "level": NUMERIC_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
        "request_id": record["extra"].get("request_id", _request_id),
    }

    for key, value in record["extra"].items():
        if key != "request_id":
            payload[key] = value

    if record["exception"]:
        payload["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    return json.dumps(payload, default=str)


def json_sink(message):
    """Write records as NDJSON to stderr.

    stdout is reserved for command output (the audit diff is echoed there).
    """
    # Never call logger.* inside a sink - causes infinite recursion
    sys.stderr.write(_to_json_line(message.record) + "\n")
    sys.stderr.flush()


_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")
logger.level("CRITICAL", color="<red><bold>")

if _json_mode:
    logger.add(json_sink, level=_log_level, colorize=False)
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:

    def _file_json_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_json_line(message.record) + "\n")

    logger.add(_file_json_sink, level="DEBUG")


__all__ = ["logger"]
