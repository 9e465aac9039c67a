"""Structured logging setup."""

import hashlib
import logging
import sys
from pathlib import Path
from typing import Any

import structlog

FINGERPRINT_HASH_LENGTH = 12


def hash_fingerprint_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Replace a raw certificate fingerprint with a short hash."""
    fingerprint = event_dict.pop("fingerprint", None)
    if fingerprint and fingerprint != "unknown":
        digest = hashlib.sha256(fingerprint.encode()).hexdigest()
        event_dict["fingerprint_hash"] = digest[:FINGERPRINT_HASH_LENGTH]
    elif fingerprint:
        event_dict["fingerprint"] = fingerprint
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
    hash_fingerprints: bool = True,
) -> None:
    """Configure structlog for the whole process.

    Events go to stdout, or are appended to log_file when one is given.
    JSON output is meant for log shippers; the console renderer is for
    people. Exceptions logged with logger.exception are rendered inline.
    """
    output_stream = open(log_file, "a") if log_file else sys.stdout

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
    ]
    if hash_fingerprints:
        processors.append(hash_fingerprint_processor)

    if json_logs:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output_stream.isatty()))

    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)
