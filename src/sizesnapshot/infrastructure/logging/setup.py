from __future__ import annotations

import copy
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

import structlog

from sizesnapshot.infrastructure.config.schema import AppConfig

log = structlog.get_logger(__name__)


# All output goes to stderr; stdout stays free for tools piping the CLI.
BASE_LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {},
    "handlers": {
        "default": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "sizesnapshot": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "asyncio": {"level": "WARNING"},
    },
}


def _add_record_created_timestamp_utc(
    _: Any, __: Any, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Stamp foreign (stdlib) LogRecords with the time the record was created.

    ProcessorFormatter sets event_dict["_record"] for foreign records.
    """
    record = event_dict.get("_record")
    if isinstance(record, logging.LogRecord):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        event_dict["timestamp"] = dt.isoformat().replace("+00:00", "Z")
    return event_dict


def build_logging_config(config: AppConfig) -> dict[str, Any]:
    """
    Build a dictConfig for stdlib logging, rendered through structlog.

    - Apply config.log_level to all loggers preconfigured with a level,
      except those pinned to a stricter level (asyncio).
    - Everything else is controlled via root logger level/handlers.
    """
    cfg = copy.deepcopy(BASE_LOGGING_CONFIG)

    if config.log_format == "json":
        renderer: structlog.typing.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    cfg["formatters"]["structlog"] = {
        "()": structlog.stdlib.ProcessorFormatter,
        "foreign_pre_chain": [
            structlog.contextvars.merge_contextvars,
            _add_record_created_timestamp_utc,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ],
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    }
    cfg["handlers"]["default"]["formatter"] = "structlog"

    level = config.log_level
    for name, logger_cfg in cfg["loggers"].items():
        if name != "asyncio":
            logger_cfg["level"] = level

    cfg["root"] = {"handlers": ["default"], "level": level}

    return cfg


def configure_logging(config: AppConfig) -> dict[str, Any]:
    """
    Configure structlog + stdlib logging and return the applied dictConfig.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    cfg = build_logging_config(config)
    logging.config.dictConfig(cfg)

    log.debug(
        "logging_configured", log_format=config.log_format, log_level=config.log_level
    )
    return cfg
