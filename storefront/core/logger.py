"""
Shared Logger

Centralized logging configuration for the storefront library.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line.

    Records logged by the façades carry `extra_data` (StorefrontError.to_dict());
    its error code and the PROMOTED_DETAILS keys are copied to the top level.
    """

    PROMOTED_DETAILS = ("entity", "field", "operation", "record_id")

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        extra_data = getattr(record, "extra_data", None)
        if isinstance(extra_data, dict):
            if "error" in extra_data:
                log_data["error_code"] = extra_data["error"]
            details = extra_data.get("details") or {}
            for key in self.PROMOTED_DETAILS:
                if key in details:
                    log_data[key] = details[key]
            log_data["extra"] = extra_data
        elif extra_data is not None:
            log_data["extra"] = extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def configure_logging(level: str = "INFO", format_type: str = "plain") -> None:
    """
    Configure root logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'plain' or 'json'
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper()))

    if format_type == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(console_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
