import os
import sys
import json
import logging
from loguru import logger as loguru_logger

from portfolio_api.core.config import Settings


class CloudLoggingAdapter:
    """
    Sink that writes Loguru records as Cloud Logging compatible JSON lines
    """
    def __init__(self, service_name: str):
        self.env = os.getenv("ENV", "development")
        self.service_name = service_name

    def write(self, message):
        record = message.record

        # Basic structure required by Cloud Logging
        cloud_log = {
            "severity": record["level"].name,
            "time": record["time"].isoformat(),
            "message": record["message"],
            "logging.googleapis.com/labels": {
                "environment": self.env,
                "service": self.service_name
            }
        }

        for k, v in record["extra"].items():
            cloud_log[k] = v

        if record["exception"]:
            exc_type, exc_value, _ = record["exception"]
            cloud_log["exception"] = f"{getattr(exc_type, '__name__', exc_type)}: {exc_value}"

        print(json.dumps(cloud_log, default=str), file=sys.stderr)


class InterceptHandler(logging.Handler):
    """Route standard library log records (uvicorn, SQLAlchemy) into Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside of the logging module
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(settings: Settings) -> None:
    """Replace Loguru's default sink according to the settings."""
    loguru_logger.remove()

    if settings.LOG_JSON:
        loguru_logger.add(CloudLoggingAdapter(settings.PROJECT_NAME).write, level=settings.LOG_LEVEL)
    else:
        loguru_logger.add(
            sys.stderr,
            level=settings.LOG_LEVEL,
            format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


# Export the logger
logger = loguru_logger
