import logging
from http import HTTPStatus
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

import aiohttp
import requests

LOG_FORMAT = (
    "{asctime} - {name:15.15} - {levelname:8} - {message} ({filename}:{lineno})"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "todoist_rest.log"
RESET = "\x1b[0m"


class ColorFormatter(logging.Formatter):
    """Console formatter that tints each record by level."""

    LEVEL_COLORS: ClassVar[dict[int, str]] = {
        logging.DEBUG: "\x1b[38;20m",
        logging.INFO: "\x1b[38;20m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._by_level = {
            level: logging.Formatter(color + LOG_FORMAT + RESET, DATE_FORMAT, "{")
            for level, color in self.LEVEL_COLORS.items()
        }
        self._plain = logging.Formatter(LOG_FORMAT, DATE_FORMAT, "{")

    def format(self, record: logging.LogRecord) -> str:
        return self._by_level.get(record.levelno, self._plain).format(record)


def log_setup(log_directory: Path | str = "log") -> None:
    log_path = Path(log_directory)
    log_path.mkdir(parents=True, exist_ok=True)

    # configure the root logger so the library loggers inherit it
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    file_handler = TimedRotatingFileHandler(
        log_path / LOG_FILE_NAME, when="midnight", interval=1, backupCount=7, utc=True
    )
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT, style="{"))

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.DEBUG)
    stream_handler.setFormatter(ColorFormatter(style="{"))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(stream_handler)


request_logger = logging.getLogger("todoist_rest.http")


def _log_status(url: Any, status: int) -> None:
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        request_logger.error("Request Error: %s %d", url, status)
    else:
        request_logger.debug("Response Received: %s %d", url, status)


def log_response(response: requests.Response, *_: Any, **__: Any) -> None:
    """requests response hook, the sync counterpart of ``trace_config``."""
    request_logger.debug(
        "Request Started: %s %s", response.request.method, response.request.url
    )
    _log_status(response.url, response.status_code)


async def _on_request_start(  # noqa: RUF029
    _session: Any, _ctx: Any, params: aiohttp.TraceRequestStartParams
) -> None:
    request_logger.debug("Request Started: %s %s", params.method, params.url)


async def _on_request_end(  # noqa: RUF029
    _session: Any, _ctx: Any, params: aiohttp.TraceRequestEndParams
) -> None:
    _log_status(params.response.url, params.response.status)


async def _on_request_exception(  # noqa: RUF029
    _session: Any, _ctx: Any, params: aiohttp.TraceRequestExceptionParams
) -> None:
    request_logger.error("Request Exception: %r", params.exception)


def make_trace_config() -> aiohttp.TraceConfig:
    """Trace hooks for an ``aiohttp.ClientSession``, logging like ``log_response``."""
    config = aiohttp.TraceConfig()
    config.on_request_start.append(_on_request_start)
    config.on_request_end.append(_on_request_end)
    config.on_request_exception.append(_on_request_exception)
    return config


trace_config = make_trace_config()
