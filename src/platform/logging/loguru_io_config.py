"""
Loguru sink setup for the booking core.

Console output always; an hourly file under ``LOG_DIR`` while DEBUG is on
(tests redirect it with ``TEST_LOG_DIR``). Records from the standard
``logging`` module (uvicorn, fastapi) are routed through the same sinks.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
from pathlib import Path
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Never written to a log line as-is: the checkout form fields, prefill 'name' included
SENSITIVE_KEYWORDS: frozenset[str] = frozenset(
    {'password', 'name', 'passenger_name', 'email', 'card', 'card_number', 'expiry', 'cvv'}
)

# Nesting of @Logger.io calls and the moment the outermost one started
call_depth_var: ContextVar[int] = ContextVar('call_depth', default=0)
chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


LOG_FORMAT = (
    '<c>{extra[service_context]}</> '
    '<lvl>{level:<8}</> '
    '<c>{name}:{function}:{line}</>'
    '<y>{extra[call_target]}</> | '
    '{message} '
    '<lk>[{elapsed} chain={extra[chain_start_time]}]</>'
)


class InterceptHandler(logging.Handler):
    """Hand stdlib log records to loguru, keeping the original caller location."""

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.name == 'asyncio' and record.levelno <= logging.DEBUG:
            return

        level: str | int
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


def _log_file_path() -> Path:
    test_log_dir = os.environ.get('TEST_LOG_DIR')
    prefix = 'test_' if test_log_dir else ''
    return Path(test_log_dir or LOG_DIR) / f'{prefix}{datetime.now():%Y-%m-%d_%H}.log'


def configure_logging() -> 'LoguruLogger':
    loguru_logger.remove()
    bound = loguru_logger.bind(
        **{
            ExtraField.SERVICE_CONTEXT: get_service_context(),
            ExtraField.CHAIN_START_TIME: '',
            ExtraField.CALL_TARGET: '',
        }
    )

    level = 'DEBUG' if settings.DEBUG else 'INFO'
    bound.add(sys.stdout, format=LOG_FORMAT, level=level)
    if settings.DEBUG:
        bound.add(
            str(_log_file_path()),
            format=LOG_FORMAT,
            level=level,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    return bound


custom_logger: 'LoguruLogger' = configure_logging()
