"""Helpers behind @Logger.io: call-chain timing, masking and truncation"""

from inspect import getsourcelines
from pathlib import Path
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MAX_CONTENT_LENGTH = 500
MASK = '********'

# key=value / key: value fragments inside a repr, e.g. CheckoutParams(cvv='123')
_INLINE_SECRET = re.compile(
    r"(\b(?:%s)\b\s*[=:]\s*)('[^']*'|\"[^\"]*\"|[^,)\s}]+)" % '|'.join(sorted(SENSITIVE_KEYWORDS))
)


def enter_call() -> None:
    if call_depth_var.get() == 0:
        chain_start_time_var.set(time())
    call_depth_var.set(call_depth_var.get() + 1)


def leave_call() -> None:
    depth = max(call_depth_var.get() - 1, 0)
    call_depth_var.set(depth)
    if depth == 0:
        chain_start_time_var.set(0)


def chain_start_time() -> float:
    return chain_start_time_var.get()


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    """``booking_store.py::BookingStore.add_item:105``"""
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    filename = Path(target.__code__.co_filename).name
    return f'{filename}::{func.__qualname__}:{lineno}'


def mask_value(data: Any) -> Any:
    """Recursively replace values of sensitive keys, then scrub inline reprs."""
    if isinstance(data, dict):
        return {
            key: MASK if key in SENSITIVE_KEYWORDS else mask_value(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_value(item) for item in data]
    if isinstance(data, tuple):
        return tuple(mask_value(item) for item in data)

    text = str(data)
    scrubbed = _INLINE_SECRET.sub(rf'\1{MASK!r}', text)
    return data if scrubbed == text else scrubbed


def truncate_content(data: Any) -> Any:
    text = str(data)
    if len(text) <= MAX_CONTENT_LENGTH:
        return data
    return f'{text[:MAX_CONTENT_LENGTH]}... ({len(text)} chars)'
