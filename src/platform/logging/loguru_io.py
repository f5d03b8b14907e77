"""
Call logging decorator.

``@Logger.io`` logs the (masked) arguments and return value of the decorated
function at DEBUG and any exception it raises. Platform errors are expected
outcomes and are logged as warnings without a traceback; anything else gets
the full traceback. ``Logger.base`` is the plain loguru logger for
operational messages.
"""

from functools import wraps
from inspect import iscoroutinefunction
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, custom_logger
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    chain_start_time,
    enter_call,
    leave_call,
    mask_value,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = True
    ) -> None:
        self._logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.call_target = ''

    def _bound(self) -> 'LoguruLogger':
        # depth=2 points the record at the caller of the wrapper
        return self._logger.bind(
            **{
                ExtraField.CALL_TARGET: self.call_target,
                ExtraField.CHAIN_START_TIME: chain_start_time(),
            }
        ).opt(depth=2)

    def _render(self, value: Any) -> Any:
        masked = mask_value(value)
        return truncate_content(masked) if self.truncate_content else masked

    def _on_enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        enter_call()
        if settings.DEBUG:
            self._bound().debug(f'args: {self._render(args)}, kwargs: {self._render(kwargs)}')

    def _on_return(self, value: Any) -> None:
        if settings.DEBUG:
            self._bound().debug(f'return: {self._render(value)}')

    def _on_error(self, e: Exception) -> None:
        # An error bubbling through several decorated frames is logged once
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            self._bound().warning(f'{type(e).__name__}: {e}')
        else:
            self._bound().exception(f'{type(e).__name__}: {e}')

    def __call__(self, func: _F) -> _F:
        self.call_target = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                self._on_enter(args, kwargs)
                try:
                    value = await func(*args, **kwargs)
                    self._on_return(value)
                    return value
                except Exception as e:
                    self._on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    leave_call()

            return cast(_F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            self._on_enter(args, kwargs)
            try:
                value = func(*args, **kwargs)
                self._on_return(value)
                return value
            except Exception as e:
                self._on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                leave_call()

        return cast(_F, sync_wrapper)


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
