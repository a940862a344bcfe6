"""
Logging of railway functions.

Functions returning a `Result` or `IOResult` are decorated with
:func:`log_railway_function`, which logs their outcome with loguru. Messages may
refer to the arguments of the call by name, e.g. ``"Failed to load {fits_file}"``.
"""

from enum import Enum
from functools import wraps
from inspect import signature
import logging
from typing import Any, Callable

from loguru import logger
from returns.io import IOResult
from returns.pipeline import is_successful
from returns.result import Result
from returns.unsafe import unsafe_perform_io

from rawimage.settings import get_settings


class FailureLevel(Enum):
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def _call_arguments(func: Callable[..., Any], *args, **kwargs) -> dict[str, Any]:
    bound = signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    return dict(bound.arguments)


def _failure_value(result: Result | IOResult) -> Any:
    if isinstance(result, IOResult):
        return unsafe_perform_io(result.failure())
    return result.failure()


def log_failure(failure_message: str, failure_level: FailureLevel, error: Any) -> None:
    logger.debug(f"{failure_message}: {error!r}")
    logger.log(failure_level.name, failure_message)


def log_railway_function(
    failure_message: str,
    success_message: str | None = None,
    failure_level: FailureLevel = FailureLevel.ERROR,
):
    """
    Log the outcome of a function returning a `Result` or `IOResult`.

    On success `success_message` is logged at INFO level (if given). On failure
    the error is logged at DEBUG level and `failure_message` at `failure_level`.
    Both messages are formatted with the call arguments. With the `verbose`
    setting enabled, every call is logged at DEBUG level first.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            arguments = _call_arguments(func, *args, **kwargs)
            if get_settings().verbose:
                rendered = ", ".join(
                    f"{key}={value!r}" for key, value in arguments.items()
                )
                logger.debug(f"Calling {func.__name__}({rendered})")
            result = func(*args, **kwargs)
            if not isinstance(result, (Result, IOResult)):
                return result
            if is_successful(result):
                if success_message:
                    logger.info(success_message.format_map(arguments))
            else:
                log_failure(
                    failure_message.format_map(arguments),
                    failure_level,
                    _failure_value(result),
                )
            return result

        return wrapper

    return decorator
