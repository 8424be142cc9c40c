"""Performance Logging.

Timing for outbound API calls: every call is logged at DEBUG, slow
calls at WARNING, failures at ERROR before the exception propagates.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional

from src.logging_config.config import DEFAULT_LOGGING_CONFIG


def log_performance(
    threshold_ms: Optional[float] = None,
    logger_name: Optional[str] = None,
) -> Callable:
    """Decorator that logs how long a coroutine took.

    If the coroutine returns an object with a ``status_code`` attribute
    (an ``httpx.Response``), the status code is logged with the timing.

    Args:
        threshold_ms: Slow call threshold in milliseconds.
                     Defaults to config.slow_threshold_ms.
        logger_name: Custom logger name. Defaults to function's module.

    Example:
        @log_performance(threshold_ms=500)
        async def send(request):
            ...
    """
    if threshold_ms is None:
        threshold_ms = DEFAULT_LOGGING_CONFIG.slow_threshold_ms

    def decorator(func: Callable) -> Callable:
        _logger = logging.getLogger(logger_name or func.__module__)
        func_name = func.__qualname__

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                _logger.error(
                    f"{func_name} failed after {duration_ms:.1f}ms: {type(exc).__name__}",
                    extra={"duration_ms": round(duration_ms, 2)},
                )
                raise

            duration_ms = (time.perf_counter() - start) * 1000
            extra = {"duration_ms": round(duration_ms, 2)}
            status_code = getattr(result, "status_code", None)
            if status_code is not None:
                extra["status_code"] = status_code

            if duration_ms >= threshold_ms:
                _logger.warning(
                    f"Slow call: {func_name} took {duration_ms:.1f}ms",
                    extra=extra,
                )
            else:
                _logger.debug(
                    f"{func_name} completed in {duration_ms:.1f}ms",
                    extra=extra,
                )
            return result

        return wrapper

    return decorator
