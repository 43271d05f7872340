"""
logging decorators.
"""

import asyncio
import functools
import time
from typing import Any, Callable, TypeVar

from factlens.observability.logger.logger import get_logger
from factlens.observability.logger.pipeline_step import PipelineStep


F = TypeVar('F', bound=Callable[..., Any])


def time_profile(
    pipeline_step: PipelineStep = PipelineStep.SYSTEM
) -> Callable[[F], F]:
    """
    log how long the wrapped function took, sync or async.

    the duration is logged on success and on failure; exceptions propagate.

    example:
        >>> @time_profile(PipelineStep.IMAGE_ANALYSIS)
        ... async def analyze(path):
        ...     ...
        # logs: [TIME PROFILE] analyze completed in 0.84s
    """
    def decorator(func: F) -> F:
        logger = get_logger(func.__module__, pipeline_step)

        def _report(started: float, failed: bool) -> None:
            elapsed = time.time() - started
            outcome = "failed after" if failed else "completed in"
            logger.info(f"[TIME PROFILE] {func.__name__} {outcome} {elapsed:.2f}s")

        if asyncio.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                started = time.time()
                try:
                    result = await func(*args, **kwargs)
                except BaseException:
                    _report(started, failed=True)
                    raise
                _report(started, failed=False)
                return result
            return async_wrapper  # type: ignore

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            started = time.time()
            try:
                result = func(*args, **kwargs)
            except BaseException:
                _report(started, failed=True)
                raise
            _report(started, failed=False)
            return result
        return sync_wrapper  # type: ignore

    return decorator
