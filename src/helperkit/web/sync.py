"""
Run coroutine functions from synchronous code.

The coroutine runs on a worker thread with its own event loop, so
``run_sync`` can be called from plain code and from code that is already
inside a running event loop.

    result = run_sync(
        fetch_status, "https://api.example.com/health",
        on_completion=lambda status: print(f"Notification: {status}"),
    )
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Awaitable, Callable, Optional, TypeVar

from ..exceptions import NullArgumentError

T = TypeVar("T")

_executor = ThreadPoolExecutor(thread_name_prefix="helperkit-run-sync")


def _run_in_new_loop(
    func: Callable[..., Awaitable[T]],
    args: tuple,
    kwargs: dict,
    timeout: Optional[float],
) -> T:
    async def runner() -> T:
        if timeout is None:
            return await func(*args, **kwargs)
        return await asyncio.wait_for(func(*args, **kwargs), timeout)

    return asyncio.run(runner())


def run_sync(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    on_completion: Optional[Callable[[T], None]] = None,
    timeout: Optional[float] = None,
    **kwargs: Any,
) -> T:
    """Call ``func(*args, **kwargs)`` and block until its coroutine finishes.

    Args:
        func: Coroutine function to run
        on_completion: Called with the result after a successful run
        timeout: Seconds before the coroutine is cancelled

    Returns:
        The coroutine's result.

    Raises:
        asyncio.TimeoutError: If ``timeout`` elapses first
        Exception: Whatever the coroutine raises
    """
    if func is None:
        raise NullArgumentError("func")

    future = _executor.submit(_run_in_new_loop, func, args, kwargs, timeout)
    result = future.result()

    if on_completion is not None:
        on_completion(result)
    return result
