"""
Decorator form of the retry executor.
"""

import functools
import uuid
from typing import Awaitable, Callable, ParamSpec, TypeVar

from .config import RetryPolicy
from .history import RetryHistory
from .invoker import RetryInvoker
from ..adapters.base import TransientErrorAdapter

P = ParamSpec("P")
T = TypeVar("T")


def async_with_retry(
    policy: RetryPolicy | None = None,
    adapter: TransientErrorAdapter | None = None,
    seed: str | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        policy: Retry policy (default: RetryPolicy.default())
        adapter: Transient error adapter; without one nothing is retried
        seed: Jitter seed shared by every call; a random one per call if None

    Returns:
        Decorated async function with retry behavior
    """
    if policy is None:
        policy = RetryPolicy.default()
    invoker = RetryInvoker(adapter)

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            token = seed if seed is not None else uuid.uuid4().hex
            history = RetryHistory.from_token(token, policy)
            return await invoker.execute(lambda: func(*args, **kwargs), history)

        return wrapper

    return decorator
