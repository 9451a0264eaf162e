"""
remote_retry - Retry Logic.

Exponential backoff with seeded jitter for remote calls.
"""

from .config import RetryPolicy, RetryListener, resolve_policy
from .decorators import async_with_retry
from .history import InvocationState, RetryAttempt, RetryHistory
from .invoker import RetryInvoker
from .jitter import Jitter, full_jitter, equal_jitter, decorrelated_jitter
from .seeded import SeededRandomGenerator

__all__ = [
    "RetryPolicy",
    "RetryListener",
    "resolve_policy",
    "async_with_retry",
    "RetryAttempt",
    "RetryHistory",
    "InvocationState",
    "RetryInvoker",
    "Jitter",
    "full_jitter",
    "equal_jitter",
    "decorrelated_jitter",
    "SeededRandomGenerator",
]
