"""
remote_retry - Resilient invocation of remote calls.

Retries transient failures with exponential backoff and seeded jitter,
surfacing non-transient failures and budget exhaustion immediately.
"""

from .adapters import (
    TransientErrorAdapter,
    PredicateAdapter,
    HttpTransientErrorAdapter,
    RpcTransientErrorAdapter,
)
from .clients import BaseClient, HttpClient
from .exceptions import (
    RemoteRetryError,
    InvalidConfigurationError,
    RetriesExceededError,
    TransportError,
    ApiResponseError,
    RpcError,
    RpcStatusCode,
)
from .retry import (
    RetryPolicy,
    RetryAttempt,
    RetryHistory,
    RetryInvoker,
    InvocationState,
    SeededRandomGenerator,
    resolve_policy,
    async_with_retry,
    full_jitter,
    equal_jitter,
    decorrelated_jitter,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Adapters
    "TransientErrorAdapter",
    "PredicateAdapter",
    "HttpTransientErrorAdapter",
    "RpcTransientErrorAdapter",
    # Clients
    "BaseClient",
    "HttpClient",
    # Exceptions
    "RemoteRetryError",
    "InvalidConfigurationError",
    "RetriesExceededError",
    "TransportError",
    "ApiResponseError",
    "RpcError",
    "RpcStatusCode",
    # Retry
    "RetryPolicy",
    "RetryAttempt",
    "RetryHistory",
    "RetryInvoker",
    "InvocationState",
    "SeededRandomGenerator",
    "resolve_policy",
    "async_with_retry",
    "full_jitter",
    "equal_jitter",
    "decorrelated_jitter",
]
