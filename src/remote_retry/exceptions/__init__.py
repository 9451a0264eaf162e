"""
remote_retry - Exception Hierarchy.

Errors raised by the retry engine and by the transports it wraps.
"""

from .base import (
    RemoteRetryError,
    InvalidConfigurationError,
    RetriesExceededError,
    TransportError,
    ApiResponseError,
    RpcError,
    RpcStatusCode,
    TRANSIENT_HTTP_STATUSES,
    TRANSIENT_RPC_CODES,
)

__all__ = [
    "RemoteRetryError",
    "InvalidConfigurationError",
    "RetriesExceededError",
    "TransportError",
    "ApiResponseError",
    "RpcError",
    "RpcStatusCode",
    "TRANSIENT_HTTP_STATUSES",
    "TRANSIENT_RPC_CODES",
]
