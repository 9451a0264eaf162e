"""
Exception classes for retried remote calls.

Transport errors carry a `retryable` hint and status context. Errors raised
by the retry engine itself describe why an invocation stopped.
"""

from enum import IntEnum
from typing import Any, Sequence


class RemoteRetryError(Exception):
    """Base exception for all remote_retry errors."""


class InvalidConfigurationError(RemoteRetryError, ValueError):
    """Raised when a retry policy is built with invalid values."""


class RetriesExceededError(RemoteRetryError):
    """
    Raised when the retry budget is spent and the call still fails.

    The last transient error is chained as ``__cause__`` and kept on
    ``last_error``.
    """

    def __init__(
        self,
        message: str = "Exceeded max retry attempts",
        *,
        last_error: BaseException | None = None,
        attempts: Sequence[Any] = (),
    ):
        super().__init__(message)
        self.message = message
        self.last_error = last_error
        self.attempts = tuple(attempts)

    def __str__(self) -> str:
        parts = [f"{self.message} ({len(self.attempts)} retries)"]
        if self.last_error is not None:
            parts.append(f"last error: {self.last_error}")
        return ", ".join(parts)


class TransportError(RemoteRetryError):
    """Base exception for errors reported by a transport."""

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        status_code: int | None = None,
        transport: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.retryable = retryable
        self.status_code = status_code
        self.transport = transport

    def __str__(self) -> str:
        parts = [self.message]
        if self.transport:
            parts.insert(0, f"[{self.transport}]")
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        return " ".join(parts)


class RpcStatusCode(IntEnum):
    """Status codes of an RPC channel, numbered as in gRPC."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


TRANSIENT_RPC_CODES = frozenset({RpcStatusCode.INTERNAL, RpcStatusCode.UNAVAILABLE})
TRANSIENT_HTTP_STATUSES = frozenset({500, 503})


class ApiResponseError(TransportError):
    """Raised when an HTTP API answers with an error status."""

    def __init__(
        self,
        message: str = "API request failed",
        *,
        status_code: int,
        grpc_status_code: int | None = None,
        **kwargs,
    ):
        kwargs.setdefault("transport", "http")
        super().__init__(
            message,
            retryable=status_code in TRANSIENT_HTTP_STATUSES,
            status_code=status_code,
            **kwargs,
        )
        self.grpc_status_code = grpc_status_code


class RpcError(TransportError):
    """Raised when an RPC channel returns a non-OK status."""

    def __init__(self, message: str = "RPC failed", *, code: RpcStatusCode, **kwargs):
        code = RpcStatusCode(code)
        kwargs.setdefault("transport", "rpc")
        super().__init__(
            message,
            retryable=code in TRANSIENT_RPC_CODES,
            status_code=int(code),
            **kwargs,
        )
        self.code = code
