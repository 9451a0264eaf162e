"""
Transient error adapters.

An adapter sits between the retry engine and a transport: it awaits each
attempt and decides whether a failure was caused by a temporary bad state
on the server, such as a timeout under high load.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

from ..exceptions import TransportError

T = TypeVar("T")


class TransientErrorAdapter(ABC):
    """
    Abstract base class for transient error adapters.

    Transports must implement `is_transient`; `send` may be overridden to
    intercept each attempt.
    """

    @property
    @abstractmethod
    def transport_name(self) -> str:
        """Return the transport name for logging."""
        ...

    @abstractmethod
    def is_transient(self, error: BaseException) -> bool:
        """Return True if `error` is worth retrying."""
        ...

    def is_flagged_retryable(self, error: BaseException) -> bool:
        """
        Whether `error` is a `TransportError` of this transport marked retryable.

        Errors that do not name a transport are taken at their word.
        """
        return (
            isinstance(error, TransportError)
            and error.retryable
            and error.transport in (None, self.transport_name)
        )

    async def send(self, task: Callable[[], Awaitable[T]]) -> T:
        """Run one attempt of the task."""
        return await task()

    def __call__(self, error: BaseException) -> bool:
        """Adapters double as plain `(error) -> bool` predicates."""
        return self.is_transient(error)


class PredicateAdapter(TransientErrorAdapter):
    """Adapter backed by a plain `(error) -> bool` callable."""

    def __init__(self, predicate: Callable[[BaseException], bool], name: str = "custom"):
        self.predicate = predicate
        self.name = name

    @property
    def transport_name(self) -> str:
        return self.name

    def is_transient(self, error: BaseException) -> bool:
        return bool(self.predicate(error))
