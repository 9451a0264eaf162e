"""
Base client interface.

Clients run every remote call through a `RetryInvoker`, building a fresh
`RetryHistory` per call.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

from ..adapters import TransientErrorAdapter
from ..retry import RetryHistory, RetryInvoker, RetryPolicy, resolve_policy

T = TypeVar("T")


class BaseClient(ABC):
    """
    Abstract base class for clients calling a remote service.

    `global_retry_policy` applies to every call that does not pass its own
    `retry_policy`; set it to None to disable retries by default.
    """

    def __init__(
        self,
        adapter: TransientErrorAdapter,
        global_retry_policy: RetryPolicy | None = None,
    ):
        """
        Initialize the client.

        Args:
            adapter: Transient error adapter matching the client's transport
            global_retry_policy: Default policy (default: RetryPolicy.default())
        """
        self.adapter = adapter
        self.global_retry_policy = (
            global_retry_policy if global_retry_policy is not None else RetryPolicy.default()
        )
        self.retry_invoker = RetryInvoker(adapter)

    @property
    @abstractmethod
    def transport_name(self) -> str:
        """Return the transport name for logging."""
        ...

    async def invoke_with_retry(
        self,
        task: Callable[[], Awaitable[T]],
        seed: str,
        retry_policy: RetryPolicy | None = None,
    ) -> T:
        """
        Run `task` with the effective retry policy.

        Args:
            task: Zero-argument coroutine function performing one attempt
            seed: Session token or id seeding the jitter of this call
            retry_policy: Policy for this call only, replacing the global one

        Returns:
            The task's result
        """
        policy = resolve_policy(retry_policy, self.global_retry_policy)
        history = RetryHistory.from_token(seed, policy)
        return await self.retry_invoker.execute(task, history)

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the service is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
