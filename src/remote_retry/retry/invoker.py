"""
Retry executor: runs a remote call and waits out backoffs between retries.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from .history import InvocationState, RetryAttempt, RetryHistory
from ..adapters.base import TransientErrorAdapter
from ..exceptions import RetriesExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryInvoker:
    """
    Invokes requests with retry and exponential backoff.

    The invoker holds no per-request state; every call to `execute` works on
    the `RetryHistory` it is given, so one invoker can serve concurrent calls.
    """

    def __init__(self, adapter: TransientErrorAdapter | None = None):
        """
        Initialize the invoker.

        Args:
            adapter: Decides which errors are transient. Without an adapter
                nothing is retried.
        """
        self.adapter = adapter

    def is_transient(self, error: BaseException) -> bool:
        """Whether the configured adapter classifies `error` as transient."""
        return self.adapter is not None and self.adapter.is_transient(error)

    async def _send(self, task: Callable[[], Awaitable[T]]) -> T:
        if self.adapter is None:
            return await task()
        return await self.adapter.send(task)

    @staticmethod
    def _transition(history: RetryHistory, state: InvocationState) -> None:
        logger.debug(f"Invocation {history.state.value} -> {state.value}")
        history.state = state

    async def execute(self, task: Callable[[], Awaitable[T]], history: RetryHistory) -> T:
        """
        Run `task` until it succeeds, fails for good or the budget runs out.

        Args:
            task: Zero-argument coroutine function performing the remote call.
                It may be called more than once.
            history: Fresh history for this invocation

        Returns:
            The task's result

        Raises:
            RetriesExceededError: The call kept failing transiently after
                `max_attempts` retries; the last error is chained.
            asyncio.CancelledError: The invocation was cancelled. When this
                happens during a backoff, `history.state` is CANCELLED.
            Exception: Any non-transient error raised by the task, unchanged.
        """
        while True:
            self._transition(history, InvocationState.EXECUTING)
            try:
                result = await self._send(task)
            except Exception as e:
                if history.policy is None or not self.is_transient(e):
                    logger.debug(f"Not retrying {type(e).__name__}: {e}")
                    self._transition(history, InvocationState.FAILED_NON_TRANSIENT)
                    raise
                history.last_error = e
                attempt = self._record_attempt(history, e)
            else:
                self._transition(history, InvocationState.SUCCEEDED)
                return result

            await self._backoff(attempt, history)

    def _record_attempt(self, history: RetryHistory, error: Exception) -> RetryAttempt:
        policy = history.policy
        if not history.can_retry():
            logger.error(f"All {policy.max_attempts} retries exhausted: {error}")
            self._transition(history, InvocationState.FAILED_BUDGET_EXCEEDED)
            raise RetriesExceededError(
                last_error=error, attempts=history.attempts
            ) from error

        attempt = history.next_attempt()
        history.attempts.append(attempt)
        logger.warning(
            f"Transient error: {error}, retrying in {attempt.jittered_delay_ms}ms "
            f"({history.retries}/{policy.max_attempts})"
        )
        policy.on_attempt(history.retries, attempt)
        return attempt

    async def _backoff(self, attempt: RetryAttempt, history: RetryHistory) -> None:
        self._transition(history, InvocationState.AWAITING_BACKOFF)
        try:
            await asyncio.sleep(attempt.jittered_delay_ms / 1000)
        except asyncio.CancelledError:
            logger.info(
                f"Cancelled while waiting {attempt.jittered_delay_ms}ms before retry "
                f"{history.retries}"
            )
            self._transition(history, InvocationState.CANCELLED)
            raise
