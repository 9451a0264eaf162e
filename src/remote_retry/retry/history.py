"""
Per-invocation retry history.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .config import RetryPolicy
from .seeded import SeededRandomGenerator


class InvocationState(str, Enum):
    """States an invocation moves through."""

    IDLE = "idle"
    EXECUTING = "executing"
    AWAITING_BACKOFF = "awaiting_backoff"
    SUCCEEDED = "succeeded"
    FAILED_NON_TRANSIENT = "failed_non_transient"
    FAILED_BUDGET_EXCEEDED = "failed_budget_exceeded"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class RetryAttempt:
    """The delays computed at one retry decision, in milliseconds."""

    exponential_delay_ms: int
    jittered_delay_ms: int


@dataclass
class RetryHistory:
    """
    Record of the retries made for one logical request.

    A history belongs to a single invocation and must not be shared between
    concurrent calls. A history without a policy never retries.

    Attributes:
        policy: Policy driving the retries, or None to disable retrying
        random: Random source bound to this request
        attempts: Retries made so far, oldest first
        state: Where the owning invocation currently stands
        last_error: Most recent transient error, kept for diagnostics
    """

    policy: RetryPolicy | None
    random: SeededRandomGenerator
    attempts: list[RetryAttempt] = field(default_factory=list)
    state: InvocationState = InvocationState.IDLE
    last_error: BaseException | None = None

    @classmethod
    def from_token(cls, token: str, policy: RetryPolicy | None) -> "RetryHistory":
        """Create a history whose jitter is seeded from an id or auth token."""
        return cls(policy=policy, random=SeededRandomGenerator(token))

    @classmethod
    def from_session(cls, session: Any, policy: RetryPolicy | None) -> "RetryHistory":
        """Create a history seeded from an authenticated session's token."""
        return cls.from_token(session.auth_token, policy)

    @property
    def retries(self) -> int:
        """Number of retries recorded so far."""
        return len(self.attempts)

    def can_retry(self) -> bool:
        """Whether a policy is attached and its budget is not yet spent."""
        return self.policy is not None and self.retries < self.policy.max_attempts

    def next_attempt(self) -> RetryAttempt:
        """Compute the next attempt from the policy without recording it."""
        if self.policy is None:
            raise RuntimeError("Retry history has no policy attached")
        exponential = self.policy.exponential_delay_ms(self.retries)
        jittered = self.policy.jitter(tuple(self.attempts), exponential, self.random)
        return RetryAttempt(exponential_delay_ms=exponential, jittered_delay_ms=jittered)
