"""
Retry policy definition and resolution.
"""

from dataclasses import dataclass, field
from typing import Callable, TYPE_CHECKING

from .jitter import Jitter, full_jitter
from ..exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    from .history import RetryAttempt

RetryListener = Callable[[int, "RetryAttempt"], None]


def _ignore_attempt(attempt_number: int, attempt: "RetryAttempt") -> None:
    pass


@dataclass(frozen=True)
class RetryPolicy:
    """
    Configuration for retry behavior.

    Immutable once built, so one policy can back many concurrent invocations.

    Attributes:
        base_delay_ms: Base delay in milliseconds, doubled on every retry
        max_attempts: Maximum number of retries after the first call
        jitter: Strategy turning the exponential delay into the waited delay
            (default: full jitter)
        on_attempt: Listener called with (retry number, attempt) before each
            backoff wait (default: no-op)
    """

    base_delay_ms: int
    max_attempts: int
    jitter: Jitter = field(default=full_jitter, compare=False)
    on_attempt: RetryListener = field(default=_ignore_attempt, compare=False)

    def __post_init__(self) -> None:
        if self.base_delay_ms <= 0:
            raise InvalidConfigurationError(
                f"base_delay_ms must be greater than 0, got {self.base_delay_ms}"
            )
        if self.max_attempts < 0:
            raise InvalidConfigurationError(
                f"max_attempts must not be negative, got {self.max_attempts}"
            )

    def exponential_delay_ms(self, retry_index: int) -> int:
        """Delay before retry number `retry_index + 1`, without jitter."""
        return self.base_delay_ms * 2**retry_index

    @classmethod
    def default(cls) -> "RetryPolicy":
        """Preset used by clients when no policy is given (500ms, 4 retries)."""
        return cls(base_delay_ms=500, max_attempts=4)

    @classmethod
    def aggressive(cls) -> "RetryPolicy":
        """Preset for aggressive retry (more attempts, longer delays)."""
        return cls(base_delay_ms=1000, max_attempts=8)

    @classmethod
    def conservative(cls) -> "RetryPolicy":
        """Preset for conservative retry (fewer attempts, shorter delays)."""
        return cls(base_delay_ms=250, max_attempts=2)

    @classmethod
    def no_retry(cls) -> "RetryPolicy":
        """Preset for no retry (single attempt only)."""
        return cls(base_delay_ms=1, max_attempts=0)


def resolve_policy(
    per_call: RetryPolicy | None, default: RetryPolicy | None
) -> RetryPolicy | None:
    """
    Pick the policy for one invocation.

    A per-call policy replaces the default as a whole; fields are never merged.
    """
    return per_call if per_call is not None else default
