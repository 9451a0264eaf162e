"""
Jitter strategies.

A jitter strategy maps the attempts made so far, the proposed exponential
delay (milliseconds) and the history's random source to the delay actually
waited. Each strategy draws exactly one value from the random source.
"""

import math
from typing import Callable, Sequence, TYPE_CHECKING

from .seeded import SeededRandomGenerator

if TYPE_CHECKING:
    from .history import RetryAttempt

Jitter = Callable[[Sequence["RetryAttempt"], int, SeededRandomGenerator], int]


def full_jitter(
    history: Sequence["RetryAttempt"], delay_ms: int, random: SeededRandomGenerator
) -> int:
    """Pick a delay uniformly in [0, delay_ms)."""
    return math.floor(delay_ms * random.next())


def equal_jitter(
    history: Sequence["RetryAttempt"], delay_ms: int, random: SeededRandomGenerator
) -> int:
    """Keep half of the delay and randomize the other half."""
    half = delay_ms // 2
    return half + math.floor((delay_ms - half) * random.next())


def decorrelated_jitter(
    history: Sequence["RetryAttempt"], delay_ms: int, random: SeededRandomGenerator
) -> int:
    """
    Grow from the previous jittered delay instead of the exponential one.

    The first retry falls back to full jitter. Later retries pick uniformly
    between the first exponential delay and three times the last jittered
    delay.
    """
    if not history:
        return full_jitter(history, delay_ms, random)
    low = history[0].exponential_delay_ms
    high = max(low, history[-1].jittered_delay_ms * 3)
    return math.floor(random.next_in(low, high))
