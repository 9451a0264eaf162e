"""Tests for retry policy, jitter and seeded randomness - behavior focused."""

import pytest
from remote_retry.exceptions import InvalidConfigurationError
from remote_retry.retry import (
    RetryAttempt,
    RetryHistory,
    RetryPolicy,
    SeededRandomGenerator,
    decorrelated_jitter,
    equal_jitter,
    full_jitter,
    resolve_policy,
)


class TestRetryPolicy:
    """Test RetryPolicy construction and presets."""

    def test_rejects_zero_base_delay(self):
        """A base delay of 0 is invalid."""
        with pytest.raises(InvalidConfigurationError):
            RetryPolicy(base_delay_ms=0, max_attempts=3)

    def test_rejects_negative_base_delay(self):
        """A negative base delay is invalid."""
        with pytest.raises(InvalidConfigurationError):
            RetryPolicy(base_delay_ms=-10, max_attempts=3)

    def test_rejects_negative_max_attempts(self):
        """A negative attempt budget is invalid."""
        with pytest.raises(InvalidConfigurationError):
            RetryPolicy(base_delay_ms=100, max_attempts=-1)

    def test_invalid_configuration_is_a_value_error(self):
        """Callers can catch configuration errors as ValueError."""
        with pytest.raises(ValueError):
            RetryPolicy(base_delay_ms=0, max_attempts=0)

    def test_zero_attempts_is_valid(self):
        """max_attempts=0 means a single call with no retries."""
        policy = RetryPolicy(base_delay_ms=100, max_attempts=0)
        assert policy.max_attempts == 0

    def test_defaults_to_full_jitter(self):
        """Without a jitter strategy, full jitter is used."""
        policy = RetryPolicy(base_delay_ms=100, max_attempts=3)
        assert policy.jitter is full_jitter

    def test_default_listener_is_noop(self):
        """The default listener accepts calls and does nothing."""
        policy = RetryPolicy(base_delay_ms=100, max_attempts=3)
        assert policy.on_attempt(1, RetryAttempt(100, 50)) is None

    def test_is_immutable(self):
        """Policies cannot be changed once built."""
        policy = RetryPolicy(base_delay_ms=100, max_attempts=3)
        with pytest.raises(AttributeError):
            policy.max_attempts = 10

    def test_exponential_delay_doubles(self):
        """Each retry index doubles the base delay."""
        policy = RetryPolicy(base_delay_ms=100, max_attempts=5)
        assert [policy.exponential_delay_ms(i) for i in range(4)] == [100, 200, 400, 800]

    def test_default_preset_matches_client_defaults(self):
        """Default preset waits 500ms and retries 4 times."""
        policy = RetryPolicy.default()
        assert policy.base_delay_ms == 500
        assert policy.max_attempts == 4

    def test_aggressive_preset_has_more_retries(self):
        """Aggressive preset should have more retries than default."""
        assert RetryPolicy.aggressive().max_attempts > RetryPolicy.default().max_attempts

    def test_conservative_preset_has_fewer_retries(self):
        """Conservative preset should have fewer retries than default."""
        assert RetryPolicy.conservative().max_attempts < RetryPolicy.default().max_attempts

    def test_no_retry_preset_has_zero_retries(self):
        """No retry preset should have zero retries."""
        assert RetryPolicy.no_retry().max_attempts == 0


class TestResolvePolicy:
    """Test per-call vs default policy precedence."""

    def test_per_call_policy_wins(self):
        """A per-call policy replaces the default."""
        per_call = RetryPolicy(base_delay_ms=10, max_attempts=1)
        default = RetryPolicy(base_delay_ms=500, max_attempts=4)
        assert resolve_policy(per_call, default) is per_call

    def test_falls_back_to_default(self):
        """Without a per-call policy, the default applies."""
        default = RetryPolicy(base_delay_ms=500, max_attempts=4)
        assert resolve_policy(None, default) is default

    def test_no_field_merging(self):
        """Fields missing from the per-call policy are not taken from the default."""
        listener_calls = []
        default = RetryPolicy(
            base_delay_ms=500,
            max_attempts=4,
            on_attempt=lambda n, attempt: listener_calls.append(n),
        )
        per_call = RetryPolicy(base_delay_ms=10, max_attempts=1)

        resolved = resolve_policy(per_call, default)
        resolved.on_attempt(1, RetryAttempt(10, 5))

        assert resolved.max_attempts == 1
        assert listener_calls == []

    def test_both_absent_disables_retry(self):
        """No policy at all resolves to None."""
        assert resolve_policy(None, None) is None


class TestSeededRandomGenerator:
    """Test seeded random source behavior."""

    def test_values_are_in_unit_interval(self):
        """Every value lies in [0, 1)."""
        generator = SeededRandomGenerator("session-token")
        values = [generator.next() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_same_seed_same_sequence(self):
        """Two generators with the same seed produce the same sequence."""
        first = SeededRandomGenerator("a7c5e1f0-user")
        second = SeededRandomGenerator("a7c5e1f0-user")

        assert [first.next() for _ in range(5)] == [second.next() for _ in range(5)]

    def test_different_seed_different_sequence(self):
        """Different seeds give independent sequences."""
        first = SeededRandomGenerator("test_id")
        second = SeededRandomGenerator("other_id")

        assert [first.next() for _ in range(3)] != [second.next() for _ in range(3)]

    def test_next_in_respects_range(self):
        """next_in stays inside the half-open range."""
        generator = SeededRandomGenerator("range")
        values = [generator.next_in(5.0, 10.0) for _ in range(500)]
        assert all(5.0 <= v < 10.0 for v in values)


class TestJitter:
    """Test jitter strategy behavior."""

    def test_full_jitter_stays_below_delay(self):
        """Full jitter picks a delay in [0, delay)."""
        generator = SeededRandomGenerator("jitter")
        for delay in (1, 7, 100, 1600, 25600):
            for _ in range(50):
                assert 0 <= full_jitter([], delay, generator) < delay

    def test_full_jitter_of_zero_is_zero(self):
        """A zero delay stays zero."""
        assert full_jitter([], 0, SeededRandomGenerator("zero")) == 0

    def test_full_jitter_returns_int(self):
        """Jittered delays are whole milliseconds."""
        assert isinstance(full_jitter([], 333, SeededRandomGenerator("int")), int)

    def test_full_jitter_consumes_one_value(self):
        """Full jitter draws exactly one value from the random source."""
        used = SeededRandomGenerator("consume")
        reference = SeededRandomGenerator("consume")

        full_jitter([], 1000, used)
        reference.next()

        assert used.next() == reference.next()

    def test_equal_jitter_keeps_half(self):
        """Equal jitter never drops below half the delay nor reaches it."""
        generator = SeededRandomGenerator("equal")
        for _ in range(200):
            assert 500 <= equal_jitter([], 1000, generator) < 1000

    def test_decorrelated_jitter_uses_history(self):
        """Decorrelated jitter grows from the last jittered delay."""
        generator = SeededRandomGenerator("decorrelated")
        history = [RetryAttempt(100, 80), RetryAttempt(200, 150)]
        for _ in range(200):
            assert 100 <= decorrelated_jitter(history, 400, generator) < 450

    def test_decorrelated_jitter_first_retry(self):
        """Without history, decorrelated jitter behaves like full jitter."""
        assert decorrelated_jitter([], 100, SeededRandomGenerator("s")) == full_jitter(
            [], 100, SeededRandomGenerator("s")
        )


class TestRetryHistory:
    """Test RetryHistory construction and bookkeeping."""

    def test_starts_empty(self):
        """A new history has no attempts."""
        history = RetryHistory.from_token("token", RetryPolicy.default())
        assert history.attempts == []
        assert history.retries == 0

    def test_from_session_seeds_with_auth_token(self):
        """Sessions seed the random source with their auth token."""

        class Session:
            auth_token = "jwt-token"

        history = RetryHistory.from_session(Session(), RetryPolicy.default())

        assert history.random.seed == "jwt-token"

    def test_without_policy_cannot_retry(self):
        """Absence of a policy disables retries."""
        history = RetryHistory.from_token("token", None)
        assert history.can_retry() is False

    def test_next_attempt_passes_full_history_to_jitter(self):
        """The jitter strategy sees every previous attempt in order."""
        seen = []

        def recording_jitter(attempts, delay_ms, random):
            seen.append(list(attempts))
            return delay_ms

        history = RetryHistory.from_token(
            "token", RetryPolicy(base_delay_ms=10, max_attempts=3, jitter=recording_jitter)
        )
        for _ in range(3):
            history.attempts.append(history.next_attempt())

        assert seen == [
            [],
            [RetryAttempt(10, 10)],
            [RetryAttempt(10, 10), RetryAttempt(20, 20)],
        ]
