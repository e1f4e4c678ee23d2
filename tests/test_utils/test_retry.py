"""
Tests for retry utility with exponential backoff.

Tests cover:
- RetryConfig defaults
- Delay calculation with exponential backoff
- Jitter randomization
- Max delay capping
- Retryable error filtering
- Async retry execution
"""

from typing import List
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from dao_action_builder.utils.retry import (
    RetryConfig,
    calculate_delay,
    retry_async,
)


# =============================================================================
# RetryConfig Tests
# =============================================================================


class TestRetryConfig:
    """Tests for RetryConfig dataclass."""

    def test_default_values(self) -> None:
        """Test RetryConfig default values."""
        config = RetryConfig()

        assert config.max_attempts == 3
        assert config.base_delay_ms == 500
        assert config.max_delay_ms == 10000
        assert config.jitter is True
        assert config.exponential_base == 2.0
        assert config.retryable_errors == (Exception,)

    def test_custom_values(self) -> None:
        """Test RetryConfig with custom values."""
        config = RetryConfig(
            max_attempts=5,
            base_delay_ms=250,
            max_delay_ms=2000,
            jitter=False,
            exponential_base=3.0,
            retryable_errors=(httpx.TransportError,),
        )

        assert config.max_attempts == 5
        assert config.base_delay_ms == 250
        assert config.max_delay_ms == 2000
        assert config.jitter is False
        assert config.exponential_base == 3.0
        assert config.retryable_errors == (httpx.TransportError,)


# =============================================================================
# Delay Calculation Tests
# =============================================================================


class TestDelayCalculation:
    """Tests for calculate_delay function."""

    def test_first_attempt_delay(self) -> None:
        """Test delay for first retry attempt."""
        config = RetryConfig(base_delay_ms=1000, jitter=False)

        # 1000 * 2^0 = 1000ms = 1.0s
        assert calculate_delay(0, config) == 1.0

    def test_exponential_growth(self) -> None:
        """Test delay grows exponentially."""
        config = RetryConfig(
            base_delay_ms=1000, max_delay_ms=60000, jitter=False, exponential_base=2.0
        )

        delays = [calculate_delay(i, config) for i in range(5)]

        assert delays == [1.0, 2.0, 4.0, 8.0, 16.0]

    def test_max_delay_cap(self) -> None:
        """Test delay is capped at max_delay_ms."""
        config = RetryConfig(base_delay_ms=1000, max_delay_ms=5000, jitter=False)

        assert calculate_delay(10, config) == 5.0

    def test_jitter_adds_randomness(self) -> None:
        """Test jitter keeps delays between zero and the computed delay."""
        config = RetryConfig(base_delay_ms=1000, jitter=True)

        delays = [calculate_delay(0, config) for _ in range(100)]

        assert min(delays) != max(delays)
        assert all(0 <= d <= 1.0 for d in delays)

    def test_jitter_disabled(self) -> None:
        """Test no jitter produces consistent delays."""
        config = RetryConfig(base_delay_ms=1000, jitter=False)

        delays = [calculate_delay(0, config) for _ in range(10)]

        assert all(d == 1.0 for d in delays)


# =============================================================================
# Async Retry Tests
# =============================================================================


class TestRetryAsync:
    """Tests for retry_async function."""

    @pytest.mark.asyncio
    async def test_success_on_first_attempt(self) -> None:
        """Test function succeeds on first attempt."""
        call_count = 0

        async def success_fn():
            nonlocal call_count
            call_count += 1
            return "success"

        result = await retry_async(success_fn)

        assert result == "success"
        assert call_count == 1

    @pytest.mark.asyncio
    async def test_retry_on_failure(self) -> None:
        """Test retry after transient failure."""
        call_count = 0

        async def fail_then_succeed():
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise ValueError("Transient error")
            return "success"

        config = RetryConfig(max_attempts=5, base_delay_ms=1, jitter=False)
        result = await retry_async(fail_then_succeed, config)

        assert result == "success"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_max_attempts_exceeded(self) -> None:
        """Test the last error is raised after max attempts."""
        call_count = 0

        async def always_fail():
            nonlocal call_count
            call_count += 1
            raise ValueError(f"Persistent error {call_count}")

        config = RetryConfig(max_attempts=3, base_delay_ms=1, jitter=False)

        with pytest.raises(ValueError) as exc_info:
            await retry_async(always_fail, config)

        assert str(exc_info.value) == "Persistent error 3"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_non_retryable_error(self) -> None:
        """Test non-retryable errors are raised immediately."""
        call_count = 0

        async def raise_type_error():
            nonlocal call_count
            call_count += 1
            raise TypeError("Not retryable")

        config = RetryConfig(
            max_attempts=5,
            retryable_errors=(ValueError,),
            base_delay_ms=1,
        )

        with pytest.raises(TypeError):
            await retry_async(raise_type_error, config)

        assert call_count == 1

    @pytest.mark.asyncio
    async def test_retryable_error_filter(self) -> None:
        """Test only retryable errors trigger retry."""
        call_count = 0
        errors: List[type] = [ValueError, ValueError, RuntimeError]

        async def raise_different_errors():
            nonlocal call_count
            error_type = errors[call_count]
            call_count += 1
            raise error_type("Error")

        config = RetryConfig(
            max_attempts=5,
            retryable_errors=(ValueError,),
            base_delay_ms=1,
        )

        with pytest.raises(RuntimeError):
            await retry_async(raise_different_errors, config)

        assert call_count == 3

    @pytest.mark.asyncio
    async def test_transport_errors_are_retried(self) -> None:
        """Test httpx transport failures are retried when configured."""
        call_count = 0

        async def flaky_request():
            nonlocal call_count
            call_count += 1
            if call_count == 1:
                raise httpx.ConnectError("connection refused")
            return {"status": "1"}

        config = RetryConfig(
            max_attempts=3,
            base_delay_ms=1,
            retryable_errors=(httpx.TransportError,),
        )

        result = await retry_async(flaky_request, config)

        assert result == {"status": "1"}
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_default_config(self) -> None:
        """Test retry works with default config."""
        call_count = 0

        async def fail_once():
            nonlocal call_count
            call_count += 1
            if call_count == 1:
                raise Exception("First attempt fails")
            return "success"

        with patch(
            "dao_action_builder.utils.retry.asyncio.sleep", new_callable=AsyncMock
        ) as sleep:
            result = await retry_async(fail_once)

        assert result == "success"
        assert call_count == 2
        sleep.assert_awaited_once()


# =============================================================================
# Edge Cases
# =============================================================================


class TestEdgeCases:
    """Tests for edge cases and boundary conditions."""

    @pytest.mark.asyncio
    async def test_single_attempt(self) -> None:
        """Test with max_attempts=1 (no retries)."""
        call_count = 0

        async def always_fail():
            nonlocal call_count
            call_count += 1
            raise ValueError("Fail")

        config = RetryConfig(max_attempts=1, base_delay_ms=1)

        with pytest.raises(ValueError):
            await retry_async(always_fail, config)

        assert call_count == 1

    @pytest.mark.asyncio
    async def test_zero_attempts_rejected(self) -> None:
        """Test max_attempts below one is a configuration error."""
        fn = AsyncMock(return_value="never")

        with pytest.raises(ValueError, match="max_attempts"):
            await retry_async(fn, RetryConfig(max_attempts=0))

        fn.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_zero_base_delay(self) -> None:
        """Test with zero base delay."""
        call_count = 0

        async def fail_twice():
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise ValueError("Retry")
            return "success"

        config = RetryConfig(max_attempts=5, base_delay_ms=0, jitter=False)

        result = await retry_async(fail_twice, config)

        assert result == "success"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_none_config_uses_defaults(self) -> None:
        """Test None config uses default values."""
        fn = AsyncMock(return_value="result")

        result = await retry_async(fn, None)

        assert result == "result"
        fn.assert_awaited_once()
