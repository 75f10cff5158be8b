"""core/tfutils.py: predicados de reintento y utilidades de polling"""

from __future__ import annotations

from datetime import timedelta

from core.errors import BackendError, BtpCliError
from core.domain.commands import CommandResponse
from core.tfutils import (
    DEFAULT_TIMEOUT,
    calculate_delay_and_min_timeout,
    is_retriable_error_for_entitlement,
    is_retriable_error_for_env_instance,
    set_difference,
)


class TestEntitlementRetry:
    """Errores transitorios de entitlements"""

    def test_quota_locking(self):
        err = BtpCliError("Could not update entitlement [Error: 30004/400]")
        assert is_retriable_error_for_entitlement(err) is True

    def test_rate_limit(self):
        err = BackendError("Too many requests [Error: 11006/429]", command_response=CommandResponse(429))
        assert is_retriable_error_for_entitlement(err) is True

    def test_other_errors(self):
        assert is_retriable_error_for_entitlement(BtpCliError("[Error: 30005/400]")) is False
        assert is_retriable_error_for_entitlement(ValueError("boom")) is False

    def test_none(self):
        assert is_retriable_error_for_entitlement(None) is False


class TestEnvironmentInstanceRetry:
    def test_command_timeout(self):
        err = BtpCliError("Command timed out. Please try again later. [Status: 504; Correlation ID: x]")
        assert is_retriable_error_for_env_instance(err) is True

    def test_other_errors(self):
        assert is_retriable_error_for_env_instance(BtpCliError("Login timed out. Please try again later.")) is False

    def test_none(self):
        assert is_retriable_error_for_env_instance(None) is False


class TestPollingDelay:
    """Intervalo = timeout / 100, redondeado al segundo"""

    def test_default_timeout(self):
        delay, min_timeout = calculate_delay_and_min_timeout(DEFAULT_TIMEOUT)
        assert delay == timedelta(seconds=6)
        assert min_timeout == delay

    def test_one_hour(self):
        delay, _ = calculate_delay_and_min_timeout(timedelta(hours=1))
        assert delay == timedelta(seconds=36)

    def test_rounds_half_up(self):
        delay, _ = calculate_delay_and_min_timeout(timedelta(seconds=250))
        assert delay == timedelta(seconds=3)


class TestSetDifference:
    def test_default_equality(self):
        assert set_difference(["a", "b", "c"], ["b"]) == ["a", "c"]

    def test_custom_equality(self):
        result = set_difference(["A", "b"], ["a"], lambda x, y: x.lower() == y.lower())
        assert result == ["b"]

    def test_keeps_order_and_duplicates(self):
        assert set_difference([3, 1, 3], []) == [3, 1, 3]
