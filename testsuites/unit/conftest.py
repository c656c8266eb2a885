import pytest

from testsuites.ui_testing.framework.wait_policy import WaitPolicy
from testsuites.unit.fakes import FakePage


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def instant_policy():
    """No real waiting: zero backoff and settle delays."""
    return WaitPolicy(
        timeout_ms=100,
        retry_delay_seconds=0,
        max_retries=3,
        page_settle_seconds=0,
    )
