"""
Shared test fixtures.
"""
import pytest

from quran_api.api_client import QuranApiClient
from quran_api.utils.trace import set_verbose

from tests.fakes import BASE_URL, FakeClock, FakeSession


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleeps():
    """Backoff delays requested by the client, in order."""
    return []


@pytest.fixture
def make_client(sleeps):
    """Factory returning (client, session) for a list of outcomes."""

    def _make(outcomes, api_key="", timeout_seconds=5.0):
        session = FakeSession(outcomes)
        client = QuranApiClient(
            base_url=BASE_URL,
            api_key=api_key,
            timeout_seconds=timeout_seconds,
            session=session,
            sleep=sleeps.append,
        )
        return client, session

    return _make


@pytest.fixture(autouse=True)
def quiet_trace():
    """Reset the verbose tracing override after each test."""
    yield
    set_verbose(None)
