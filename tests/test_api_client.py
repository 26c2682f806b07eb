"""
Tests for the retrying Quran.com API client.
"""
import pytest
import requests

from quran_api.api_client import MAX_RETRIES
from quran_api.errors import TransportError
from quran_api.utils.trace import set_verbose

from tests.fakes import BASE_URL, make_response


def test_success_on_first_attempt(make_client, sleeps):
    client, session = make_client([make_response(200, {"chapters": []})])

    assert client.fetch("chapters", {"language": "en"}) == {"chapters": []}
    assert len(session.calls) == 1
    assert session.calls[0]["url"] == f"{BASE_URL}/chapters"
    assert sleeps == []


@pytest.mark.parametrize("succeeds_on", [1, 2, 3, 4])
def test_retries_5xx_until_success(make_client, sleeps, succeeds_on):
    outcomes = [make_response(503)] * (succeeds_on - 1) + [make_response(200, {"ok": True})]
    client, session = make_client(outcomes)

    assert client.fetch("juzs") == {"ok": True}
    assert len(session.calls) == min(MAX_RETRIES + 1, succeeds_on)
    assert sleeps == [1, 2, 4][: succeeds_on - 1]


def test_exhausted_retries_raise_transport_error(make_client, sleeps):
    client, session = make_client([make_response(500, {"error": "boom"})])

    with pytest.raises(TransportError) as exc_info:
        client.fetch("verses/by_key/1:1")

    assert len(session.calls) == MAX_RETRIES + 1
    assert sleeps == [1, 2, 4]
    assert exc_info.value.status == 500
    assert "Status: 500" in exc_info.value.message
    assert "boom" in exc_info.value.message


def test_404_is_not_retried(make_client, sleeps):
    client, session = make_client([make_response(404, {"message": "not found"})])

    with pytest.raises(TransportError) as exc_info:
        client.fetch("chapters/999")

    assert len(session.calls) == 1
    assert sleeps == []
    assert exc_info.value.status == 404
    assert exc_info.value.retryable is False
    assert exc_info.value.status_code == 404


def test_400_is_not_retried(make_client, sleeps):
    client, session = make_client([make_response(400)])

    with pytest.raises(TransportError):
        client.fetch("search", {"q": ""})

    assert len(session.calls) == 1


@pytest.mark.parametrize("error", [
    requests.ConnectionError("refused"),
    requests.Timeout("read timed out"),
])
def test_connectivity_failures_are_retried(make_client, sleeps, error):
    client, session = make_client([error, make_response(200, {"ok": 1})])

    assert client.fetch("juzs") == {"ok": 1}
    assert len(session.calls) == 2
    assert sleeps == [1]


def test_connectivity_failure_message_after_exhaustion(make_client, sleeps):
    client, session = make_client([requests.ConnectionError("refused")])

    with pytest.raises(TransportError) as exc_info:
        client.fetch("juzs")

    assert len(session.calls) == 4
    assert exc_info.value.status is None
    assert "connection failed or timed out" in exc_info.value.message


def test_invalid_json_is_terminal(make_client, sleeps):
    client, session = make_client([make_response(200, raw=b"<html>oops</html>")])

    with pytest.raises(TransportError) as exc_info:
        client.fetch("chapters")

    assert len(session.calls) == 1
    assert exc_info.value.retryable is False


def test_none_params_are_dropped(make_client):
    client, session = make_client([make_response(200, {})])

    client.fetch("search", {"q": "mercy", "size": None, "page": 2})

    assert session.calls[0]["params"] == {"q": "mercy", "page": 2}


def test_api_key_header_attached_when_configured(make_client):
    client, session = make_client([make_response(200, {})], api_key="secret")
    client.fetch("juzs")
    assert session.calls[0]["headers"] == {"x-api-key": "secret"}


def test_no_api_key_header_when_empty(make_client):
    client, session = make_client([make_response(200, {})], api_key="")
    client.fetch("juzs")
    assert session.calls[0]["headers"] == {}


def test_timeout_applies_to_every_attempt(make_client):
    client, session = make_client(
        [make_response(502), make_response(200, {})], timeout_seconds=2.5
    )
    client.fetch("juzs")
    assert [call["timeout"] for call in session.calls] == [2.5, 2.5]


def test_verbose_tracing_does_not_change_outcome(make_client, sleeps, caplog):
    set_verbose(True)
    client, session = make_client([make_response(503), make_response(200, {"ok": 1})])

    with caplog.at_level("INFO", logger="quran_api.trace"):
        assert client.fetch("juzs") == {"ok": 1}

    assert "[VERBOSE] [REQUEST]" in caplog.text
    assert "[VERBOSE] [ERROR]" in caplog.text
    assert "[VERBOSE] [RESPONSE]" in caplog.text


def test_url_for_joins_paths():
    from quran_api.api_client import QuranApiClient

    client = QuranApiClient(base_url="https://example.org/api/v4/", api_key="")
    assert client.url_for("/chapters") == "https://example.org/api/v4/chapters"
