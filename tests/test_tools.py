"""
Tool endpoints: listing, dispatch and error mapping
"""
import pytest
from fastapi.testclient import TestClient

from quran_api import fallback
from quran_api.main import (
    GENERIC_ERROR_MESSAGE,
    INVALID_PARAMS_MESSAGE,
    UPSTREAM_ERROR_MESSAGE,
    app,
    set_services,
)
from quran_api.resources import build_services

from tests.fakes import make_response

client = TestClient(app)


@pytest.fixture
def upstream(make_client, clock):
    """Install services backed by a fake upstream; returns a setter."""

    def _install(outcomes):
        api_client, session = make_client(outcomes)
        set_services(build_services(client=api_client, clock=clock))
        return session

    yield _install
    set_services(None)


def test_tools_lists_every_tool():
    """Test that /tools lists tools with input schemas"""
    response = client.get("/tools")
    assert response.status_code == 200
    tools = {tool["name"]: tool for tool in response.json()["tools"]}
    assert "list-chapters" in tools
    assert "verses-by_verse_key" in tools
    assert tools["list-chapters"]["cacheable"] is True
    assert tools["list-chapters"]["hasFallback"] is True
    assert tools["juzs"]["cacheable"] is False
    assert "verse_key" in tools["verses-by_verse_key"]["inputSchema"]["properties"]


def test_tools_listing_includes_examples():
    """Test that documented tools carry usage examples"""
    tools = {tool["name"]: tool for tool in client.get("/tools").json()["tools"]}

    examples = tools["list-chapters"]["examples"]
    assert [example["parameters"] for example in examples] == [
        {"language": "en"},
        {"language": "ar"},
    ]
    assert examples[0]["result"]["message"] == "list-chapters executed successfully"
    assert tools["tafsirs"]["examples"][0]["parameters"] == {"language": "en"}
    assert tools["languages"]["examples"][0]["parameters"] == {}
    assert tools["info"]["examples"] == []


def test_tools_listing_includes_aliases():
    """Test that original tool names are listed as aliases"""
    tools = {tool["name"]: tool for tool in client.get("/tools").json()["tools"]}
    assert tools["QURAN-verses-uthmani_tajweed"]["aliases"] == ["QURAN-verses-uthmani-tajweed"]
    assert tools["QURAN-verses-imlaei"]["aliases"] == ["QURAN-verses-Imlaei"]
    assert tools["list-juz-recitation"]["aliases"] == ["list-juz-recitaiton"]


def test_call_tool_returns_envelope(upstream):
    """Test that a successful call returns success, message and data"""
    upstream([make_response(200, {"juzs": [{"juz_number": 1}]})])

    response = client.post("/tools/juzs", json={})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "juzs executed successfully",
        "data": {"juzs": [{"juz_number": 1}]},
    }


def test_call_tool_without_body(upstream):
    """Test that a missing body means no arguments"""
    upstream([make_response(200, {"recitation_styles": {}})])

    response = client.post("/tools/recitation-styles")

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_second_call_reports_cache(upstream):
    """Test that cached tools say so in the message"""
    session = upstream([make_response(200, {"languages": []})])

    client.post("/tools/languages", json={"language": "en"})
    response = client.post("/tools/languages", json={"language": "en"})

    assert response.json()["message"] == "languages executed successfully (from cache)"
    assert len(session.calls) == 1


def test_unknown_tool_returns_404(upstream):
    """Test that unknown tool names are rejected"""
    upstream([make_response(200, {})])

    response = client.post("/tools/not-a-tool", json={})

    assert response.status_code == 404


def test_invalid_arguments_return_400(upstream):
    """Test that validation failures map to 400 with field details"""
    session = upstream([make_response(200, {})])

    response = client.post("/tools/GET-chapter", json={"id": "abc"})

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["message"] == INVALID_PARAMS_MESSAGE
    assert data["errors"][0]["field"] == "id"
    assert session.calls == []


def test_upstream_failure_without_fallback_returns_502(upstream, sleeps):
    """Test that exhausted retries map to 502"""
    upstream([make_response(500)])

    response = client.post("/tools/verses-by_verse_key", json={"verse_key": "1:1"})

    assert response.status_code == 502
    assert response.json() == {"success": False, "message": UPSTREAM_ERROR_MESSAGE}
    assert sleeps == [1, 2, 4]


def test_upstream_failure_with_fallback_returns_static_data(upstream):
    """Test that fallback tools still succeed when upstream is down"""
    upstream([make_response(503)])

    response = client.post("/tools/list-chapters", json={"language": "en"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "list-chapters executed with fallback data (API unavailable)"
    assert data["data"] == fallback.get_fallback(fallback.CHAPTERS)


def test_unexpected_error_returns_500(upstream):
    """Test that unexpected failures map to a generic 500"""
    upstream([RuntimeError("boom")])

    response = client.post("/tools/juzs", json={})

    assert response.status_code == 500
    assert response.json()["message"] == GENERIC_ERROR_MESSAGE


def test_cache_stats_and_clear(upstream):
    """Test that cache stats reflect entries and DELETE /cache clears them"""
    upstream([make_response(200, {"tafsirs": []})])
    client.post("/tools/tafsirs", json={"language": "en"})

    stats = client.get("/cache/stats").json()
    assert stats["tafsirs"]["entries"] == 1
    assert "juzs" not in stats

    response = client.delete("/cache")
    assert response.json() == {"cleared": 1}
    assert client.get("/cache/stats").json()["tafsirs"]["entries"] == 0


@pytest.mark.parametrize("alias, path", [
    ("QURAN-verses-uthmani-tajweed", "/quran/verses/uthmani_tajweed"),
    ("QURAN-verses-Imlaei", "/quran/verses/imlaei"),
    ("recitation-autio-files", "/quran/recitations/7"),
])
def test_alias_dispatches_to_tool(upstream, alias, path):
    """Test that an alias calls the same endpoint as the tool it names"""
    session = upstream([make_response(200, {"verses": []})])

    arguments = {"recitation_id": 7} if alias == "recitation-autio-files" else {}
    response = client.post(f"/tools/{alias}", json=arguments)

    assert response.status_code == 200
    assert session.calls[0]["url"].endswith(path)


def test_shutdown_closes_api_session(make_client, clock):
    """Test that stopping the app closes the upstream HTTP session"""
    api_client, session = make_client([make_response(200, {})])
    set_services(build_services(client=api_client, clock=clock))

    with TestClient(app) as running:
        assert running.get("/health").status_code == 200
        assert session.closed is False

    assert session.closed is True
