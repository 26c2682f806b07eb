"""
Fake collaborators for tests: HTTP session, responses and clock.

No test touches the network.
"""
import json

import requests

BASE_URL = "https://api.test/v4"

REASONS = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


def make_response(status_code=200, body=None, raw=None):
    """Build a real requests.Response without a network round-trip."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = REASONS.get(status_code, "")
    response.url = BASE_URL
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body if body is not None else {}).encode("utf-8")
    return response


class FakeSession:
    """
    Stands in for requests.Session.

    Each call consumes the next outcome; the last outcome repeats.
    Outcomes are Response objects or exceptions to raise.
    """

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []
        self.closed = False

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({
            "url": url,
            "params": params,
            "headers": headers,
            "timeout": timeout,
        })
        if len(self.outcomes) > 1:
            outcome = self.outcomes.pop(0)
        else:
            outcome = self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds

