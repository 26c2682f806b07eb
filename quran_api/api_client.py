"""
HTTP client for the Quran.com API.

Every call is a single GET retried with exponential backoff on
connectivity failures and 5xx responses.
"""
import logging
import time
from typing import Any, Callable, Dict, Optional

import requests
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from config.settings import settings
from quran_api.errors import TransportError
from quran_api.utils.trace import verbose_log

logger = logging.getLogger("api_client")

# Retries after the first attempt; 4 attempts in total
MAX_RETRIES = 3
# Backoff doubles from here: 1s, 2s, 4s
INITIAL_RETRY_DELAY_SECONDS = 1.0

# Longest slice of an error body copied into TransportError messages
ERROR_BODY_EXCERPT = 500


def _is_retryable(error: BaseException) -> bool:
    return isinstance(error, TransportError) and error.retryable


def _body_excerpt(response: requests.Response) -> str:
    try:
        text = response.text or ""
    except Exception:
        return ""
    text = text.strip()
    if len(text) > ERROR_BODY_EXCERPT:
        return text[:ERROR_BODY_EXCERPT] + "..."
    return text


class QuranApiClient:
    """
    Retrying fetcher for Quran.com API endpoints.

    Usage:
        client = QuranApiClient()
        data = client.fetch("chapters", {"language": "en"})
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        max_retries: int = MAX_RETRIES,
        initial_delay_seconds: float = INITIAL_RETRY_DELAY_SECONDS,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, defaults to QURAN_API_BASE_URL
            api_key: Sent as x-api-key when non-empty, defaults to API_KEY
            timeout_seconds: Per-attempt timeout, defaults to REQUEST_TIMEOUT_MS
            session: requests session, injectable for tests
            sleep: Backoff sleep function, injectable for tests
            max_retries: Retries allowed after the first attempt
            initial_delay_seconds: Delay before the first retry
        """
        self.base_url = (base_url or settings.quran_api_base_url).rstrip("/")
        self.api_key = settings.api_key if api_key is None else api_key
        self.timeout_seconds = (
            settings.request_timeout_seconds if timeout_seconds is None else timeout_seconds
        )
        self.max_retries = max_retries
        self.initial_delay_seconds = initial_delay_seconds
        self._session = session or requests.Session()
        self._sleep = sleep

    def _get_headers(self) -> Dict[str, str]:
        """Get API authentication headers."""
        if self.api_key:
            return {"x-api-key": self.api_key}
        return {}

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def fetch(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET ``path`` with retries.

        Args:
            path: Endpoint path relative to the base URL
            params: Flat query parameters; None values are dropped

        Returns:
            Decoded JSON body

        Raises:
            TransportError: On a terminal failure or once retries are exhausted
        """
        url = self.url_for(path)
        query = {k: v for k, v in (params or {}).items() if v is not None}

        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=self.initial_delay_seconds, exp_base=2),
            retry=retry_if_exception(_is_retryable),
            before_sleep=self._log_retry,
            sleep=self._sleep,
            reraise=True,
        )

        for attempt in retrying:
            with attempt:
                return self._attempt(
                    url, query, attempt.retry_state.attempt_number - 1
                )

    def _attempt(self, url: str, query: Dict[str, Any], retry_count: int) -> Any:
        """Issue one GET and translate failures into TransportError."""
        verbose_log("request", {
            "url": url,
            "params": query,
            "retry": (
                f"Retry attempt {retry_count} of {self.max_retries}"
                if retry_count > 0 else None
            ),
        })

        try:
            response = self._session.get(
                url,
                params=query,
                headers=self._get_headers(),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            raise self._status_error(url, retry_count, e) from e
        except requests.RequestException as e:
            raise self._connection_error(url, retry_count, e) from e

        try:
            data = response.json()
        except ValueError as e:
            verbose_log("error", {"url": url, "retry": retry_count, "error": str(e)})
            raise TransportError(
                f"API request failed: invalid JSON body (Status: {response.status_code})",
                status=response.status_code,
                retryable=False,
            ) from e

        verbose_log("response", {"status": response.status_code, "data": data})
        return data

    def _status_error(
        self, url: str, retry_count: int, error: requests.HTTPError
    ) -> TransportError:
        response = error.response
        status = response.status_code if response is not None else None
        message = f"API request failed: {error}"
        if status is not None:
            message += f" (Status: {status})"
        excerpt = _body_excerpt(response) if response is not None else ""
        if excerpt:
            message += f" - {excerpt}"

        verbose_log("error", {"url": url, "retry": retry_count, "status": status, "error": str(error)})
        return TransportError(
            message,
            status=status,
            retryable=status is not None and 500 <= status < 600,
        )

    def _connection_error(
        self, url: str, retry_count: int, error: requests.RequestException
    ) -> TransportError:
        verbose_log("error", {"url": url, "retry": retry_count, "error": str(error)})
        return TransportError(
            f"API request failed: {error} - connection failed or timed out",
            status=None,
            retryable=True,
        )

    def _log_retry(self, retry_state: RetryCallState) -> None:
        delay = retry_state.next_action.sleep if retry_state.next_action else 0
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            f"API request failed, retrying in {delay * 1000:.0f}ms "
            f"(attempt {retry_state.attempt_number} of {self.max_retries}): {error}"
        )

    def close(self) -> None:
        self._session.close()
