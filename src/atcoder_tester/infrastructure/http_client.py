"""Synchronous HTTP client for AtCoder pages."""

from typing import Any, TypeVar

from curl_cffi import requests
from loguru import logger

from atcoder_tester.domain.exceptions import ResponseTooLargeError, TransportError
from atcoder_tester.domain.models import Url
from atcoder_tester.infrastructure.html import Html

P = TypeVar("P")
Q = TypeVar("Q")

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RESPONSE_BYTES = 16 * 1024 * 1024


class HTTPClient:
    """HTTP client with a persistent cookie jar and browser impersonation."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES,
        impersonate: str = "chrome",
    ):
        """
        Initialize client.

        Args:
            session: curl_cffi session to reuse; a new one is created if omitted
            timeout: Per-request timeout in seconds
            max_response_bytes: Largest body that will be decoded
            impersonate: Browser fingerprint passed to curl_cffi
        """
        self.session = session or requests.Session(impersonate=impersonate)
        self.timeout = timeout
        self.max_response_bytes = max_response_bytes

    @classmethod
    def with_cookies(cls, cookies: list[dict[str, Any]], **kwargs: Any) -> "HTTPClient":
        """Create client whose jar is pre-filled with exported cookies."""
        client = cls(**kwargs)
        for cookie in cookies:
            client.session.cookies.set(
                cookie["name"],
                cookie["value"],
                domain=cookie.get("domain", ""),
                path=cookie.get("path", "/"),
                secure=cookie.get("secure", False),
            )
        logger.debug(f"Restored {len(cookies)} cookies")
        return client

    def get(self, url: Url[P]) -> Html[P]:
        """Fetch a page and parse it."""
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url.value, timeout=self.timeout)
            response.raise_for_status()
        except Exception as e:
            logger.error(f"GET {url} failed: {e}")
            raise TransportError(f"Failed to fetch {url}: {e}") from e

        return Html.parse(self._decode(response, url))

    def post(self, url: Url[P], form: dict[str, str], page: type[Q]) -> Html[Q]:
        """Submit a form; ``page`` is the kind of page the server answers with."""
        logger.debug(f"POST {url} -> {page.__name__}")
        try:
            response = self.session.post(url.value, data=form, timeout=self.timeout)
            response.raise_for_status()
        except Exception as e:
            logger.error(f"POST {url} failed: {e}")
            raise TransportError(f"Failed to post to {url}: {e}") from e

        return Html.parse(self._decode(response, url))

    def cookies(self) -> list[dict[str, Any]]:
        """Export the cookie jar as plain dicts."""
        return [
            {
                "name": cookie.name,
                "value": cookie.value,
                "domain": cookie.domain,
                "path": cookie.path,
                "secure": cookie.secure,
                "expires": cookie.expires,
            }
            for cookie in self.session.cookies.jar
        ]

    def _decode(self, response: Any, url: Url) -> str:
        content = response.content
        if len(content) > self.max_response_bytes:
            raise ResponseTooLargeError(
                f"Response from {url} is {len(content)} bytes, "
                f"limit is {self.max_response_bytes}"
            )
        return content.decode(response.encoding or "utf-8", errors="replace")
