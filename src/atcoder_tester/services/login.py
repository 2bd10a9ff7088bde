"""Service for logging in to AtCoder."""

from collections.abc import Callable

from loguru import logger

from atcoder_tester.domain.exceptions import LoginFailedError, ParsingError
from atcoder_tester.domain.models import Credentials, Home, Login, SessionData, Url
from atcoder_tester.infrastructure.parsers import (
    HTTPClientProtocol,
    extract_csrf_token,
    extract_title,
    is_logged_in,
)

# Returns credentials to try, or None to give up.
CredentialsPrompt = Callable[[int], Credentials | None]

LOGGED_IN_TITLE = "AtCoder"


class LoginService:
    """Logs in with username and password and exposes the resulting session."""

    def __init__(self, http_client: HTTPClientProtocol, csrf_token: str = ""):
        self.http_client = http_client
        self.csrf_token = csrf_token

    def fetch_csrf_token(self, url: Url[Home]) -> str:
        html = self.http_client.get(url)
        csrf_token = extract_csrf_token(html)
        if not csrf_token:
            raise ParsingError(f"CSRF Token Not Found on {url}")

        self.csrf_token = csrf_token
        return csrf_token

    def login(self, credentials: Credentials, url: Url[Login]) -> None:
        """
        Submit the login form.

        Raises:
            LoginFailedError: AtCoder answered with anything but its home page
            ParsingError: Response has no ``<title>``
        """
        form = {
            "username": credentials.username,
            "password": credentials.password,
            "csrf_token": self.csrf_token,
        }
        html = self.http_client.post(url, form, page=Home)

        title = extract_title(html)
        if title is None:
            raise ParsingError("<title> Not Found")
        if title != LOGGED_IN_TITLE:
            raise LoginFailedError()

        logger.info(f"Logged in as {credentials.username}")

    def interactive_login(
        self,
        prompt: CredentialsPrompt,
        url: Url[Login],
        max_attempts: int = 3,
    ) -> None:
        """
        Ask for credentials until login succeeds.

        ``prompt`` receives the attempt number starting at 1. The last
        failure is re-raised once it returns None or attempts run out.
        """
        last_error: LoginFailedError | None = None

        for attempt in range(1, max_attempts + 1):
            credentials = prompt(attempt)
            if credentials is None:
                break

            try:
                self.login(credentials, url)
                return
            except LoginFailedError as e:
                logger.warning(f"Login attempt {attempt} failed")
                last_error = e

        raise last_error or LoginFailedError("Login cancelled")

    def check(self, url: Url[Home]) -> bool:
        html = self.http_client.get(url)
        return is_logged_in(html)

    def session_data(self) -> SessionData:
        return SessionData(cookies=self.http_client.cookies(), csrf_token=self.csrf_token)
