"""Unit tests for HTTPClient."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from atcoder_tester.domain.exceptions import ResponseTooLargeError, TransportError
from atcoder_tester.domain.models import Home, Url
from atcoder_tester.infrastructure.http_client import HTTPClient

URL = Url("https://atcoder.jp/home")


def make_response(content: bytes, encoding: str | None = "utf-8") -> MagicMock:
    response = MagicMock()
    response.content = content
    response.encoding = encoding
    return response


@pytest.fixture
def session():
    session = MagicMock()
    session.get.return_value = make_response(b"<html><title>AtCoder</title></html>")
    session.post.return_value = make_response(b"<html><title>AtCoder</title></html>")
    return session


class TestHTTPClient:
    def test_get(self, session):
        client = HTTPClient(session, timeout=5.0)

        html = client.get(URL)

        assert html.soup.title.get_text() == "AtCoder"
        session.get.assert_called_once_with("https://atcoder.jp/home", timeout=5.0)

    def test_get_decodes_utf8_by_default(self, session):
        session.get.return_value = make_response(
            "<p>入力例</p>".encode("utf-8"), encoding=None
        )
        client = HTTPClient(session)

        assert client.get(URL).soup.p.get_text() == "入力例"

    def test_get_transport_error(self, session):
        session.get.side_effect = RuntimeError("connection reset")
        client = HTTPClient(session)

        with pytest.raises(TransportError, match="connection reset"):
            client.get(URL)

    def test_get_error_status(self, session):
        session.get.return_value.raise_for_status.side_effect = RuntimeError("404")
        client = HTTPClient(session)

        with pytest.raises(TransportError):
            client.get(URL)

    def test_response_too_large(self, session):
        client = HTTPClient(session, max_response_bytes=8)

        with pytest.raises(ResponseTooLargeError):
            client.get(URL)

    def test_post(self, session):
        client = HTTPClient(session, timeout=5.0)
        form = {"username": "user"}

        html = client.post(Url("https://atcoder.jp/login"), form, page=Home)

        assert html.soup.title.get_text() == "AtCoder"
        session.post.assert_called_once_with(
            "https://atcoder.jp/login", data=form, timeout=5.0
        )

    def test_post_transport_error(self, session):
        session.post.side_effect = RuntimeError("timeout")
        client = HTTPClient(session)

        with pytest.raises(TransportError):
            client.post(Url("https://atcoder.jp/login"), {}, page=Home)

    def test_cookies(self, session):
        session.cookies.jar = [
            SimpleNamespace(
                name="REVEL_SESSION",
                value="abc",
                domain="atcoder.jp",
                path="/",
                secure=True,
                expires=None,
            )
        ]
        client = HTTPClient(session)

        assert client.cookies() == [
            {
                "name": "REVEL_SESSION",
                "value": "abc",
                "domain": "atcoder.jp",
                "path": "/",
                "secure": True,
                "expires": None,
            }
        ]

    def test_with_cookies(self, session):
        cookies = [
            {"name": "REVEL_SESSION", "value": "abc", "domain": "atcoder.jp"},
            {"name": "language", "value": "en", "path": "/", "secure": True},
        ]

        client = HTTPClient.with_cookies(cookies, session=session)

        assert client.session is session
        assert session.cookies.set.call_count == 2
        session.cookies.set.assert_any_call(
            "REVEL_SESSION", "abc", domain="atcoder.jp", path="/", secure=False
        )
        session.cookies.set.assert_any_call(
            "language", "en", domain="", path="/", secure=True
        )
