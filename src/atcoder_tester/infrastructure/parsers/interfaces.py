"""Protocol interfaces for parsers and clients."""

from typing import Any, Protocol, TypeVar

from atcoder_tester.domain.models import FetchTarget, TaskTestCases
from atcoder_tester.domain.models.identifiers import Task, Tasks, Url
from atcoder_tester.infrastructure.html import Html

P = TypeVar("P")
Q = TypeVar("Q")


class URLParserProtocol(Protocol):
    """Protocol for URL parsing."""

    @classmethod
    def parse(cls, url: str) -> FetchTarget:
        """Parse URL into a fetch target."""
        ...


class TaskPageParserProtocol(Protocol):
    """Protocol for extracting sample cases."""

    def parse(self, html: Html[Task]) -> list[TaskTestCases]:
        """Extract sample cases of every task on the page."""
        ...


class TasksPageParserProtocol(Protocol):
    """Protocol for extracting task screen names."""

    def parse(self, html: Html[Tasks]) -> list[str]:
        """Extract screen names in row order."""
        ...


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    def get(self, url: Url[P]) -> Html[P]:
        """Get a page."""
        ...

    def post(self, url: Url[P], form: dict[str, str], page: type[Q]) -> Html[Q]:
        """Submit a form and return the resulting page."""
        ...

    def cookies(self) -> list[dict[str, Any]]:
        """Export the cookie jar."""
        ...
