"""Parsers for extracting data from AtCoder URLs and pages."""

from .home_page_parser import extract_csrf_token, extract_title, is_logged_in
from .interfaces import (
    HTTPClientProtocol,
    TaskPageParserProtocol,
    TasksPageParserProtocol,
    URLParserProtocol,
)
from .task_page_parser import TaskPageParser
from .tasks_page_parser import TasksPageParser
from .url_parser import URLParser, parse_fetch_url

__all__ = [
    "HTTPClientProtocol",
    "TaskPageParser",
    "TaskPageParserProtocol",
    "TasksPageParser",
    "TasksPageParserProtocol",
    "URLParser",
    "URLParserProtocol",
    "extract_csrf_token",
    "extract_title",
    "is_logged_in",
    "parse_fetch_url",
]
