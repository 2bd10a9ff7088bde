"""Parser for AtCoder contest and task URLs."""

import re

from loguru import logger

from atcoder_tester.domain.exceptions import URLParsingError
from atcoder_tester.domain.models import ContestTarget, FetchTarget, TaskInfo, TaskTarget, Url
from atcoder_tester.domain.models.identifiers import Task

from .interfaces import URLParserProtocol


class URLParser(URLParserProtocol):
    """Classifies a URL as a contest-wide or single-task fetch target."""

    # Contest top page: https://atcoder.jp/contests/abc388
    CONTEST_PATTERN = re.compile(r"^https://atcoder\.jp/contests/[^/?#]+$")
    # Task page: https://atcoder.jp/contests/abc388/tasks/abc388_a
    TASK_PATTERN = re.compile(r"^(https://atcoder\.jp/contests/[^/?#]+)/tasks/([^/?#]+)$")

    @classmethod
    def parse(cls, url: str) -> FetchTarget:
        """
        Parse contest or task URL into a fetch target.

        The whole string must match; trailing slashes and query strings are
        rejected rather than normalized.
        """
        logger.debug(f"Parsing URL: {url}")

        if cls.CONTEST_PATTERN.fullmatch(url):
            target: FetchTarget = ContestTarget(
                contest_url=Url(url),
                tasks_print_url=Url(f"{url}/tasks_print"),
                tasks_url=Url(f"{url}/tasks"),
            )
            logger.info(f"Parsed URL to {target}")
            return target

        match = cls.TASK_PATTERN.fullmatch(url)
        if match:
            contest_url, task_screen_name = match.groups()
            target = TaskTarget(
                task_url=Url(url),
                contest_url=Url(contest_url),
                task_screen_name=task_screen_name,
            )
            logger.info(f"Parsed URL to {target}")
            return target

        raise URLParsingError(url)

    @classmethod
    def build_task_url(cls, task_info: TaskInfo) -> Url[Task]:
        """Build task page URL from saved task info."""
        url: Url[Task] = Url(f"{task_info.contest_url}/tasks/{task_info.task_screen_name}")

        logger.debug(f"Built task URL: {url}")
        return url


def parse_fetch_url(url: str) -> FetchTarget:
    """Convenience wrapper around ``URLParser.parse``."""
    return URLParser.parse(url)
