"""Parser for extracting task screen names from the task list page."""

import re

from loguru import logger

from atcoder_tester.domain.models.identifiers import Tasks
from atcoder_tester.infrastructure.html import Html

from .interfaces import TasksPageParserProtocol


class TasksPageParser(TasksPageParserProtocol):
    """Parser for the ``/contests/<contest>/tasks`` table."""

    LINK_SELECTOR = "table > tbody > tr > td:first-child > a"
    TASK_LINK_PATTERN = re.compile(r"^/contests/[^/]+/tasks/([^/]+)$")

    def parse(self, html: Html[Tasks]) -> list[str]:
        """Extract one screen name per table row, top to bottom."""
        task_screen_names = []

        for link in html.soup.select(self.LINK_SELECTOR):
            href = link.get("href")
            if not isinstance(href, str):
                continue

            match = self.TASK_LINK_PATTERN.match(href)
            if not match:
                logger.debug(f"Skipping row with unexpected link: {href}")
                continue

            task_screen_names.append(match.group(1))

        logger.debug(f"Extracted task screen names: {task_screen_names}")
        return task_screen_names
