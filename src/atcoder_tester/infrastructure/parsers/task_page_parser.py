"""Parser for extracting sample cases from task pages."""

from bs4 import Tag
from loguru import logger

from atcoder_tester.domain.models import TaskTestCases, TestCase
from atcoder_tester.domain.models.identifiers import Task
from atcoder_tester.infrastructure.html import Html

from .interfaces import TaskPageParserProtocol


class TaskPageParser(TaskPageParserProtocol):
    """Parser for AtCoder task pages and the tasks print page.

    Both pages render each task inside a block headed by a ``span.h2`` title,
    so one parser covers a single task and a whole contest.
    """

    TITLE_SELECTOR = "span.h2"
    SAMPLE_LABEL = "Sample "

    def parse(self, html: Html[Task]) -> list[TaskTestCases]:
        """
        Extract title and sample cases of every task on the page.

        Returns an empty list when the page holds no task blocks.
        """
        test_suite = []

        for container in self._extract_task_containers(html):
            title = self._extract_title(container)
            if not title:
                logger.debug("Skipping task block without title")
                continue

            test_cases = self._extract_test_cases(container, title)
            test_suite.append(TaskTestCases(task=title, test_cases=test_cases))

        logger.debug(f"Extracted {len(test_suite)} tasks from page")
        return test_suite

    def _extract_task_containers(self, html: Html[Task]) -> list[Tag]:
        """Find the element holding each task's full statement."""
        containers = []
        for title_tag in html.soup.select(self.TITLE_SELECTOR):
            parent = title_tag.parent
            if isinstance(parent, Tag):
                containers.append(parent)
        return containers

    def _extract_title(self, container: Tag) -> str | None:
        """Extract short title, e.g. "A" from "A - Welcome to AtCoder"."""
        title_tag = container.select_one(self.TITLE_SELECTOR)
        if not title_tag:
            return None

        words = title_tag.get_text().split()
        return words[0] if words else None

    def _extract_sample_blocks(self, container: Tag) -> list[str]:
        """Collect sample ``pre`` blocks in document order."""
        blocks = []
        for heading in container.find_all("h3"):
            if not heading.get_text().startswith(self.SAMPLE_LABEL):
                continue

            pre = heading.find_next_sibling("pre")
            if pre is None:
                continue
            blocks.append(pre.get_text())
        return blocks

    def _extract_test_cases(self, container: Tag, title: str) -> list[TestCase]:
        """Pair blocks as input, output, input, output, ..."""
        blocks = self._extract_sample_blocks(container)

        if len(blocks) % 2:
            logger.warning(
                f"Task {title} has an odd number of sample blocks ({len(blocks)}), "
                "dropping the last one"
            )

        return [
            TestCase(input=blocks[i], output=blocks[i + 1])
            for i in range(0, len(blocks) - 1, 2)
        ]
