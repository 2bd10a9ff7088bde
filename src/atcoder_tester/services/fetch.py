"""Service for fetching sample cases of a contest or a task."""

from pathlib import Path

from loguru import logger

from atcoder_tester.domain.exceptions import TaskMismatchError
from atcoder_tester.domain.models import (
    ContestHome,
    ContestTarget,
    FetchTarget,
    TaskInfo,
    TaskTestCases,
    Url,
)
from atcoder_tester.infrastructure import fixtures
from atcoder_tester.infrastructure.parsers import (
    HTTPClientProtocol,
    TaskPageParser,
    TaskPageParserProtocol,
    TasksPageParser,
    TasksPageParserProtocol,
)


def create_task_info(
    tasks: list[str],
    task_screen_names: list[str],
    contest_url: Url[ContestHome],
) -> list[TaskInfo]:
    """
    Pair titles and screen names by position.

    Both lists come from different pages, so a length mismatch means the
    pairing cannot be trusted.
    """
    if len(tasks) != len(task_screen_names):
        logger.error(f"Cannot pair tasks {tasks} with screen names {task_screen_names}")
        raise TaskMismatchError(tasks, task_screen_names)

    return [
        TaskInfo(task=task, task_screen_name=task_screen_name, contest_url=contest_url)
        for task, task_screen_name in zip(tasks, task_screen_names)
    ]


class FetchService:
    """Downloads sample cases and records which task is which."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        test_dir: Path,
        tasks_info_file: Path,
        task_page_parser: TaskPageParserProtocol | None = None,
        tasks_page_parser: TasksPageParserProtocol | None = None,
    ):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.test_dir = test_dir
        self.tasks_info_file = tasks_info_file
        self.task_page_parser = task_page_parser or TaskPageParser()
        self.tasks_page_parser = tasks_page_parser or TasksPageParser()

    def fetch_test_suite(self, target: FetchTarget) -> list[TaskTestCases]:
        logger.info(f"Fetching sample cases from {target.fetch_url}")
        html = self.http_client.get(target.fetch_url)
        test_suite = self.task_page_parser.parse(html)
        if not test_suite:
            logger.warning(f"No tasks found on {target.fetch_url}")
        return test_suite

    def fetch_task_screen_names(self, target: FetchTarget) -> list[str]:
        if isinstance(target, ContestTarget):
            html = self.http_client.get(target.tasks_url)
            return self.tasks_page_parser.parse(html)
        return [target.task_screen_name]

    def fetch(self, target: FetchTarget) -> list[TaskInfo]:
        """
        Fetch sample cases, save them as fixtures and save task info.

        Returns:
            Saved task info in page order
        """
        test_suite = self.fetch_test_suite(target)
        fixtures.save_test_suite(test_suite, self.test_dir)

        tasks = [task_test_cases.task for task_test_cases in test_suite]
        logger.info(f"Saved test cases of tasks {tasks} to {self.test_dir}")

        task_screen_names = self.fetch_task_screen_names(target)
        tasks_info = create_task_info(tasks, task_screen_names, target.contest_url)
        fixtures.save_tasks_info(self.tasks_info_file, tasks_info)

        return tasks_info
