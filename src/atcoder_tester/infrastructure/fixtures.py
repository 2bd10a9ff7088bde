"""On-disk layout of fetched sample cases.

Sample cases live at ``<test_dir>/<task>/in/<n>.txt`` and
``<test_dir>/<task>/out/<n>.txt`` numbered from 1 in page order. The fetch
command writes this layout and the test command reads it back.
"""

import json
from pathlib import Path

from loguru import logger

from atcoder_tester.domain.exceptions import FixtureError
from atcoder_tester.domain.models import TaskInfo, TaskTestCases, TestCase, TestCaseFile


class TaskTestPath:
    """Paths of one task's fixture files."""

    def __init__(self, test_dir: Path, task: str):
        self.path = Path(test_dir) / task

    @property
    def input_dir(self) -> Path:
        return self.path / "in"

    @property
    def output_dir(self) -> Path:
        return self.path / "out"

    def input_file(self, file: str) -> Path:
        return self.input_dir / file

    def output_file(self, file: str) -> Path:
        return self.output_dir / file

    def list_files(self) -> list[str]:
        """List input file names, ``2.txt`` before ``10.txt``."""
        try:
            entries = list(self.input_dir.iterdir())
        except OSError as e:
            raise FixtureError(f"Cannot read test cases in {self.input_dir}: {e}") from e

        files = [entry.name for entry in entries if entry.is_file()]
        return sorted(files, key=_file_sort_key)


def _file_sort_key(file: str) -> tuple[int, int, str]:
    stem = Path(file).stem
    if stem.isdigit():
        return (0, int(stem), file)
    return (1, 0, file)


def normalize_test_case_name(name: str) -> str:
    """``"1"`` and ``"1.txt"`` both name the first test case."""
    return name if name.endswith(".txt") else f"{name}.txt"


def save_test_suite(test_suite: list[TaskTestCases], test_dir: Path) -> None:
    for task_test_cases in test_suite:
        task_path = TaskTestPath(test_dir, task_test_cases.task)
        task_path.input_dir.mkdir(parents=True, exist_ok=True)
        task_path.output_dir.mkdir(parents=True, exist_ok=True)

        for i, test_case in enumerate(task_test_cases.test_cases, start=1):
            file = f"{i}.txt"
            task_path.input_file(file).write_text(test_case.input, encoding="utf-8", newline="")
            task_path.output_file(file).write_text(test_case.output, encoding="utf-8", newline="")

        logger.debug(
            f"Saved {len(task_test_cases.test_cases)} test cases to {task_path.path}"
        )


def load_test_cases(
    test_dir: Path,
    task: str,
    test_case_filter: list[str] | None = None,
) -> list[TestCaseFile]:
    """
    Load the test cases of a task in ascending file order.

    Args:
        test_dir: Root directory of all fixtures
        task: Task title, e.g. "A"
        test_case_filter: File names to keep; every case is loaded if omitted

    Raises:
        FixtureError: Task directory or a requested file is missing
    """
    task_path = TaskTestPath(test_dir, task)
    files = task_path.list_files()

    if test_case_filter:
        wanted = [normalize_test_case_name(name) for name in test_case_filter]
        missing = [name for name in wanted if name not in files]
        if missing:
            raise FixtureError(f"Test cases not found for task {task}: {missing}")
        files = [file for file in files if file in wanted]

    test_case_files = []
    for file in files:
        try:
            test_case = TestCase(
                input=task_path.input_file(file).read_bytes().decode("utf-8"),
                output=task_path.output_file(file).read_bytes().decode("utf-8"),
            )
        except (OSError, UnicodeDecodeError) as e:
            raise FixtureError(f"Cannot read test case {file} of task {task}: {e}") from e
        test_case_files.append(TestCaseFile(test_case=test_case, file=file))

    logger.debug(f"Loaded {len(test_case_files)} test cases for task {task}")
    return test_case_files


def save_tasks_info(path: Path, tasks_info: list[TaskInfo]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    contents = json.dumps([info.to_dict() for info in tasks_info], indent=2)
    path.write_text(contents + "\n", encoding="utf-8")


def load_tasks_info(path: Path) -> list[TaskInfo]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return [TaskInfo.from_dict(item) for item in data]
    except FileNotFoundError:
        return []
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise FixtureError(f"Invalid tasks info file {path}: {e}") from e
