"""Value objects for page identification."""

from dataclasses import dataclass
from typing import Generic, TypeVar


class Home:
    """AtCoder home page."""


class Login:
    """Login form page."""


class Tasks:
    """Task list table of a contest."""


class Task:
    """Single task page or the tasks print page of a contest."""


class ContestHome:
    """Contest top page."""


P = TypeVar("P")


@dataclass(frozen=True)
class Url(Generic[P]):
    """URL of a page of kind ``P``.

    The type parameter is only a marker, so ``Url[Tasks]`` and ``Url[Task]``
    share one runtime representation while staying distinct for type checkers.
    """

    value: str

    def __str__(self) -> str:
        """String representation."""
        return self.value


@dataclass(frozen=True)
class ContestTarget:
    """Fetch every task of a contest at once."""

    contest_url: Url[ContestHome]
    tasks_print_url: Url[Task]
    tasks_url: Url[Tasks]

    @property
    def fetch_url(self) -> Url[Task]:
        return self.tasks_print_url

    def __str__(self) -> str:
        """String representation."""
        return f"contest {self.contest_url}"


@dataclass(frozen=True)
class TaskTarget:
    """Fetch a single task."""

    task_url: Url[Task]
    contest_url: Url[ContestHome]
    task_screen_name: str

    @property
    def fetch_url(self) -> Url[Task]:
        return self.task_url

    def __str__(self) -> str:
        """String representation."""
        return f"task {self.task_screen_name}"


FetchTarget = ContestTarget | TaskTarget
