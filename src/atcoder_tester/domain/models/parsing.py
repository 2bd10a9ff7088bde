"""Value objects for parsed data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .identifiers import ContestHome, Url


@dataclass(frozen=True)
class TestCase:
    """One sample case: ``output`` is the oracle for ``input``."""

    __test__ = False

    input: str
    output: str


@dataclass
class TaskTestCases:
    """Sample cases of one task, in page order."""

    __test__ = False

    task: str
    test_cases: list[TestCase] = field(default_factory=list)


@dataclass(frozen=True)
class TaskInfo:
    """Links a task title to its screen name."""

    task: str
    task_screen_name: str
    contest_url: Url[ContestHome]

    def to_dict(self) -> dict[str, Any]:
        return {
            "task": self.task,
            "task_screen_name": self.task_screen_name,
            "contest_url": self.contest_url.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TaskInfo:
        return cls(
            task=data["task"],
            task_screen_name=data["task_screen_name"],
            contest_url=Url(data["contest_url"]),
        )


@dataclass
class SessionData:
    """Cookies and CSRF token of a logged-in session."""

    cookies: list[dict[str, Any]]
    csrf_token: str

    def to_dict(self) -> dict[str, Any]:
        return {"cookies": self.cookies, "csrf_token": self.csrf_token}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionData:
        return cls(
            cookies=list(data.get("cookies", [])),
            csrf_token=data["csrf_token"],
        )


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"
