"""Domain models package."""

from .identifiers import (
    ContestHome,
    ContestTarget,
    FetchTarget,
    Home,
    Login,
    Task,
    Tasks,
    TaskTarget,
    Url,
)
from .judge import (
    Command,
    Diff,
    JudgeOutcome,
    JudgeReport,
    ProcessResult,
    TestCaseFile,
    Verdict,
)
from .parsing import Credentials, SessionData, TaskInfo, TaskTestCases, TestCase

__all__ = [
    "Command",
    "ContestHome",
    "ContestTarget",
    "Credentials",
    "Diff",
    "FetchTarget",
    "Home",
    "JudgeOutcome",
    "JudgeReport",
    "Login",
    "ProcessResult",
    "SessionData",
    "Task",
    "TaskInfo",
    "TaskTarget",
    "TaskTestCases",
    "Tasks",
    "TestCase",
    "TestCaseFile",
    "Url",
    "Verdict",
]
