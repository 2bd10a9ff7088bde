"""Value objects for local judging."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .parsing import TestCase


@dataclass(frozen=True)
class Command:
    """A program with its arguments and optional working directory."""

    command: str
    args: list[str] = field(default_factory=list)
    working_dir: Path | None = None

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]

    def __str__(self) -> str:
        """String representation."""
        return " ".join(self.argv)


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and captured streams of a finished process."""

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out


@dataclass(frozen=True)
class TestCaseFile:
    """A sample case together with the fixture file it was read from."""

    __test__ = False

    test_case: TestCase
    file: str


@dataclass(frozen=True)
class Diff:
    input: str
    expected: str
    actual: str
    file: str


class Verdict(str, Enum):
    AC = "AC"
    WA = "WA"
    RE = "RE"
    TLE = "TLE"

    @property
    def label(self) -> str:
        return {
            Verdict.AC: "Accepted",
            Verdict.WA: "Wrong Answer",
            Verdict.RE: "Runtime Error",
            Verdict.TLE: "Time Limit Exceeded",
        }[self]


@dataclass(frozen=True)
class JudgeOutcome:
    """Verdict of one test case; failures carry the diff to show."""

    verdict: Verdict
    diff: Diff | None = None

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.AC

    @property
    def stops_run(self) -> bool:
        return self.verdict in (Verdict.RE, Verdict.TLE)


@dataclass
class JudgeReport:
    """Result of one verification run."""

    compiled: bool
    total: int = 0
    attempted: int = 0
    failures: list[JudgeOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.compiled and not self.failures

    @property
    def diffs(self) -> list[Diff]:
        return [outcome.diff for outcome in self.failures if outcome.diff is not None]
