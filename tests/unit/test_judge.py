"""Unit tests for the local judge."""

from unittest.mock import MagicMock

import pytest

from atcoder_tester.domain.exceptions import OutputDecodeError, ProcessSpawnError
from atcoder_tester.domain.models import (
    Command,
    Diff,
    ProcessResult,
    TestCase,
    TestCaseFile,
    Verdict,
)
from atcoder_tester.services.judge import LocalJudge, judge, outputs_match


def make_file(output: str, input: str = "input", file: str = "test.txt") -> TestCaseFile:
    return TestCaseFile(test_case=TestCase(input=input, output=output), file=file)


class TestJudge:
    """Test classification of a single run."""

    def test_judge_ac(self):
        result = ProcessResult(returncode=0, stdout=b"Hello World!")
        test_case_file = make_file(" Hello\n World!  \n", input="1\n2\n")

        outcome = judge(result, test_case_file)

        assert outcome.verdict is Verdict.AC
        assert outcome.diff is None

    def test_judge_ac_even_with_failing_exit_status(self):
        result = ProcessResult(returncode=1, stdout=b"42\n", stderr=b"warning")

        assert judge(result, make_file("42")).verdict is Verdict.AC

    def test_judge_wa(self):
        result = ProcessResult(returncode=0, stdout=b"e")

        outcome = judge(result, make_file("expected"))

        assert outcome.verdict is Verdict.WA
        assert outcome.diff == Diff(
            input="input", expected="expected", actual="e\n\n", file="test.txt"
        )

    def test_judge_wa_includes_stderr(self):
        result = ProcessResult(returncode=0, stdout=b"e", stderr=b"debug")

        outcome = judge(result, make_file("expected"))

        assert outcome.diff.actual == "e\n\ndebug"

    def test_judge_re(self):
        result = ProcessResult(returncode=1, stdout=b"e", stderr=b"error")

        outcome = judge(result, make_file("expected"))

        assert outcome.verdict is Verdict.RE
        assert outcome.diff == Diff(
            input="input", expected="expected", actual="e\n\nerror", file="test.txt"
        )

    def test_judge_tle(self):
        result = ProcessResult(returncode=-9, stdout=b"expected", timed_out=True)

        outcome = judge(result, make_file("expected"))

        assert outcome.verdict is Verdict.TLE
        assert outcome.diff.actual == "expected\n\n"

    def test_judge_invalid_utf8(self):
        result = ProcessResult(returncode=0, stdout=b"\xff\xfe")

        with pytest.raises(OutputDecodeError):
            judge(result, make_file("expected"))

    @pytest.mark.parametrize(
        "expected, actual, match",
        [
            ("1 2\n3\n", "1\n2 3", True),
            ("1 2\r\n", "1 2\n", True),
            ("", "\n\n", True),
            ("1 2", "12", False),
            ("Yes", "yes", False),
        ],
    )
    def test_outputs_match(self, expected, actual, match):
        assert outputs_match(expected, actual) is match


class TestLocalJudge:
    """Test the compile and execute loop."""

    @pytest.fixture
    def files(self):
        return [make_file(str(i), input=str(i), file=f"{i}.txt") for i in range(1, 4)]

    def make_runner(self, *results):
        return MagicMock(side_effect=list(results))

    def test_all_accepted(self, files):
        runner = self.make_runner(
            ProcessResult(0, b"1"), ProcessResult(0, b"2"), ProcessResult(0, b"3")
        )
        judge_ = LocalJudge(Command("./a.out"), runner=runner)

        report = judge_.run(files)

        assert report.passed
        assert report.failures == []
        assert report.attempted == 3
        assert runner.call_count == 3

    def test_feeds_input_and_time_limit(self, files):
        runner = self.make_runner(ProcessResult(0, b"1"))
        command = Command("python3", ["main.py"])
        judge_ = LocalJudge(command, time_limit=2.0, runner=runner)

        judge_.verify(files[:1])

        runner.assert_called_once_with(command, "1", 2.0)

    def test_continues_after_wrong_answer(self, files):
        runner = self.make_runner(
            ProcessResult(0, b"x"), ProcessResult(0, b"2"), ProcessResult(0, b"y")
        )
        judge_ = LocalJudge(Command("./a.out"), runner=runner)

        failures = judge_.verify(files)

        assert [failure.verdict for failure in failures] == [Verdict.WA, Verdict.WA]
        assert [failure.diff.file for failure in failures] == ["1.txt", "3.txt"]
        assert runner.call_count == 3

    def test_stops_after_runtime_error(self, files):
        runner = self.make_runner(
            ProcessResult(0, b"1"), ProcessResult(1, b"e", b"error"), ProcessResult(0, b"3")
        )
        judge_ = LocalJudge(Command("./a.out"), runner=runner)

        report = judge_.run(files)

        assert not report.passed
        assert [failure.verdict for failure in report.failures] == [Verdict.RE]
        assert report.failures[0].diff.actual == "e\n\nerror"
        assert report.attempted == 2
        assert report.total == 3
        assert runner.call_count == 2

    def test_stops_after_timeout(self, files):
        runner = self.make_runner(ProcessResult(-9, b"", timed_out=True), ProcessResult(0, b"2"))
        judge_ = LocalJudge(Command("./a.out"), time_limit=1.0, runner=runner)

        failures = judge_.verify(files)

        assert [failure.verdict for failure in failures] == [Verdict.TLE]
        assert runner.call_count == 1

    def test_compile_failure_attempts_nothing(self, files):
        runner = MagicMock()
        compile_runner = MagicMock(return_value=1)
        judge_ = LocalJudge(
            Command("./a.out"),
            Command("g++", ["main.cpp"]),
            runner=runner,
            compile_runner=compile_runner,
        )

        report = judge_.run(files)

        assert not report.compiled
        assert not report.passed
        assert report.failures == []
        assert report.attempted == 0
        runner.assert_not_called()

    def test_compile_success_runs_cases(self, files):
        runner = self.make_runner(
            ProcessResult(0, b"1"), ProcessResult(0, b"2"), ProcessResult(0, b"3")
        )
        compile_command = Command("g++", ["main.cpp"])
        compile_runner = MagicMock(return_value=0)
        judge_ = LocalJudge(
            Command("./a.out"), compile_command, runner=runner, compile_runner=compile_runner
        )

        report = judge_.run(files)

        assert report.passed
        compile_runner.assert_called_once_with(compile_command)

    def test_spawn_error_propagates(self, files):
        runner = MagicMock(side_effect=ProcessSpawnError("No such file"))
        judge_ = LocalJudge(Command("./missing"), runner=runner)

        with pytest.raises(ProcessSpawnError):
            judge_.run(files)

    def test_decode_error_propagates(self, files):
        runner = self.make_runner(ProcessResult(0, b"\xff"))
        judge_ = LocalJudge(Command("./a.out"), runner=runner)

        with pytest.raises(OutputDecodeError):
            judge_.verify(files)

    def test_empty_test_suite_passes(self):
        judge_ = LocalJudge(Command("./a.out"), runner=MagicMock())

        report = judge_.run([])

        assert report.passed
        assert report.total == 0
