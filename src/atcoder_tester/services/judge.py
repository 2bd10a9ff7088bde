"""Local judge: compile once, then run every sample case in order."""

from collections.abc import Callable

from loguru import logger

from atcoder_tester.domain.exceptions import OutputDecodeError
from atcoder_tester.domain.models import (
    Command,
    Diff,
    JudgeOutcome,
    JudgeReport,
    ProcessResult,
    TestCaseFile,
    Verdict,
)
from atcoder_tester.infrastructure import process_runner

Runner = Callable[[Command, str | None, float | None], ProcessResult]
CompileRunner = Callable[[Command], int]


def outputs_match(expected: str, actual: str) -> bool:
    """Compare whitespace-separated tokens, ignoring layout."""
    return expected.split() == actual.split()


def judge(result: ProcessResult, test_case_file: TestCaseFile) -> JudgeOutcome:
    """
    Classify one finished run against its oracle.

    Raises:
        OutputDecodeError: stdout or stderr is not UTF-8
    """
    try:
        stdout = result.stdout.decode("utf-8")
        stderr = result.stderr.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputDecodeError(f"Output of {test_case_file.file} is not valid UTF-8: {e}") from e

    test_case = test_case_file.test_case
    if not result.timed_out and outputs_match(test_case.output, stdout):
        return JudgeOutcome(Verdict.AC)

    diff = Diff(
        input=test_case.input,
        expected=test_case.output,
        actual=f"{stdout}\n\n{stderr}",
        file=test_case_file.file,
    )

    if result.timed_out:
        return JudgeOutcome(Verdict.TLE, diff)
    if result.returncode == 0:
        return JudgeOutcome(Verdict.WA, diff)
    return JudgeOutcome(Verdict.RE, diff)


class LocalJudge:
    """Runs a candidate program against saved sample cases."""

    def __init__(
        self,
        execute: Command,
        compile: Command | None = None,
        *,
        time_limit: float | None = None,
        runner: Runner = process_runner.run,
        compile_runner: CompileRunner = process_runner.run_inherit,
    ):
        """
        Initialize judge.

        Args:
            execute: Command running the candidate program
            compile: Optional command building it first
            time_limit: Seconds allowed per test case, unlimited if None
            runner: Executes one test case
            compile_runner: Executes the compile command, returns exit status
        """
        self.execute = execute
        self.compile_command = compile
        self.time_limit = time_limit
        self.runner = runner
        self.compile_runner = compile_runner

    def compile(self) -> bool:
        if self.compile_command is None:
            return True

        logger.info(f"Compiling: {self.compile_command}")
        status = self.compile_runner(self.compile_command)
        if status != 0:
            logger.warning(f"Compilation failed with exit status {status}")
            return False
        return True

    def verify_one(self, test_case_file: TestCaseFile) -> JudgeOutcome:
        result = self.runner(self.execute, test_case_file.test_case.input, self.time_limit)
        outcome = judge(result, test_case_file)
        logger.debug(f"{test_case_file.file}: {outcome.verdict.value}")
        return outcome

    def verify(self, test_case_files: list[TestCaseFile]) -> list[JudgeOutcome]:
        """
        Run test cases one at a time and collect the failures.

        Every case is attempted after a wrong answer; a runtime error or a
        timeout ends the run.
        """
        failures, _ = self._verify(test_case_files)
        return failures

    def _verify(self, test_case_files: list[TestCaseFile]) -> tuple[list[JudgeOutcome], int]:
        failures = []
        attempted = 0
        for test_case_file in test_case_files:
            outcome = self.verify_one(test_case_file)
            attempted += 1
            if outcome.accepted:
                continue

            failures.append(outcome)
            if outcome.stops_run:
                logger.info(
                    f"Stopping after {outcome.verdict.label} on {test_case_file.file}"
                )
                break
        return failures, attempted

    def run(self, test_case_files: list[TestCaseFile]) -> JudgeReport:
        """Compile, then verify; a failed compile attempts no test case."""
        if not self.compile():
            return JudgeReport(compiled=False)

        failures, attempted = self._verify(test_case_files)
        report = JudgeReport(
            compiled=True,
            total=len(test_case_files),
            attempted=attempted,
            failures=failures,
        )
        logger.info(f"Judged {attempted}/{report.total} test cases, {len(failures)} failed")
        return report
