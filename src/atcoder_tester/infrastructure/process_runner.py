"""Subprocess runner for compile and execute commands."""

import os
import signal
import subprocess

from loguru import logger

from atcoder_tester.domain.exceptions import ProcessSpawnError
from atcoder_tester.domain.models import Command, ProcessResult

# Runs get their own process group; a deadline kills the whole group.
_OWN_PROCESS_GROUP = os.name == "posix"


def _popen(command: Command, **kwargs) -> subprocess.Popen:
    try:
        return subprocess.Popen(command.argv, cwd=command.working_dir, **kwargs)
    except OSError as e:
        logger.error(f"Failed to start `{command}`: {e}")
        raise ProcessSpawnError(f"Failed to start `{command}`: {e}") from e


def _kill(proc: subprocess.Popen) -> None:
    """Kill the process and, on POSIX, everything in its process group."""
    if not _OWN_PROCESS_GROUP:
        proc.kill()
        return

    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        return
    except PermissionError:
        proc.kill()


def run(command: Command, input: str | None = None, timeout: float | None = None) -> ProcessResult:
    """
    Run command to completion, feeding ``input`` to stdin and capturing output.

    When ``timeout`` elapses the process group is killed and the result is
    marked as timed out; whatever it wrote so far is kept.
    """
    logger.debug(f"Running `{command}`")
    proc = _popen(
        command,
        stdin=subprocess.PIPE if input is not None else subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        start_new_session=_OWN_PROCESS_GROUP,
    )
    input_bytes = input.encode("utf-8") if input is not None else None

    try:
        stdout, stderr = proc.communicate(input=input_bytes, timeout=timeout)
    except subprocess.TimeoutExpired:
        logger.debug(f"`{command}` exceeded {timeout}s, killing")
        _kill(proc)
        stdout, stderr = proc.communicate()
        return ProcessResult(proc.returncode, stdout, stderr, timed_out=True)

    return ProcessResult(proc.returncode, stdout, stderr)


def run_inherit(command: Command) -> int:
    """Run command with the terminal's stdout and stderr, return exit status."""
    logger.debug(f"Running `{command}`")
    proc = _popen(command)
    return proc.wait()
