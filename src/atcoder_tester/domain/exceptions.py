"""Exceptions raised by atcoder-tester."""


class AtCoderTesterError(Exception):
    """Base error for everything the CLI reports to the user."""

    pass


class ConfigError(AtCoderTesterError):
    """Missing or invalid configuration."""

    pass


class URLParsingError(AtCoderTesterError, ValueError):
    """URL is neither a contest page nor a task page."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Failed to parse URL: {url}")


class ParsingError(AtCoderTesterError, ValueError):
    """Required element not found in an HTML page."""

    pass


class HTTPClientError(AtCoderTesterError):
    """Error talking to AtCoder."""

    pass


class TransportError(HTTPClientError):
    """Request failed or returned an error status."""

    pass


class ResponseTooLargeError(HTTPClientError):
    """Response body exceeds the configured size limit."""

    pass


class SessionError(AtCoderTesterError):
    """Session file missing or unreadable."""

    pass


class FixtureError(AtCoderTesterError):
    """Test case files missing or unreadable."""

    pass


class TaskMismatchError(AtCoderTesterError):
    """Task titles and screen names cannot be paired."""

    def __init__(self, tasks: list[str], task_screen_names: list[str]):
        self.tasks = tasks
        self.task_screen_names = task_screen_names
        super().__init__(
            f"Found {len(tasks)} tasks but {len(task_screen_names)} screen names: "
            f"{tasks} / {task_screen_names}"
        )


class LoginError(AtCoderTesterError):
    """Login could not be completed."""

    pass


class LoginFailedError(LoginError):
    """Credentials were rejected."""

    def __init__(self, message: str = "Login Failed"):
        super().__init__(message)


class JudgeError(AtCoderTesterError):
    """Verification run could not produce a verdict."""

    pass


class ProcessSpawnError(JudgeError):
    """Program could not be started."""

    pass


class OutputDecodeError(JudgeError):
    """Program output is not valid UTF-8."""

    pass


class TerminalSizeError(AtCoderTesterError):
    """Terminal dimensions are unavailable."""

    def __init__(self, message: str = "Failed to get terminal size"):
        super().__init__(message)
