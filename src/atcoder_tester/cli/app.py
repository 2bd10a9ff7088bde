"""Command line interface: login, fetch-test and test."""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from loguru import logger

from atcoder_tester.config import Settings, load_settings
from atcoder_tester.domain.exceptions import AtCoderTesterError, TerminalSizeError
from atcoder_tester.domain.models import Credentials, JudgeReport
from atcoder_tester.infrastructure import fixtures, session_store
from atcoder_tester.infrastructure.http_client import HTTPClient
from atcoder_tester.infrastructure.parsers import URLParser
from atcoder_tester.services import DiffRenderer, FetchService, LocalJudge, LoginService

app = typer.Typer(
    help="Fetch AtCoder sample cases and test solutions against them.",
    no_args_is_help=True,
    add_completion=False,
)


def setup_logging(debug: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "WARNING")


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report library errors on stderr and exit with status 1."""
    try:
        yield
    except AtCoderTesterError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e


def http_client(settings: Settings, cookies: list | None = None) -> HTTPClient:
    options = {
        "timeout": settings.http.timeout,
        "max_response_bytes": settings.http.max_response_bytes,
        "impersonate": settings.http.impersonate,
    }
    if cookies is None:
        return HTTPClient(**options)
    return HTTPClient.with_cookies(cookies, **options)


def prompt_credentials(attempt: int) -> Credentials | None:
    if attempt > 1 and not typer.confirm("Retry?", default=False):
        return None

    username = typer.prompt("Username")
    password = typer.prompt("Password", hide_input=True)
    return Credentials(username=username, password=password)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="Path of config.toml")
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug logs")] = False,
) -> None:
    setup_logging(debug)
    with exit_on_error():
        ctx.obj = load_settings(config)


@app.command()
def login(
    ctx: typer.Context,
    check: Annotated[bool, typer.Option("--check", help="Check login status")] = False,
) -> None:
    """Login and save the session."""
    settings: Settings = ctx.obj
    session_file = settings.file.session_data

    with exit_on_error():
        if check:
            session = session_store.load_session(session_file)
            service = LoginService(http_client(settings, session.cookies), session.csrf_token)
            if not service.check(settings.url.homepage_url):
                typer.echo("Not logged in")
                raise typer.Exit(1)
            typer.echo("Logged in")
            return

        service = LoginService(http_client(settings))
        service.fetch_csrf_token(settings.url.homepage_url)
        service.interactive_login(prompt_credentials, settings.url.login_url)
        typer.echo("Login Successful")

        session_store.save_session(session_file, service.session_data())
        typer.echo(f"{session_file} Created")


def fetch_test(
    ctx: typer.Context,
    url: Annotated[
        str,
        typer.Argument(
            help=(
                "URL of a contest page (https://atcoder.jp/contests/<contest>) "
                "or a task page (https://atcoder.jp/contests/<contest>/tasks/<task>)"
            )
        ),
    ],
) -> None:
    """Fetch sample cases."""
    settings: Settings = ctx.obj

    with exit_on_error():
        target = URLParser.parse(url)
        session = session_store.load_session(settings.file.session_data)

        service = FetchService(
            http_client=http_client(settings, session.cookies),
            test_dir=settings.file.test,
            tasks_info_file=settings.file.tasks_info,
        )
        tasks_info = service.fetch(target)

    typer.echo(f"Saved: {[task_info.task for task_info in tasks_info]}")


def print_report(report: JudgeReport, verbose: bool) -> None:
    renderer = DiffRenderer(verbose=verbose)
    try:
        blocks = renderer.render_all(report.diffs)
    except TerminalSizeError as e:
        typer.echo(f"{e}, skipping diffs", err=True)
        blocks = []

    if blocks:
        for outcome, block in zip(report.failures, blocks):
            typer.echo(outcome.verdict.label)
            typer.echo(block)
    else:
        for outcome in report.failures:
            if outcome.diff is not None:
                typer.echo(f"{outcome.diff.file}: {outcome.verdict.label}")

    passed = report.attempted - len(report.failures)
    typer.echo(f"Passed {passed}/{report.total}")


def test(
    ctx: typer.Context,
    language: Annotated[str, typer.Argument(help="Language name in config.toml")],
    task: Annotated[str, typer.Argument(help="Task title, e.g. A")],
    test_cases: Annotated[
        Optional[List[str]],
        typer.Option(
            "--test-cases",
            "-t",
            help='Run only these test cases, e.g. "-t 1 -t 3"; all by default',
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show full diffs")] = False,
) -> None:
    """Test a solution against the saved sample cases."""
    settings: Settings = ctx.obj

    with exit_on_error():
        language_settings = settings.language(language)
        test_case_files = fixtures.load_test_cases(settings.file.test, task, test_cases)

        compile_settings = language_settings.compile
        judge = LocalJudge(
            execute=language_settings.execute.to_command(),
            compile=compile_settings.to_command() if compile_settings else None,
            time_limit=language_settings.deadline,
        )
        report = judge.run(test_case_files)

    if not report.compiled:
        typer.echo("Compilation Failed", err=True)
        raise typer.Exit(1)

    print_report(report, verbose)
    if not report.passed:
        raise typer.Exit(1)

    typer.echo("All test cases passed")
    with exit_on_error():
        tasks_info = fixtures.load_tasks_info(settings.file.tasks_info)
    for task_info in tasks_info:
        if task_info.task == task:
            typer.echo(f"Submit: {URLParser.build_task_url(task_info)}")


app.command("fetch-test")(fetch_test)
app.command("f", hidden=True)(fetch_test)
app.command("test")(test)
app.command("t", hidden=True)(test)


def main() -> None:
    app()
