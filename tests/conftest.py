"""Shared fixtures."""

from pathlib import Path

import pytest

from atcoder_tester.infrastructure.html import Html

DATA_DIR = Path(__file__).parent / "data"


def load_html(name: str) -> Html:
    return Html.parse((DATA_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def tasks_print_html() -> Html:
    return load_html("tasks_print.html")


@pytest.fixture
def task_html() -> Html:
    return load_html("task.html")


@pytest.fixture
def tasks_html() -> Html:
    return load_html("tasks.html")


@pytest.fixture
def home_html() -> Html:
    return load_html("home.html")


@pytest.fixture
def home_logged_in_html() -> Html:
    return load_html("home_logged_in.html")
