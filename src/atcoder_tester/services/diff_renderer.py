"""Terminal rendering of failed test cases."""

import os
import sys

from atcoder_tester.domain.exceptions import TerminalSizeError
from atcoder_tester.domain.models import Diff

ELLIPSIS = "..."


def terminal_size() -> tuple[int, int]:
    """Return ``(columns, lines)`` of the terminal attached to stdout."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError) as e:
        raise TerminalSizeError() from e
    return size.columns, size.lines


def make_title(title: str, fill: str, width: int) -> str:
    """Center ``title`` in ``width`` columns; odd padding goes to the right."""
    padding = max(width - len(title), 0)
    left = padding // 2
    return f"{fill * left}{title}{fill * (padding - left)}"


def strip_lines(text: str) -> list[str]:
    r"""Split on ``\n`` only and drop trailing whitespace, ``\r`` included."""
    return [line.rstrip() for line in text.rstrip().split("\n")]


def trim_height(lines: list[str], max_height: int) -> list[str]:
    if len(lines) <= max_height:
        return lines

    half = max(max_height - 1, 0) // 2
    tail = lines[len(lines) - half :] if half else []
    return [*lines[:half], ELLIPSIS, *tail]


def trim_width(line: str, max_width: int) -> str:
    line = line.rstrip()
    if len(line) <= max_width:
        return line

    budget = max(max_width - len(ELLIPSIS), 0)
    left = (budget + 1) // 2
    right = budget - left
    tail = line[len(line) - right :] if right else ""
    return f"{line[:left]}{ELLIPSIS}{tail}"


def trim(text: str, max_width: int, max_height: int) -> str:
    """Fit text into the terminal by eliding middle lines and middle columns."""
    lines = trim_height(strip_lines(text), max_height)
    return "\n".join(trim_width(line, max_width) for line in lines)


class DiffRenderer:
    """Formats a failing case as titled Input / Expected / Actual sections."""

    SECTIONS = ("Input", "Expected", "Actual")

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, diff: Diff, width: int, height: int) -> str:
        lines = [make_title(diff.file, "=", width)]

        contents = (diff.input, diff.expected, diff.actual)
        for title, content in zip(self.SECTIONS, contents):
            lines.append(make_title(title, "-", width))
            if self.verbose:
                lines.append("\n".join(strip_lines(content)))
            else:
                lines.append(trim(content, width, height))

        return "\n".join(lines)

    def render_all(self, diffs: list[Diff], size: tuple[int, int] | None = None) -> list[str]:
        """
        Render every diff for the current terminal.

        Raises:
            TerminalSizeError: ``size`` not given and the terminal size is unknown
        """
        width, height = size or terminal_size()
        return [self.render(diff, width, height) for diff in diffs]
