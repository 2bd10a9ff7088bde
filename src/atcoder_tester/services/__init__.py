from atcoder_tester.services.diff_renderer import DiffRenderer
from atcoder_tester.services.fetch import FetchService, create_task_info
from atcoder_tester.services.judge import LocalJudge, judge
from atcoder_tester.services.login import LoginService

__all__ = [
    "DiffRenderer",
    "FetchService",
    "LocalJudge",
    "LoginService",
    "create_task_info",
    "judge",
]
