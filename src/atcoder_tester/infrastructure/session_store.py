"""Persistence of login sessions."""

import json
from pathlib import Path

from loguru import logger

from atcoder_tester.domain.exceptions import SessionError
from atcoder_tester.domain.models import SessionData


def save_session(path: Path, session_data: SessionData) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(session_data.to_dict(), indent=2) + "\n", encoding="utf-8")
    logger.info(f"Saved session to {path}")


def load_session(path: Path) -> SessionData:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return SessionData.from_dict(data)
    except FileNotFoundError as e:
        raise SessionError(f"Session file not found: {path}. Run `login` first") from e
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise SessionError(f"Invalid session file {path}: {e}") from e
