import io
from datetime import datetime

import pytest
from rich.console import Console

from log_summary.core import LogEntry


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


@pytest.fixture
def make_entry():
    def _make_entry(event_type: str, message: str) -> LogEntry:
        return LogEntry(
            timestamp=datetime(2024, 1, 1, 10, 0, 0),
            event_type=event_type,
            message=message,
        )
    return _make_entry


@pytest.fixture
def sample_log(tmp_path):
    path = tmp_path / "sample.log"
    path.write_text(
        "[2024-01-01 10:00:00] INFO Starting up\n"
        "[2024-01-01 10:00:05] ERROR disk full\n"
        "[2024-01-01 10:00:06] error disk full\n",
        encoding="utf-8",
    )
    return path
