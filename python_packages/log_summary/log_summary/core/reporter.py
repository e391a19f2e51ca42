from abc import ABC, abstractmethod
from typing import Any, Optional

from rich.console import Console
from rich.theme import Theme

from log_summary.config import REPORT_THEME


class Reporter(ABC):
    """Base class for generating reports

    Output goes to the given console, or to a stdout console when none is
    passed. Either way the report styles are available by name.
    """
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.console.push_theme(Theme(REPORT_THEME))

    def print_text(self, text: str, style: Optional[str] = None, end: str = "\n") -> None:
        """Print log-derived text as-is, without rich markup, highlighting or wrapping"""
        self.console.print(
            text,
            style=style,
            end=end,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    @abstractmethod
    def generate_report(self, analysis_result: Any) -> None:
        """Generate and display the report"""
        pass
