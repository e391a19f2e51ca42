# log_summary/log_summary/analyzers/event_counts/reporter.py
from typing import Dict

from log_summary.config import EVENT_COUNTS_HEADER
from log_summary.core import Reporter


class EventCountReporter(Reporter):
    def generate_report(self, analysis_result: Dict[str, int]) -> None:
        """Print one `EVENT_TYPE: count` line per event type"""
        self.print_text(EVENT_COUNTS_HEADER, style="title")

        for event_type, count in analysis_result.items():
            self.print_text(event_type, style="event_type", end="")
            self.print_text(": ", end="")
            self.print_text(str(count), style="count")
