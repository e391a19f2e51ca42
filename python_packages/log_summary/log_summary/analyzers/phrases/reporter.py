# log_summary/log_summary/analyzers/phrases/reporter.py
from typing import List, Tuple

from log_summary.config import MESSAGE_PHRASES_HEADER
from log_summary.core import Reporter


class MessagePhraseReporter(Reporter):
    def generate_report(
        self, analysis_result: List[Tuple[str, int]], event_type: str = ""
    ) -> None:
        """Print the most frequent messages for an event type"""
        self.print_text(
            MESSAGE_PHRASES_HEADER.format(event_type=event_type.upper()), style="title"
        )

        for message, count in analysis_result:
            self.print_text(str(count), style="count", end="")
            self.print_text(" occurance(s) of: ", end="")
            self.print_text(f'"{message}"', style="message")
