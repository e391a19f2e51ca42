# log_summary/log_summary/analyzers/phrases/collector.py
from log_summary.core import DataCollector, LogEntry
from .models import MessagePhraseStats

class MessagePhraseCollector(DataCollector):
    def __init__(self, event_type: str):
        self.stats = MessagePhraseStats(event_type=event_type.upper())

    def is_interested(self, entry: LogEntry) -> bool:
        """Check if the entry has the requested event type, ignoring case"""
        return entry.event_type == self.stats.event_type

    def process_entry(self, entry: LogEntry) -> None:
        if not self.is_interested(entry):
            return

        self.stats.add_message(entry.message)
