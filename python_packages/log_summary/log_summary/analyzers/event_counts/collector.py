# log_summary/log_summary/analyzers/event_counts/collector.py
from log_summary.core import DataCollector, LogEntry
from .models import EventCountStats

class EventCountCollector(DataCollector):
    def __init__(self):
        self.stats = EventCountStats()

    def is_interested(self, entry: LogEntry) -> bool:
        return True

    def process_entry(self, entry: LogEntry) -> None:
        """Count the entry under its event type"""
        if not self.is_interested(entry):
            return

        self.stats.add_event(entry.event_type)
