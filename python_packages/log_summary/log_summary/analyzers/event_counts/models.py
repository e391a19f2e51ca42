# log_summary/log_summary/analyzers/event_counts/models.py
from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict

@dataclass
class EventCountStats:
    """Number of entries seen per event type, in order of first occurrence"""
    counts: DefaultDict[str, int] = field(default_factory=lambda: defaultdict(int))

    def add_event(self, event_type: str) -> None:
        self.counts[event_type] += 1
