# log_summary/log_summary/analyzers/event_counts/analyzer.py
from typing import Dict
from log_summary.core import Analyzer
from .models import EventCountStats

class EventCountAnalyzer(Analyzer[EventCountStats, Dict[str, int]]):
    def analyze(self, stats: EventCountStats) -> Dict[str, int]:
        """Return event type counts as a plain dictionary

        Keys keep the order in which each event type first appeared.
        """
        return dict(stats.counts)
