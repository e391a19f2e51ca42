# log_summary/log_summary/summary.py
"""Library entry points for summarizing parsed log entries.

Both functions are pure: they take the parsed entries and return plain
Python values, leaving presentation to the reporters.
"""
from typing import Dict, Iterable, List, Tuple

from .analyzers.event_counts import EventCountAnalyzer, EventCountCollector
from .analyzers.phrases import MessagePhraseAnalyzer, MessagePhraseCollector
from .config import TOP_PHRASE_LIMIT
from .core import LogEntry


def count_event_types(entries: Iterable[LogEntry]) -> Dict[str, int]:
    """Count entries per (uppercased) event type"""
    collector = EventCountCollector()
    collector.process_entries(entries)

    analyzer = EventCountAnalyzer()
    return analyzer.analyze(collector.stats)


def top_message_phrases(
    entries: Iterable[LogEntry], event_type: str, limit: int = TOP_PHRASE_LIMIT
) -> List[Tuple[str, int]]:
    """Most frequent messages for an event type, compared case-insensitively

    Returns an empty list when no entry has the event type.

    Raises:
        ValueError: If limit is not positive
    """
    analyzer = MessagePhraseAnalyzer(limit)

    collector = MessagePhraseCollector(event_type)
    collector.process_entries(entries)

    return analyzer.analyze(collector.stats)
