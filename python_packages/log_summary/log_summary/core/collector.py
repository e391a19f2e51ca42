# log_summary/log_summary/core/collector.py
from abc import ABC, abstractmethod
from typing import Iterable

from .log import LogEntry


class DataCollector(ABC):
    """Accumulates stats from parsed log entries, one entry at a time

    Subclasses keep their stats on `self.stats` and skip entries for which
    `is_interested` is false.
    """
    @abstractmethod
    def is_interested(self, entry: LogEntry) -> bool:
        pass

    @abstractmethod
    def process_entry(self, entry: LogEntry) -> None:
        pass

    def process_entries(self, entries: Iterable[LogEntry]) -> None:
        for entry in entries:
            self.process_entry(entry)
