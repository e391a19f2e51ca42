# log_summary/log_summary/core/log.py
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List

from dateutil import parser as dateutil_parser

from log_summary.config import DEFAULT_ENCODING
from .errors import FieldCountError, TimestampFormatError

logger = logging.getLogger(__name__)

# First run of characters enclosed in square brackets with no nested brackets.
TIMESTAMP_PATTERN = re.compile(r'\[[^\[\]]*\]')


def parse_timestamp(text: str, line_number: int) -> datetime:
    """Parse the contents of a timestamp field in any common date-time format"""
    try:
        return dateutil_parser.parse(text.strip())
    except (ValueError, OverflowError) as error:
        raise TimestampFormatError(line_number) from error


@dataclass(frozen=True)
class LogEntry:
    """Single parsed log line"""
    timestamp: datetime
    event_type: str
    message: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', self.event_type.upper())
        object.__setattr__(self, 'message', self.message.strip())

    def __str__(self) -> str:
        return f"[{self.timestamp}] [{self.event_type}] [{self.message}]"

    @classmethod
    def from_line(cls, line: str, line_number: int) -> 'LogEntry':
        """Parse a log line of the form `[TIMESTAMP] EVENT_TYPE MESSAGE`

        Args:
            line: Raw line, with or without its trailing newline
            line_number: 1-based position of the line, used in error messages

        Raises:
            TimestampFormatError: If the line has no bracketed timestamp or
                the timestamp cannot be parsed
            FieldCountError: If the event type or message is missing
        """
        line = line.rstrip('\r\n')

        match = TIMESTAMP_PATTERN.search(line)
        if match is None:
            raise TimestampFormatError(line_number)

        timestamp = parse_timestamp(match.group(0)[1:-1], line_number)

        parts = line[match.end() + 1:].split(' ', 1)
        if len(parts) != 2:
            raise FieldCountError(line_number)

        return cls(timestamp=timestamp, event_type=parts[0], message=parts[1])


class LogReader:
    """Reads a whole log into memory, stopping at the first malformed line"""

    @staticmethod
    def parse_lines(lines: Iterable[str]) -> List[LogEntry]:
        entries: List[LogEntry] = []
        for line in lines:
            entries.append(LogEntry.from_line(line, len(entries) + 1))
        return entries

    @staticmethod
    def read_log(file_path: Path, encoding: str = DEFAULT_ENCODING) -> List[LogEntry]:
        logger.debug("Reading log file %s", file_path)
        with open(file_path, 'r', encoding=encoding) as f:
            entries = LogReader.parse_lines(f)
        logger.debug("Parsed %d entries from %s", len(entries), file_path)
        return entries
