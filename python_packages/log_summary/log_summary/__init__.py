# log_summary/log_summary/__init__.py
from .core import (
    FieldCountError,
    LogEntry,
    LogParseError,
    LogReader,
    TimestampFormatError,
)
from .summary import count_event_types, top_message_phrases

__all__ = [
    'LogEntry',
    'LogReader',
    'LogParseError',
    'TimestampFormatError',
    'FieldCountError',
    'count_event_types',
    'top_message_phrases',
]
