# log_summary/log_summary/core/__init__.py
from .errors import FieldCountError, LogParseError, TimestampFormatError
from .log import LogEntry, LogReader
from .collector import DataCollector
from .analyzer import Analyzer
from .reporter import Reporter

__all__ = [
    'LogEntry',
    'LogReader',
    'LogParseError',
    'TimestampFormatError',
    'FieldCountError',
    'DataCollector',
    'Analyzer',
    'Reporter',
]
