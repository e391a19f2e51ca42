# log_summary/log_summary/core/errors.py


class LogParseError(ValueError):
    """Base class for errors raised while parsing a log line"""

    def __init__(self, message: str, line_number: int):
        super().__init__(message)
        self.line_number = line_number


class TimestampFormatError(LogParseError):
    """Line has no bracketed timestamp, or its contents are not a date-time"""

    def __init__(self, line_number: int):
        super().__init__(
            f"Line {line_number} in log data has a timestamp that cannot be parsed.",
            line_number,
        )


class FieldCountError(LogParseError):
    """Line does not carry an event type and a message after the timestamp"""

    def __init__(self, line_number: int):
        super().__init__(
            f"Line {line_number} in log data does not have three entries "
            "formatted as [TIMESTAMP] EVENT_TYPE MESSAGE.",
            line_number,
        )
