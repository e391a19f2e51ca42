# log_summary/log_summary/analyzers/phrases/models.py
from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict

@dataclass
class MessagePhraseStats:
    """Occurrences of each distinct message for one event type"""
    event_type: str
    message_counts: DefaultDict[str, int] = field(
        default_factory=lambda: defaultdict(int)
    )

    def add_message(self, message: str) -> None:
        # The phrase is the whole trimmed message.
        self.message_counts[message] += 1
