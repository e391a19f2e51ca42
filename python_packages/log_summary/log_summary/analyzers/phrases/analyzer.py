# log_summary/log_summary/analyzers/phrases/analyzer.py
from typing import List, Tuple
from log_summary.config import TOP_PHRASE_LIMIT
from log_summary.core import Analyzer
from .models import MessagePhraseStats

class MessagePhraseAnalyzer(Analyzer[MessagePhraseStats, List[Tuple[str, int]]]):
    def __init__(self, limit: int = TOP_PHRASE_LIMIT):
        if limit <= 0:
            raise ValueError(f"Phrase limit must be positive, got {limit}")
        self.limit = limit

    def analyze(self, stats: MessagePhraseStats) -> List[Tuple[str, int]]:
        """Rank messages by frequency

        Returns:
            List[Tuple[str, int]]: Up to `limit` (message, count) pairs, most
                frequent first. Ties keep the order the messages were first seen.
        """
        ranked = sorted(
            stats.message_counts.items(),
            key=lambda item: item[1],
            reverse=True
        )
        return ranked[:self.limit]
