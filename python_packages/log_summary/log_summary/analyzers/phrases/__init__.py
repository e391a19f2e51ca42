from .analyzer import MessagePhraseAnalyzer
from .collector import MessagePhraseCollector
from .models import MessagePhraseStats
from .reporter import MessagePhraseReporter

__all__ = [
    'MessagePhraseAnalyzer',
    'MessagePhraseCollector',
    'MessagePhraseStats',
    'MessagePhraseReporter'
]
