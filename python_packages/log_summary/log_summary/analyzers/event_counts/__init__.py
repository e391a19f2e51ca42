from .analyzer import EventCountAnalyzer
from .collector import EventCountCollector
from .models import EventCountStats
from .reporter import EventCountReporter

__all__ = ['EventCountAnalyzer', 'EventCountCollector', 'EventCountStats', 'EventCountReporter']
