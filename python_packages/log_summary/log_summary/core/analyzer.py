# log_summary/log_summary/core/analyzer.py
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

StatsT = TypeVar('StatsT')
ResultT = TypeVar('ResultT')


class Analyzer(ABC, Generic[StatsT, ResultT]):
    """Turns the stats gathered by a collector into a reportable result"""
    @abstractmethod
    def analyze(self, stats: StatsT) -> ResultT:
        pass
