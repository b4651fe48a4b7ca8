"""Column type inference and statistics."""

from .column_classifier import ColumnClassifier, ColumnType
from .stats_calculator import StatsCalculator, ColumnStats
from .profiler import TableProfiler

__all__ = [
    'ColumnClassifier',
    'ColumnType',
    'StatsCalculator',
    'ColumnStats',
    'TableProfiler'
]
