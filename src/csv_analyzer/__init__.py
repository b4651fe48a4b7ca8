"""
CSV Analyzer - Column Type Inference and Descriptive Statistics

Loads delimited text files, classifies each column as Numeric or Text
from a bounded row sample, and reports count, sum, mean, median, sample
standard deviation, min and max for the numeric columns.
"""

__version__ = '1.0.0'
__author__ = 'Your Team'

from .loaders import CSVLoader, Table, TableLoadError, EmptySourceError
from .profiling import ColumnClassifier, ColumnType, StatsCalculator, ColumnStats, TableProfiler
from .reporting import ReportGenerator
from .utils import ConfigLoader, setup_logging

__all__ = [
    'CSVLoader',
    'Table',
    'TableLoadError',
    'EmptySourceError',
    'ColumnClassifier',
    'ColumnType',
    'StatsCalculator',
    'ColumnStats',
    'TableProfiler',
    'ReportGenerator',
    'ConfigLoader',
    'setup_logging',
]
