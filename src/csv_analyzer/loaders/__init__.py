"""Table loaders."""

from .csv_loader import CSVLoader, Table, TableLoadError, EmptySourceError
from .sample_data import create_sample_data, SAMPLE_RECORDS

__all__ = [
    'CSVLoader',
    'Table',
    'TableLoadError',
    'EmptySourceError',
    'create_sample_data',
    'SAMPLE_RECORDS'
]
