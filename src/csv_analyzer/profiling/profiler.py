"""Main table profiling engine."""

from datetime import datetime
from typing import Dict, Any

from .column_classifier import ColumnClassifier, ColumnType
from .stats_calculator import StatsCalculator
from ..loaders.csv_loader import Table
from ..utils.logger import get_logger

logger = get_logger('profiler')


class TableProfiler:
    """Profile tables and generate statistical summaries."""

    def __init__(self, sample_rows: int = ColumnClassifier.DEFAULT_SAMPLE_ROWS):
        """
        Initialize table profiler.

        Args:
            sample_rows: Number of leading rows used for type inference
        """
        self.classifier = ColumnClassifier(sample_rows=sample_rows)

    def profile_table(self, table: Table) -> Dict[str, Any]:
        """
        Generate a profile for a table.

        Args:
            table: Loaded table

        Returns:
            Dictionary with metadata, column types, statistics and summary
        """
        logger.info(f"Starting profile for {table.source or '<in-memory table>'}")
        profile_start = datetime.now()

        classifications = self.classifier.classify_columns(table)

        columns = []
        for col_index, name in enumerate(table.headers):
            column_type = ColumnClassifier.column_type(classifications, col_index)
            columns.append({
                'index': col_index,
                'name': name,
                'type': column_type.value
            })

        statistics = StatsCalculator.calculate_stats(table, classifications)

        numeric_columns = sum(1 for c in columns if c['type'] == ColumnType.NUMERIC.value)
        duration = (datetime.now() - profile_start).total_seconds()

        profile = {
            'metadata': {
                'source': table.source,
                'row_count': table.row_count,
                'column_count': table.column_count,
                'type_sample_rows': self.classifier.sample_rows,
                'profiled_at': profile_start.isoformat(),
                'duration_seconds': round(duration, 3)
            },
            'columns': columns,
            'statistics': statistics,
            'summary': {
                'numeric_columns': numeric_columns,
                'text_columns': len(columns) - numeric_columns,
                'columns_with_statistics': len(statistics)
            }
        }

        logger.info(
            f"Profile complete: {numeric_columns} numeric columns, "
            f"{len(statistics)} with statistics ({duration:.3f}s)"
        )
        return profile
