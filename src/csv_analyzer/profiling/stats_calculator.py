"""
Statistics Calculator Module

Extracts clean numeric values from classified columns and computes the
descriptive statistics reported for each of them: count, sum, mean,
median, sample standard deviation, min and max.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Sequence, Any

import numpy as np

from .column_classifier import ColumnClassifier
from ..loaders.csv_loader import Table
from ..utils.logger import get_logger

logger = get_logger('stats_calculator')


@dataclass(frozen=True)
class ColumnStats:
    """Statistics for one numeric column."""
    name: str
    count: int
    sum: float
    mean: float
    median: float
    std_dev: Optional[float]  # None for single-value columns
    min: float
    max: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _as_array(values: Sequence[float]) -> np.ndarray:
    if len(values) == 0:
        raise ValueError("statistics require at least one value")
    return np.asarray(values, dtype=float)


class StatsCalculator:
    """Computes per-column statistics for the numeric columns of a Table."""

    @staticmethod
    def total(values: Sequence[float]) -> float:
        return float(np.sum(_as_array(values)))

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        return StatsCalculator.total(values) / len(values)

    @staticmethod
    def median(values: Sequence[float]) -> float:
        """
        Middle value of the sorted values; mean of the two middle values
        when the count is even. The input sequence is left untouched.
        """
        ordered = np.sort(_as_array(values))
        n = len(ordered)
        if n % 2 == 0:
            return float((ordered[n // 2 - 1] + ordered[n // 2]) / 2)
        return float(ordered[n // 2])

    @staticmethod
    def std_dev(values: Sequence[float], mean: Optional[float] = None) -> Optional[float]:
        """
        Sample standard deviation (n - 1 denominator).

        Args:
            values: Non-empty value set
            mean: Precomputed mean, computed here when omitted

        Returns:
            Standard deviation, or None when there is a single value
        """
        data = _as_array(values)
        if len(data) == 1:
            return None

        if mean is None:
            mean = StatsCalculator.mean(values)

        variance = float(np.sum((data - mean) ** 2)) / (len(data) - 1)
        return float(np.sqrt(variance))

    @staticmethod
    def minimum(values: Sequence[float]) -> float:
        return float(np.min(_as_array(values)))

    @staticmethod
    def maximum(values: Sequence[float]) -> float:
        return float(np.max(_as_array(values)))

    @staticmethod
    def extract_numeric_values(table: Table, col_index: int) -> List[float]:
        """
        Collect every parseable value in a column, in row order.

        Blank cells, unparsable cells and rows too short for the column are
        skipped. All rows are scanned, not just the classification sample.
        """
        values = []
        for row_index in range(table.row_count):
            number = ColumnClassifier.parse_number(table.cell(row_index, col_index))
            if number is not None:
                values.append(number)
        return values

    @staticmethod
    def build_column_stats(name: str, values: Sequence[float]) -> ColumnStats:
        """
        Assemble the statistics record for one column.

        Args:
            name: Column header
            values: Non-empty value set

        Returns:
            ColumnStats record
        """
        total = StatsCalculator.total(values)
        mean = total / len(values)

        return ColumnStats(
            name=name,
            count=len(values),
            sum=total,
            mean=mean,
            median=StatsCalculator.median(values),
            std_dev=StatsCalculator.std_dev(values, mean),
            min=StatsCalculator.minimum(values),
            max=StatsCalculator.maximum(values)
        )

    @staticmethod
    def calculate_stats(table: Table, classifications: Dict[int, bool]) -> List[ColumnStats]:
        """
        Compute statistics for every numeric column with at least one value.

        Columns are visited in header order. Text columns, indices outside
        the header and columns with no parseable values are left out.

        Args:
            table: Table to analyze
            classifications: Column index -> numeric flag from ColumnClassifier

        Returns:
            List of ColumnStats, one per qualifying column
        """
        stats = []

        for col_index in range(table.column_count):
            if not classifications.get(col_index, False):
                continue

            name = table.headers[col_index]
            values = StatsCalculator.extract_numeric_values(table, col_index)
            if not values:
                logger.debug(f"Column {name!r} has no numeric values, skipping statistics")
                continue

            stats.append(StatsCalculator.build_column_stats(name, values))

        logger.debug(f"Computed statistics for {len(stats)} columns")
        return stats
