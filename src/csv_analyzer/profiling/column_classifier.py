"""
Column Type Classifier Module

Infers whether each column of a Table is Numeric or Text from a bounded
sample of leading rows. Blank cells carry no information, so a column
whose sampled cells are all blank is classified Numeric.
"""

import math
from enum import Enum
from typing import Any, Dict, Optional

from ..loaders.csv_loader import Table
from ..utils.logger import get_logger

logger = get_logger('column_classifier')

INFINITY_LITERALS = ('inf', 'infinity')


class ColumnType(Enum):
    """Column data type classifications."""
    NUMERIC = "Numeric"
    TEXT = "Text"


class ColumnClassifier:
    """Classifies columns by attempting to parse a sample of their cells."""

    # Rows inspected per column; later rows are not checked
    DEFAULT_SAMPLE_ROWS = 10

    def __init__(self, sample_rows: int = DEFAULT_SAMPLE_ROWS):
        """
        Initialize classifier.

        Args:
            sample_rows: Number of leading rows inspected per column
        """
        if sample_rows < 1:
            raise ValueError(f"sample_rows must be at least 1, got {sample_rows}")
        self.sample_rows = sample_rows

    @staticmethod
    def is_blank(value: Any) -> bool:
        return value is None or str(value).strip() == ''

    @staticmethod
    def parse_number(value: Any) -> Optional[float]:
        """
        Parse a raw cell as a float.

        Only plain ASCII decimal notation is accepted: digit-group
        underscores, non-ASCII digits and values too large for a double
        (e.g. 1e400) are unparsable. Literal inf/infinity/nan are kept.

        Args:
            value: Raw cell text

        Returns:
            Parsed value, or None for blank or unparsable cells
        """
        if ColumnClassifier.is_blank(value):
            return None

        text = str(value).strip()
        if not text.isascii() or '_' in text:
            return None

        try:
            number = float(text)
        except ValueError:
            return None

        if math.isinf(number) and text.lstrip('+-').lower() not in INFINITY_LITERALS:
            return None
        return number

    @staticmethod
    def is_numeric(value: Any) -> bool:
        """Check if a non-blank value parses as a number."""
        return ColumnClassifier.parse_number(value) is not None

    def classify_column(self, table: Table, col_index: int) -> bool:
        """
        Classify a single column.

        Args:
            table: Table to inspect
            col_index: Column index

        Returns:
            True if every non-blank sampled cell parses as a number
        """
        check_rows = min(self.sample_rows, table.row_count)

        for row_index in range(check_rows):
            value = table.cell(row_index, col_index)
            if self.is_blank(value):
                continue
            if not self.is_numeric(value):
                logger.debug(
                    f"Column {col_index} is text: row {row_index} value {value!r} is not numeric"
                )
                return False

        return True

    def classify_columns(self, table: Table) -> Dict[int, bool]:
        """
        Classify every column of the table.

        Args:
            table: Table to inspect

        Returns:
            Dictionary mapping column index to numeric flag, in header order.
            Empty when the table has no data rows.
        """
        if table.row_count == 0:
            logger.info("Table has no data rows, skipping type inference")
            return {}

        classifications = {
            col_index: self.classify_column(table, col_index)
            for col_index in range(table.column_count)
        }

        numeric_count = sum(1 for is_numeric in classifications.values() if is_numeric)
        logger.info(
            f"Classified {len(classifications)} columns "
            f"({numeric_count} numeric) from first {min(self.sample_rows, table.row_count)} rows"
        )
        return classifications

    @staticmethod
    def column_type(classifications: Dict[int, bool], col_index: int) -> ColumnType:
        """Map a classification entry to a ColumnType; unclassified columns are Text."""
        if classifications.get(col_index, False):
            return ColumnType.NUMERIC
        return ColumnType.TEXT
