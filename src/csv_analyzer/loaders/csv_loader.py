"""
CSV Loader Module

Reads delimited text files into an in-memory Table of string fields.
Rows shorter than the header are kept as-is; cells past the end of a
row are treated as blank by every consumer.
"""

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Iterable

from ..utils.logger import get_logger

logger = get_logger('csv_loader')


class TableLoadError(Exception):
    """Raised when a source cannot be read or parsed into a Table."""


class EmptySourceError(TableLoadError):
    """Raised when a source has no records, not even a header."""


@dataclass
class Table:
    """Header plus rows of raw string fields."""
    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)
    source: Optional[str] = None

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def cell(self, row_index: int, col_index: int) -> Optional[str]:
        """Return a raw cell, or None when the row is too short for the column."""
        row = self.rows[row_index]
        if col_index < len(row):
            return row[col_index]
        return None


class CSVLoader:
    """Load delimited text files into Table objects."""

    def __init__(self, delimiter: str = ',', encoding: str = 'utf-8'):
        """
        Initialize loader.

        Args:
            delimiter: Single-character field delimiter
            encoding: Text encoding of the source file
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def load(self, path) -> Table:
        """
        Read a delimited file. The first record is the header.

        Args:
            path: Path to the file

        Returns:
            Table with header and data rows

        Raises:
            TableLoadError: File is missing, unreadable or malformed
            EmptySourceError: File has no records
        """
        path = Path(path)
        logger.info(f"Loading CSV file: {path}")

        try:
            with open(path, 'r', encoding=self.encoding, newline='') as f:
                reader = csv.reader(f, delimiter=self.delimiter)
                records = list(reader)
        except OSError as e:
            raise TableLoadError(f"error opening file: {e}") from e
        except (csv.Error, UnicodeDecodeError) as e:
            raise TableLoadError(f"error reading CSV file: {e}") from e

        table = self.from_records(records, source=str(path))
        logger.info(f"Loaded {table.row_count:,} rows, {table.column_count} columns from {path.name}")
        return table

    @staticmethod
    def from_records(records: Iterable[Sequence[str]], source: Optional[str] = None) -> Table:
        """
        Build a Table from in-memory records, header first.

        Raises:
            EmptySourceError: No records at all
        """
        records = [list(record) for record in records]
        if not records:
            raise EmptySourceError(f"empty csv file: {source}" if source else "empty csv file")

        headers, rows = records[0], records[1:]

        ragged = sum(1 for row in rows if len(row) < len(headers))
        if ragged:
            logger.debug(f"{ragged} rows are shorter than the header; missing cells read as blank")

        return Table(headers=headers, rows=rows, source=source)
