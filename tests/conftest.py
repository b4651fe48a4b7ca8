"""Shared fixtures for the CSV analyzer test suite."""

import logging

import pytest

from csv_analyzer.loaders.csv_loader import CSVLoader
from csv_analyzer.loaders.sample_data import SAMPLE_RECORDS


@pytest.fixture(autouse=True)
def isolate_logging():
    """Drop handlers a test attaches (e.g. via the CLI's setup_logging) so they don't leak."""
    loggers = [logging.getLogger(), logging.getLogger('csv_analyzer')]
    saved = [(lg, lg.level, list(lg.handlers), lg.propagate) for lg in loggers]
    yield
    for lg, level, handlers, propagate in saved:
        for handler in lg.handlers:
            if handler not in handlers:
                handler.close()
        lg.setLevel(level)
        lg.handlers = handlers
        lg.propagate = propagate


@pytest.fixture
def make_table():
    """Build a Table from a header and rows."""
    def _make(headers, rows, source=None):
        return CSVLoader.from_records([headers] + [list(r) for r in rows], source=source)
    return _make


@pytest.fixture
def sample_table():
    """The ten-product sample dataset."""
    return CSVLoader.from_records(SAMPLE_RECORDS, source='sample_data.csv')


@pytest.fixture
def mixed_table(make_table):
    """Numeric, text, blank-only and ragged columns in one table."""
    return make_table(
        ['id', 'name', 'score', 'empty', 'tail'],
        [
            ['1', 'alpha', '10', '', '5'],
            ['2', 'beta', ' 20 ', '  '],
            ['3', 'gamma', '', ''],
            ['4', 'delta', '30', '', '7'],
        ]
    )
