"""
Tests for value extraction and statistics.

Covers:
- Statistical functions (total, mean, median, std_dev, minimum, maximum)
- extract_numeric_values
- calculate_stats ordering, omission rules and idempotence
"""

import math

import pytest

from csv_analyzer.profiling.column_classifier import ColumnClassifier
from csv_analyzer.profiling.stats_calculator import StatsCalculator, ColumnStats


class TestStatisticalFunctions:
    """Test the pure statistical helpers"""

    def test_sum_mean(self):
        values = [10, 20, 30]
        assert StatsCalculator.total(values) == 60
        assert StatsCalculator.mean(values) == 20

    def test_median_even(self):
        assert StatsCalculator.median([1, 2, 3, 4]) == 2.5

    def test_median_odd(self):
        assert StatsCalculator.median([1, 2, 3]) == 2

    def test_median_unsorted_input_is_not_mutated(self):
        values = [9.0, 1.0, 5.0, 3.0]
        assert StatsCalculator.median(values) == 4.0
        assert values == [9.0, 1.0, 5.0, 3.0]

    def test_sample_std_dev(self):
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        assert StatsCalculator.std_dev(values) == pytest.approx(2.138089935, rel=1e-9)

    def test_std_dev_uses_given_mean(self):
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        assert StatsCalculator.std_dev(values, 5.0) == pytest.approx(math.sqrt(32 / 7))

    def test_std_dev_single_value_is_none(self):
        assert StatsCalculator.std_dev([42.0]) is None

    def test_std_dev_constant_values(self):
        assert StatsCalculator.std_dev([3, 3, 3]) == 0.0

    def test_min_max(self):
        values = [5, -3, 10, 0]
        assert StatsCalculator.minimum(values) == -3
        assert StatsCalculator.maximum(values) == 10

    @pytest.mark.parametrize('func', [
        StatsCalculator.total,
        StatsCalculator.mean,
        StatsCalculator.median,
        StatsCalculator.std_dev,
        StatsCalculator.minimum,
        StatsCalculator.maximum,
    ])
    def test_empty_input_raises(self, func):
        with pytest.raises(ValueError):
            func([])


class TestExtractNumericValues:
    """Test value extraction from a full column scan"""

    def test_skips_blank_and_ragged_cells(self, mixed_table):
        assert StatsCalculator.extract_numeric_values(mixed_table, 2) == [10.0, 20.0, 30.0]
        assert StatsCalculator.extract_numeric_values(mixed_table, 4) == [5.0, 7.0]

    def test_blank_only_column_is_empty(self, mixed_table):
        assert StatsCalculator.extract_numeric_values(mixed_table, 3) == []

    def test_scans_beyond_sample_and_skips_unparsable(self, make_table):
        rows = [[str(i)] for i in range(12)] + [['n/a'], ['100']]
        table = make_table(['x'], rows)
        values = StatsCalculator.extract_numeric_values(table, 0)
        assert values == [float(i) for i in range(12)] + [100.0]
        assert len(values) <= table.row_count

    def test_overflow_cell_is_skipped(self, make_table):
        rows = [['1']] * 10 + [['1e400'], ['3']]
        table = make_table(['x'], rows)
        values = StatsCalculator.extract_numeric_values(table, 0)
        assert values == [1.0] * 10 + [3.0]
        assert all(math.isfinite(v) for v in values)

    def test_preserves_row_order(self, make_table):
        table = make_table(['x'], [['3'], ['1'], ['2']])
        assert StatsCalculator.extract_numeric_values(table, 0) == [3.0, 1.0, 2.0]


class TestCalculateStats:
    """Test statistics record assembly"""

    def _stats(self, table, sample_rows=10):
        classifications = ColumnClassifier(sample_rows).classify_columns(table)
        return StatsCalculator.calculate_stats(table, classifications)

    def test_record_fields(self, make_table):
        table = make_table(['v'], [['10'], ['20'], ['30']])
        stats = self._stats(table)
        assert stats == [ColumnStats(
            name='v', count=3, sum=60.0, mean=20.0, median=20.0,
            std_dev=10.0, min=10.0, max=30.0
        )]

    def test_header_order_and_text_omitted(self, sample_table):
        stats = self._stats(sample_table)
        assert [s.name for s in stats] == ['Price', 'Quantity', 'Revenue', 'Rating']

    def test_sample_quantity_column(self, sample_table):
        quantity = self._stats(sample_table)[1]
        assert quantity.count == 10
        assert quantity.sum == 410
        assert quantity.mean == 41
        assert quantity.median == 35
        assert quantity.min == 8
        assert quantity.max == 100

    def test_sample_price_column(self, sample_table):
        price = self._stats(sample_table)[0]
        assert price.sum == pytest.approx(1688.45)
        assert price.mean == pytest.approx(168.845)

    def test_blank_column_has_no_record(self, mixed_table):
        names = [s.name for s in self._stats(mixed_table)]
        assert 'empty' not in names
        assert names == ['id', 'score', 'tail']

    def test_numeric_column_with_only_late_text(self, make_table):
        rows = [['']] * 10 + [['x'], ['y']]
        table = make_table(['late'], rows)
        assert self._stats(table) == []

    def test_single_value_column(self, make_table):
        table = make_table(['one'], [['7.5'], ['']])
        [stat] = self._stats(table)
        assert stat.count == 1
        assert stat.mean == 7.5
        assert stat.median == 7.5
        assert stat.min == stat.max == 7.5
        assert stat.std_dev is None

    def test_out_of_range_classification_ignored(self, make_table):
        table = make_table(['a'], [['1'], ['2']])
        stats = StatsCalculator.calculate_stats(table, {0: True, 5: True})
        assert [s.name for s in stats] == ['a']

    def test_empty_classification(self, make_table):
        table = make_table(['a'], [])
        assert StatsCalculator.calculate_stats(table, {}) == []

    def test_idempotent(self, sample_table):
        assert self._stats(sample_table) == self._stats(sample_table)

    def test_to_dict(self, make_table):
        table = make_table(['v'], [['1'], ['3']])
        [stat] = self._stats(table)
        assert stat.to_dict() == {
            'name': 'v', 'count': 2, 'sum': 4.0, 'mean': 2.0, 'median': 2.0,
            'std_dev': pytest.approx(math.sqrt(2)), 'min': 1.0, 'max': 3.0
        }
