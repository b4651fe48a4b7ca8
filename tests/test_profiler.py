"""Tests for TableProfiler."""

from csv_analyzer.profiling.profiler import TableProfiler


class TestTableProfiler:
    """Test profile assembly"""

    def test_profile_structure(self, sample_table):
        profile = TableProfiler().profile_table(sample_table)

        assert set(profile) == {'metadata', 'columns', 'statistics', 'summary'}
        assert profile['metadata']['source'] == 'sample_data.csv'
        assert profile['metadata']['row_count'] == 10
        assert profile['metadata']['column_count'] == 6
        assert profile['metadata']['type_sample_rows'] == 10

    def test_columns_in_header_order(self, sample_table):
        profile = TableProfiler().profile_table(sample_table)

        assert [(c['index'], c['name'], c['type']) for c in profile['columns']] == [
            (0, 'Product', 'Text'),
            (1, 'Price', 'Numeric'),
            (2, 'Quantity', 'Numeric'),
            (3, 'Revenue', 'Numeric'),
            (4, 'Category', 'Text'),
            (5, 'Rating', 'Numeric'),
        ]

    def test_summary(self, mixed_table):
        profile = TableProfiler().profile_table(mixed_table)

        assert profile['summary'] == {
            'numeric_columns': 4,
            'text_columns': 1,
            'columns_with_statistics': 3
        }

    def test_no_data_rows(self, make_table):
        profile = TableProfiler().profile_table(make_table(['a', 'b'], []))

        assert [c['type'] for c in profile['columns']] == ['Text', 'Text']
        assert profile['statistics'] == []
        assert profile['summary']['numeric_columns'] == 0

    def test_sample_rows_passed_to_classifier(self, make_table):
        table = make_table(['x'], [['1'], ['two']])

        assert TableProfiler(sample_rows=1).profile_table(table)['columns'][0]['type'] == 'Numeric'
        assert TableProfiler(sample_rows=2).profile_table(table)['columns'][0]['type'] == 'Text'

    def test_repeatable(self, sample_table):
        profiler = TableProfiler()
        first = profiler.profile_table(sample_table)
        second = profiler.profile_table(sample_table)

        assert first['statistics'] == second['statistics']
        assert first['columns'] == second['columns']
