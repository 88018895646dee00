"""Tests for wide-to-long reshaping."""

import numpy as np
import pandas as pd
import pytest

from data_engineering.reshape import InvalidColumnError, to_long, to_wide
from data_engineering.synthetic.presets import TUMOR_FEATURES, generate_tumor_measurements


class TestToLong:
    def test_scenario_cardinality(self, tumor_wide):
        long = to_long(tumor_wide, TUMOR_FEATURES, id_columns=['group'])

        assert long.shape == (600, 3)
        assert list(long.columns) == ['group', 'feature', 'value']
        assert long.index.name == 'record_id'

    def test_rows_grouped_by_record_then_column_order(self, tumor_wide):
        long = to_long(tumor_wide, TUMOR_FEATURES, id_columns=['group'])

        assert list(long.index[:6]) == [0] * 6
        assert list(long.index[6:12]) == [1] * 6
        assert long['feature'].iloc[:6].tolist() == TUMOR_FEATURES
        assert long['feature'].iloc[-6:].tolist() == TUMOR_FEATURES

    def test_values_match_wide_cells(self, tumor_wide):
        long = to_long(tumor_wide, TUMOR_FEATURES, id_columns=['group'])

        np.testing.assert_array_equal(
            long['value'].to_numpy(),
            tumor_wide[TUMOR_FEATURES].to_numpy().ravel()
        )
        for record_id, row in long.iloc[::37].iterrows():
            assert row['value'] == tumor_wide.at[record_id, row['feature']]
            assert row['group'] == tumor_wide.at[record_id, 'group']

    def test_column_subset_follows_requested_order(self, tumor_wide):
        long = to_long(tumor_wide, ['area_mean', 'radius_mean'], id_columns=['group'])

        assert len(long) == 200
        assert long['feature'].iloc[:4].tolist() == [
            'area_mean', 'radius_mean', 'area_mean', 'radius_mean'
        ]

    def test_custom_names(self, tumor_wide):
        long = to_long(tumor_wide, TUMOR_FEATURES, ['group'],
                       var_name='measure', value_name='score')
        assert list(long.columns) == ['group', 'measure', 'score']

    def test_unnamed_index_becomes_record_id(self):
        wide = pd.DataFrame({'group': ['a', 'b'], 'x': [1.0, 2.0]})
        long = to_long(wide, ['x'], ['group'])
        assert long.index.name == 'record_id'
        assert list(long.index) == [0, 1]

    def test_input_is_not_modified(self, tumor_wide):
        before = tumor_wide.copy()
        to_long(tumor_wide, TUMOR_FEATURES, ['group'])
        pd.testing.assert_frame_equal(tumor_wide, before)


class TestEdgeCases:
    def test_missing_value_column(self, tumor_wide):
        with pytest.raises(InvalidColumnError) as excinfo:
            to_long(tumor_wide, ['radius_mean', 'nope'], ['group'])

        assert excinfo.value.missing == ['nope']
        assert isinstance(excinfo.value, ValueError)

    def test_missing_id_column(self, tumor_wide):
        with pytest.raises(InvalidColumnError):
            to_long(tumor_wide, TUMOR_FEATURES, ['respondent'])

    def test_empty_wide_gives_empty_long(self):
        empty = generate_tumor_measurements(0, seed=42)
        long = to_long(empty, TUMOR_FEATURES, ['group'])

        assert len(long) == 0
        assert list(long.columns) == ['group', 'feature', 'value']

    def test_no_value_columns_gives_empty_long(self, tumor_wide):
        long = to_long(tumor_wide, [], ['group'])
        assert len(long) == 0
        assert list(long.columns) == ['group', 'feature', 'value']

    def test_duplicate_value_columns(self, tumor_wide):
        with pytest.raises(ValueError, match='Duplicate'):
            to_long(tumor_wide, ['radius_mean', 'radius_mean'], ['group'])

    def test_column_used_as_id_and_value(self, tumor_wide):
        with pytest.raises(ValueError, match='both id and value'):
            to_long(tumor_wide, ['radius_mean'], ['group', 'radius_mean'])


class TestRoundTrip:
    def test_pivot_back_restores_wide_table(self, tumor_wide):
        long = to_long(tumor_wide, TUMOR_FEATURES, ['group'])
        restored = to_wide(long, ['group'])

        pd.testing.assert_frame_equal(restored, tumor_wide, check_column_type=False)

    def test_pivot_back_subset(self, tumor_wide):
        columns = ['texture_mean', 'radius_mean']
        restored = to_wide(to_long(tumor_wide, columns, ['group']), ['group'])

        assert list(restored.columns) == ['group'] + columns
        pd.testing.assert_frame_equal(
            restored, tumor_wide[['group'] + columns], check_column_type=False
        )

    def test_empty_table_round_trip(self):
        empty = generate_tumor_measurements(0, seed=42)
        restored = to_wide(to_long(empty, TUMOR_FEATURES, ['group']), ['group'])

        assert len(restored) == 0
        assert list(restored.columns) == ['group']
        assert restored.index.name == 'record_id'

    def test_to_wide_missing_column(self, tumor_wide):
        long = to_long(tumor_wide, TUMOR_FEATURES, ['group'])
        with pytest.raises(InvalidColumnError):
            to_wide(long.drop(columns=['value']), ['group'])
