"""Tests for pandera table validation."""

import numpy as np
import pandera as pa
import pytest

from data_engineering.reshape import to_long
from data_engineering.synthetic.presets import TUMOR_FEATURES, TUMOR_GROUPS
from data_engineering.utils.validation import (
    validate_long_table,
    validate_tips,
    validate_wide_table,
)


def test_generated_table_passes(tumor_wide):
    assert validate_wide_table(tumor_wide, TUMOR_FEATURES, TUMOR_GROUPS, 'tumor')


def test_missing_value_fails(tumor_wide):
    tumor_wide.loc[3, 'area_mean'] = np.nan
    with pytest.raises(pa.errors.SchemaErrors):
        validate_wide_table(tumor_wide, TUMOR_FEATURES, TUMOR_GROUPS)


def test_infinite_value_fails(tumor_wide):
    tumor_wide.loc[5, 'radius_mean'] = np.inf
    with pytest.raises(pa.errors.SchemaErrors):
        validate_wide_table(tumor_wide, TUMOR_FEATURES, TUMOR_GROUPS)


def test_unknown_group_fails(tumor_wide):
    tumor_wide.loc[0, 'group'] = 'Group Z'
    with pytest.raises(pa.errors.SchemaErrors):
        validate_wide_table(tumor_wide, TUMOR_FEATURES, TUMOR_GROUPS)


def test_missing_column_fails(tumor_wide):
    with pytest.raises(pa.errors.SchemaErrors):
        validate_wide_table(tumor_wide.drop(columns=['texture_mean']), TUMOR_FEATURES, TUMOR_GROUPS)


def test_long_table_passes(tumor_wide):
    long = to_long(tumor_wide, TUMOR_FEATURES, ['group'])
    assert validate_long_table(long, TUMOR_FEATURES, ['group'], len(tumor_wide))


def test_long_table_row_count_mismatch(tumor_wide):
    long = to_long(tumor_wide, TUMOR_FEATURES, ['group']).iloc[:-1]
    with pytest.raises(ValueError, match='ROW COUNT MISMATCH'):
        validate_long_table(long, TUMOR_FEATURES, ['group'], len(tumor_wide))


def test_long_table_unknown_feature(tumor_wide):
    long = to_long(tumor_wide, TUMOR_FEATURES, ['group'])
    long.iloc[0, long.columns.get_loc('feature')] = 'mystery'
    with pytest.raises(pa.errors.SchemaErrors):
        validate_long_table(long, TUMOR_FEATURES, ['group'], len(tumor_wide))


def test_tips_missing_column(tips_df):
    with pytest.raises(pa.errors.SchemaErrors):
        validate_tips(tips_df.drop(columns=['day']))


def test_tips_negative_tip(tips_df):
    tips_df.loc[0, 'tip'] = -1.0
    with pytest.raises(pa.errors.SchemaErrors):
        validate_tips(tips_df)
