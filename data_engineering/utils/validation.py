#!/usr/bin/env python3
"""
Table Schema Validation

Uses pandera to check the gallery's tables before they are plotted:
- Wide observation tables (group label + numeric measurements)
- Long tables produced by the reshaper (schema + row cardinality)
- The downloaded tips dataset

Usage:
    from data_engineering.utils.validation import validate_wide_table, validate_long_table

    validate_wide_table(df, TUMOR_FEATURES, TUMOR_GROUPS, 'tumor measurements')
    validate_long_table(long_df, TUMOR_FEATURES, ['group'], len(df))
"""

from typing import Sequence

import numpy as np
import pandas as pd
import pandera as pa
from pandera import Check, Column

from data_engineering.synthetic.generator import GROUP_COLUMN

# Checks shared by every numeric column
FINITE = Check(lambda s: np.isfinite(s.astype(float)), error='value is not finite')
NUMERIC = Check(lambda s: pd.api.types.is_numeric_dtype(s), element_wise=False,
                error='column is not numeric')


# ============================================================================
# SCHEMA BUILDERS
# ============================================================================

def wide_table_schema(value_columns: Sequence[str], groups: Sequence[str]) -> pa.DataFrameSchema:
    """Schema for a wide observation table"""
    columns = {
        GROUP_COLUMN: Column(
            str,
            Check.isin(list(groups)),
            nullable=False,
            description='Group label'
        ),
    }
    for col in value_columns:
        columns[col] = Column(checks=[NUMERIC, FINITE], nullable=False)

    return pa.DataFrameSchema(
        columns,
        strict=False,  # Allow extra columns not defined here
        coerce=True,
        description='Wide observation table'
    )


def long_table_schema(
    value_columns: Sequence[str],
    id_columns: Sequence[str],
    var_name: str = 'feature',
    value_name: str = 'value'
) -> pa.DataFrameSchema:
    """Schema for a long table: ids, feature name from the declared set, numeric value"""
    columns = {col: Column(nullable=False) for col in id_columns}
    columns[var_name] = Column(str, Check.isin(list(value_columns)), nullable=False)
    columns[value_name] = Column(checks=[NUMERIC, FINITE], nullable=False)

    return pa.DataFrameSchema(columns, strict=True, coerce=True, description='Long-format table')


tips_schema = pa.DataFrameSchema(
    {
        'total_bill': Column(float, Check.greater_than(0), nullable=False),
        'tip': Column(float, Check.greater_than_or_equal_to(0), nullable=False),
        'sex': Column(str, nullable=False),
        'day': Column(str, nullable=False),
    },
    strict=False,
    coerce=True,
    description='Restaurant tips dataset'
)


# ============================================================================
# VALIDATION FUNCTIONS
# ============================================================================

def _run(schema: pa.DataFrameSchema, df: pd.DataFrame, name: str) -> pd.DataFrame:
    try:
        validated = schema.validate(df, lazy=True)
        print(f'  ✓ Schema validation passed')
        return validated
    except pa.errors.SchemaErrors as err:
        print(f'  ❌ Schema validation failed for {name}:')
        print(err.failure_cases)
        raise


def validate_wide_table(
    df: pd.DataFrame,
    value_columns: Sequence[str],
    groups: Sequence[str],
    name: str = 'dataset'
) -> bool:
    """
    Validate a wide observation table

    Args:
        df: Table to validate
        value_columns: Measurement columns that must be numeric and complete
        groups: Allowed group labels
        name: Table name for logging

    Returns:
        True if validation passes

    Raises:
        pandera.errors.SchemaErrors: If the schema check fails
    """
    print(f'\nValidating {name} (wide, {len(df):,} records)')
    _run(wide_table_schema(value_columns, groups), df, name)
    return True


def validate_long_table(
    long: pd.DataFrame,
    value_columns: Sequence[str],
    id_columns: Sequence[str],
    expected_records: int,
    name: str = 'dataset',
    var_name: str = 'feature',
    value_name: str = 'value'
) -> bool:
    """
    Validate a long table against its source table

    Args:
        long: Long table from to_long
        value_columns: Columns that were unpivoted
        id_columns: Columns carried onto every row
        expected_records: Number of records in the source wide table
        name: Table name for logging

    Returns:
        True if validation passes

    Raises:
        ValueError: If the row count is not records x columns
        pandera.errors.SchemaErrors: If the schema check fails
    """
    print(f'\nValidating {name} (long, {len(long):,} rows)')

    expected_rows = expected_records * len(value_columns)
    if len(long) != expected_rows:
        raise ValueError(
            f'❌ ROW COUNT MISMATCH in {name}: {len(long):,} rows, '
            f'expected {expected_records:,} x {len(value_columns)} = {expected_rows:,}'
        )
    print(f'  ✓ Row count matches ({expected_records:,} x {len(value_columns)})')

    _run(long_table_schema(value_columns, id_columns, var_name, value_name), long, name)
    return True


def validate_tips(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate (and coerce) the tips dataset

    Returns:
        Validated DataFrame with coerced dtypes

    Raises:
        pandera.errors.SchemaErrors: If required columns are missing or out of range
    """
    print(f'\nValidating tips dataset ({len(df):,} rows)')
    return _run(tips_schema, df, 'tips')
