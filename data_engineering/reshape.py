#!/usr/bin/env python3
"""
Wide-to-Long Reshaping

Turns a wide observation table (one column per measurement) into a long
table (one row per record/measurement pair) so that category-faceted plots
can use the measurement name as an axis.

Usage:
    from data_engineering.reshape import to_long, to_wide

    long_df = to_long(wide_df, value_columns=TUMOR_FEATURES, id_columns=['group'])
    wide_again = to_wide(long_df, id_columns=['group'])
"""

from typing import List, Sequence

import numpy as np
import pandas as pd

DEFAULT_INDEX_NAME = 'record_id'


class InvalidColumnError(ValueError):
    """A requested column does not exist in the input table"""

    def __init__(self, missing: Sequence[str], available: Sequence[str]):
        self.missing = list(missing)
        self.available = list(available)
        super().__init__(
            f"Column(s) not found: {self.missing}. Available: {self.available}"
        )


def to_long(
    wide: pd.DataFrame,
    value_columns: Sequence[str],
    id_columns: Sequence[str] = ('group',),
    var_name: str = 'feature',
    value_name: str = 'value'
) -> pd.DataFrame:
    """
    Unpivot measurement columns into (feature, value) rows

    Rows are ordered by original record, then by the order of value_columns.
    The record identity is kept on the index.

    Args:
        wide: Wide observation table
        value_columns: Measurement columns to unpivot, in output order
        id_columns: Columns copied onto every long row
        var_name: Name of the column holding the measurement name
        value_name: Name of the column holding the measurement value

    Returns:
        DataFrame with columns id_columns + [var_name, value_name] and
        len(wide) * len(value_columns) rows

    Raises:
        InvalidColumnError: A value or id column is not in wide
        ValueError: Duplicate value columns, or a column used as both id and value
    """
    value_columns = list(value_columns)
    id_columns = list(id_columns)

    missing = [col for col in id_columns + value_columns if col not in wide.columns]
    if missing:
        raise InvalidColumnError(missing, wide.columns)
    if len(set(value_columns)) != len(value_columns):
        raise ValueError(f"Duplicate value columns: {value_columns}")
    overlap = set(id_columns) & set(value_columns)
    if overlap:
        raise ValueError(f"Columns used as both id and value: {sorted(overlap)}")

    index_name = wide.index.name or DEFAULT_INDEX_NAME
    n_records, n_features = len(wide), len(value_columns)

    if n_records == 0 or n_features == 0:
        empty = wide.iloc[:0][id_columns].copy()
        empty[var_name] = pd.Series(dtype=object)
        empty[value_name] = pd.Series(dtype=float)
        empty.index.name = index_name
        return empty

    long = wide[id_columns + value_columns].melt(
        id_vars=id_columns,
        value_vars=value_columns,
        var_name=var_name,
        value_name=value_name,
        ignore_index=False
    )

    # melt stacks column by column; reorder to record-major
    order = np.arange(n_records * n_features).reshape(n_features, n_records).T.ravel()
    long = long.iloc[order]
    long.index.name = index_name

    return long


def to_wide(
    long: pd.DataFrame,
    id_columns: Sequence[str] = ('group',),
    var_name: str = 'feature',
    value_name: str = 'value'
) -> pd.DataFrame:
    """
    Pivot a long table produced by to_long back to wide form

    Feature columns appear in first-seen order and records keep their
    original order. An empty long table carries no feature names, so it
    comes back as an empty table of the id columns.

    Raises:
        InvalidColumnError: An id, var or value column is not in long
    """
    id_columns = list(id_columns)
    required = id_columns + [var_name, value_name]
    missing = [col for col in required if col not in long.columns]
    if missing:
        raise InvalidColumnError(missing, long.columns)

    if long.empty:
        return long.iloc[:0][id_columns].copy()

    index_name = long.index.name or DEFAULT_INDEX_NAME
    features: List[str] = list(dict.fromkeys(long[var_name]))

    flat = long.rename_axis(index_name).reset_index()
    values = flat.pivot(index=index_name, columns=var_name, values=value_name)
    values = values[features]
    values.columns.name = None

    ids = flat.drop_duplicates(index_name).set_index(index_name)[id_columns]
    wide = ids.join(values)
    wide.index.name = long.index.name
    return wide
