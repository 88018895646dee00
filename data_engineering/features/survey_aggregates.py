"""
Chart-Specific Aggregates for Survey Tables

Small transforms that shape a table for one kind of chart:
- Standardized measurements (swarm of features on a shared axis)
- Category order by median (box + jitter)
- Per-wave counts with a rolling mean (bar + line)
- Response-category shares (stacked bar)
- Per-region aggregates (choropleth)
- Correlation matrix (heatmap)

Usage:
    from data_engineering.features.survey_aggregates import wave_summary

    summary = wave_summary(waves_df, 'group', 'satisfaction', window=3)
"""

from typing import List, Optional, Sequence

import numpy as np
import pandas as pd


def standardize_columns(df: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """
    Z-score the named columns, leaving the rest untouched

    Constant columns become 0 rather than NaN.
    """
    df = df.copy()
    for col in columns:
        std = df[col].std(ddof=0)
        centered = df[col] - df[col].mean()
        df[col] = centered / std if std > 0 else centered * 0.0
    return df


def order_by_median(df: pd.DataFrame, group_col: str, value_col: str,
                    ascending: bool = True) -> List[str]:
    """Group labels ordered by median value (ties broken by label)"""
    medians = df.groupby(group_col)[value_col].median().reset_index()
    medians = medians.sort_values([value_col, group_col], ascending=[ascending, True])
    return medians[group_col].tolist()


def wave_summary(df: pd.DataFrame, wave_col: str, value_col: str,
                 window: int = 3) -> pd.DataFrame:
    """
    Per-wave response count, mean value, and centred rolling mean

    Args:
        df: Responses with a wave label column
        wave_col: Wave label column (sortable, e.g. 'YYYY-MM')
        value_col: Numeric response to average
        window: Rolling window in waves

    Returns:
        DataFrame with columns [wave_col, 'responses', 'mean_<value>', 'rolling_<value>']
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    summary = (
        df.groupby(wave_col)[value_col]
        .agg(responses='count', mean='mean')
        .sort_index()
        .reset_index()
        .rename(columns={'mean': f'mean_{value_col}'})
    )
    summary[f'rolling_{value_col}'] = (
        summary[f'mean_{value_col}'].rolling(window=window, center=True, min_periods=1).mean()
    )
    return summary


def response_shares(df: pd.DataFrame, group_col: str, value_col: str,
                    bins: Sequence[float], labels: Sequence[str],
                    group_order: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """
    Percentage of each group's responses falling into each category

    Args:
        df: Responses
        group_col: Grouping column (one bar per group)
        value_col: Numeric response to bin
        bins: Bin edges for pd.cut (len(labels) + 1 values)
        labels: Category labels, in stacking order
        group_order: Optional row order

    Returns:
        DataFrame indexed by group with one column per label; rows sum to 100
    """
    if len(bins) != len(labels) + 1:
        raise ValueError(f"Expected {len(labels) + 1} bin edges, got {len(bins)}")

    categories = pd.cut(df[value_col], bins=bins, labels=labels, include_lowest=True)
    shares = pd.crosstab(df[group_col], categories, normalize='index') * 100
    shares = shares.reindex(columns=list(labels), fill_value=0.0)
    shares.columns = pd.Index(list(labels), name=value_col)
    if group_order is not None:
        shares = shares.reindex(list(group_order))
    return shares


def aggregate_by_region(df: pd.DataFrame, region_col: str, value_col: str,
                        agg: str = 'mean') -> pd.DataFrame:
    """
    One row per region with the aggregated value and respondent count

    Returns:
        DataFrame with columns [region_col, value_col, 'respondents'] sorted by region
    """
    grouped = df.groupby(region_col)[value_col]
    result = pd.DataFrame({
        value_col: grouped.agg(agg),
        'respondents': grouped.size(),
    })
    return result.sort_index().reset_index()


def correlation_matrix(df: pd.DataFrame, columns: Optional[Sequence[str]] = None,
                       method: str = 'pearson') -> pd.DataFrame:
    """Correlation matrix of the named (or all numeric) columns"""
    if columns is None:
        numeric_df = df.select_dtypes(include=[np.number])
    else:
        numeric_df = df[list(columns)]
    return numeric_df.corr(method=method)
