#!/usr/bin/env python3
"""
Gallery Figures

One function per chart example. Each builds its dataset, validates it,
renders the chart and writes it to output_dir, returning the file path.
"""

from pathlib import Path
from typing import Callable, Dict

from config.paths import DEFAULT_TIPS_FILE
from config.style import DEFAULT_N, DEFAULT_SEED
from data_engineering.download.download_tips import load_tips
from data_engineering.features.survey_aggregates import (
    aggregate_by_region,
    correlation_matrix,
    order_by_median,
    response_shares,
    standardize_columns,
    wave_summary,
)
from data_engineering.reshape import to_long
from data_engineering.synthetic.generator import GROUP_COLUMN
from data_engineering.synthetic.presets import (
    EDUCATION_LEVELS,
    STATE_CODES,
    SURVEY_FEATURES,
    SURVEY_WAVES,
    TUMOR_FEATURES,
    TUMOR_GROUPS,
    generate_regional_survey,
    generate_survey_responses,
    generate_survey_waves,
    generate_tumor_measurements,
)
from data_engineering.utils.validation import validate_long_table, validate_wide_table
from analysis.visualization import (
    create_choropleth,
    create_respondent_map,
    plot_bar_line,
    plot_box_jitter,
    plot_correlation_heatmap,
    plot_density,
    plot_scatter_regression,
    plot_stacked_bar,
    plot_swarm,
    plot_violin,
    save_figure,
    save_map,
)

LIKERT_BINS = [0, 2, 4, 6, 8, 10]
LIKERT_LABELS = ['Very low', 'Low', 'Neutral', 'High', 'Very high']
TIPS_DAY_ORDER = ['Thur', 'Fri', 'Sat', 'Sun']


def _tumor_table(n, seed):
    df = generate_tumor_measurements(n, seed)
    validate_wide_table(df, TUMOR_FEATURES, TUMOR_GROUPS, 'tumor measurements')
    return df


def _survey_table(n, seed):
    df = generate_survey_responses(n, seed)
    validate_wide_table(df, SURVEY_FEATURES, EDUCATION_LEVELS, 'survey responses')
    return df


def _regional_table(n, seed):
    df = generate_regional_survey(n, seed)
    validate_wide_table(df, ['latitude', 'longitude', 'wellbeing', 'community_trust'],
                        STATE_CODES, 'regional survey')
    return df


# ============================================================================
# DISTRIBUTIONS
# ============================================================================

def figure_swarm(output_dir: Path, n: int = DEFAULT_N, seed: int = DEFAULT_SEED) -> Path:
    """Standardized measurements per feature, reshaped to long form"""
    df = standardize_columns(_tumor_table(n, seed), TUMOR_FEATURES)
    long_df = to_long(df, TUMOR_FEATURES, id_columns=[GROUP_COLUMN])
    validate_long_table(long_df, TUMOR_FEATURES, [GROUP_COLUMN], len(df), 'tumor measurements')

    fig = plot_swarm(long_df, title='Standardized Measurements by Feature')
    return save_figure(fig, Path(output_dir) / 'swarm.png')


def figure_density(output_dir: Path, n: int = DEFAULT_N, seed: int = DEFAULT_SEED) -> Path:
    df = _tumor_table(n, seed)
    fig = plot_density(df, 'radius_mean', title='Radius Distribution by Group')
    return save_figure(fig, Path(output_dir) / 'density.png')


def figure_box_jitter(output_dir: Path, n: int = DEFAULT_N, seed: int = DEFAULT_SEED) -> Path:
    """Trust score per education level, ordered by median"""
    df = _survey_table(n, seed)
    order = order_by_median(df, GROUP_COLUMN, 'trust_score')
    fig = plot_box_jitter(df, GROUP_COLUMN, 'trust_score', order=order,
                          title='Institutional Trust by Education Level')
    return save_figure(fig, Path(output_dir) / 'box_jitter.png')


def figure_violin(output_dir: Path, n: int = DEFAULT_N, seed: int = DEFAULT_SEED,
                  tips_path: Path = DEFAULT_TIPS_FILE, download: bool = True) -> Path:
    """Tip percentage by day and sex from the public tips dataset"""
    tips = load_tips(tips_path, download=download)
    fig = plot_violin(tips, x='day', y='tip_pct', hue='sex', order=TIPS_DAY_ORDER,
                      title='Tip as % of Bill by Day')
    return save_figure(fig, Path(output_dir) / 'violin.png')


# ============================================================================
# RELATIONSHIPS AND COMPOSITION
# ============================================================================

def figure_bar_line(output_dir: Path, n: int = DEFAULT_N, seed: int = DEFAULT_SEED) -> Path:
    """Responses per wave (bars) and mean satisfaction with a 3-wave rolling mean"""
    # six times the base size so each of the twelve waves has a usable mean
    df = generate_survey_waves(n * 6, seed)
    validate_wide_table(df, ['satisfaction', 'response_minutes'], SURVEY_WAVES, 'survey waves')

    summary = wave_summary(df, GROUP_COLUMN, 'satisfaction', window=3)
    fig = plot_bar_line(summary, GROUP_COLUMN, 'responses', 'mean_satisfaction',
                        trend_col='rolling_satisfaction',
                        title='Survey Responses and Satisfaction by Wave')
    return save_figure(fig, Path(output_dir) / 'bar_line.png')


def figure_correlation(output_dir: Path, n: int = DEFAULT_N, seed: int = DEFAULT_SEED) -> Path:
    df = _tumor_table(n, seed)
    corr = correlation_matrix(df, TUMOR_FEATURES)
    fig = plot_correlation_heatmap(corr, title='Correlation Between Measurements')
    return save_figure(fig, Path(output_dir) / 'correlation_heatmap.png')


def figure_scatter_regression(output_dir: Path, n: int = DEFAULT_N,
                              seed: int = DEFAULT_SEED) -> Path:
    df = _tumor_table(n, seed)
    fig = plot_scatter_regression(df, 'radius_mean', 'perimeter_mean',
                                  title='Perimeter vs Radius')
    return save_figure(fig, Path(output_dir) / 'scatter_regression.png')


def figure_stacked_bar(output_dir: Path, n: int = DEFAULT_N, seed: int = DEFAULT_SEED) -> Path:
    """Life-satisfaction categories per education level"""
    df = _survey_table(n, seed)
    shares = response_shares(df, GROUP_COLUMN, 'life_satisfaction',
                             LIKERT_BINS, LIKERT_LABELS, group_order=EDUCATION_LEVELS)
    fig = plot_stacked_bar(shares, title='Life Satisfaction by Education Level')
    return save_figure(fig, Path(output_dir) / 'stacked_bar.png')


# ============================================================================
# MAPS
# ============================================================================

def figure_maps(output_dir: Path, n: int = DEFAULT_N, seed: int = DEFAULT_SEED) -> Path:
    """State choropleth of mean wellbeing plus a respondent point map"""
    df = _regional_table(n * 4, seed)

    by_state = aggregate_by_region(df, GROUP_COLUMN, 'wellbeing')
    choropleth = create_choropleth(by_state, GROUP_COLUMN, 'wellbeing',
                                   hover_cols=['respondents'])
    save_map(create_respondent_map(df, popup_cols=['wellbeing', 'community_trust']),
             Path(output_dir) / 'respondent_map.html')
    return save_map(choropleth, Path(output_dir) / 'choropleth.html')


FIGURES: Dict[str, Callable[..., Path]] = {
    'swarm': figure_swarm,
    'density': figure_density,
    'box_jitter': figure_box_jitter,
    'violin': figure_violin,
    'bar_line': figure_bar_line,
    'correlation': figure_correlation,
    'scatter_regression': figure_scatter_regression,
    'stacked_bar': figure_stacked_bar,
    'maps': figure_maps,
}
