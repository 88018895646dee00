"""Tests for the chart and map builders."""

import folium
import matplotlib.pyplot as plt
import plotly.graph_objects as go
import pytest

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
from data_engineering.features.survey_aggregates import (
    aggregate_by_region,
    correlation_matrix,
    order_by_median,
    response_shares,
    standardize_columns,
    wave_summary,
)
from data_engineering.download.download_tips import add_tip_percentage
from data_engineering.reshape import to_long
from data_engineering.synthetic.presets import (
    TUMOR_FEATURES,
    generate_regional_survey,
    generate_survey_waves,
    generate_tumor_measurements,
)


@pytest.fixture
def small_tumor():
    return generate_tumor_measurements(40, seed=1)


@pytest.fixture
def regional():
    return generate_regional_survey(80, seed=2)


class TestDistributions:
    def test_swarm(self, small_tumor):
        z = standardize_columns(small_tumor, TUMOR_FEATURES)
        fig = plot_swarm(to_long(z, TUMOR_FEATURES, ['group']), title='Swarm')

        assert isinstance(fig, plt.Figure)
        ax = fig.axes[0]
        assert ax.get_title() == 'Swarm'
        assert [t.get_text() for t in ax.get_xticklabels()] == TUMOR_FEATURES

    def test_density(self, small_tumor):
        fig = plot_density(small_tumor, 'radius_mean')
        ax = fig.axes[0]
        assert ax.get_title() == 'Distribution of radius_mean'
        assert ax.get_ylabel() == 'Density'

    def test_box_jitter_uses_order(self, survey_wide):
        order = order_by_median(survey_wide, 'group', 'trust_score')
        fig = plot_box_jitter(survey_wide, 'group', 'trust_score', order=order)

        labels = [t.get_text() for t in fig.axes[0].get_xticklabels()]
        assert labels == order

    def test_violin_split_by_sex(self, tips_df):
        tips = add_tip_percentage(tips_df)
        fig = plot_violin(tips, order=['Thur', 'Fri', 'Sat', 'Sun'])

        ax = fig.axes[0]
        assert [t.get_text() for t in ax.get_xticklabels()] == ['Thur', 'Fri', 'Sat', 'Sun']
        assert ax.get_legend() is not None

    def test_violin_without_hue(self, tips_df):
        fig = plot_violin(add_tip_percentage(tips_df), hue=None)
        assert isinstance(fig, plt.Figure)


class TestRelationships:
    def test_bar_line_has_twin_axis(self):
        summary = wave_summary(generate_survey_waves(240, seed=3), 'group', 'satisfaction')
        fig = plot_bar_line(summary, 'group', 'responses', 'mean_satisfaction',
                            trend_col='rolling_satisfaction')

        assert len(fig.axes) == 2
        assert len(fig.axes[0].patches) == len(summary)
        assert len(fig.axes[1].get_lines()) == 2

    def test_correlation_heatmap(self, small_tumor):
        corr = correlation_matrix(small_tumor, TUMOR_FEATURES)
        fig = plot_correlation_heatmap(corr, title='Correlations')

        assert fig.axes[0].get_title() == 'Correlations'
        # heatmap axes + colorbar
        assert len(fig.axes) == 2

    def test_scatter_regression_one_fit_per_group(self, small_tumor):
        fig = plot_scatter_regression(small_tumor, 'radius_mean', 'perimeter_mean')

        ax = fig.axes[0]
        assert len(ax.get_lines()) == small_tumor['group'].nunique()
        assert ax.get_legend() is not None

    def test_stacked_bar(self, survey_wide):
        labels = ['Low', 'Mid', 'High']
        shares = response_shares(survey_wide, 'group', 'life_satisfaction', [0, 4, 7, 10], labels)
        fig = plot_stacked_bar(shares)

        ax = fig.axes[0]
        assert len(ax.containers) == len(labels)
        assert ax.get_xlim() == (0, 100)


class TestMaps:
    def test_choropleth(self, regional):
        by_state = aggregate_by_region(regional, 'group', 'wellbeing')
        fig = create_choropleth(by_state, 'group', 'wellbeing', hover_cols=['respondents'])

        assert isinstance(fig, go.Figure)
        assert fig.data[0].locationmode == 'USA-states'
        assert sorted(fig.data[0].locations) == sorted(by_state['group'])

    def test_respondent_map_has_one_marker_per_row(self, regional):
        m = create_respondent_map(regional, popup_cols=['wellbeing'])
        markers = [c for c in m._children.values() if isinstance(c, folium.CircleMarker)]

        assert isinstance(m, folium.Map)
        assert len(markers) == len(regional)

    def test_respondent_map_samples_large_tables(self, regional):
        m = create_respondent_map(regional, max_points=25)
        markers = [c for c in m._children.values() if isinstance(c, folium.CircleMarker)]
        assert len(markers) == 25

    def test_save_map_writes_html(self, regional, tmp_path):
        by_state = aggregate_by_region(regional, 'group', 'wellbeing')
        html = save_map(create_choropleth(by_state, 'group', 'wellbeing'), tmp_path / 'c.html')
        point_html = save_map(create_respondent_map(regional), tmp_path / 'maps' / 'p.html')

        assert html.exists() and html.stat().st_size > 0
        assert point_html.exists()


def test_save_figure_writes_and_closes(small_tumor, tmp_path):
    fig = plot_density(small_tumor, 'texture_mean')
    path = save_figure(fig, tmp_path / 'nested' / 'density.png', dpi=50)

    assert path.exists()
    assert not plt.fignum_exists(fig.number)
