"""
Relationship and composition charts: bar + line, correlation heatmap,
scatter + regression, stacked bar
"""

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from config.style import CHART_COLORS, DIVERGING_CMAP, SEQUENTIAL_CMAP, group_palette


def plot_bar_line(summary: pd.DataFrame, x: str, bar_col: str, line_col: str,
                  trend_col: Optional[str] = None,
                  title: str = 'Responses and Mean Score by Wave') -> plt.Figure:
    """
    Bars on the left axis, a line (and optional trend) on a twin right axis

    Args:
        summary: One row per x value (see wave_summary)
        x: Category / period column
        bar_col: Column drawn as bars
        line_col: Column drawn as a line with markers
        trend_col: Optional smoothed column drawn dashed
        title: Chart title

    Returns:
        Matplotlib figure
    """
    fig, ax_bar = plt.subplots(figsize=(12, 6))
    positions = np.arange(len(summary))

    ax_bar.bar(positions, summary[bar_col], color=CHART_COLORS[0], alpha=0.6,
               edgecolor='black', linewidth=0.5, label=bar_col.replace('_', ' ').title())
    ax_bar.set_xticks(positions)
    ax_bar.set_xticklabels(summary[x], rotation=45, ha='right')
    ax_bar.set_ylabel(bar_col.replace('_', ' ').title(), fontsize=11)

    ax_line = ax_bar.twinx()
    ax_line.plot(positions, summary[line_col], color=CHART_COLORS[1], marker='o',
                 linewidth=2, label=line_col.replace('_', ' ').title())
    if trend_col is not None:
        ax_line.plot(positions, summary[trend_col], color=CHART_COLORS[6],
                     linestyle='--', linewidth=2, label=trend_col.replace('_', ' ').title())
    ax_line.set_ylabel(line_col.replace('_', ' ').title(), fontsize=11)
    ax_line.grid(False)

    handles = ax_bar.get_legend_handles_labels()[0] + ax_line.get_legend_handles_labels()[0]
    ax_bar.legend(handles=handles, loc='upper left', fontsize=10, framealpha=0.95)
    ax_bar.set_title(title, fontsize=14, fontweight='bold', pad=15)
    fig.tight_layout()

    return fig


def plot_correlation_heatmap(corr: pd.DataFrame, annotate: bool = True,
                             mask_upper: bool = True,
                             title: str = 'Feature Correlation Heatmap') -> plt.Figure:
    """
    Heatmap of a correlation matrix, lower triangle by default

    Returns:
        Matplotlib figure
    """
    mask = np.triu(np.ones_like(corr, dtype=bool), k=1) if mask_upper else None

    fig, ax = plt.subplots(figsize=(9, 8))
    sns.heatmap(
        corr,
        mask=mask,
        annot=annotate,
        fmt='.2f',
        cmap=DIVERGING_CMAP,
        center=0,
        square=True,
        linewidths=0.5,
        cbar_kws={"shrink": 0.8, "label": "Correlation Coefficient"},
        vmin=-1,
        vmax=1,
        ax=ax
    )
    ax.set_title(title, fontsize=14, fontweight='bold', pad=20)
    ax.set_xticklabels(ax.get_xticklabels(), rotation=45, ha='right', fontsize=10)
    ax.set_yticklabels(ax.get_yticklabels(), rotation=0, fontsize=10)
    fig.tight_layout()

    return fig


def plot_scatter_regression(df: pd.DataFrame, x: str, y: str,
                            hue: Optional[str] = 'group',
                            title: Optional[str] = None) -> plt.Figure:
    """
    Scatter plot with a least-squares line and 95% band, one fit per hue level

    Returns:
        Matplotlib figure
    """
    if title is None:
        title = f'{y} vs {x}'

    fig, ax = plt.subplots(figsize=(10, 7))

    if hue is None:
        sns.regplot(data=df, x=x, y=y, color=CHART_COLORS[0],
                    scatter_kws={'alpha': 0.6, 's': 25}, ax=ax)
    else:
        levels = list(pd.unique(df[hue]))
        palette = group_palette(levels)
        for level in levels:
            subset = df[df[hue] == level]
            sns.regplot(data=subset, x=x, y=y, color=palette[level], label=level,
                        scatter_kws={'alpha': 0.6, 's': 25}, ax=ax)
        ax.legend(title=hue, fontsize=10)

    ax.set_title(title, fontsize=14, fontweight='bold', pad=15)
    ax.set_xlabel(x, fontsize=11)
    ax.set_ylabel(y, fontsize=11)
    ax.grid(alpha=0.3)
    fig.tight_layout()

    return fig


def plot_stacked_bar(shares: pd.DataFrame, horizontal: bool = True,
                     label_min: float = 5.0,
                     title: str = 'Response Shares by Group') -> plt.Figure:
    """
    Stacked percentage bars, one bar per row of shares

    Args:
        shares: Rows = groups, columns = categories in stacking order (see response_shares)
        horizontal: Draw horizontal bars
        label_min: Segments at least this wide get a percentage label
        title: Chart title

    Returns:
        Matplotlib figure
    """
    colors = sns.color_palette(SEQUENTIAL_CMAP, n_colors=shares.shape[1])

    fig, ax = plt.subplots(figsize=(12, 6))
    shares.plot(kind='barh' if horizontal else 'bar', stacked=True, color=colors,
                edgecolor='white', linewidth=0.5, ax=ax)

    for container in ax.containers:
        labels = [f'{v:.0f}%' if v >= label_min else '' for v in container.datavalues]
        ax.bar_label(container, labels=labels, label_type='center', fontsize=9, color='white')

    value_axis = 'Share of Responses (%)'
    if horizontal:
        ax.set_xlabel(value_axis, fontsize=11)
        ax.set_xlim(0, 100)
        ax.invert_yaxis()
    else:
        ax.set_ylabel(value_axis, fontsize=11)
        ax.set_ylim(0, 100)

    ax.set_title(title, fontsize=14, fontweight='bold', pad=15)
    ax.legend(title=shares.columns.name, bbox_to_anchor=(1.02, 1), loc='upper left', fontsize=10)
    fig.tight_layout()

    return fig
