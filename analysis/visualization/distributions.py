"""
Distribution charts: swarm, density, box + jitter, violin

Every builder draws onto a new matplotlib figure and returns it without
showing it; use save_figure() to write it to disk.
"""

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from config.style import FIGURE_DPI, group_palette


def _levels(df: pd.DataFrame, col: str, order: Optional[Sequence[str]] = None):
    if order is not None:
        return list(order)
    return list(pd.unique(df[col]))


def save_figure(fig: plt.Figure, path: Path, dpi: int = FIGURE_DPI) -> Path:
    """Write a matplotlib figure and close it"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_swarm(long_df: pd.DataFrame, x: str = 'feature', y: str = 'value',
               hue: str = 'group', point_size: float = 3.0,
               title: str = 'Measurements by Feature') -> plt.Figure:
    """
    Swarm plot of a long table: one swarm per feature, colored by group

    Args:
        long_df: Long table (see data_engineering.reshape.to_long)
        x: Feature-name column
        y: Value column
        hue: Group column
        point_size: Marker size
        title: Chart title

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(12, 6))

    sns.swarmplot(
        data=long_df,
        x=x,
        y=y,
        hue=hue,
        palette=group_palette(_levels(long_df, hue)),
        order=_levels(long_df, x),
        size=point_size,
        dodge=True,
        ax=ax
    )

    ax.set_title(title, fontsize=14, fontweight='bold', pad=15)
    ax.set_xlabel('')
    ax.set_ylabel(y.replace('_', ' ').title(), fontsize=11)
    ax.tick_params(axis='x', rotation=30)
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()

    return fig


def plot_density(df: pd.DataFrame, value_col: str, hue: str = 'group',
                 fill: bool = True, alpha: float = 0.4,
                 title: Optional[str] = None) -> plt.Figure:
    """
    Kernel density estimate of one measurement per group

    Returns:
        Matplotlib figure
    """
    if title is None:
        title = f'Distribution of {value_col}'

    fig, ax = plt.subplots(figsize=(10, 6))

    sns.kdeplot(
        data=df,
        x=value_col,
        hue=hue,
        hue_order=_levels(df, hue),
        palette=group_palette(_levels(df, hue)),
        fill=fill,
        alpha=alpha,
        common_norm=False,
        linewidth=1.5,
        ax=ax
    )

    ax.set_title(title, fontsize=14, fontweight='bold', pad=15)
    ax.set_xlabel(value_col, fontsize=11)
    ax.set_ylabel('Density', fontsize=11)
    fig.tight_layout()

    return fig


def plot_box_jitter(df: pd.DataFrame, x: str, y: str,
                    order: Optional[Sequence[str]] = None, jitter: float = 0.2,
                    title: Optional[str] = None) -> plt.Figure:
    """
    Box plot per category with the raw observations jittered on top

    Args:
        df: Wide table
        x: Category column
        y: Numeric column
        order: Category order (e.g. from order_by_median)
        jitter: Horizontal jitter width
        title: Chart title

    Returns:
        Matplotlib figure
    """
    if title is None:
        title = f'{y} by {x}'
    levels = _levels(df, x, order)

    fig, ax = plt.subplots(figsize=(10, 6))

    sns.boxplot(
        data=df,
        x=x,
        y=y,
        hue=x,
        order=levels,
        hue_order=levels,
        palette=group_palette(levels),
        showfliers=False,
        width=0.6,
        legend=False,
        ax=ax
    )
    sns.stripplot(
        data=df,
        x=x,
        y=y,
        order=levels,
        color='black',
        alpha=0.4,
        size=3,
        jitter=jitter,
        ax=ax
    )

    ax.set_title(title, fontsize=14, fontweight='bold', pad=15)
    ax.set_xlabel(x.replace('_', ' ').title(), fontsize=11)
    ax.set_ylabel(y.replace('_', ' ').title(), fontsize=11)
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()

    return fig


def plot_violin(df: pd.DataFrame, x: str = 'day', y: str = 'tip_pct',
                hue: Optional[str] = 'sex', order: Optional[Sequence[str]] = None,
                title: str = 'Tip Percentage by Day') -> plt.Figure:
    """
    Violin plot, split by hue when it has exactly two levels

    Returns:
        Matplotlib figure
    """
    levels = _levels(df, x, order)
    fig, ax = plt.subplots(figsize=(10, 6))

    if hue is None:
        sns.violinplot(data=df, x=x, y=y, hue=x, order=levels, hue_order=levels,
                       palette=group_palette(levels), inner='quart', legend=False, ax=ax)
    else:
        hue_levels = _levels(df, hue)
        sns.violinplot(
            data=df,
            x=x,
            y=y,
            hue=hue,
            order=levels,
            hue_order=hue_levels,
            palette=group_palette(hue_levels),
            split=len(hue_levels) == 2,
            inner='quart',
            ax=ax
        )

    ax.set_title(title, fontsize=14, fontweight='bold', pad=15)
    ax.set_xlabel(x.replace('_', ' ').title(), fontsize=11)
    ax.set_ylabel(y.replace('_', ' ').title(), fontsize=11)
    fig.tight_layout()

    return fig
