"""
Chart builders for the survey plot gallery
"""

from .distributions import (
    plot_box_jitter,
    plot_density,
    plot_swarm,
    plot_violin,
    save_figure,
)
from .relationships import (
    plot_bar_line,
    plot_correlation_heatmap,
    plot_scatter_regression,
    plot_stacked_bar,
)
from .maps import (
    create_choropleth,
    create_respondent_map,
    save_map,
)

__all__ = [
    'plot_box_jitter',
    'plot_density',
    'plot_swarm',
    'plot_violin',
    'save_figure',
    'plot_bar_line',
    'plot_correlation_heatmap',
    'plot_scatter_regression',
    'plot_stacked_bar',
    'create_choropleth',
    'create_respondent_map',
    'save_map',
]
