"""
Plot style configuration for the survey plot gallery
Colors, constants, and settings
"""

import matplotlib.pyplot as plt
import seaborn as sns

# Generator defaults shared by the gallery and the CLI
DEFAULT_N = 100
DEFAULT_SEED = 42

# Group Colors (two-group examples)
GROUP_COLORS = {
    'Group A': '#3498db',   # Blue
    'Group B': '#e74c3c',   # Red
}

# Chart Color Palette (for multi-category charts)
CHART_COLORS = [
    '#3498db',  # Blue
    '#e74c3c',  # Red
    '#2ecc71',  # Green
    '#f39c12',  # Orange
    '#9b59b6',  # Purple
    '#1abc9c',  # Turquoise
    '#34495e',  # Dark gray
    '#e67e22',  # Carrot
]

# Sequential colormap for heatmaps, stacked bars and choropleths
SEQUENTIAL_CMAP = 'viridis'
DIVERGING_CMAP = 'RdBu_r'

# Plotly Chart Theme
PLOTLY_THEME = 'plotly_white'

# Map Settings
MAP_CENTER = [39.8, -98.6]  # Contiguous US
MAP_ZOOM = 4

# Static figure export
FIGURE_DPI = 300
FIGURE_SIZE = (12, 6)


def group_palette(levels):
    """Color per level: GROUP_COLORS when every level has one, else CHART_COLORS in order"""
    levels = list(levels)
    if all(level in GROUP_COLORS for level in levels):
        return {level: GROUP_COLORS[level] for level in levels}
    return {level: CHART_COLORS[i % len(CHART_COLORS)] for i, level in enumerate(levels)}


def apply_plot_style():
    """Apply the gallery's seaborn/matplotlib defaults"""
    sns.set_style('whitegrid')
    plt.rcParams['figure.figsize'] = FIGURE_SIZE
    plt.rcParams['axes.titleweight'] = 'bold'
