"""
Map visualization utilities: state choropleth (plotly) and respondent point map (folium)
"""

from pathlib import Path
from typing import Optional, Sequence, Tuple

import folium
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from config.style import MAP_CENTER, MAP_ZOOM, PLOTLY_THEME, SEQUENTIAL_CMAP, group_palette


def create_choropleth(region_df: pd.DataFrame, location_col: str, value_col: str,
                      hover_cols: Optional[Sequence[str]] = None,
                      title: Optional[str] = None) -> go.Figure:
    """
    US state choropleth of an aggregated metric

    Args:
        region_df: One row per state (see aggregate_by_region)
        location_col: Two-letter state code column
        value_col: Metric that drives the fill color
        hover_cols: Extra columns shown on hover
        title: Chart title

    Returns:
        Plotly figure
    """
    if title is None:
        title = f'Mean {value_col.replace("_", " ")} by State'

    fig = px.choropleth(
        region_df,
        locations=location_col,
        locationmode='USA-states',
        color=value_col,
        scope='usa',
        hover_data=list(hover_cols) if hover_cols else None,
        color_continuous_scale=SEQUENTIAL_CMAP,
        template=PLOTLY_THEME
    )

    fig.update_layout(
        title=title,
        height=500,
        margin=dict(l=0, r=0, t=50, b=0),
        coloraxis_colorbar=dict(title=value_col.replace('_', ' ').title())
    )

    return fig


def create_respondent_map(df: pd.DataFrame, lat_col: str = 'latitude',
                          lon_col: str = 'longitude', group_col: str = 'group',
                          popup_cols: Optional[Sequence[str]] = None,
                          center: Optional[Tuple[float, float]] = None,
                          zoom_start: int = MAP_ZOOM, max_points: int = 1000) -> folium.Map:
    """
    Create a map with one circle marker per respondent, colored by group

    Args:
        df: Respondents with coordinates
        lat_col: Name of latitude column
        lon_col: Name of longitude column
        group_col: Column that drives marker color
        popup_cols: Columns listed in the marker popup
        center: Map center (lat, lon). If None, use mean of data
        zoom_start: Initial zoom level
        max_points: Maximum number of points to plot

    Returns:
        Folium map object
    """
    # Sample if too many points
    if len(df) > max_points:
        df_sample = df.sample(n=max_points, random_state=42)
    else:
        df_sample = df.copy()

    # Remove missing coordinates
    df_sample = df_sample.dropna(subset=[lat_col, lon_col])

    # Determine map center
    if center is None:
        if len(df_sample) > 0:
            center = (df_sample[lat_col].mean(), df_sample[lon_col].mean())
        else:
            center = tuple(MAP_CENTER)

    m = folium.Map(
        location=center,
        zoom_start=zoom_start,
        tiles='OpenStreetMap'
    )

    colors = group_palette(sorted(df_sample[group_col].unique()))

    for idx, row in df_sample.iterrows():
        popup_text = f"<b>Respondent:</b> {idx}<br><b>{group_col.title()}:</b> {row[group_col]}<br>"
        for col in popup_cols or []:
            value = row[col]
            if isinstance(value, float):
                value = f"{value:.2f}"
            popup_text += f"<b>{col.replace('_', ' ').title()}:</b> {value}<br>"

        color = colors[row[group_col]]
        folium.CircleMarker(
            location=[row[lat_col], row[lon_col]],
            radius=5,
            popup=folium.Popup(popup_text, max_width=300),
            color=color,
            fill=True,
            fillColor=color,
            fillOpacity=0.7
        ).add_to(m)

    return m


def save_map(figure, path: Path) -> Path:
    """Write a plotly figure or folium map to HTML"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(figure, folium.Map):
        figure.save(str(path))
    else:
        figure.write_html(str(path), include_plotlyjs='cdn')
    return path
