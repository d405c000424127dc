"""Visualization functions for the inflation comparison."""

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from .config import CHART_COLORS, SAVED_MONEY
from .processing import retained_value_series


# Chart constants
LINE_WIDTH = 1.5
MARKER_SIZE = 9
NUM_ROWS = 2

# Dark theme layout colors
THEME = {
    'background': '#1a1a2e',
    'paper': '#16213e',
    'grid': '#2a2a4a',
    'text': '#e8e8e8',
    'zero_line': 'rgba(255, 255, 255, 0.3)',
}


def enable_unified_spikeline(fig, num_rows, x_range=None, spike_color='rgba(255, 255, 255, 0.5)'):
    """
    Enable spike lines that span all subplots in a multi-row figure.

    Args:
        fig: Plotly figure with subplots
        num_rows: Number of subplot rows
        x_range: Optional tuple of (first_year, last_year) for the x-axis
        spike_color: Color for the spike line
    """
    bottom_xaxis = f'x{num_rows}'
    for row in range(1, num_rows):
        fig.update_xaxes(row=row, col=1, matches=bottom_xaxis)

    if x_range is not None:
        fig.update_xaxes(range=[x_range[0] - 0.5, x_range[1] + 0.5])

    fig.update_xaxes(
        showspikes=True,
        spikemode='across',
        spikesnap='cursor',
        spikecolor=spike_color,
        spikethickness=1,
        spikedash='dot',
    )


def create_comparison_chart(trackers, money=SAVED_MONEY, colors=None):
    """
    Create a chart comparing yearly inflation across countries.

    Two subplots:
    - Row 1: Annual inflation in % with the maximum and minimum marked
    - Row 2: Value of the saved cash at the end of each year

    Args:
        trackers: Iterable of filled InflationTracker objects, one per country
        money: Cash saved at the start of the first year
        colors: Optional color scheme dict (defaults to CHART_COLORS)

    Returns:
        Plotly figure object
    """
    colors = colors or CHART_COLORS

    fig = make_subplots(
        rows=NUM_ROWS, cols=1,
        row_heights=[0.5, 0.5],
        shared_xaxes=True,
        vertical_spacing=0.08,
        subplot_titles=('Annual Inflation Rate (%)', f'Value of {money:,.0f} Saved in Cash'),
    )

    first_year, last_year = None, None
    for tracker in trackers:
        if len(tracker) == 0:
            print(f"Warning: No data to chart for {tracker.country_name or 'unnamed tracker'}")
            continue

        country = tracker.country_name
        color = colors.get(country, '#ffffff')
        rates = tracker.to_series()
        years = list(rates.index)
        first_year = years[0] if first_year is None else min(first_year, years[0])
        last_year = years[-1] if last_year is None else max(last_year, years[-1])

        fig.add_trace(
            go.Scatter(
                x=years, y=rates * 100,
                name=country,
                legendgroup=country,
                line=dict(color=color, width=LINE_WIDTH),
                hovertemplate=f"{country}: %{{y:.2f}}%<extra></extra>",
            ),
            row=1, col=1
        )

        max_year, max_val = tracker.get_max()
        min_year, min_val = tracker.get_min()
        fig.add_trace(
            go.Scatter(
                x=[max_year, min_year], y=[max_val * 100, min_val * 100],
                name=f"{country} max/min",
                legendgroup=country,
                mode='markers',
                marker=dict(color=[colors.get('max', color), colors.get('min', color)], size=MARKER_SIZE),
                hovertemplate=f"{country} %{{x}}: %{{y:.2f}}%<extra></extra>",
                showlegend=False,
            ),
            row=1, col=1
        )

        retained = retained_value_series(rates, money)
        fig.add_trace(
            go.Scatter(
                x=years, y=retained,
                name=f"{country} savings",
                legendgroup=country,
                line=dict(color=color, width=LINE_WIDTH, dash='dot'),
                hovertemplate=f"{country}: %{{y:,.2f}}<extra></extra>",
                showlegend=False,
            ),
            row=2, col=1
        )

    fig.add_hline(y=0, line_dash='dash', line_color=THEME['zero_line'], line_width=1, row=1, col=1)

    fig.update_layout(
        height=650,
        hovermode='x unified',
        paper_bgcolor=THEME['paper'],
        plot_bgcolor=THEME['background'],
        font=dict(color=THEME['text'], size=10),
        legend=dict(orientation='h', yanchor='bottom', y=1.04, xanchor='center', x=0.5,
                    bgcolor='rgba(0,0,0,0)'),
        margin=dict(t=80, l=60, r=40, b=40),
    )
    fig.update_xaxes(gridcolor=THEME['grid'], dtick=2)
    fig.update_yaxes(gridcolor=THEME['grid'])
    fig.update_yaxes(title_text='%', row=1, col=1)
    fig.update_yaxes(title_text='Value', row=2, col=1)

    x_range = (first_year, last_year) if first_year is not None else None
    enable_unified_spikeline(fig, num_rows=NUM_ROWS, x_range=x_range, spike_color='rgba(255, 255, 255, 0.7)')

    return fig


def save_comparison_chart(fig, path, include_plotlyjs=True):
    """
    Export chart to HTML file.

    Args:
        fig: Plotly figure from create_comparison_chart
        path: Output file path
        include_plotlyjs: Whether to include plotly.js ('cdn', True, False)
    """
    fig.write_html(path, include_plotlyjs=include_plotlyjs)
