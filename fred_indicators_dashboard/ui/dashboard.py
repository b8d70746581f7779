"""Streamlit dashboard for FRED economic indicators.

Run with the proxy up (``fred-proxy``):

    streamlit run fred_indicators_dashboard/ui/dashboard.py
"""

import asyncio
import logging

import streamlit as st
import plotly.graph_objects as go

from fred_indicators_dashboard.config import NAV_CATEGORIES, Settings
from fred_indicators_dashboard.indicators import IndicatorCalculator
from fred_indicators_dashboard.indicators.calculator import DashboardResult, IndicatorResult


logger = logging.getLogger(__name__)

CHART_HEIGHT = 250


def _hex_to_rgba(color: str, alpha: float) -> str:
    color = color.lstrip("#")
    red, green, blue = (int(color[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha})"


def build_indicator_chart(indicator: IndicatorResult) -> go.Figure | None:
    """Build the line or area chart for one panel; None when there is nothing to plot."""
    if not indicator.has_data:
        return None

    labels = [point.label for point in indicator.points]
    values = [point.value for point in indicator.points]

    trace = go.Scatter(
        x=labels, y=values,
        mode="lines", line=dict(color=indicator.color, width=2, shape="spline"),
        name=indicator.series_id,
        customdata=[point.month for point in indicator.points],
        hovertemplate="%{customdata}: %{y:.2f}<extra></extra>",
    )
    if indicator.chart == "area":
        trace.update(fill="tozeroy", fillcolor=_hex_to_rgba(indicator.fill or indicator.color, 0.6))

    fig = go.Figure(trace)
    fig.update_layout(
        height=CHART_HEIGHT, margin=dict(l=0, r=10, t=10, b=0),
        paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
        xaxis=dict(
            type="category", showgrid=True, gridcolor="#e5e7eb", griddash="dash",
            tickfont=dict(size=12),
        ),
        yaxis=dict(showgrid=True, gridcolor="#e5e7eb", griddash="dash", tickfont=dict(size=12)),
        hovermode="x unified",
    )
    return fig


def load_dashboard(settings: Settings | None = None) -> DashboardResult:
    """Fetch and aggregate every panel; blocks until all series settle."""
    calc = IndicatorCalculator(settings)
    return asyncio.run(calc.calculate())


def render_sidebar() -> None:
    """Render the static indicator navigation."""
    with st.sidebar:
        st.markdown(
            """<div style="margin-bottom: 1.5rem;">
                <div style="font-size: 1.25rem; font-weight: 700; color: #111827;">FRED Indicators</div>
                <div style="font-size: 0.85rem; color: #6b7280;">Economic Data Dashboard</div>
            </div>""",
            unsafe_allow_html=True,
        )
        for i, item in enumerate(NAV_CATEGORIES):
            active = i == 0
            background = "#2563eb" if active else "transparent"
            color = "#ffffff" if active else "#374151"
            st.markdown(
                f"""<div style="display: flex; justify-content: space-between; padding: 0.6rem 1rem;
                    border-radius: 8px; background: {background}; color: {color};
                    font-size: 0.875rem; font-weight: 500; margin-bottom: 0.25rem;">
                    <span>{item}</span><span>&rsaquo;</span>
                </div>""",
                unsafe_allow_html=True,
            )


def render_indicator_panel(indicator: IndicatorResult, result: DashboardResult) -> None:
    """Render one chart card, or its empty-state placeholder."""
    with st.container(border=True):
        st.markdown(
            f"""<div style="margin-bottom: 0.5rem;">
                <div style="font-size: 1.1rem; font-weight: 600; color: #111827;">{indicator.title}</div>
                <div style="font-size: 0.85rem; color: #6b7280;">{indicator.subtitle}</div>
            </div>""",
            unsafe_allow_html=True,
        )

        fig = build_indicator_chart(indicator)
        if fig is not None:
            st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})
        else:
            st.markdown(
                f"""<div style="height: {CHART_HEIGHT}px; display: flex; align-items: center;
                    justify-content: center; color: #9ca3af;">No data available</div>""",
                unsafe_allow_html=True,
            )

        st.markdown(
            f"""<div style="font-size: 0.75rem; color: #6b7280; margin-top: 0.5rem;">
                Last Updated: {result.loaded_at.strftime('%Y-%m-%d')}
                <a href="{indicator.details_url}" target="_blank" rel="noopener noreferrer"
                   style="color: #2563eb; margin-left: 0.5rem;">View Details &rarr;</a>
            </div>""",
            unsafe_allow_html=True,
        )


def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="Economic Indicators Dashboard",
        page_icon="",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.markdown(
        """
        <style>
            .stApp { background-color: #f9fafb; }
            #MainMenu, footer { visibility: hidden; }
        </style>
        """,
        unsafe_allow_html=True,
    )

    render_sidebar()

    st.markdown(
        """<div style="margin-bottom: 1.5rem;">
            <h1 style="margin: 0; font-size: 1.9rem; color: #111827;">Economic Indicators Dashboard</h1>
            <div style="color: #4b5563; margin-top: 0.25rem;">
                Real-time economic data from the Federal Reserve Economic Data (FRED) system
            </div>
        </div>""",
        unsafe_allow_html=True,
    )

    with st.spinner("Loading economic data..."):
        result = load_dashboard()

    if result.failed:
        logger.warning(f"Rendering without data for: {', '.join(result.failed)}")

    indicators = list(result.indicators.values())
    for row_start in range(0, len(indicators), 2):
        columns = st.columns(2)
        for column, indicator in zip(columns, indicators[row_start:row_start + 2]):
            with column:
                render_indicator_panel(indicator, result)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    main()
