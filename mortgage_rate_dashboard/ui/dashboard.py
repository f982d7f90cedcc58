"""Streamlit dashboard for Treasury yields and mortgage rates.

Sections:
- Rate cards: 10-year yield, estimated and published mortgage rates
- Spread control: re-derives estimates from the loaded series, no refetch
- Trend chart: yield, estimated curves, and weekly survey rates
- Inflation: CPI and Core PCE readings and chart
- Payment calculator and CSV export
"""

from datetime import date

import plotly.graph_objects as go
import streamlit as st

from mortgage_rate_dashboard.config import (
    SPREAD_MAX,
    SPREAD_MIN,
    SPREAD_PRESETS,
    SPREAD_STEP,
    Settings,
    TimeRange,
)
from mortgage_rate_dashboard.data.fred_fetcher import FredFetcher
from mortgage_rate_dashboard.indicators.calculator import FatalDataUnavailable
from mortgage_rate_dashboard.indicators.export import export_filename, export_frame
from mortgage_rate_dashboard.indicators.loader import SnapshotLoader
from mortgage_rate_dashboard.indicators.payments import compare_extra_payment
from mortgage_rate_dashboard.indicators.transforms import (
    moving_average,
    normalize,
    percent_change,
    value_range,
    volatility,
)
from mortgage_rate_dashboard.models.snapshot import DashboardSnapshot, InflationReading


RANGE_LABELS = {
    TimeRange.DAYS_30: "30 Days",
    TimeRange.DAYS_90: "90 Days",
    TimeRange.DAYS_180: "180 Days",
    TimeRange.DAYS_365: "1 Year",
}

MOVING_AVERAGE_WINDOW = 20

COLORS = {
    "treasury": "#3b82f6",
    "estimated_30": "#f59e0b",
    "estimated_15": "#d946ef",
    "actual_30": "#10b981",
    "actual_15": "#8b5cf6",
    "cpi": "#ef4444",
    "core_pce": "#3b82f6",
}


def format_delta(delta: float) -> tuple[str, str]:
    """Format change with color; rising rates are red."""
    if delta > 0:
        return f"+{delta:.2f}", "#ef4444"
    elif delta < 0:
        return f"{delta:.2f}", "#10b981"
    return "0.00", "#6b7280"


def render_card(title: str, value: float | None, subtitle: str, delta: float | None = None) -> None:
    """Render a single rate card."""
    shown = "N/A" if value is None else f"{value:.2f}%"
    delta_html = ""
    if delta is not None:
        delta_str, delta_color = format_delta(delta)
        delta_html = (
            f'<span style="font-size: 1rem; color: {delta_color}; '
            f"font-family: 'SF Mono', monospace;\">{delta_str}</span>"
        )

    st.markdown(
        f"""<div style="background: #1e293b; border: 1px solid #334155; border-radius: 8px; padding: 1rem 1.5rem; margin-bottom: 1rem;">
            <div style="color: #94a3b8; font-size: 0.7rem; text-transform: uppercase; letter-spacing: 0.1em;">{title}</div>
            <div style="display: flex; align-items: baseline; gap: 0.75rem; margin-top: 0.25rem;">
                <span style="font-size: 2.25rem; font-weight: 700; color: #f1f5f9; font-family: 'SF Mono', monospace;">{shown}</span>
                {delta_html}
            </div>
            <div style="color: #64748b; font-size: 0.75rem; margin-top: 0.25rem;">{subtitle}</div>
        </div>""",
        unsafe_allow_html=True,
    )


# =============================================================================
# RATES
# =============================================================================

def render_rate_cards(snapshot: DashboardSnapshot) -> None:
    """Render the yield card and the 2x2 mortgage grid."""
    ty = snapshot.ten_year_yield
    render_card(
        "10-Year Treasury Yield",
        ty.current,
        f"Previous {ty.previous:.2f}% | As of {ty.last_updated.isoformat()}",
        delta=ty.delta,
    )

    rates = snapshot.mortgage_rates
    col1, col2 = st.columns(2)
    with col1:
        render_card("Estimated 15-Year Mortgage", rates.estimated_15_year, "Treasury + spread")
        render_card("Estimated 30-Year Mortgage", rates.estimated, "Treasury + spread")
    with col2:
        if rates.actual_15_year is not None:
            render_card("Actual 15-Year Mortgage", rates.actual_15_year, "Weekly survey average")
        if rates.actual is not None:
            render_card("Actual 30-Year Mortgage", rates.actual, "Weekly survey average")


def render_spread_control(loader: SnapshotLoader) -> None:
    """Slider and presets; a change only re-derives the estimates."""
    preset_cols = st.columns(len(SPREAD_PRESETS))
    for col, (label, value) in zip(preset_cols, SPREAD_PRESETS.items()):
        with col:
            if st.button(f"{label} ({value:.2f}%)", use_container_width=True):
                st.session_state["spread"] = value

    spread = st.slider(
        "Lender spread over the 10-year yield (percentage points)",
        min_value=SPREAD_MIN,
        max_value=SPREAD_MAX,
        step=SPREAD_STEP,
        key="spread",
    )
    if loader.snapshot is not None and loader.snapshot.spread != spread:
        loader.recompute(spread)


def render_trend_chart(snapshot: DashboardSnapshot, show_average: bool) -> None:
    """Yield, estimated curves, and survey rates on the treasury dates."""
    history = snapshot.history
    labels = list(history.labels)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels, y=[obs.value for obs in history.treasury_yield],
        mode="lines", line=dict(color=COLORS["treasury"], width=2),
        name="10-Year Treasury Yield",
    ))
    fig.add_trace(go.Scatter(
        x=labels, y=[obs.value for obs in history.estimated_mortgage],
        mode="lines", line=dict(color=COLORS["estimated_30"], width=2, dash="dash"),
        name="Estimated 30-Year Mortgage",
    ))
    fig.add_trace(go.Scatter(
        x=labels, y=[obs.value for obs in history.estimated_15_year_mortgage],
        mode="lines", line=dict(color=COLORS["estimated_15"], width=2, dash="dot"),
        name="Estimated 15-Year Mortgage",
    ))

    # Weekly survey rates are gapped on daily labels; bridge the gaps
    for points, name, color in (
        (history.actual_mortgage, "Actual 30-Year Mortgage", COLORS["actual_30"]),
        (history.actual_15_year_mortgage, "Actual 15-Year Mortgage", COLORS["actual_15"]),
    ):
        if points:
            fig.add_trace(go.Scatter(
                x=labels, y=[p.value for p in points],
                mode="lines+markers", connectgaps=True,
                line=dict(color=color, width=2), marker=dict(size=5),
                name=name,
            ))

    if show_average:
        averages = moving_average([obs.value for obs in history.treasury_yield], MOVING_AVERAGE_WINDOW)
        if averages:
            fig.add_trace(go.Scatter(
                x=labels[MOVING_AVERAGE_WINDOW - 1:], y=averages,
                mode="lines", line=dict(color="#94a3b8", width=1),
                name=f"{MOVING_AVERAGE_WINDOW}-Day Average (10Y)",
            ))

    fig.update_layout(
        height=400, margin=dict(l=0, r=0, t=30, b=0),
        paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        hovermode="x unified",
        yaxis=dict(ticksuffix="%", gridcolor="#1e293b"),
        xaxis=dict(gridcolor="#1e293b", tickformat="%b %d"),
    )
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def render_range_stats(snapshot: DashboardSnapshot) -> None:
    """Summary statistics of the 10-year yield over the selected range."""
    values = [obs.value for obs in snapshot.history.treasury_yield]
    bounds = value_range(values)
    change = percent_change(values[-1], values[0])

    col1, col2, col3 = st.columns(3)
    col1.metric("Range", f"{bounds.min:.2f}% - {bounds.max:.2f}%")
    col2.metric("Volatility (std dev)", f"{volatility(values):.3f}")
    col3.metric("Change over range", f"{change * 100:+.2f}%")


# =============================================================================
# INFLATION
# =============================================================================

def render_inflation_reading(name: str, reading: InflationReading) -> None:
    annual = "N/A" if reading.annual_rate is None else f"{reading.annual_rate:.2f}%"
    st.metric(
        f"{name} (YoY)",
        annual,
        delta=f"{reading.monthly_rate:+.3f}% MoM",
        delta_color="inverse",
    )
    st.caption(f"Index {reading.current:.3f} as of {reading.as_of.isoformat()}")


def render_inflation(snapshot: DashboardSnapshot, normalized: bool) -> None:
    """CPI and Core PCE readings and chart on their shared monthly dates."""
    if snapshot.inflation is None:
        return

    st.markdown("### Inflation")
    col1, col2 = st.columns(2)
    with col1:
        render_inflation_reading("CPI - All Items", snapshot.inflation.cpi)
    with col2:
        render_inflation_reading("Core PCE", snapshot.inflation.core_pce)

    history = snapshot.history
    labels = list(history.inflation_labels)
    fig = go.Figure()
    for points, name, color in (
        (history.cpi, "CPI - All Items", COLORS["cpi"]),
        (history.core_pce, "Core PCE", COLORS["core_pce"]),
    ):
        if not points:
            continue
        values = [p.value for p in points]
        if normalized:
            present = [v for v in values if v is not None]
            scaled = iter(normalize(present))
            values = [None if v is None else next(scaled) for v in values]
        fig.add_trace(go.Scatter(
            x=labels, y=values, mode="lines+markers", connectgaps=True,
            line=dict(color=color, width=2), name=name,
        ))

    fig.update_layout(
        height=320, margin=dict(l=0, r=0, t=30, b=0),
        paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        hovermode="x unified",
    )
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


# =============================================================================
# CALCULATOR & EXPORT
# =============================================================================

def render_payment_calculator(snapshot: DashboardSnapshot) -> None:
    """Monthly payment estimate at the current rates."""
    rates = snapshot.mortgage_rates
    col1, col2, col3 = st.columns(3)
    with col1:
        loan_amount = st.number_input("Loan amount", min_value=10000, value=400000, step=10000)
        term = st.radio("Term", options=[30, 15], horizontal=True, format_func=lambda t: f"{t}-year")
    with col2:
        default_rate = rates.actual if term == 30 else rates.actual_15_year
        if default_rate is None:
            default_rate = rates.estimated if term == 30 else rates.estimated_15_year
        rate = st.number_input("Interest rate (%)", min_value=0.0, value=float(default_rate), step=0.1)
        extra = st.number_input("Extra principal / month", min_value=0, value=0, step=50)
    with col3:
        property_tax = st.number_input("Property tax / year", min_value=0, value=6000, step=100)
        insurance = st.number_input("Insurance / year", min_value=0, value=1500, step=100)
        pmi = st.number_input("PMI / month", min_value=0, value=0, step=50)

    comparison = compare_extra_payment(
        loan_amount, rate, term, extra,
        property_tax=property_tax, home_insurance=insurance, pmi=pmi,
    )
    result = comparison.with_extra
    m1, m2, m3 = st.columns(3)
    m1.metric("Monthly payment", f"${result.monthly_payment:,.0f}")
    m2.metric("Total interest", f"${result.total_interest:,.0f}")
    m3.metric("Payoff", f"{result.months_to_payoff / 12:.1f} years")
    if extra > 0:
        st.caption(
            f"Extra principal saves ${comparison.interest_saved:,.0f} in interest "
            f"and {comparison.months_saved} months."
        )


def render_export(snapshot: DashboardSnapshot, time_range: TimeRange) -> None:
    frame = export_frame(snapshot)
    st.download_button(
        "Export CSV",
        data=frame.to_csv(index=False, float_format="%.2f", na_rep="N/A"),
        file_name=export_filename(time_range, date.today()),
        mime="text/csv",
    )


# =============================================================================
# MAIN APP
# =============================================================================

def get_loader() -> SnapshotLoader:
    """One loader per browser session."""
    if "loader" not in st.session_state:
        st.session_state["loader"] = SnapshotLoader(FredFetcher(Settings()))
    return st.session_state["loader"]


def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(page_title="Mortgage Rate Dashboard", layout="wide")

    settings = Settings()
    if "spread" not in st.session_state:
        st.session_state["spread"] = settings.default_spread

    st.markdown("## Treasury Yields & Mortgage Rates")
    st.caption("Data: FRED (St. Louis Fed). Estimates = 10-year yield + lender spread.")

    col_range, col_refresh = st.columns([4, 1])
    with col_range:
        time_range = st.radio(
            "History Period",
            options=list(RANGE_LABELS.keys()),
            index=list(RANGE_LABELS.keys()).index(TimeRange.default()),
            format_func=RANGE_LABELS.get,
            horizontal=True,
            label_visibility="collapsed",
        )
    with col_refresh:
        refresh = st.button("Refresh", use_container_width=True)

    try:
        loader = get_loader()
    except ValueError as e:
        st.error(f"Configuration error: {e}")
        return

    needs_load = (
        refresh
        or loader.bundle is None
        or loader.bundle.time_range != time_range
    )
    if needs_load:
        try:
            with st.spinner("Loading..."):
                loader.load_sync(time_range, st.session_state["spread"])
        except FatalDataUnavailable as e:
            st.error(f"Unable to load data: {e}")
            if loader.snapshot is None:
                st.button("Try Again")
                return

    render_spread_control(loader)
    snapshot = loader.snapshot

    render_rate_cards(snapshot)
    show_average = st.checkbox(f"Show {MOVING_AVERAGE_WINDOW}-day average of the 10-year yield")
    render_trend_chart(snapshot, show_average)
    render_range_stats(snapshot)

    normalized = st.checkbox("Normalize inflation indices to 0-1")
    render_inflation(snapshot, normalized)

    with st.expander("Payment Calculator"):
        render_payment_calculator(snapshot)

    render_export(snapshot, time_range)


if __name__ == "__main__":
    main()
