"""Streamlit dashboard for the Wi-Fi signal simulator.

Renders:
- Distance slider (1..max distance) with strength and dBm coloured by quality
- Legend for strong/moderate/weak
- Step-by-step calculation for the selected distance
- Signal vs Distance chart with the current point highlighted
- Summary (strength, power, distance, Mbps)

Usage:
    streamlit run wifisim/dashboard_app.py
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

# Ensure project root is on sys.path when run via `streamlit run .../dashboard_app.py`
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from wifisim import (
    DEFAULT_PARAMS,
    QUALITY_BANDS,
    calculation_steps,
    compute_curve,
    compute_reading,
    format_power_dbm,
    signal_curve_figure,
    signal_quality,
    summary_rows,
)


def _legend():
    cols = st.columns(len(QUALITY_BANDS))
    for col, band in zip(cols, QUALITY_BANDS):
        col.markdown(
            f"<span style='display:inline-block; width:12px; height:12px; border-radius:6px; "
            f"background:{band.color};'></span> {band.label}",
            unsafe_allow_html=True,
        )


def _curve_frame(readings, selected_m: int) -> pd.DataFrame:
    df = pd.DataFrame(
        {
            "distance_m": [r.distance_m for r in readings],
            "strength_percent": [r.strength_percent for r in readings],
            "power_dbm": [r.power_dbm for r in readings],
        }
    )
    df["current"] = df["strength_percent"].where(df["distance_m"] == selected_m)
    return df.set_index("distance_m")


def main():
    params = DEFAULT_PARAMS
    st.set_page_config(page_title="Wi-Fi Signal Strength Simulator", layout="wide")
    st.title("Wi-Fi Signal Strength Simulator")
    st.caption(f"Frequency {params.frequency_mhz / 1000:g} GHz, transmit power {params.tx_power_mw:g} mW")

    left, right = st.columns(2)
    with left:
        distance = st.slider("Distance (m)", min_value=1, max_value=params.max_distance_m, value=6)
        reading = compute_reading(distance, params)
        band = signal_quality(reading.strength_percent)
        st.markdown(
            f"<div style='text-align:right;'><div style='font-size:24px; font-weight:bold; color:{band.color};'>"
            f"{reading.strength_percent:g}%</div><div style='font-size:12px;'>"
            f"{format_power_dbm(reading.power_dbm)}</div></div>",
            unsafe_allow_html=True,
        )
        _legend()

        st.subheader("Step-by-Step Calculation")
        for step in calculation_steps(reading, params):
            st.markdown(f"**{step.title}**  \n{step.formula}  \n{step.substituted} = **{step.result}**")

    with right:
        st.subheader("Signal vs Distance")
        readings = compute_curve(params.max_distance_m, params)
        fig = signal_curve_figure(readings, highlight_distance_m=distance)
        st.pyplot(fig)
        plt.close(fig)
        with st.expander("Curve data"):
            st.dataframe(_curve_frame(readings, distance), use_container_width=True)

        st.subheader("Summary")
        cols = st.columns(2)
        for i, (label, value) in enumerate(summary_rows(reading)):
            cols[i % 2].metric(label, value)


if __name__ == "__main__":
    main()
