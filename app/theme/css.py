"""Phosphor icons and the pit-lane dark theme."""

from __future__ import annotations

import streamlit as st

_PHOSPHOR_CDN = "https://unpkg.com/@phosphor-icons/web@2.0.3/src"

# Card accents, keyed by the metric card variant.
_ACCENTS = {
    "season": "#A78BFA",
    "stops": "#F87171",
    "circuit": "#38BDF8",
    "team": "#F472B6",
    "timing": "#93C5FD",
    "selection": "#FFA500",
}


def _accent_rules() -> str:
    return "\n".join(
        f".metric-card.{name} {{ border-left-color: {color}; }}\n"
        f".metric-card.{name} .metric-icon {{ color: {color}; }}"
        for name, color in _ACCENTS.items()
    )


_BASE_CSS = """
.stApp {
    background: #10131A;
    color: #E5E7EB;
}
.block-container {
    padding: 0.8rem 2rem 2rem 2rem;
    max-width: 1440px;
}
header[data-testid="stHeader"] { background: transparent; }
footer { display: none; }

.pit-summary { margin: 0.4rem 0 1.2rem 0; }
.pit-summary-title {
    color: #6B7280;
    font-size: 0.62rem;
    letter-spacing: 0.12em;
    text-transform: uppercase;
    margin: 0 0 0.35rem 0.15rem;
}
.pit-kpis {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(150px, 1fr));
    gap: 0.6rem;
}

.metric-card {
    position: relative;
    display: flex;
    align-items: center;
    gap: 0.6rem;
    min-height: 68px;
    padding: 0.6rem 0.8rem;
    background: #181C26;
    border: 1px solid #232837;
    border-left: 3px solid #4B5563;
    border-radius: 6px;
}
.metric-icon {
    font-size: 1.4rem;
    color: #9CA3AF;
    flex-shrink: 0;
}
.metric-body {
    display: flex;
    flex-direction: column;
    min-width: 0;
}
.metric-label {
    color: #9CA3AF;
    font-size: 0.62rem;
    letter-spacing: 0.06em;
    text-transform: uppercase;
}
.metric-value {
    color: #F9FAFB;
    font-size: 1.05rem;
    font-weight: 700;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
}
.metric-sub {
    color: #6B7280;
    font-size: 0.66rem;
}

.metric-card.has-tooltip { cursor: help; }
.metric-tooltip {
    display: none;
    position: absolute;
    left: 0.6rem;
    bottom: calc(100% + 0.35rem);
    z-index: 1000;
    padding: 0.4rem 0.65rem;
    background: #262B3A;
    border-radius: 4px;
    color: #E5E7EB;
    font-size: 0.74rem;
    white-space: nowrap;
}
.metric-card.has-tooltip:hover .metric-tooltip { display: block; }

.section-header {
    color: #F3F4F6;
    font-size: 1rem;
    font-weight: 700;
    margin: 1.4rem 0 0.25rem 0;
    padding-left: 0.5rem;
    border-left: 3px solid #E10600;
}
.section-header.first { margin-top: 0.4rem; }
.chart-caption {
    color: #9CA3AF;
    font-size: 0.86rem;
    line-height: 1.45;
    margin-bottom: 0.3rem;
}

.stSlider label { color: #9CA3AF !important; }
.stSlider [data-baseweb="slider"] div[role="slider"] {
    background: #E10600;
    border-color: #E10600;
}
.stButton > button {
    background: #181C26 !important;
    color: #E5E7EB !important;
    border: 1px solid #2D3343 !important;
}
.stButton > button:hover:enabled { border-color: #FFA500 !important; }

.app-footer {
    color: #4B5563;
    font-size: 0.74rem;
    text-align: center;
    margin-top: 1.8rem;
    padding-top: 0.8rem;
    border-top: 1px solid #1F2430;
}
"""


def inject_theme() -> None:
    """Load the icon font and the page stylesheet."""
    st.markdown(
        f"""
        <link rel="stylesheet" href="{_PHOSPHOR_CDN}/regular/style.css" />
        <link rel="stylesheet" href="{_PHOSPHOR_CDN}/bold/style.css" />
        """,
        unsafe_allow_html=True,
    )
    st.markdown(
        f"<style>{_BASE_CSS}\n{_accent_rules()}</style>",
        unsafe_allow_html=True,
    )
