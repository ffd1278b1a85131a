from __future__ import annotations

import pandas as pd
import streamlit as st

from pitstops.config import get_settings
from pitstops.extract import read_pitstop_csv
from pitstops.transform import build_record_table

_SETTINGS = get_settings()


@st.cache_data(ttl=_SETTINGS.cache_ttl_seconds, show_spinner="Loading pit stops…")
def load_record_table(csv_path: str) -> pd.DataFrame:
    return build_record_table(read_pitstop_csv(csv_path))


def get_record_table() -> pd.DataFrame:
    return load_record_table(_SETTINGS.csv_path)
