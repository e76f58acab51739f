"""Cached backend fetchers for the Streamlit page."""

from __future__ import annotations

import streamlit as st

from pitwall import PitwallClient
from pitwall.models import DriverStrategy, RaceResult, StintAnalysis

from .api_logging import log_api_call
from .constants import API_URL
from .services.tire_strategy import TireStrategyService


@st.cache_resource
def get_service() -> TireStrategyService:
    """One backend client per server process, shared across reruns."""
    return TireStrategyService(PitwallClient(base_url=API_URL))


@st.cache_data(ttl=600)
@log_api_call
def fetch_strategy(
    year: int, event: str, session: str,
) -> tuple[list[DriverStrategy], list[RaceResult]]:
    return get_service().fetch_session(year, event, session)


@st.cache_data(ttl=600)
@log_api_call
def fetch_stint_analysis(year: int, event: str, session: str) -> list[StintAnalysis]:
    return get_service().fetch_stint_analysis(year, event, session)
