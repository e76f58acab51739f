"""Query parameter builder for backend requests."""

from __future__ import annotations

from typing import Any


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    ``None`` values are skipped so optional filters can be passed through
    unconditionally.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, str(value)))
    return params
