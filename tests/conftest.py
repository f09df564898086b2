"""Test configuration for pytest.

:author: Shay Hill
:created: 2026-10-17
"""

from __future__ import annotations

from typing import Any

import pytest

from fontmeter.baseline import BaselineEntry


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left} {op} {right}"]
    return None


BASELINE_SIZE = 12

BASELINE_WIDTHS = {"a": 6.0, "b": 6.5, "W": 11.25, " ": 3.0}


@pytest.fixture
def baseline_widths() -> dict[str, float]:
    """Return a fresh copy of the baseline widths."""
    return dict(BASELINE_WIDTHS)


@pytest.fixture
def baseline() -> BaselineEntry:
    """Return a baseline entry at BASELINE_SIZE."""
    return BaselineEntry(BASELINE_SIZE, BASELINE_WIDTHS)
