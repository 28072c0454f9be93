"""
Pytest configuration and shared span fixtures.
"""

import pytest

from flamescope import tracing
from flamescope.tracing import Span


@pytest.fixture
def single_span():
    """One root span with no children."""
    return Span("main", 0, 100)


@pytest.fixture
def nested_span():
    """Root with a single child."""
    return Span("main", 0, 100, [Span("work", 10, 90)])


@pytest.fixture
def repeated_span():
    """Root with two children sharing a name."""
    return Span("main", 0, 100, [Span("task", 10, 20), Span("task", 30, 40)])


@pytest.fixture
def forest():
    """Two roots with overlapping names and a three-level subtree."""
    first = Span(
        "main",
        0,
        100,
        [
            Span("parse", 5, 40, [Span("lex", 6, 20), Span("lex", 21, 39)]),
            Span("eval", 45, 95, [Span("call", 50, 60)]),
        ],
    )
    second = Span("idle", 100, 150, [Span("parse", 110, 120)])
    return [first, second]


@pytest.fixture(autouse=True)
def clean_recorder():
    """Keep the module-level recorder empty between tests."""
    tracing.clear()
    yield
    tracing.clear()
