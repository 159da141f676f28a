"""
Shared fixtures for modelkit tests.
"""

from typing import Any, Callable, List, Tuple

import pytest

from modelkit import i18n
from modelkit.model import Model

EventLog = List[Tuple[Any, ...]]


@pytest.fixture
def record_events() -> Callable[..., EventLog]:
    """
    Subscribe to events on a model and collect them.

    Usage:
        log = record_events(model, "valid", "invalid")
        ...
        assert [entry[0] for entry in log] == ["invalid"]
    """
    def subscribe(model: Model, *events: str) -> EventLog:
        log: EventLog = []
        for event in events:
            model.on(event, lambda *args, _event=event: log.append((_event, *args)))
        return log

    return subscribe


@pytest.fixture
def subject() -> Model:
    """A bare model with no declared validators."""
    return Model()


@pytest.fixture
def fresh_catalogs():
    """Forget cached message catalogs before and after a test."""
    i18n.clear_cache()
    yield
    i18n.clear_cache()
