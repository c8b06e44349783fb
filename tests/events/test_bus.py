"""Tests for EventBus dispatch."""

import pytest

from barricadewall.core import EntityId
from barricadewall.events import Deployed, EntityBuilt, EventBus, ItemDeployed


def test_emit_reaches_handlers_in_subscription_order():
    bus = EventBus()
    order = []
    bus.subscribe(EntityBuilt, lambda e: order.append("first"))
    bus.subscribe(EntityBuilt, lambda e: order.append("second"))

    reached = bus.emit(EntityBuilt(planner=None, entity=EntityId(1)))

    assert reached == 2
    assert order == ["first", "second"]


def test_emit_is_keyed_by_exact_event_type():
    bus = EventBus()
    built, deployed = [], []
    bus.subscribe(EntityBuilt, built.append)
    bus.subscribe(ItemDeployed, deployed.append)

    bus.emit(ItemDeployed(planner=None, entity=EntityId(2)))

    assert built == []
    assert deployed == [ItemDeployed(planner=None, entity=EntityId(2))]


def test_emit_without_subscribers_reaches_nobody():
    assert EventBus().emit(Deployed(entity=None, player=None)) == 0


def test_unsubscribe():
    bus = EventBus()
    seen = []
    bus.subscribe(EntityBuilt, seen.append)

    assert bus.unsubscribe(EntityBuilt, seen.append) is True
    assert bus.unsubscribe(EntityBuilt, seen.append) is False

    bus.emit(EntityBuilt(planner=None, entity=None))
    assert seen == []


def test_handler_errors_propagate_to_emitter():
    bus = EventBus()

    def broken(event):
        raise RuntimeError("handler failed")

    bus.subscribe(EntityBuilt, broken)
    with pytest.raises(RuntimeError, match="handler failed"):
        bus.emit(EntityBuilt(planner=None, entity=None))
