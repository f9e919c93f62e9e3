"""Unit tests for InMemoryEventBus."""

import pytest

from vault.domain.shared.event import Event
from vault.infrastructure.event.memory_bus import InMemoryEventBus


class PingEvent(Event):
    message: str


class PongEvent(Event):
    message: str


class TestInMemoryEventBus:
    @pytest.mark.asyncio
    async def test_delivers_in_subscription_order(self):
        bus = InMemoryEventBus()
        calls: list[str] = []

        async def first(event: PingEvent) -> None:
            calls.append(f"first:{event.message}")

        async def second(event: PingEvent) -> None:
            calls.append(f"second:{event.message}")

        bus.subscribe(PingEvent, first)
        bus.subscribe(PingEvent, second)

        await bus.publish(PingEvent(message="hi"))

        assert calls == ["first:hi", "second:hi"]

    @pytest.mark.asyncio
    async def test_only_matching_event_type_is_delivered(self):
        bus = InMemoryEventBus()
        received: list[Event] = []

        async def handler(event: Event) -> None:
            received.append(event)

        bus.subscribe(PongEvent, handler)

        await bus.publish(PingEvent(message="ignored"))

        assert received == []

    @pytest.mark.asyncio
    async def test_failing_handler_is_isolated(self, caplog):
        bus = InMemoryEventBus()
        calls: list[str] = []

        async def broken(event: PingEvent) -> None:
            raise RuntimeError("boom")

        async def healthy(event: PingEvent) -> None:
            calls.append(event.message)

        bus.subscribe(PingEvent, broken)
        bus.subscribe(PingEvent, healthy)

        await bus.publish(PingEvent(message="still delivered"))

        assert calls == ["still delivered"]
        assert "failed on PingEvent" in caplog.text

    @pytest.mark.asyncio
    async def test_late_subscriber_gets_no_replay(self):
        bus = InMemoryEventBus()
        received: list[Event] = []

        await bus.publish(PingEvent(message="before"))

        async def handler(event: Event) -> None:
            received.append(event)

        bus.subscribe(PingEvent, handler)
        await bus.publish(PingEvent(message="after"))

        assert [e.message for e in received] == ["after"]  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_unsubscribe_stops_delivery(self):
        bus = InMemoryEventBus()
        received: list[Event] = []

        async def handler(event: Event) -> None:
            received.append(event)

        bus.subscribe(PingEvent, handler)
        bus.unsubscribe(PingEvent, handler)
        bus.unsubscribe(PingEvent, handler)  # unknown handler is ignored

        await bus.publish(PingEvent(message="x"))

        assert received == []

    @pytest.mark.asyncio
    async def test_unsubscribe_during_delivery_keeps_current_event(self):
        bus = InMemoryEventBus()
        calls: list[str] = []

        async def second(event: PingEvent) -> None:
            calls.append("second")

        async def first(event: PingEvent) -> None:
            calls.append("first")
            bus.unsubscribe(PingEvent, second)

        bus.subscribe(PingEvent, first)
        bus.subscribe(PingEvent, second)

        await bus.publish(PingEvent(message="a"))
        await bus.publish(PingEvent(message="b"))

        assert calls == ["first", "second", "first"]
