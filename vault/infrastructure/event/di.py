"""Dependency injection provider for the event system."""

import logging

from dishka import Provider, Scope, provide

from vault.domain.record.event import RECORD_EVENTS
from vault.domain.record.listener import RecordEventLogger
from vault.domain.shared.port.event_bus import EventBus
from vault.infrastructure.event.memory_bus import InMemoryEventBus

logger = logging.getLogger(__name__)


class EventProvider(Provider):
    """Provides the APP-scoped event bus with startup listeners attached."""

    @provide(scope=Scope.APP)
    def get_event_bus(self) -> EventBus:
        bus = InMemoryEventBus()
        record_logger = RecordEventLogger()
        for event_type in RECORD_EVENTS:
            bus.subscribe(event_type, record_logger.handle)
        logger.debug(f"Event bus created with {len(RECORD_EVENTS)} subscriptions")
        return bus
