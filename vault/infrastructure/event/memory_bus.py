import logging
import threading
from collections import defaultdict

from vault.domain.shared.event import Event, EventHandlerFunc
from vault.domain.shared.port.event_bus import EventBus

logger = logging.getLogger(__name__)


class InMemoryEventBus(EventBus):
    """Process-local publish/subscribe, alive for as long as the container.

    Handlers for an event type run one after another in subscription
    order. A handler that raises is logged and skipped; later handlers
    still run and the publisher never sees the error. Events are not
    kept, so late subscribers only see events published after they join.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type[Event], list[EventHandlerFunc]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_type: type[Event], handler: EventHandlerFunc) -> None:
        with self._lock:
            self._subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: type[Event], handler: EventHandlerFunc) -> None:
        with self._lock:
            handlers = self._subscribers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

    async def publish(self, event: Event) -> None:
        event_type = type(event)
        with self._lock:
            handlers = list(self._subscribers.get(event_type, []))

        if not handlers:
            logger.debug(f"No handlers for event {event_type.__name__}")
            return

        logger.debug(f"Publishing event {event_type.__name__} to {len(handlers)} handlers")

        for handler in handlers:
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    f"Handler {getattr(handler, '__qualname__', handler)} "
                    f"failed on {event_type.__name__}"
                )
