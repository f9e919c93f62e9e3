from abc import abstractmethod
from typing import Protocol

from vault.domain.shared.event import Event, EventHandlerFunc


class EventBus(Protocol):

    @abstractmethod
    def subscribe(self, event_type: type[Event], handler: EventHandlerFunc) -> None:
        ...

    @abstractmethod
    def unsubscribe(self, event_type: type[Event], handler: EventHandlerFunc) -> None:
        ...

    @abstractmethod
    async def publish(self, event: Event) -> None:
        ...
