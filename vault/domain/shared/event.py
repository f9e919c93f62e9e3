"""Domain events and the handler signature used by the event bus."""

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from typing import Any, Awaitable, Callable, ClassVar, Generic, NewType, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

EventId = NewType("EventId", UUID)

E = TypeVar("E", bound="Event")

EventHandlerFunc = Callable[[Any], Awaitable[None]]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_event_id() -> EventId:
    return EventId(uuid4())


class Event(BaseModel):
    """Base class for domain events.

    Subclasses are automatically registered by name in Event._registry.
    """

    id: EventId = Field(default_factory=_new_event_id)
    created_at: datetime = Field(default_factory=_utc_now)

    _registry: ClassVar[dict[str, type["Event"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry[cls.__name__] = cls


class EventListener(Generic[E], ABC):
    """Base class for event listeners."""

    @abstractmethod
    async def handle(self, event: E) -> None:
        ...
