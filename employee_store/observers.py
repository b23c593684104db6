"""
Observer interfaces for store events.

The store is handed an observer at construction and notifies it of every
successful mutation and every rejected one. Observers are write-only sinks:
they never feed back into the store. `LoggingObserver` is the default and
routes events into the standard logging tree.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from employee_store.utils.logging import get_logger


class EventKind(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    VALIDATION_FAILED = "validation_failed"


@dataclass(frozen=True)
class StoreEvent:
    """
    A single notification from the store.

    Attributes
    ----------
    kind : EventKind
        What happened.
    operation : str
        The store operation that produced the event (e.g. "create", "update").
    key : Any
        Key of the affected record, when known.
    detail : dict
        Operation-specific values (changed field, error kind, message).
    """

    kind: EventKind
    operation: str
    key: Any = None
    detail: Dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class StoreObserver(Protocol):
    """Anything with a `notify(event)` method can observe a store."""

    def notify(self, event: StoreEvent) -> None:
        ...


class AbstractStoreObserver(abc.ABC):
    """
    Optional ABC helper for class-based observers.
    """

    @abc.abstractmethod
    def notify(self, event: StoreEvent) -> None:  # pragma: no cover - interface only
        raise NotImplementedError


class LoggingObserver(AbstractStoreObserver):
    """Log mutations at INFO and rejected operations at WARNING."""

    def __init__(self, logger_name: Optional[str] = None) -> None:
        self._log = get_logger(logger_name or "employee_store.store")

    def notify(self, event: StoreEvent) -> None:
        extra = {"event": event.kind.value, "operation": event.operation, "key": event.key}
        extra.update(event.detail)
        if event.kind is EventKind.VALIDATION_FAILED:
            self._log.warning(
                f"[{event.operation.upper()} REJECTED] {event.detail.get('error', '')}",
                extra=extra,
            )
        else:
            self._log.info(f"[{event.operation.upper()}] employee {event.key}", extra=extra)


class RecordingObserver(AbstractStoreObserver):
    """Keep every event in memory, in arrival order."""

    def __init__(self) -> None:
        self.events: List[StoreEvent] = []

    def notify(self, event: StoreEvent) -> None:
        self.events.append(event)

    def kinds(self) -> List[EventKind]:
        return [event.kind for event in self.events]


__all__ = [
    "EventKind",
    "StoreEvent",
    "StoreObserver",
    "AbstractStoreObserver",
    "LoggingObserver",
    "RecordingObserver",
]
