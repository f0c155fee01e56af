"""A minimal observer pattern: subjects publish events to registered observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Observer(ABC, Generic[T]):
    """Something that reacts to events of type ``T``."""

    @abstractmethod
    def handle(self, event: T) -> None:
        """React to ``event``."""


class Observable(Generic[T]):
    """A subject that delivers events to each registered observer once."""

    def __init__(self) -> None:
        self._observers: dict[Observer[T], None] = {}

    def add_observer(self, observer: Observer[T]) -> None:
        """Register ``observer``; registering it again has no effect."""
        self._observers[observer] = None

    def remove_observer(self, observer: Observer[T]) -> None:
        """Unregister ``observer``; unknown observers are ignored."""
        self._observers.pop(observer, None)

    def notify_observers(self, event: T) -> None:
        """Deliver ``event`` to every registered observer."""
        for observer in tuple(self._observers):
            observer.handle(event)