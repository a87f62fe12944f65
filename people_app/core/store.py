from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Tuple

from .person import Person

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class PersonNotFoundError(LookupError):
    """Raised when an update targets a person that is not in the store."""

    def __init__(self, person: Person) -> None:
        super().__init__(f"No person with uuid {person.uuid} in the store")
        self.person = person


class PeopleStore:
    """
    Ordered, observable list of people.

    Listeners are plain callables. They run synchronously, in registration
    order, right after a mutation that notifies.
    """

    def __init__(self) -> None:
        self._people: List[Person] = []
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # read path
    # ------------------------------------------------------------------

    def count(self) -> int:
        return len(self._people)

    def all(self) -> Tuple[Person, ...]:
        return tuple(self._people)

    def index_of(self, person: Person) -> int:
        """Position of the first entry equal to ``person``, or -1."""
        for index, existing in enumerate(self._people):
            if existing == person:
                return index
        return -1

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._people))

    def __getitem__(self, index: int) -> Person:
        return self._people[index]

    # ------------------------------------------------------------------
    # write path
    # ------------------------------------------------------------------

    def add(self, person: Person) -> None:
        self._people.append(person)
        logger.debug("Added %r", person)
        self._notify()

    def remove(self, person: Person) -> None:
        index = self.index_of(person)
        if index >= 0:
            del self._people[index]
            logger.debug("Removed %r", person)
        else:
            logger.debug("Remove ignored, %s not present", person.uuid)
        self._notify()

    def update(self, updated_person: Person) -> None:
        index = self.index_of(updated_person)
        if index < 0:
            raise PersonNotFoundError(updated_person)
        existing = self._people[index]
        if existing.name == updated_person.name and existing.age == updated_person.age:
            return
        self._people[index] = existing.updated(updated_person.name, updated_person.age)
        logger.debug("Updated %r -> %r", existing, self._people[index])
        self._notify()

    # ------------------------------------------------------------------
    # subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def _notify(self) -> None:
        # Copy so a listener may unsubscribe itself while being called.
        for listener in list(self._listeners):
            listener()
