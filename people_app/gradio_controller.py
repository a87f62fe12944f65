from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional, Tuple

from people_app.core.form import PersonForm
from people_app.core.person import Person
from people_app.core.store import PeopleStore, PersonNotFoundError

logger = logging.getLogger(__name__)

TABLE_HEADERS = ["#", "Name", "Age", "Display"]


class GradioPeopleController:
    """UI-agnostic controller tailored for Gradio callbacks."""

    def __init__(self, store: Optional[PeopleStore] = None) -> None:
        self._store = store if store is not None else PeopleStore()
        self._lock = threading.Lock()
        self._revision = 0
        self._store.subscribe(self._on_store_changed)

    @property
    def store(self) -> PeopleStore:
        return self._store

    @property
    def revision(self) -> int:
        """Number of change notifications received from the store."""
        return self._revision

    def rows(self) -> List[List[Any]]:
        with self._lock:
            return [
                [index + 1, person.name, person.age, person.display_name]
                for index, person in enumerate(self._store.all())
            ]

    def choices(self) -> List[Tuple[str, str]]:
        with self._lock:
            return [
                (f"{index + 1}. {person.display_name}", person.uuid)
                for index, person in enumerate(self._store.all())
            ]

    def find(self, uuid: Optional[str]) -> Optional[Person]:
        if not uuid:
            return None
        with self._lock:
            for person in self._store.all():
                if person.uuid == uuid:
                    return person
        return None

    def add(self, name: str, age_text: str) -> Tuple[Optional[Person], str]:
        form = PersonForm()
        form.set_name(name or "")
        form.set_age_text(age_text or "")
        person = form.result()
        if person is None:
            return None, "Enter a name and a whole-number age."
        with self._lock:
            self._store.add(person)
        logger.info("Added %s", person.display_name)
        return person, f"Added {person.display_name}."

    def update(self, uuid: Optional[str], name: str, age_text: str) -> Tuple[Optional[Person], str]:
        existing = self.find(uuid)
        if existing is None:
            return None, "Select a person to update."
        form = PersonForm(existing)
        form.set_name(name or "")
        form.set_age_text(age_text or "")
        person = form.result()
        if person is None:
            return None, "Enter a name and a whole-number age."
        try:
            with self._lock:
                self._store.update(person)
        except PersonNotFoundError as exc:
            logger.warning("%s", exc)
            return None, f"Could not update {existing.display_name}: not in the list."
        return person, f"Saved {person.display_name}."

    def remove(self, uuid: Optional[str]) -> Tuple[Optional[Person], str]:
        person = self.find(uuid)
        if person is None:
            return None, "Select a person to remove."
        with self._lock:
            self._store.remove(person)
        logger.info("Removed %s", person.display_name)
        return person, f"Removed {person.display_name}."

    def _on_store_changed(self) -> None:
        # Called with the lock already held by the mutating method.
        self._revision += 1
