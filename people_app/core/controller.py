from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from PySide6.QtCore import QObject, Signal

from .export import export_people_csv
from .person import Person
from .store import PeopleStore, PersonNotFoundError

logger = logging.getLogger(__name__)


class PeopleController(QObject):
    """Bridges an injected ``PeopleStore`` to Qt signals for the widgets."""

    people_changed = Signal()
    log_emitted = Signal(str)

    def __init__(self, store: PeopleStore, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._store = store
        self._unsubscribe = self._store.subscribe(self._on_store_changed)

    @property
    def store(self) -> PeopleStore:
        return self._store

    @property
    def people(self) -> Tuple[Person, ...]:
        return self._store.all()

    @property
    def count(self) -> int:
        return self._store.count()

    def add_person(self, person: Person) -> None:
        self._store.add(person)
        self._log(f"Added {person.display_name}.")

    def remove_person(self, person: Person) -> None:
        present = self._store.index_of(person) >= 0
        self._store.remove(person)
        if present:
            self._log(f"Removed {person.display_name}.")
        else:
            self._log(f"{person.display_name} was not in the list.")

    def update_person(self, person: Person) -> None:
        try:
            self._store.update(person)
        except PersonNotFoundError:
            logger.warning("Update rejected, %s is not in the list", person.uuid)
            self.log_emitted.emit(f"Could not update {person.display_name}: not in the list.")
            raise
        self._log(f"Saved {person.display_name}.")

    def export_csv(self, path: Path) -> int:
        rows = export_people_csv(self._store.all(), path)
        self._log(f"Exported {rows} people to {path}.")
        return rows

    def shutdown(self) -> None:
        self._unsubscribe()

    def _on_store_changed(self) -> None:
        self.people_changed.emit()

    def _log(self, message: str) -> None:
        logger.info(message)
        self.log_emitted.emit(message)
