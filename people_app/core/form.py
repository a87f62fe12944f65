from __future__ import annotations

import re
from typing import Optional

from .person import Person

AGE_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_age(text: Optional[str]) -> Optional[int]:
    """Return the age typed into the form, or None while it is not a whole number."""
    if text is None:
        return None
    text = text.strip()
    if not AGE_PATTERN.fullmatch(text):
        return None
    return int(text)


class PersonForm:
    """
    State behind the create/update dialog, independent of any widget toolkit.

    Confirming only yields a person once the name is non-empty and the age
    parses as an integer.
    """

    def __init__(self, existing: Optional[Person] = None) -> None:
        self.existing = existing
        self.name_text = existing.name if existing is not None else ""
        self.age_text = str(existing.age) if existing is not None else ""
        self._name: Optional[str] = None
        self._age: Optional[int] = existing.age if existing is not None else None
        if existing is not None:
            self.set_name(existing.name)

    @property
    def is_update(self) -> bool:
        return self.existing is not None

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def age(self) -> Optional[int]:
        return self._age

    def set_name(self, text: str) -> None:
        self.name_text = text
        self._name = text if text.strip() else None

    def set_age_text(self, text: str) -> None:
        self.age_text = text
        self._age = parse_age(text)

    @property
    def is_valid(self) -> bool:
        return self._name is not None and self._age is not None

    def result(self) -> Optional[Person]:
        if not self.is_valid:
            return None
        if self.existing is not None:
            return self.existing.updated(self._name, self._age)
        return Person(name=self._name, age=self._age)
