from __future__ import annotations

import uuid as uuid_lib
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def new_uuid() -> str:
    return str(uuid_lib.uuid4())


@dataclass(frozen=True, eq=False)
class Person:
    """
    A person entry in the list.

    Instances are immutable and identified by ``uuid`` alone: two people
    with the same uuid compare equal whatever their name and age.
    """

    name: str
    age: int
    uuid: str = field(default_factory=new_uuid)

    def __post_init__(self) -> None:
        # Person("Ann", 3, None) behaves like an omitted uuid.
        if self.uuid is None:
            object.__setattr__(self, "uuid", new_uuid())

    def updated(self, name: Optional[str] = None, age: Optional[int] = None) -> "Person":
        return Person(
            name=self.name if name is None else name,
            age=self.age if age is None else age,
            uuid=self.uuid,
        )

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.age} year old)"

    def to_dict(self) -> Dict[str, Any]:
        return {"uuid": self.uuid, "name": self.name, "age": self.age}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)
