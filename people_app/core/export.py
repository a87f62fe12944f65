from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from .person import Person

CSV_HEADERS = ["uuid", "name", "age", "display_name"]


def export_people_csv(people: Iterable[Person], path: Path) -> int:
    """Write ``people`` to ``path`` in list order and return the row count."""
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with path.open("w", newline="") as fh:
        writer = csv.writer(fh)
        writer.writerow(CSV_HEADERS)
        for person in people:
            writer.writerow([person.uuid, person.name, person.age, person.display_name])
            rows += 1
    return rows
