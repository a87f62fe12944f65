from __future__ import annotations

import csv

from people_app.core.export import CSV_HEADERS, export_people_csv
from people_app.core.person import Person


def test_export_writes_rows_in_order(tmp_path):
    people = [Person("Alice", 30, uuid="a"), Person("Bob", 25, uuid="b")]
    path = tmp_path / "out" / "people.csv"
    assert export_people_csv(people, path) == 2
    with path.open(newline="") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == CSV_HEADERS
    assert rows[1] == ["a", "Alice", "30", "Alice (30 year old)"]
    assert rows[2] == ["b", "Bob", "25", "Bob (25 year old)"]


def test_export_empty_list(tmp_path):
    path = tmp_path / "people.csv"
    assert export_people_csv([], path) == 0
    assert path.read_text().strip() == ",".join(CSV_HEADERS)
