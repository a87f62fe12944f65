from __future__ import annotations

import pytest

from people_app.core.form import PersonForm, parse_age
from people_app.core.person import Person


@pytest.mark.parametrize(
    "text, expected",
    [("30", 30), (" 42 ", 42), ("-3", -3), ("0", 0), ("", None), ("   ", None), ("abc", None), ("3.5", None), ("+7", 7), ("1_000", None), ("\u0663\u0660", None), ("30\n", 30), ("0x1e", None), (None, None)],
)
def test_parse_age(text, expected):
    assert parse_age(text) == expected


def test_create_requires_age():
    form = PersonForm()
    form.set_name("Alice")
    form.set_age_text("")
    assert not form.is_valid
    assert form.result() is None


def test_create_requires_name():
    form = PersonForm()
    form.set_name("   ")
    form.set_age_text("30")
    assert form.result() is None


def test_create_yields_fresh_person():
    form = PersonForm()
    form.set_name("Alice")
    form.set_age_text("30")
    person = form.result()
    assert (person.name, person.age) == ("Alice", 30)
    assert person.uuid


def test_update_prefills_and_keeps_uuid():
    existing = Person("Alice", 30)
    form = PersonForm(existing)
    assert form.is_update
    assert (form.name_text, form.age_text) == ("Alice", "30")
    assert form.is_valid
    form.set_age_text("31")
    result = form.result()
    assert result == existing
    assert result.age == 31
    assert result.name == "Alice"


def test_invalid_age_edit_blocks_update():
    form = PersonForm(Person("Alice", 30))
    form.set_age_text("thirty")
    assert form.result() is None
    form.set_age_text("30")
    assert form.result() is not None


def test_update_with_blank_existing_name_needs_a_name():
    form = PersonForm(Person("   ", 30))
    assert form.name is None
    assert not form.is_valid
    assert form.result() is None
    form.set_name("Alice")
    assert form.result().name == "Alice"
