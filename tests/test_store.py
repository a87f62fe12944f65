from __future__ import annotations

import pytest

from people_app.core.person import Person
from people_app.core.store import PeopleStore, PersonNotFoundError


class Recorder:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


def test_add_appends_and_notifies(store):
    recorder = Recorder()
    store.subscribe(recorder)
    alice = Person("Alice", 30)
    store.add(alice)
    assert store.count() == 1
    assert store.all()[-1] is alice
    assert recorder.calls == 1


def test_insertion_order_is_preserved(store):
    store.add(Person("Alice", 30))
    store.add(Person("Bob", 25))
    assert [p.display_name for p in store.all()] == ["Alice (30 year old)", "Bob (25 year old)"]


def test_all_is_an_immutable_view(store):
    store.add(Person("Alice", 30))
    view = store.all()
    assert isinstance(view, tuple)
    with pytest.raises(AttributeError):
        view.append(Person("Bob", 25))
    store.add(Person("Bob", 25))
    assert len(view) == 1


def test_duplicate_uuid_is_accepted(store):
    alice = Person("Alice", 30)
    store.add(alice)
    store.add(alice.updated("Alicia"))
    assert store.count() == 2
    assert store.all()[0] == store.all()[1]


def test_remove_first_match(store):
    alice = Person("Alice", 30)
    bob = Person("Bob", 25)
    store.add(alice)
    store.add(bob)
    store.remove(alice.updated("Someone else"))
    assert store.all() == (bob,)


def test_remove_unknown_is_noop_but_notifies(store):
    store.add(Person("Alice", 30))
    recorder = Recorder()
    store.subscribe(recorder)
    store.remove(Person("Ghost", 1))
    assert store.count() == 1
    assert recorder.calls == 1


def test_update_replaces_in_place(store):
    alice = Person("Alice", 30)
    bob = Person("Bob", 25)
    store.add(alice)
    store.add(bob)
    store.update(alice.updated("Bob", 40))
    first = store.all()[0]
    assert (first.name, first.age, first.uuid) == ("Bob", 40, alice.uuid)
    assert store.all()[1] is bob


def test_update_notifies_once_when_changed(store):
    alice = Person("Alice", 30)
    store.add(alice)
    recorder = Recorder()
    store.subscribe(recorder)
    store.update(alice.updated(age=31))
    assert recorder.calls == 1


def test_update_with_same_values_is_silent(store):
    alice = Person("Alice", 30)
    store.add(alice)
    recorder = Recorder()
    store.subscribe(recorder)
    store.update(alice.updated("Alice", 30))
    assert recorder.calls == 0
    assert store.all()[0] is alice


def test_update_unknown_raises(store):
    store.add(Person("Alice", 30))
    recorder = Recorder()
    store.subscribe(recorder)
    ghost = Person("Ghost", 1)
    with pytest.raises(PersonNotFoundError) as excinfo:
        store.update(ghost)
    assert excinfo.value.person is ghost
    assert isinstance(excinfo.value, LookupError)
    assert recorder.calls == 0
    assert store.count() == 1


def test_listeners_called_in_registration_order(store):
    order = []
    store.subscribe(lambda: order.append("first"))
    store.subscribe(lambda: order.append("second"))
    store.add(Person("Alice", 30))
    assert order == ["first", "second"]


def test_listener_sees_state_after_mutation(store):
    seen = []
    store.subscribe(lambda: seen.append(store.count()))
    store.add(Person("Alice", 30))
    assert seen == [1]


def test_unsubscribe(store):
    recorder = Recorder()
    unsubscribe = store.subscribe(recorder)
    store.add(Person("Alice", 30))
    unsubscribe()
    store.add(Person("Bob", 25))
    assert recorder.calls == 1
    assert not store.has_listeners
    store.unsubscribe(recorder)


def test_listener_may_unsubscribe_during_notification(store):
    calls = []

    def once() -> None:
        calls.append("once")
        store.unsubscribe(once)

    store.subscribe(once)
    store.subscribe(lambda: calls.append("other"))
    store.add(Person("Alice", 30))
    store.add(Person("Bob", 25))
    assert calls == ["once", "other", "other"]


def test_sequence_helpers():
    store = PeopleStore()
    alice = Person("Alice", 30)
    store.add(alice)
    assert len(store) == 1
    assert list(store) == [alice]
    assert store[0] is alice
    assert store.index_of(alice) == 0
    assert store.index_of(Person("Ghost", 1)) == -1
