import pytest

from vclass.domain import Roster
from vclass.persistence import TextRosterRepository
from vclass.service import (
    CLASS_CAPTION,
    Card,
    RosterStore,
    build_cards,
)


class CountingRepository:
    def __init__(self, roster=None):
        self.roster = roster or Roster()
        self.saves = 0

    def lade(self):
        return self.roster

    def speichere(self, roster):
        self.saves += 1


def test_add_twice_returns_true_then_false(store):
    assert store.add_class("Algebra") is True
    assert store.add_class("Algebra") is False
    assert store.list_classes() == ("Algebra",)


def test_add_student_is_symmetric(store):
    assert store.add_student("Ada") is True
    assert store.add_student("Ada") is False
    assert store.list_students() == ("Ada",)
    assert store.list_classes() == ()


def test_input_is_trimmed_before_storing(store):
    assert store.add_class("  Chemistry  ")
    assert store.add_class("Chemistry") is False
    assert store.list_classes() == ("Chemistry",)


def test_duplicates_never_touch_storage():
    repo = CountingRepository()
    store = RosterStore(repo)

    store.add_class("Algebra")
    store.add_class("Algebra")
    store.add_student("Ada")
    store.add_student("Ada")

    assert repo.saves == 2


def test_successful_add_persists_both_files(tmp_path, store):
    store.add_student("Ada")

    assert (tmp_path / "students.txt").read_text(encoding="utf-8") == "Ada\n"
    assert (tmp_path / "classes.txt").read_text(encoding="utf-8") == ""


def test_fresh_store_sees_previous_additions(tmp_path, store):
    store.add_class("Algebra")
    store.add_class("Biology")

    fresh = RosterStore(
        TextRosterRepository(str(tmp_path / "classes.txt"), str(tmp_path / "students.txt"))
    )
    assert fresh.list_classes() == ("Algebra", "Biology")


def test_initialize_reloads_from_storage(tmp_path, store):
    (tmp_path / "classes.txt").write_text("Art\n", encoding="utf-8")
    store.initialize()
    assert store.list_classes() == ("Art",)


def test_write_failure_propagates_and_keeps_entry_in_memory(tmp_path):
    blocked = tmp_path / "classes.txt"
    blocked.mkdir()
    store = RosterStore(
        TextRosterRepository(str(blocked), str(tmp_path / "students.txt"))
    )

    with pytest.raises(OSError):
        store.add_class("Algebra")
    assert store.list_classes() == ("Algebra",)


def test_build_cards_uses_one_card_per_name():
    cards = build_cards(["Algebra", "Biology"], CLASS_CAPTION)
    assert cards == [
        Card("Algebra", [CLASS_CAPTION]),
        Card("Biology", [CLASS_CAPTION]),
    ]
