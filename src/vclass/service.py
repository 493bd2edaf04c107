"""
Application/Use-Case layer

Der RosterStore hält den Bestand und hält die Textdateien synchron.
Außerdem werden hier die Karten (ViewModel) für die ConsoleRosterView gebaut.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Iterable, Protocol

from .domain import Roster, normalize_name
from .persistence import RosterRepository

CLASS_CAPTION = "Manage and track your class activities."
STUDENT_CAPTION = "Active participant in your classes."


@dataclass(slots=True)
class Card:
    """
    Datenobjekt für eine Karte in der View.
    """
    title: str
    lines: List[str] = field(default_factory=list)


def build_cards(names: Iterable[str], caption: str) -> List[Card]:
    """Eine Karte pro Name, alle mit derselben Beschriftung."""
    return [Card(title=name, lines=[caption]) for name in names]


class RosterService(Protocol):
    """
    Schnittstelle des Bestands für den Controller.
    """
    def add_class(self, name: str) -> bool: ...

    def add_student(self, name: str) -> bool: ...

    def list_classes(self) -> Tuple[str, ...]: ...

    def list_students(self) -> Tuple[str, ...]: ...


class RosterStore:
    """
    Einziger Besitzer der Klassen- und Schülerlisten.

    - Beim Erzeugen wird geladen.
    - Nach jedem erfolgreichen Hinzufügen wird sofort gespeichert.
    - Doppelte Namen lösen keinen Schreibzugriff aus.
    """

    def __init__(self, repo: RosterRepository) -> None:
        """
        Erstellt den Store und lädt den Bestand.
        """
        self._repo = repo
        self._roster = Roster()
        self.initialize()

    def initialize(self) -> None:
        """
        Lädt den Bestand aus dem Repository.
        Fehlende Dateien ergeben leere Listen.
        """
        self._roster = self._repo.lade()

    def add_class(self, name: str) -> bool:
        """
        Fügt eine Klasse hinzu und speichert.
        - False, wenn der Name schon existiert (nichts wird geschrieben).
        - OSError beim Schreiben geht an den Aufrufer. Die Klasse bleibt im Speicher.
        """
        if not self._roster.add_class(normalize_name(name)):
            return False
        self._repo.speichere(self._roster)
        return True

    def add_student(self, name: str) -> bool:
        """Fügt einen Schüler hinzu und speichert. Wie add_class."""
        if not self._roster.add_student(normalize_name(name)):
            return False
        self._repo.speichere(self._roster)
        return True

    def list_classes(self) -> Tuple[str, ...]:
        return self._roster.class_names()

    def list_students(self) -> Tuple[str, ...]:
        return self._roster.student_names()
