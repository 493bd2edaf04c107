"""
Domain beinhaltet die Entities

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder Datei-Logik.

- Entities sind Dataclasses.
- Klassen und Schüler sind zwei getrennte Listen ohne Beziehung.
- Namen sind eindeutig (exakter Vergleich, Groß/Klein zählt).
- Die Reihenfolge ist die Einfüge-Reihenfolge. Es wird nie sortiert.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Iterable

WHITESPACE = " \t\n\r\f\v"


def normalize_name(raw: str) -> str:
    """Entfernt Leerraum am Anfang und Ende."""
    return raw.strip(WHITESPACE)


@dataclass(frozen=True, slots=True)
class ClassRecord:
    """
    Eine Klasse.
    Der Name wird beim Erzeugen getrimmt und darf nicht leer sein.
    """
    name: str

    def __post_init__(self) -> None:
        """Prüft Grundregeln nach dem Erzeugen."""
        name = normalize_name(self.name)
        if not name:
            raise ValueError("Klassenname darf nicht leer sein.")
        object.__setattr__(self, "name", name)


@dataclass(frozen=True, slots=True)
class StudentRecord:
    """Ein Schüler. Gleiche Regeln wie bei ClassRecord."""
    name: str

    def __post_init__(self) -> None:
        name = normalize_name(self.name)
        if not name:
            raise ValueError("Schülername darf nicht leer sein.")
        object.__setattr__(self, "name", name)


@dataclass(slots=True)
class Roster:
    """
    Bestand aus Klassen und Schülern.

    Aufgaben:
    - Eindeutigkeit je Liste sicherstellen
    - Einfüge-Reihenfolge erhalten
    """
    classes: List[ClassRecord] = field(default_factory=list)
    students: List[StudentRecord] = field(default_factory=list)

    @classmethod
    def from_names(cls, class_names: Iterable[str], student_names: Iterable[str]) -> "Roster":
        """
        Baut einen Bestand aus Namen.
        - Leere Namen werden übersprungen.
        - Doppelte Namen werden nur einmal übernommen (erstes Vorkommen).
        """
        roster = cls()
        for name in class_names:
            if normalize_name(name):
                roster.add_class(name)
        for name in student_names:
            if normalize_name(name):
                roster.add_student(name)
        return roster

    def add_class(self, name: str) -> bool:
        """
        Fügt eine Klasse hinzu.
        - True: neu angelegt
        - False: Name existiert schon, keine Änderung
        """
        record = ClassRecord(name)
        if record in self.classes:
            return False
        self.classes.append(record)
        return True

    def add_student(self, name: str) -> bool:
        """Fügt einen Schüler hinzu. Rückgabe wie bei add_class."""
        record = StudentRecord(name)
        if record in self.students:
            return False
        self.students.append(record)
        return True

    def class_names(self) -> Tuple[str, ...]:
        """Alle Klassennamen in Einfüge-Reihenfolge."""
        return tuple(c.name for c in self.classes)

    def student_names(self) -> Tuple[str, ...]:
        """Alle Schülernamen in Einfüge-Reihenfolge."""
        return tuple(s.name for s in self.students)
