"""
Persistence layer (Textdateien)

Die Speicherung erfolgt in zwei einfachen Textdateien, ein Name pro Zeile.
Die Domain selbst bleibt frei von Datei-Details.
- RosterRepository: Schnittstelle (lade / speichere)
- TextRosterRepository: Datei-Repository
- LineListSerializer: Mapping zwischen Namenslisten und Text

Fehlerbehandlung:
- Fehlende oder nicht lesbare Datei bedeutet leere Liste.
- Schreibfehler (OSError) werden nicht abgefangen, sondern an den Aufrufer gegeben.
"""

from __future__ import annotations

from typing import List, Iterable, Protocol, Optional

from .domain import Roster, normalize_name

CLASSES_FILE = "classes.txt"
STUDENTS_FILE = "students.txt"


class RosterRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    def lade(self) -> Roster:
        """Lädt den Bestand."""
        ...

    def speichere(self, roster: Roster) -> None:
        """Speichert den Bestand."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim laden und speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    - Ungültige Bytes bleiben per surrogateescape erhalten und werden unverändert zurückgeschrieben.
    - Zeilenende ist immer "\\n".
    """

    def lese_text(self, pfad: str) -> Optional[str]:
        """
        Liest eine Datei als Text.
        Fehlt die Datei oder kann sie nicht geöffnet werden, wird None zurückgegeben.
        """
        try:
            with open(pfad, "r", encoding="utf-8", errors="surrogateescape") as f:
                return f.read()
        except OSError:
            return None

    def schreibe_text(self, pfad: str, content: str) -> None:
        """
        Schreibt Text in eine Datei.
        Die Datei wird vorher geleert (kein atomares Umbenennen).
        """
        with open(pfad, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            f.write(content)


class LineListSerializer:
    """
    Wandelt Namenslisten <-> Text.
    - Jede Zeile wird getrimmt.
    - Leere Zeilen werden ignoriert.
    """

    def to_text(self, names: Iterable[str]) -> str:
        """Ein Name pro Zeile, jede Zeile endet mit Zeilenumbruch."""
        return "".join(f"{name}\n" for name in names)

    def from_text(self, raw: Optional[str]) -> List[str]:
        """Liest die Namen aus dem Text. None ergibt eine leere Liste."""
        if raw is None:
            return []

        names: List[str] = []
        for line in raw.split("\n"):
            name = normalize_name(line)
            if name:
                names.append(name)
        return names


class TextRosterRepository:
    """
    Repository für die beiden Textdateien.
    - FileStorage für Datei-Zugriff
    - LineListSerializer für Mapping
    """

    def __init__(
        self,
        classes_pfad: str = CLASSES_FILE,
        students_pfad: str = STUDENTS_FILE,
        storage: Optional[FileStorage] = None,
        serializer: Optional[LineListSerializer] = None
    ) -> None:
        """
        Erstellt das Repository.
        Standard sind classes.txt und students.txt im aktuellen Arbeitsverzeichnis.
        """
        self._classes_pfad = classes_pfad
        self._students_pfad = students_pfad
        self._storage = storage or FileStorage()
        self._serializer = serializer or LineListSerializer()

    def lade(self) -> Roster:
        """
        Lädt beide Dateien und baut den Bestand.
        """
        class_names = self._serializer.from_text(self._storage.lese_text(self._classes_pfad))
        student_names = self._serializer.from_text(self._storage.lese_text(self._students_pfad))
        return Roster.from_names(class_names, student_names)

    def speichere(self, roster: Roster) -> None:
        """
        Schreibt beide Listen in ihre Dateien.
        """
        self._storage.schreibe_text(self._classes_pfad, self._serializer.to_text(roster.class_names()))
        self._storage.schreibe_text(self._students_pfad, self._serializer.to_text(roster.student_names()))
