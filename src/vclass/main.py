"""
Entry point für VClass.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

from .persistence import TextRosterRepository, CLASSES_FILE, STUDENTS_FILE
from .service import RosterStore
from .view import ConsoleRosterView
from .controller import RosterController


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Komponenten erstellen (Dateien im aktuellen Arbeitsverzeichnis)
    - Controller starten
    """
    try:
        # Bausteine der App erstellen.
        repo = TextRosterRepository(CLASSES_FILE, STUDENTS_FILE)
        store = RosterStore(repo)
        view = ConsoleRosterView()
        controller = RosterController(store, view)

        # App starten.
        controller.run()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        print("\nApplication terminated.")


if __name__ == "__main__":
    main()
