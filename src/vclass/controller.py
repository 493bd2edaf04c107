"""
Controller layer

Der RosterController steuert die App. Er verbindet RosterStore und View.

Aufgaben:
- Menü anzeigen und Eingaben verarbeiten
- Klassen und Schüler über den RosterStore anlegen
- Karten über die ConsoleRosterView ausgeben
"""

from __future__ import annotations

from typing import Callable

from .service import RosterService, build_cards, CLASS_CAPTION, STUDENT_CAPTION
from .view import RosterView

MENU_ADD_CLASS = 1
MENU_ADD_STUDENT = 2
MENU_VIEW_CLASSES = 3
MENU_VIEW_STUDENTS = 4
MENU_QUIT = 5


class RosterController:
    """
    Hauptcontroller.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Store und View
    - Schreibfehler melden, ohne abzubrechen
    """

    def __init__(self, store: RosterService, view: RosterView) -> None:
        """
        Erstellt den Controller.

        - store: Klassen/Schüler laden und speichern (z.B. RosterStore)
        - view: Ein-/Ausgabe (z.B. ConsoleRosterView)
        """
        self._store = store
        self._view = view

    def run(self) -> None:
        """
        Startet die Anwendung.

        - Begrüßung einmal zeigen
        - Menü-Schleife bis "Quit"
        - Fußzeile einmal zeigen
        """
        self._view.render_hero()

        running = True
        while running:
            self._view.render_header()
            choice = self._view.prompt_menu_choice()

            if choice == MENU_ADD_CLASS:
                self.add_class_flow()
            elif choice == MENU_ADD_STUDENT:
                self.add_student_flow()
            elif choice == MENU_VIEW_CLASSES:
                self.view_classes_flow()
            elif choice == MENU_VIEW_STUDENTS:
                self.view_students_flow()
            elif choice == MENU_QUIT:
                running = False

        self._view.render_footer()

    def add_class_flow(self) -> None:
        """Fragt einen Klassennamen ab und legt die Klasse an."""
        name = self._view.prompt_non_empty_line("Enter new class name: ")
        self._add("Class", name, self._store.add_class)
        self._view.pause()

    def add_student_flow(self) -> None:
        """Fragt einen Schülernamen ab und legt den Schüler an."""
        name = self._view.prompt_non_empty_line("Enter new student name: ")
        self._add("Student", name, self._store.add_student)
        self._view.pause()

    def view_classes_flow(self) -> None:
        """Zeigt alle Klassen als Karten."""
        classes = self._store.list_classes()
        if not classes:
            self._view.show_message("\nNo classes available.\n")
        else:
            self._view.show_message("\n--- Classes ---")
            self._view.render_card_grid(build_cards(classes, CLASS_CAPTION))
        self._view.pause()

    def view_students_flow(self) -> None:
        """Zeigt alle Schüler als Karten."""
        students = self._store.list_students()
        if not students:
            self._view.show_message("\nNo students enrolled.\n")
        else:
            self._view.show_message("\n--- Students ---")
            self._view.render_card_grid(build_cards(students, STUDENT_CAPTION))
        self._view.pause()

    def _add(self, kind: str, name: str, add: Callable[[str], bool]) -> None:
        """
        Legt einen Eintrag an und meldet das Ergebnis.
        Ein Schreibfehler wird gemeldet, der Eintrag bleibt aber im Speicher.
        """
        try:
            added = add(name)
        except OSError as e:
            self._view.show_message(f'\n{kind} "{name}" added, but saving failed: {e}\n')
            return

        if added:
            self._view.show_message(f'\n{kind} "{name}" added successfully.\n')
        else:
            self._view.show_message(f'\n{kind} "{name}" already exists.\n')
