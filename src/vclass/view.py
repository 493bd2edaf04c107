"""
UI layer für die Console

Diese View zeigt Menü, Karten und Meldungen in der Konsole.
- Text formatieren und ausgeben
- Karten als Rahmen mit Titel und Inhalt bauen
- Eingaben abfragen und prüfen

Farben (fett / grau) sind nur Kosmetik. Ohne Farben funktioniert alles gleich.
"""

from __future__ import annotations

import os
import sys
import unicodedata
from typing import Callable, List, Optional, Protocol, Sequence

from .service import Card

COLOR_RESET = "\033[0m"
COLOR_GRAY = "\033[38;2;107;114;128m"
COLOR_BOLD = "\033[1m"

CARD_WIDTH = 50
CARDS_PER_ROW = 2
CARD_CONTENT_SLOTS = 3
CARD_GUTTER = "    "
ELLIPSIS = "..."

MENU_MIN = 1
MENU_MAX = 5


class RosterView(Protocol):
    """
    Schnittstelle der Ein-/Ausgabe für den Controller.
    """
    def render_hero(self) -> None: ...

    def render_header(self) -> None: ...

    def render_footer(self) -> None: ...

    def prompt_menu_choice(self) -> int: ...

    def prompt_non_empty_line(self, label: str) -> str: ...

    def render_card_grid(self, cards: Sequence[Card], width: Optional[int] = None) -> None: ...

    def pause(self) -> None: ...

    def show_message(self, text: str) -> None: ...


def _plain(text: str) -> str:
    return text


def display_width(text: str) -> int:
    """
    Breite eines Textes in Terminal-Spalten.
    - Breite ostasiatische Zeichen (W, F) zählen doppelt.
    - Kombinierende Zeichen zählen nicht.
    """
    total = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        total += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return total


def _printable(text: str) -> str:
    """Ersetzt nicht dekodierbare Bytes aus den Dateien durch das Ersatzzeichen."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _clip(text: str, columns: int) -> str:
    """Längster Anfang von text, der in columns Spalten passt."""
    out = ""
    for ch in text:
        if display_width(out + ch) > columns:
            break
        out += ch
    return out


def _truncate(text: str, limit: int, keep: int) -> str:
    """
    Kürzt Text, der breiter als limit Spalten ist, auf keep Spalten plus "...".
    Es wird nie umgebrochen.
    """
    if display_width(text) > limit:
        return _clip(text, max(0, keep)) + ELLIPSIS
    return text


def compose_card_lines(
    title: str,
    lines: Sequence[str],
    width: int = CARD_WIDTH,
    content_slots: Optional[int] = None,
    title_style: Callable[[str], str] = _plain,
) -> List[str]:
    """
    Baut die Zeilen einer Karte.

    Breiten werden in Terminal-Spalten gemessen (siehe display_width).

    Aufbau:
    - Rahmen oben
    - Titel zentriert (bei ungerader Differenz ein Leerzeichen mehr rechts)
    - Leerzeile
    - Inhalt, eine Zeile pro Eintrag
    - Rahmen unten

    Mit content_slots wird die Anzahl der Inhaltszeilen fest vorgegeben.
    Fehlende Zeilen werden leer aufgefüllt, überzählige weggelassen.
    """
    inner = width - 2
    top = "╭" + "─" * inner + "╮"
    bottom = "╰" + "─" * inner + "╯"
    blank = "│" + " " * inner + "│"

    label = _truncate(_printable(title), inner, inner - len(ELLIPSIS))
    pad_left = (inner - display_width(label)) // 2
    pad_right = inner - display_width(label) - pad_left
    title_line = "│" + " " * pad_left + title_style(label) + " " * pad_right + "│"

    content = list(lines) if content_slots is None else list(lines[:content_slots])

    out = [top, title_line, blank]
    for text in content:
        text = _truncate(_printable(text), width - 3, width - 6)
        out.append("│ " + text + " " * (width - 3 - display_width(text)) + "│")

    if content_slots is not None:
        out.extend(blank for _ in range(content_slots - len(content)))

    out.append(bottom)
    return out


class ConsoleRosterView:
    """
    View für die Konsole.

    - styling: Farben an/aus. None = automatisch (nur bei TTY und ohne NO_COLOR).
    - interactive: Bildschirm löschen an/aus. None = automatisch (nur bei TTY).
    """

    def __init__(
        self,
        styling: Optional[bool] = None,
        interactive: Optional[bool] = None,
        width: int = CARD_WIDTH
    ) -> None:
        is_tty = sys.stdout.isatty()

        if styling is None:
            styling = is_tty and "NO_COLOR" not in os.environ
        if interactive is None:
            interactive = is_tty

        self._styling = styling
        self._interactive = interactive
        self._width = width

    def render_hero(self) -> None:
        """Zeigt den Begrüßungsbereich. Wird einmal beim Start gezeigt."""
        print()
        print(self._bold("======================== WELCOME TO VCLASS ========================"))
        print()
        print(self._gray("Create and manage your virtual classes and students with ease."))
        print()

    def render_header(self) -> None:
        """Löscht den Bildschirm und zeigt Banner und Hauptmenü."""
        self.clear_screen()
        print(self._bold("============================================="))
        print(self._bold("                VCLASS 1.0                   "))
        print(self._bold("============================================="))
        print()
        print(self._gray("1. Add Class"))
        print(self._gray("2. Add Student"))
        print(self._gray("3. View Classes"))
        print(self._gray("4. View Students"))
        print(self._gray("5. Quit"))
        print()

    def render_footer(self) -> None:
        """Zeigt die Fußzeile beim Beenden."""
        rule = "=" * 68
        print(self._gray(rule))
        print(self._gray("© 2024 VClass Virtual Classroom".center(68)))
        print(self._gray(rule))
        print()

    def prompt_menu_choice(self) -> int:
        """
        Fragt die Menüauswahl ab.
        Es wird so lange gefragt, bis eine Zahl von 1 bis 5 kommt.
        """
        raw = input(f"Choose an option ({MENU_MIN}-{MENU_MAX}): ")
        while True:
            try:
                choice = int(raw.strip())
            except ValueError:
                choice = None

            if choice is not None and MENU_MIN <= choice <= MENU_MAX:
                return choice

            raw = input(f"Invalid input. Enter {MENU_MIN}-{MENU_MAX}: ")

    def prompt_non_empty_line(self, label: str) -> str:
        """
        Fragt Text ab, bis die Eingabe nach dem Trimmen nicht leer ist.
        Gibt die getrimmte Eingabe zurück.
        """
        while True:
            value = input(label).strip()
            if value:
                return value
            print("Input cannot be empty. Try again.")

    def render_card(self, title: str, lines: Sequence[str], width: Optional[int] = None) -> None:
        """
        Zeichnet eine einzelne Karte.
        Jede Zeile ist genau width Spalten breit (ohne Farbcodes).
        """
        card = compose_card_lines(title, lines, width or self._width, title_style=self._bold)
        for i, line in enumerate(card):
            # Rahmen oben und unten grau
            if i in (0, len(card) - 1):
                line = self._gray(line)
            print(line)

    def render_card_grid(self, cards: Sequence[Card], width: Optional[int] = None) -> None:
        """
        Zeichnet Karten nebeneinander, zwei pro Reihe.

        - Jede Karte hat genau 7 Zeilen (max. 3 Inhaltszeilen).
        - Zwischen den Karten liegen 4 Leerzeichen.
        - Nach jeder Reihe folgt eine Leerzeile.
        """
        w = width or self._width
        for start in range(0, len(cards), CARDS_PER_ROW):
            row = [
                compose_card_lines(c.title, c.lines, w, CARD_CONTENT_SLOTS, title_style=self._bold)
                for c in cards[start:start + CARDS_PER_ROW]
            ]
            height = len(row[0])
            for line_no in range(height):
                parts = [card[line_no] for card in row]
                if line_no in (0, height - 1):
                    parts = [self._gray(p) for p in parts]
                print(CARD_GUTTER.join(parts))
            print()

    def pause(self) -> None:
        """Wartet auf Enter."""
        input("Press Enter to continue...")

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def clear_screen(self) -> None:
        """Löscht den Bildschirm. Nur in interaktiven Sitzungen."""
        if not self._interactive:
            return
        os.system("cls" if os.name == "nt" else "clear")

    def _bold(self, text: str) -> str:
        if not self._styling:
            return text
        return f"{COLOR_BOLD}{text}{COLOR_RESET}"

    def _gray(self, text: str) -> str:
        if not self._styling:
            return text
        return f"{COLOR_GRAY}{text}{COLOR_RESET}"
