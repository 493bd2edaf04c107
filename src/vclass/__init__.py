"""
vclass package

Dieses Paket implementiert VClass, ein kleines Konsolen-Programm
zum Erfassen von Klassen und Schülern.

Schichtenarchitektur:
- domain.py: Entitäten (Klasse, Schüler, Bestand)
- persistence.py: Textdatei-Persistierung
- service.py: RosterStore + Karten-ViewModel
- view.py: ASCII-Ausgabe und Eingaben
- controller.py: Menü-Orchestrierung
- main.py: Einstiegspunkt
"""
