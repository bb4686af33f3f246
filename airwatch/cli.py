"""Command-line entry points: the role menu and the zone average query."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from airwatch.application import Application

QUIT_MESSAGE = "-> Fin du programme."
INVALID_MESSAGE = "Choix invalide."
UNKNOWN_ROLE_MESSAGE = "Rôle inconnu. Veuillez relancer le programme."


@dataclass(frozen=True)
class Menu:
    """The numbered entries offered to one role; the last entry quits."""

    entries: tuple[tuple[str, str], ...]

    @property
    def quit_choice(self) -> int:
        return len(self.entries)

    def show(self, role: str) -> None:
        print(f"\nRôle : {role}")
        for number, (label, _) in enumerate(self.entries, start=1):
            print(f"{number}. {label}")

    def response(self, choice: int | None) -> str:
        if choice is None or not 1 <= choice <= len(self.entries):
            return INVALID_MESSAGE
        return self.entries[choice - 1][1]


MENUS = {
    "GOUVERNEMENT": Menu((
        ("Calculer la moyenne de qualité de l’air dans une zone",
         "-> Moyenne dans une zone (GOUVERNEMENT)"),
        ("Estimer la qualité de l’air à un point", "-> Estimation au point (GOUVERNEMENT)"),
        ("Classifier les capteurs similaires", "-> Classification capteurs (GOUVERNEMENT)"),
        ("Analyser un capteur privé", "-> Analyse capteur privé (GOUVERNEMENT)"),
        ("Mesurer le temps d’exécution d’un algorithme",
         "-> Mesure de performance (GOUVERNEMENT)"),
        ("Quitter", QUIT_MESSAGE),
    )),
    "UTILISATEUR": Menu((
        ("Calculer la moyenne de qualité de l’air dans une zone",
         "-> Moyenne dans une zone (UTILISATEUR)"),
        ("Estimer la qualité de l’air", "-> Estimation de qualité (UTILISATEUR)"),
        ("Classifier les capteurs similaires", "-> Classification capteurs (UTILISATEUR)"),
        ("Consulter mes points", "-> Consultation des points"),
        ("Quitter", QUIT_MESSAGE),
    )),
    "ADMIN": Menu((
        ("Calculer la moyenne de qualité de l’air dans une zone",
         "-> Moyenne dans une zone (ADMIN)"),
        ("Estimer la qualité de l’air", "-> Estimation de qualité (ADMIN)"),
        ("Classifier les capteurs similaires", "-> Classification capteurs (ADMIN)"),
        ("Analyser un capteur privé", "-> Analyse capteur privé (ADMIN)"),
        ("Mesurer le temps d’exécution d’un algorithme", "-> Mesure de performance (ADMIN)"),
        ("Faire une maintenance", "-> Maintenance (ADMIN)"),
        ("Quitter", QUIT_MESSAGE),
    )),
}


def _parse_choice(raw: str) -> int | None:
    words = raw.split()
    if not words:
        return None
    try:
        return int(words[0])
    except ValueError:
        return None


def main(argv=None) -> int:
    """Ask for a role, then loop over its menu until the user quits."""
    print("Veuillez entrer votre rôle :")
    for role in MENUS:
        print(f"- {role}")
    try:
        words = input("> ").split()
    except EOFError:
        words = []
    role = words[0].upper() if words else ""

    menu = MENUS.get(role)
    if menu is None:
        print(UNKNOWN_ROLE_MESSAGE)
        return 0

    while True:
        menu.show(role)
        try:
            raw = input("> ")
        except EOFError:
            return 0
        choice = _parse_choice(raw)
        print(menu.response(choice))
        if choice == menu.quit_choice:
            return 0


def _ask(prompt: str, given, convert):
    if given is not None:
        return convert(given)
    print(prompt)
    return convert(input().strip())


def average_main(argv=None) -> int:
    """Print the average of each gas around a point; missing values are asked for."""
    parser = argparse.ArgumentParser(description="Average air quality in a zone.")
    for name in ("latitude", "longitude", "perimeter", "start", "end"):
        parser.add_argument(name, nargs="?")
    args = parser.parse_args(argv if argv is not None else [])

    try:
        latitude = _ask("Veuillez entrer une latitude :", args.latitude, float)
        longitude = _ask("Veuillez entrer une longitude :", args.longitude, float)
        perimeter = _ask("Veuillez entrer un périmètre :", args.perimeter, int)
        start = _ask("Veuillez entrer une date de début (timestamp) :", args.start, int)
        end = _ask("Veuillez entrer une date de fin (timestamp) :", args.end, int)
    except (ValueError, EOFError) as error:
        print(f"Entrée invalide : {error}")
        return 1

    averages = Application().average_air_quality(latitude, longitude, start, end, perimeter)
    for gas in sorted(averages):
        print(f"Gaz : {gas}, valeur : {averages[gas]:g}")
    return 0