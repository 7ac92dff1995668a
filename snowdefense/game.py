"""Interactive play: prompts, defender placement, the wave loop and the menu."""

from __future__ import annotations

import argparse
import contextlib
import random
import re
import sys
import time
from collections.abc import Callable
from typing import IO

from .board import (
    crown_column,
    create_map,
    create_path,
    defenders_attack,
    move_enemies,
    spawn_enemy,
    start_column,
)
from .display import (
    BEAR,
    LUGER,
    PENGUIN,
    SKIER,
    SNOWBOARDER,
    SNOWFLAKE,
    SNOWMAN,
    column_label,
    render_map,
)
from .state import GameState, load_game, save_game
from .units import DefenderKind, TileType, is_snow, make_defender

SAVE_FILE = "sauvegarde.txt"
LAST_WAVE = 11
WAVE_REWARD = 50
TURN_PAUSE = 0.4
CLEAR_SCREEN = "\033[H\033[2J"
CHOICE = "\t Votre choix : "

_INTEGER = re.compile(r"[+-]?\d+")


class InvalidInput(Exception):
    """The player typed something that cannot be read, or input ran out."""


class Prompter:
    """Reads whitespace-separated answers, writing a prompt before each."""

    def __init__(self, stream: IO[str] | None = None, out: IO[str] | None = None):
        self._stream = stream if stream is not None else sys.stdin
        self._out = out if out is not None else sys.stdout
        self._buffer = ""

    def _next_token_start(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            line = self._stream.readline()
            if not line:
                raise InvalidInput("Entrée invalide (fin de saisie). Fin du programme.")
            self._buffer = line

    def _ask(self, prompt: str) -> None:
        self._out.write(prompt)
        self._out.flush()
        self._next_token_start()

    def read_int(self, prompt: str) -> int:
        """Show prompt and read an integer."""
        self._ask(prompt)
        match = _INTEGER.match(self._buffer)
        if match is None:
            raise InvalidInput("Entrée invalide (entier attendu). Fin du programme.")
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def read_char(self, prompt: str) -> str:
        """Show prompt and read one non-blank character."""
        self._ask(prompt)
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char


def _column_index(char: str) -> int:
    if "a" <= char <= "z":
        return ord(char) - ord("a")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 26
    return -1


def _read_choice(prompter: Prompter, prompt: str, retry: str, valid) -> int:
    value = prompter.read_int(prompt)
    while value not in valid:
        value = prompter.read_int(retry)
    return value


def _choose_kind(state: GameState, prompter: Prompter, out: IO[str]) -> DefenderKind | None:
    """Ask for a defender until one is affordable; None if the player gives up."""
    menu = (
        "\n\t Choisissez un défenseur à placer :\n"
        f"\t 1 - Pingu-Patrouilleur (100 {SNOWFLAKE} )\n"
        f"\t 2 - Flocon-Perce-Ciel (200 {SNOWFLAKE} )\n"
        f"\t 3 - Garde Polaire (150 {SNOWFLAKE} )\n" + CHOICE
    )
    while True:
        number = _read_choice(
            prompter, menu, "\t Choix invalide. Réessayez :\n" + CHOICE, range(1, 4)
        )
        kind = DefenderKind.from_number(number)
        if state.snowflakes >= kind.price:
            return kind
        out.write(
            f"\t Vous n'avez pas assez de flocons({SNOWFLAKE} ) "
            f"({kind.price} requis, {state.snowflakes} disponibles).\n"
        )
        again = prompter.read_int(
            "\t Souhaitez-vous choisir un autre défenseur ?\n"
            " \t 1 pour oui ou 0 pour non\n" + CHOICE
        )
        if again not in (0, 1):
            raise InvalidInput("Entrée invalide. Fin du programme.")
        if again == 0:
            return None


def place_defenders(state: GameState, prompter: Prompter, out: IO[str] | None = None) -> None:
    """Let the player buy and place defenders until they answer no."""
    out = out if out is not None else sys.stdout
    size = state.size
    while True:
        answer = _read_choice(
            prompter,
            "\t Souhaitez-vous placer un défenseur ?\n"
            f"\t Vous avez {state.snowflakes} {SNOWFLAKE}\n"
            "\t 1 pour oui ou 0 pour non\n" + CHOICE,
            "\tValeur incorrecte. Réessayez :\n" + CHOICE,
            (0, 1),
        )
        if answer == 0:
            return

        kind = _choose_kind(state, prompter, out)
        if kind is None:
            return

        x = -1
        while not 0 <= x < size:
            x = _column_index(
                prompter.read_char(
                    "\n\t Choisissez une coordonnée x "
                    f"(lettre a-{column_label(size - 1)}) :\n" + CHOICE
                )
            )
        y = -1
        while not 0 <= y < size:
            y = prompter.read_int(
                f"\t Choisissez une coordonnée y (entre 1 et {size}) :\n" + CHOICE
            ) - 1

        if not is_snow(state.grid[y][x]):
            out.write("\t Cette case n'est pas de la neige. Recommencez.\n\n")
            continue

        state.grid[y][x] = int(kind.tile)
        state.defenders.append(make_defender(kind, x, y))
        state.snowflakes -= kind.price
        out.write(render_map(state.grid))
        out.write(
            f"\n\t Défenseur placé. Il vous reste {state.snowflakes} {SNOWFLAKE} .\n"
        )


def announce_end(
    won: bool,
    score: int,
    out: IO[str] | None = None,
    delay: Callable[[float], object] = time.sleep,
) -> None:
    """Tell the player how the game ended and show the score."""
    out = out if out is not None else sys.stdout
    verdict = "gagné" if won else "perdu"
    out.write(f"\n \t== Vous avez {verdict} ! ==\n")
    out.write(f"\n \tScore={score}\n")
    delay(2)
    out.write("\n \tRetour au menu principal...\n")
    delay(2)


def run_game(
    state: GameState,
    prompter: Prompter,
    out: IO[str] | None = None,
    rng: random.Random | None = None,
    delay: Callable[[float], object] = time.sleep,
    save_path=SAVE_FILE,
) -> bool | None:
    """Play waves until the last one, a defeat or a save.

    Returns True on victory, False on defeat and None when the game was saved.
    A state without a map gets a freshly generated one.
    """
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()

    if state.size == 0:
        size = rng.randrange(16) + 30
        state.grid = create_map(size, rng)
        create_path(state.grid, rng)
    size = state.size
    grid = state.grid
    out.write(f"\n\t Pour cette partie, la carte est de taille {size} x {size}\n\n")
    out.write(render_map(grid))

    start = start_column(grid)
    crown = crown_column(grid)

    while state.wave < LAST_WAVE:
        spawned = 0
        place_defenders(state, prompter, out)
        if spawn_enemy(grid, start, state.enemies, spawned, state.wave, rng):
            spawned += 1

        while grid[size - 1][crown] == TileType.CROWN and state.enemies:
            delay(TURN_PAUSE)
            move_enemies(grid, state.enemies)
            state.score += defenders_attack(grid, state.defenders, state.enemies)

            if any(enemy.y == size - 1 for enemy in state.enemies):
                announce_end(False, state.score, out, delay)
                return False

            if grid[0][start] == TileType.PATH and spawned <= 8:
                if spawn_enemy(grid, start, state.enemies, spawned, state.wave, rng):
                    spawned += 1

            out.write(CLEAR_SCREEN)
            out.write(render_map(grid))

        state.snowflakes += WAVE_REWARD
        out.write(f"\n \tScore={state.score}\n")
        delay(2)

        while True:
            choice = prompter.read_char(
                "\t Souhaitez-vous sauvegarder la partie ? (o/n)\n" + CHOICE
            )
            if choice == "o":
                save_game(save_path, state)
                out.write("\t Partie sauvegardée !\n")
                delay(2)
                return None
            if choice == "n":
                break
        state.wave += 1

    announce_end(True, state.score, out, delay)
    return True


def start_menu(prompter: Prompter, out: IO[str] | None = None) -> int:
    """Show the main menu and return 1 (new game), 2 (resume) or 3 (quit)."""
    out = out if out is not None else sys.stdout
    out.write(
        f"\n \t=== {PENGUIN}{SNOWMAN}{BEAR} OPERATION FLOCON "
        f"{SKIER} {SNOWBOARDER}{LUGER} === \n"
    )
    out.write("\n \t=== MENU PRINCIPAL === \n")
    out.write("\n \t Nouvelle Partie (1) \t \n")
    out.write("\n \t Reprendre une partie (2) \t \n")
    out.write("\n \t Quitter (3) \t \n")
    return _read_choice(
        prompter,
        "\n \t Votre choix : ",
        "\n \t Veuillez entrer une valeur correcte : \n"
        "\t 1 pour démarrer une nouvelle partie \n"
        "\t 2 pour reprendre une ancienne partie \n"
        "\t 3 pour quitter le jeu \n" + CHOICE,
        range(1, 4),
    )


def main(argv=None) -> int:
    """Run the menu loop; returns the process exit status."""
    parser = argparse.ArgumentParser(description="Tower defence on a snowy map.")
    parser.add_argument("--save", default=SAVE_FILE, help="save file path")
    args = parser.parse_args(argv)

    out = sys.stdout
    prompter = Prompter(sys.stdin, out)
    rng = random.Random()
    out.write(CLEAR_SCREEN)
    try:
        while True:
            choice = start_menu(prompter, out)
            if choice == 1:
                with contextlib.suppress(FileNotFoundError):
                    import os

                    os.remove(args.save)
                state = GameState()
            elif choice == 2:
                try:
                    state = load_game(args.save)
                except FileNotFoundError:
                    out.write(f"\t Erreur : le fichier {args.save} n'existe pas \n")
                    return 3
            else:
                out.write("\n\t A plus \U0001f44b\U0001f60a\n\n")
                return 0
            run_game(state, prompter, out, rng, time.sleep, args.save)
    except InvalidInput as exc:
        out.write(f"\t {exc}\n")
        return 4