"""User input handling for the terminal UI."""

from typing import List, Optional

from rich.console import Console

from shanten_trainer.core.notation import Tile, parse_tenhou, to_counts
from shanten_trainer.core.tile import MAX_COPIES, TileCounts
from shanten_trainer.rules.shanten import VALID_HAND_SIZES
from shanten_trainer.ui.i18n import t

QUIT = "q"
MIN_GUESS = -1
MAX_GUESS = 8


def parse_guess(text: str) -> Optional[int]:
    """Return the guessed shanten, or None for an empty reveal.

    Raises ValueError for anything that is not an integer in range.
    """
    text = text.strip()
    if not text:
        return None
    value = int(text)
    if not (MIN_GUESS <= value <= MAX_GUESS):
        raise ValueError(f"shanten guess out of range: {value}")
    return value


def get_guess(console: Console):
    """Ask for a shanten guess. Returns an int, None (reveal) or QUIT."""
    while True:
        choice = console.input(f"  > {t('prompt.guess')} ").strip().lower()
        if choice == QUIT:
            return QUIT
        try:
            return parse_guess(choice)
        except ValueError:
            console.print(f"  [red]{t('prompt.invalid_input')}[/red]")


def get_menu_choice(console: Console, max_choice: int) -> int:
    """Ask for a menu number between 0 and max_choice."""
    while True:
        try:
            choice = int(console.input(f"  > {t('prompt.choose', n=max_choice)} ").strip())
            if 0 <= choice <= max_choice:
                return choice
        except ValueError:
            pass
        console.print(f"  [red]{t('prompt.invalid_input')}[/red]")


def check_hand(counts: TileCounts) -> Optional[str]:
    """Localized reason a parsed hand cannot be analyzed, or None."""
    if counts.total not in VALID_HAND_SIZES:
        return t("msg.invalid_size", total=counts.total)
    if any(c > MAX_COPIES for c in counts):
        return t("msg.too_many_copies")
    return None


def get_hand_notation(console: Console) -> Optional[List[Tile]]:
    """Ask for a hand in Tenhou notation until it is usable; None on empty input."""
    while True:
        text = console.input(f"  > {t('prompt.notation')} ").strip()
        if not text:
            return None
        try:
            tiles = parse_tenhou(text)
        except ValueError as e:
            console.print(f"  [red]{t('msg.invalid_notation', error=e)}[/red]")
            continue

        problem = check_hand(to_counts(tiles))
        if problem is None:
            return tiles
        console.print(f"  [red]{problem}[/red]")
