#!/usr/bin/env python3
"""Shanten Trainer - Terminal CLI"""

from rich.console import Console

from shanten_trainer.core.notation import to_counts
from shanten_trainer.engine.config import TrainerConfig, load_config, reset_config, save_config
from shanten_trainer.engine.event import EventBus
from shanten_trainer.engine.session import PracticeSession
from shanten_trainer.engine.session_logger import SessionLogger
from shanten_trainer.rules.shanten import shanten_breakdown
from shanten_trainer.ui.board_layout import (
    render_analysis, render_answer, render_hand, render_settings, render_stats,
    render_title,
)
from shanten_trainer.ui.i18n import next_language, set_language, t
from shanten_trainer.ui.input_handler import (
    QUIT, get_guess, get_hand_notation, get_menu_choice,
)

console = Console()


def change_language(config: TrainerConfig):
    """Show language selection submenu and persist the choice."""
    console.print(f"\n  {t('lang.select')}")
    console.print(f"    1. {t('lang.zh')}")
    console.print(f"    2. {t('lang.ja')}")
    console.print(f"    3. {t('lang.en')}")
    console.print()

    while True:
        try:
            choice = int(console.input("  > 1/2/3: ").strip())
            if choice in (1, 2, 3):
                config.language = ("zh", "ja", "en")[choice - 1]
                set_language(config.language)
                save_config(config)
                return
        except ValueError:
            pass
        console.print("  [red]Invalid / 无效 / 無効[/red]")


def show_menu() -> int:
    """Show the main menu and return the choice."""
    render_title(console)
    console.print(f"  {t('menu.select')}")
    console.print(f"    1. {t('menu.practice')}")
    console.print(f"    2. {t('menu.analyze')}")
    console.print(f"    3. {t('menu.settings')}")
    console.print(f"    4. {t('menu.language')}")
    console.print(f"    0. {t('menu.quit')}")
    console.print()
    return get_menu_choice(console, 4)


def practice(config: TrainerConfig):
    """Run practice questions until the player quits."""
    event_bus = EventBus()
    logger = SessionLogger(config.to_dict())
    logger.subscribe_events(event_bus)
    session = PracticeSession(event_bus, hand_size=config.hand_size)

    while True:
        session.generate_hand()
        render_hand(console, session.hand, show_numbers=config.show_numbers)
        session.start()

        guess = get_guess(console)
        if guess == QUIT:
            session.stop()
            break
        result = session.answer(guess) if guess is not None else session.stop()
        render_answer(console, result, show_timer=config.show_timer)

        if console.input(f"  > {t('prompt.next')} ").strip().lower() == QUIT:
            break

    session.end()
    render_stats(console, session)
    log_path = logger.save()
    console.print(f"  [dim]{t('msg.log_saved', path=log_path)}[/dim]")


def analyze(config: TrainerConfig):
    """Analyze hands typed in Tenhou notation."""
    while True:
        tiles = get_hand_notation(console)
        if tiles is None:
            return
        render_hand(console, tiles, show_numbers=config.show_numbers)
        render_analysis(console, shanten_breakdown(to_counts(tiles)))


def settings(config: TrainerConfig) -> TrainerConfig:
    """Settings submenu; every change is saved immediately."""
    while True:
        render_settings(console, config)
        choice = get_menu_choice(console, 5)
        if choice == 0:
            return config
        if choice == 1:
            config.show_numbers = not config.show_numbers
        elif choice == 2:
            config.show_timer = not config.show_timer
        elif choice == 3:
            config.hand_size = 14 if config.hand_size == 13 else 13
        elif choice == 4:
            config.language = next_language(config.language)
            set_language(config.language)
        elif choice == 5:
            config = reset_config()
            set_language(config.language)
            console.print(f"  [green]{t('settings.saved')}[/green]")
            continue
        save_config(config)
        console.print(f"  [green]{t('settings.saved')}[/green]")


def main():
    """Main entry point."""
    config = load_config()
    try:
        set_language(config.language)
        while True:
            choice = show_menu()
            if choice == 0:
                console.print(f"\n  {t('msg.goodbye')}\n")
                break
            elif choice == 1:
                practice(config)
            elif choice == 2:
                analyze(config)
            elif choice == 3:
                config = settings(config)
            elif choice == 4:
                change_language(config)
    except (KeyboardInterrupt, EOFError):
        console.print(f"\n\n  [dim]{t('msg.exit')}[/dim]\n")


if __name__ == "__main__":
    main()
