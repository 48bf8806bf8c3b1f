"""Screen layout rendering using Rich."""

from typing import Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shanten_trainer.core.notation import Tile, to_tenhou
from shanten_trainer.engine.session import AnswerResult, PracticeSession
from shanten_trainer.ui.i18n import shanten_label, t
from shanten_trainer.ui.tile_display import hand_to_rich_text


def render_title(console: Console):
    console.print()
    console.print(Panel(
        f"[bold cyan]{t('label.title')}[/bold cyan]\n"
        f"[dim]{t('label.subtitle')}[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    console.print()


def render_hand(console: Console, tiles: List[Tile], show_numbers: bool = False,
                title: str = ""):
    """Render a hand inside a panel, with its notation underneath."""
    body = hand_to_rich_text(tiles, show_numbers=show_numbers)
    body.append(f"\n\n  {to_tenhou(tiles)}", style="dim")
    console.print(Panel(body, title=f"[bold]{title or t('label.hand')}[/bold]",
                        border_style="cyan"))


def render_answer(console: Console, result: AnswerResult, show_timer: bool = True):
    """Verdict line for one question."""
    answer = shanten_label(result.shanten)
    if result.guess is None:
        console.print(f"  [bold yellow]{t('msg.revealed', answer=answer)}[/bold yellow]")
    elif result.is_correct:
        console.print(f"  [bold green]{t('msg.correct')}[/bold green] {answer}")
    else:
        console.print(f"  [bold red]{t('msg.wrong', answer=answer)}[/bold red]")

    if show_timer:
        console.print(f"  [dim]{t('msg.time', seconds=result.elapsed)}[/dim]")


def render_stats(console: Console, session: PracticeSession):
    """Summary table of the session so far."""
    table = Table(title=t("stats.title"), show_header=False, border_style="cyan")
    table.add_column(style="bold")
    table.add_column(justify="right")
    table.add_row(t("stats.answered"), str(session.answered_count))
    table.add_row(t("stats.correct"), str(session.correct_count))
    table.add_row(t("stats.accuracy"), f"{session.accuracy:.0%}")
    table.add_row(t("stats.avg_time"), t("msg.time", seconds=session.average_time))
    console.print()
    console.print(table)
    console.print()


def render_analysis(console: Console, breakdown: Dict[str, int]):
    """Per-form shanten of an analyzed hand; the winning form is highlighted."""
    table = Table(title=t("analysis.title"), border_style="cyan")
    table.add_column(t("analysis.form"))
    table.add_column(t("analysis.value"), justify="right")

    overall = breakdown["overall"]
    for form in ("standard", "chiitoi", "kokushi"):
        value = breakdown[form]
        style = "bold green" if value == overall else ""
        table.add_row(t(f"analysis.{form}"), Text(str(value), style=style))

    console.print(table)
    console.print(f"  [bold]{t('analysis.overall')}:[/bold] "
                  f"[bold cyan]{shanten_label(overall)}[/bold cyan] ({overall})")
    console.print()


def render_settings(console: Console, config):
    """List the settings menu with current values."""
    def on_off(flag: bool) -> str:
        return t("settings.on") if flag else t("settings.off")

    console.print(f"\n  [bold]{t('settings.title')}[/bold]")
    console.print(f"    1. {t('settings.show_numbers')}: {on_off(config.show_numbers)}")
    console.print(f"    2. {t('settings.show_timer')}: {on_off(config.show_timer)}")
    console.print(f"    3. {t('settings.hand_size')}: {config.hand_size}")
    console.print(f"    4. {t('settings.language')}: {t('lang.' + config.language)}")
    console.print(f"    5. {t('settings.reset')}")
    console.print(f"    0. {t('settings.back')}")
    console.print()
