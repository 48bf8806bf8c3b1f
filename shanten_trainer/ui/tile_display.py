"""Tile display formatting with colors for terminal output."""

from typing import List

from rich.text import Text

from shanten_trainer.core.notation import Tile
from shanten_trainer.core.tile import TileSuit
from shanten_trainer.ui.i18n import t


# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.HONOR: "yellow",
}

HONOR_KEYS = [
    "tile.east", "tile.south", "tile.west", "tile.north",
    "tile.haku", "tile.hatsu", "tile.chun",
]

COL_WIDTH = 5  # Fixed display column width per tile slot


def tile_to_display_str(tile: Tile) -> str:
    """Localized tile name; honors are translated, red fives stay '0m'."""
    if tile.suit == TileSuit.HONOR:
        return t(HONOR_KEYS[tile.value - 1])
    return tile.name


def _tile_display_width(name: str) -> int:
    """Calculate the display width of a tile name, accounting for fullwidth chars."""
    w = 0
    for ch in name:
        if '\u4e00' <= ch <= '\u9fff' or '\u3000' <= ch <= '\u30ff' or '\uff00' <= ch <= '\uffef':
            w += 2  # Fullwidth character
        else:
            w += 1
    return w


def tile_to_rich_text(tile: Tile) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    name = tile_to_display_str(tile)
    if tile.is_red:
        style = "bold red on white"
    else:
        style = f"bold {SUIT_COLORS[tile.suit]}"
    return Text(f"[{name}]", style=style)


def sort_tiles(tiles: List[Tile]) -> List[Tile]:
    """Display order: by kind, red five before the plain one."""
    return sorted(tiles, key=lambda tile: (tile.index34, tile.value != 0))


def hand_to_rich_text(tiles: List[Tile], show_numbers: bool = False) -> Text:
    """Render a hand as one aligned row of tiles, optionally numbered 1..n above."""
    tiles = sort_tiles(tiles)
    cells = [f"[{tile_to_display_str(tile)}]" for tile in tiles]

    result = Text()
    if show_numbers:
        result.append("  ")
        for i, cell in enumerate(cells):
            width = max(COL_WIDTH, _tile_display_width(cell) + 1)
            label = str(i + 1)
            pad_total = width - len(label)
            pad_left = pad_total // 2
            result.append(" " * pad_left + label + " " * (pad_total - pad_left), style="dim")
        result.append("\n")

    result.append("  ")
    for tile, cell in zip(tiles, cells):
        result.append_text(tile_to_rich_text(tile))
        gap = COL_WIDTH - _tile_display_width(cell)
        result.append(" " * max(gap, 1))
    return result
