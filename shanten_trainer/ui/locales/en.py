"""English strings."""

TRANSLATIONS = {
    "label.title": "Shanten Trainer",
    "label.subtitle": "Riichi Mahjong · hand efficiency practice",
    "label.hand": "Hand",
    "label.you_guessed": "Your answer",
    "label.answer": "Answer",

    "menu.select": "Select:",
    "menu.practice": "Practice",
    "menu.analyze": "Analyze a hand",
    "menu.settings": "Settings",
    "menu.language": "Language",
    "menu.quit": "Quit",

    "prompt.choose": "Enter a number (0-{n}):",
    "prompt.invalid_input": "Invalid input",
    "prompt.guess": "Shanten (-1 to 8, Enter to reveal, q to stop):",
    "prompt.notation": "Hand in Tenhou notation (e.g. 123m456p789s1122z), Enter to go back:",
    "prompt.press_enter": "Press Enter to continue...",
    "prompt.next": "Enter for the next hand, q to stop:",

    "shanten.agari": "Complete",
    "shanten.tenpai": "Tenpai",
    "shanten.n": "{n}-shanten",

    "msg.correct": "Correct!",
    "msg.wrong": "Wrong, the answer is {answer}",
    "msg.revealed": "Answer: {answer}",
    "msg.time": "{seconds:.1f}s",
    "msg.invalid_notation": "Bad hand notation: {error}",
    "msg.invalid_size": "A hand must hold 13 or 14 tiles, got {total}",
    "msg.too_many_copies": "At most 4 copies of a tile",
    "msg.log_saved": "Session log saved: {path}",
    "msg.goodbye": "Goodbye!",
    "msg.exit": "Exited",

    "stats.title": "Session statistics",
    "stats.answered": "Answered",
    "stats.correct": "Correct",
    "stats.accuracy": "Accuracy",
    "stats.avg_time": "Average time",

    "analysis.title": "Hand analysis",
    "analysis.form": "Form",
    "analysis.value": "Form shanten",
    "analysis.standard": "Standard",
    "analysis.chiitoi": "Seven pairs",
    "analysis.kokushi": "Thirteen orphans",
    "analysis.overall": "Shanten",

    "settings.title": "Settings",
    "settings.show_numbers": "Show tile numbers",
    "settings.show_timer": "Show timer",
    "settings.hand_size": "Hand size",
    "settings.language": "Language",
    "settings.reset": "Restore defaults",
    "settings.back": "Back",
    "settings.on": "on",
    "settings.off": "off",
    "settings.saved": "Settings saved",

    "lang.select": "Select language:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",

    "tile.east": "E",
    "tile.south": "S",
    "tile.west": "W",
    "tile.north": "N",
    "tile.haku": "Wh",
    "tile.hatsu": "Gr",
    "tile.chun": "Rd",
}
