"""Internationalization support for the trainer.

Usage:
    from shanten_trainer.ui.i18n import t, set_language

    set_language("en")               # Switch to English
    t("msg.correct")                 # -> "Correct!"
    t("shanten.n", n=2)              # -> "2-shanten"
"""

from shanten_trainer.engine.config import LANGUAGES


class I18n:
    """Singleton internationalization manager."""

    _lang: str = "zh"
    _translations: dict = {}
    _loaded: bool = False

    @classmethod
    def set_language(cls, lang: str):
        """Set the active language."""
        if lang not in LANGUAGES:
            raise ValueError(f"unsupported language: {lang!r}")
        cls._lang = lang
        cls._load_translations()

    @classmethod
    def _load_translations(cls):
        """Load translations for the current language."""
        if cls._lang == "ja":
            from shanten_trainer.ui.locales.ja import TRANSLATIONS
        elif cls._lang == "en":
            from shanten_trainer.ui.locales.en import TRANSLATIONS
        else:
            from shanten_trainer.ui.locales.zh import TRANSLATIONS
        cls._translations = TRANSLATIONS
        cls._loaded = True

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments."""
        if not cls._loaded:
            cls._load_translations()
        text = cls._translations.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    @classmethod
    def get_language(cls) -> str:
        """Get the current language code."""
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    """Set the active language."""
    I18n.set_language(lang)


def get_language() -> str:
    """Get the current language code."""
    return I18n.get_language()


def next_language(lang: str) -> str:
    """The language after `lang` in the settings cycle."""
    return LANGUAGES[(LANGUAGES.index(lang) + 1) % len(LANGUAGES)]


def shanten_label(value: int) -> str:
    """Localized name of a shanten value: agari, tenpai, or n-shanten."""
    if value < 0:
        return t("shanten.agari")
    if value == 0:
        return t("shanten.tenpai")
    return t("shanten.n", n=value)
