"""Language registry — supported languages with their wire codes."""
from enum import Enum

from polyrec.constants import MSG_UNKNOWN_LANGUAGE
from polyrec.errors import UnknownLanguageError


class Language(Enum):
    ENGLISH = ("en-gb", "English")
    SPANISH = ("es-es", "Spanish")
    FRENCH = ("fr-fr", "French")
    GREEK = ("el", "Greek")
    GERMAN = ("de-de", "German")
    ITALIAN = ("it-it", "Italian")

    def __init__(self, code: str, display_name: str) -> None:
        self.code = code
        self.display_name = display_name

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Look up a language by its wire code, ignoring case and whitespace."""
        wanted = code.strip().lower()
        match [lang for lang in cls if lang.code == wanted]:
            case [lang]:
                return lang
            case _:
                raise UnknownLanguageError(MSG_UNKNOWN_LANGUAGE % code)


SUPPORTED_LANGUAGES: tuple[Language, ...] = tuple(Language)


def supported_languages() -> tuple[Language, ...]:
    return SUPPORTED_LANGUAGES
