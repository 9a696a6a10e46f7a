from enum import Enum

from .constants import LEVEL_ALIASES, LEVEL_EMOJIS


class Level(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"


def normalize_level(level) -> Level:
    """
    Normaliza a severidade pelo nome (case-insensitive).
    Qualquer valor não reconhecido (inclusive None ou não-string) vira UNKNOWN.
    """
    if isinstance(level, Level):
        return level
    if not isinstance(level, str):
        return Level.UNKNOWN
    name = level.upper()
    name = LEVEL_ALIASES.get(name, name)
    try:
        return Level(name)
    except ValueError:
        return Level.UNKNOWN


def get_level_emoji(level) -> str:
    return LEVEL_EMOJIS.get(normalize_level(level).value, LEVEL_EMOJIS["UNKNOWN"])
