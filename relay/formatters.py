import json
from datetime import datetime
from zoneinfo import ZoneInfo

from .constants import (
    DEFAULT_MESSAGE,
    DEFAULT_SOURCE,
    DISPLAY_TIMEZONE,
    FRENCH_SHORT_FORMAT,
    TIMESTAMP_PREFIX,
)
from .detection import get_level_emoji
from .utils import resolve_datetime

_DISPLAY_TZ = ZoneInfo(DISPLAY_TIMEZONE)


def _reorder_date(segment: str) -> str:
    parts = segment.split('/')
    if len(parts) == 3 and len(parts[2]) == 4:
        return '/'.join(reversed(parts))
    return segment


def to_short_string(moment: datetime) -> str:
    """
    Data curta no padrão francês, horário de Paris, em um único token.
    Ex: 14/11/2023 23:13:20 -> 2023/11/14-23:13:20
    """
    local = moment.astimezone(_DISPLAY_TZ)
    french = local.strftime(FRENCH_SHORT_FORMAT)
    return '-'.join(_reorder_date(segment) for segment in french.split(' '))


def format_timestamp(timestamp=None, now=None) -> str:
    moment = resolve_datetime(timestamp, now=now)
    try:
        text = to_short_string(moment)
    except OverflowError:
        # instante nos limites do calendário não cabe no fuso de exibição
        text = to_short_string(resolve_datetime(None, now=now))
    return f"{TIMESTAMP_PREFIX} {text}"


def coerce_text(value, default: str) -> str:
    """
    Texto do campo como o JSON o escreveria: true/false minúsculos, objetos e
    listas serializados, números inteiros sem ".0".
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (bool, dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def build_notification(timestamp, level, source, message, now=None) -> dict:
    """Monta o payload de saída do IFTTT (value1/value2/value3)."""
    return {
        "value1": format_timestamp(timestamp, now=now),
        "value2": f"{get_level_emoji(level)}  {coerce_text(source, DEFAULT_SOURCE)}",
        "value3": coerce_text(message, DEFAULT_MESSAGE),
    }
