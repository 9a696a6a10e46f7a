import math
import re
from datetime import datetime, timezone
from typing import Optional

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_timestamp(value) -> Optional[int]:
    """
    Converte o campo `timestamp` (ms desde epoch) em inteiro.
    Aceita número JSON ou string base 10 (usa só o prefixo numérico, ex: "1700000000000ms").
    Retorna None quando ausente, inválido ou zero.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        parsed = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        parsed = int(match.group(1))
    else:
        return None
    return parsed or None


def resolve_datetime(timestamp=None, now=None) -> datetime:
    """
    Instante efetivo do evento (UTC). Sem timestamp válido, usa o relógio atual
    no momento da chamada.
    """
    millis = parse_timestamp(timestamp)
    if millis is not None:
        try:
            return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            pass
    if now is not None:
        return now
    return datetime.now(timezone.utc)


def describe_request(req) -> str:
    return f"{req.method} {req.url}"
