import os

# Configurações globais de ambiente (lidas uma única vez no start do processo)
IFTTT_EVENT = os.getenv("IFTTT_EVENT", "")
IFTTT_SECRET = os.getenv("IFTTT_SECRET", "")
IFTTT_TRIGGER_URL = os.getenv(
    "IFTTT_TRIGGER_URL",
    "https://maker.ifttt.com/trigger/{event}/with/key/{secret}",
)
_timeout_env = os.getenv("IFTTT_TIMEOUT_SECONDS", "").strip()
IFTTT_TIMEOUT_SECONDS = float(_timeout_env) if _timeout_env else None

APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Validação estrita: exige level/source/message no corpo
RELAY_STRICT_FIELDS = os.getenv("RELAY_STRICT_FIELDS", "false").lower() == "true"

# Formatação de data (fixa: convenção francesa, horário da Europa Central)
DISPLAY_TIMEZONE = "Europe/Paris"
FRENCH_SHORT_FORMAT = "%d/%m/%Y %H:%M:%S"
TIMESTAMP_PREFIX = "⏳"

# Valores padrão dos campos de entrada
DEFAULT_SOURCE = "Unknown source"
DEFAULT_MESSAGE = "???"

# Source usado quando o próprio relay reporta erros pelo canal do IFTTT
RELAY_LOGGER_SOURCE = "IFTTT logger"

LEVEL_EMOJIS = {
    "DEBUG": "🔍",
    "INFO": "💡",
    "WARN": "⚡",
    "ERROR": "🌋",
    "UNKNOWN": "❔",
}

# Nomes curtos usados pelas revisões antigas
LEVEL_ALIASES = {
    "DEB": "DEBUG",
    "INF": "INFO",
    "WAR": "WARN",
    "ERR": "ERROR",
    "UNK": "UNKNOWN",
}

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
}

SUCCESS_STATUS = 204
ERROR_STATUS = 418
