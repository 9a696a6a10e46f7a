import logging

from flask import Flask, Response, request
from werkzeug.exceptions import BadRequest

from .constants import (
    CORS_HEADERS,
    DEBUG_MODE,
    ERROR_STATUS,
    RELAY_LOGGER_SOURCE,
    RELAY_STRICT_FIELDS,
    SUCCESS_STATUS,
)
from .detection import Level, normalize_level
from .errors import InvalidMethod, MalformedBody, RouteNotFound
from .services import IftttClient
from .utils import describe_request

logger = logging.getLogger(__name__)

ROUTED_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']
REQUIRED_FIELDS = ('level', 'source', 'message')


def _response(status):
    return Response(status=status, headers=CORS_HEADERS)


def error_response():
    return _response(ERROR_STATUS)


def parse_event(data, strict=False):
    """
    Extrai os campos do evento. No modo estrito, level/source/message são obrigatórios.
    """
    if data is None:
        raise MalformedBody("JSON body is null")
    if not isinstance(data, dict):
        # JSON válido sem campos nomeados: evento vazio
        data = {}
    if strict:
        missing = [field for field in REQUIRED_FIELDS if data.get(field) is None]
        if missing:
            raise MalformedBody(f"Missing required field(s): {', '.join(missing)}")
    return {
        'timestamp': data.get('timestamp'),
        'level': normalize_level(data.get('level')),
        'source': data.get('source'),
        'message': data.get('message'),
    }


def create_app(client=None, strict_fields=None):
    app = Flask(__name__)
    notifier = client if client is not None else IftttClient()
    strict = RELAY_STRICT_FIELDS if strict_fields is None else strict_fields

    def report(level, error):
        # o próprio relay usa o canal do IFTTT para registrar rejeições
        message = str(error) or "Unknown error"
        if level == Level.ERROR:
            logger.error(message)
        else:
            logger.warning(message)
        notifier.emit(None, level, RELAY_LOGGER_SOURCE, message)

    @app.route('/', methods=ROUTED_METHODS, provide_automatic_options=False)
    def submit():
        try:
            if request.method != 'POST':
                raise InvalidMethod(f"Method not allowed ({describe_request(request)})")
            try:
                data = request.get_json(force=True)
            except BadRequest as exc:
                raise MalformedBody(exc.description or str(exc)) from exc
            event = parse_event(data, strict=strict)
        except InvalidMethod as exc:
            report(Level.WARN, exc)
            return error_response()
        except MalformedBody as exc:
            report(Level.ERROR, f"{str(exc) or 'Unknown error'} ({describe_request(request)})")
            return error_response()

        if DEBUG_MODE:
            print(f"[DEBUG] Evento recebido: {event}")
        notifier.emit(event['timestamp'], event['level'], event['source'], event['message'])
        return _response(SUCCESS_STATUS)

    @app.errorhandler(405)
    def method_not_routed(_error):
        # só / tem rota, então 405 é sempre um método fora de ROUTED_METHODS em /
        report(Level.WARN, InvalidMethod(f"Method not allowed ({describe_request(request)})"))
        return error_response()

    @app.errorhandler(404)
    def not_routed(_error):
        report(Level.WARN, RouteNotFound(f"Bad request: {describe_request(request)}"))
        return error_response()

    return app
