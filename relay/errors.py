class RelayError(Exception):
    """Erro base do relay. A mensagem vai só para o log, nunca para a resposta HTTP."""


class InvalidMethod(RelayError):
    pass


class MalformedBody(RelayError):
    pass


class RouteNotFound(RelayError):
    pass


class OutboundDeliveryFailure(RelayError):
    """Falha ao entregar o payload no IFTTT (erro de rede ou status não-2xx)."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
