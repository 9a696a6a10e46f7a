import logging
import threading
from typing import Optional

import requests

from .constants import (
    DEBUG_MODE,
    IFTTT_EVENT,
    IFTTT_SECRET,
    IFTTT_TIMEOUT_SECONDS,
    IFTTT_TRIGGER_URL,
)
from .errors import OutboundDeliveryFailure
from .formatters import build_notification

logger = logging.getLogger(__name__)


class IftttClient:
    """
    Cliente do IFTTT Maker Webhooks.

    Configuração (evento, chave, template da URL) é recebida uma única vez no
    construtor; por padrão vem das variáveis de ambiente lidas no start.
    Com detach=True cada notificação é entregue em uma thread daemon e o
    chamador nunca espera (nem vê) o resultado do envio.
    """

    def __init__(
        self,
        event: Optional[str] = None,
        secret: Optional[str] = None,
        trigger_url: Optional[str] = None,
        timeout: Optional[float] = None,
        detach: bool = True,
    ):
        self.event = IFTTT_EVENT if event is None else event
        self.secret = IFTTT_SECRET if secret is None else secret
        self.url_template = trigger_url or IFTTT_TRIGGER_URL
        self.timeout = IFTTT_TIMEOUT_SECONDS if timeout is None else timeout
        self.detach = detach
        self.enabled = bool(self.secret)
        if not self.enabled:
            logger.warning("IFTTT_SECRET não configurado: notificações serão descartadas")

    @property
    def trigger_url(self) -> str:
        return self.url_template.format(event=self.event, secret=self.secret)

    def emit(self, timestamp, level, source, message):
        """
        Formata o evento e dispara o envio. O instante padrão ("agora") é
        resolvido aqui, no momento da emissão, e não na entrega.
        """
        payload = build_notification(timestamp, level, source, message)
        if DEBUG_MODE:
            print(f"[DEBUG] IFTTT payload: {payload}")
        return self.dispatch(payload)

    def dispatch(self, payload: dict) -> Optional[threading.Thread]:
        if not self.detach:
            self.deliver(payload)
            return None
        worker = threading.Thread(target=self.deliver, args=(payload,), daemon=True)
        worker.start()
        return worker

    def deliver(self, payload: dict) -> bool:
        if not self.enabled:
            logger.warning("Notificação descartada (IFTTT desabilitado): %s", payload.get("value2"))
            return False
        try:
            self.send_payload(payload)
        except OutboundDeliveryFailure as exc:
            logger.error("Falha ao enviar notificação ao IFTTT (evento=%s): %s", self.event, exc)
            return False
        return True

    def send_payload(self, payload: dict) -> requests.Response:
        # mensagens de erro não podem conter a URL (a chave faz parte do path)
        try:
            resp = requests.post(self.trigger_url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise OutboundDeliveryFailure(f"erro de rede: {type(exc).__name__}") from exc

        if DEBUG_MODE:
            print(f"[DEBUG] IFTTT response: {resp.status_code}")
        if not 200 <= resp.status_code < 300:
            raise OutboundDeliveryFailure(f"status HTTP {resp.status_code}", status_code=resp.status_code)
        return resp
