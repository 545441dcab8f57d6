"""Cliente HTTP especializado para a Telegram Bot API.

Estende HttpClient genérico com comportamentos do Telegram:
- URL por método: {api_base_url}/bot{token}/{sendPhoto|sendAudio|...}
- Multipart com chat_id e o campo da categoria (photo, audio, video, document)
- Decodificação da resposta para o union discriminado (app/protocols/models.py)
- Classificação: recusa declarada (dado) vs falha de transporte (exceção)
- Logging estruturado sem token e sem conteúdo do arquivo
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from api.connectors.telegram.bot_errors import parse_bot_error
from api.connectors.telegram.bot_logging import log_bot_error, log_success
from api.connectors.telegram.http_base import HttpClient, HttpClientConfig, HttpError
from app.domain.upload import UpstreamReply
from app.protocols.models import decode_bot_response

if TYPE_CHECKING:
    import httpx

    from app.domain.upload import UpstreamRequest
    from config.settings import TelegramSettings

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class TelegramHttpClient(HttpClient):
    """Cliente HTTP para os métodos send* da Bot API.

    Cada chamada de send_media é exatamente uma requisição de rede.
    """

    def __init__(
        self,
        settings: TelegramSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport)
        self._settings = settings

    async def send_media(self, request: UpstreamRequest) -> UpstreamReply:
        """Envia a mídia para o método da categoria.

        Args:
            request: Requisição da tentativa atual

        Returns:
            UpstreamReply aceito ou recusado (com description)

        Raises:
            ValueError: Se bot_token não está configurado
            HttpError: Falha de transporte ou corpo que não é JSON
        """
        if not self._settings.bot_token or not self._settings.bot_token.strip():
            logger.error(
                "bot_token ausente ou vazio para send_media",
                extra={"operation": request.operation_name},
            )
            raise ValueError(
                "bot_token é obrigatório para upload. "
                "Verifique se TELEGRAM_BOT_TOKEN está configurado."
            )

        url = self._settings.get_method_endpoint(request.operation_name)
        file = request.payload
        response = await self.post_multipart(
            url,
            data={"chat_id": request.recipient_id},
            files={
                request.category.field_name: (
                    file.name,
                    file.content,
                    file.declared_type or DEFAULT_CONTENT_TYPE,
                ),
            },
        )
        return self._process_response(response, request)

    def _process_response(
        self,
        response: httpx.Response,
        request: UpstreamRequest,
    ) -> UpstreamReply:
        """Processa response da Bot API."""
        try:
            response_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(
                "Response JSON inválido",
                extra={"operation": request.operation_name, "status_code": response.status_code},
            )
            raise HttpError("invalid_json_response", status_code=response.status_code) from e

        envelope = decode_bot_response(response_data)
        bot_error = parse_bot_error(response_data, response.status_code)
        if bot_error is not None:
            log_bot_error(bot_error, request.operation_name, response.status_code)
            return UpstreamReply(
                accepted=False,
                response=envelope,
                description=bot_error.description,
            )

        log_success(request.operation_name, response.status_code, request.payload.size)
        return UpstreamReply(accepted=True, response=envelope)


def create_telegram_http_client(
    settings: TelegramSettings | None = None,
) -> TelegramHttpClient:
    """Factory para criar cliente Telegram com config padrão.

    Args:
        settings: TelegramSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para Telegram.
    """
    from config.settings import get_telegram_settings

    telegram = settings or get_telegram_settings()
    config = HttpClientConfig(timeout_seconds=telegram.request_timeout_seconds)
    return TelegramHttpClient(telegram, config=config)
