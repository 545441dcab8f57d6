"""Protocolo do cliente de upload para o Telegram.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.upload import UpstreamReply, UpstreamRequest


class MediaUploadClientProtocol(Protocol):
    """Contrato mínimo para enviar uma mídia ao Telegram.

    Cada chamada executa exatamente uma requisição de rede.
    Falhas de transporte levantam UpstreamTransportError; recusas
    bem-formadas retornam UpstreamReply(accepted=False).
    """

    async def send_media(self, request: UpstreamRequest) -> UpstreamReply: ...
