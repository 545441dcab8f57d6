"""Endpoint de upload de arquivos.

Endpoints:
- POST /api/upload: recebe multipart com o campo "file" e devolve a URL pública

Respostas (JSON):
- 200 {"url": "<base>/file/<file_id>.<ext>"}
- 400 {"error": "No file provided in the \"file\" field."}
- 500 {"error": "<mensagem>"}

O destinatário no Telegram vem da configuração, nunca do cliente.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from app.bootstrap import get_relay_use_case
from app.domain.upload import InboundFile
from config.settings import get_relay_settings, get_telegram_settings

logger = logging.getLogger(__name__)

router = APIRouter()

FILE_FIELD = "file"


def _get_relay_use_case():
    """Obtém o use case de relay (lazy-loading)."""
    return get_relay_use_case()


def _resolve_base_url(request: Request) -> str:
    configured = get_relay_settings().public_base_url
    if configured:
        return configured
    return f"{request.url.scheme}://{request.url.netloc}"


async def _read_inbound_file(value: Any) -> InboundFile | None:
    """Converte o campo do form em InboundFile (None se não for arquivo)."""
    if not isinstance(value, UploadFile):
        return None
    content = await value.read()
    return InboundFile(
        name=value.filename or "",
        declared_type=value.content_type or "",
        size=len(content),
        content=content,
    )


@router.post("/upload")
async def upload_file(request: Request) -> JSONResponse:
    """Relay do arquivo para o Telegram.

    Falhas de parsing do form e de wiring/configuração também respondem
    com o envelope JSON {"error": ...} e status 500.

    Returns:
        JSONResponse com url (200) ou error (400/500).
    """
    try:
        form = await request.form()
    except Exception as exc:
        logger.warning("upload_form_parse_failed", extra={"error_type": type(exc).__name__})
        return JSONResponse({"error": str(exc)}, status_code=500)

    try:
        try:
            inbound = await _read_inbound_file(form.get(FILE_FIELD))
        finally:
            await form.close()

        use_case = _get_relay_use_case()
        recipient_id = get_telegram_settings().chat_id
        base_url = _resolve_base_url(request)
    except Exception as exc:
        logger.error("upload_setup_failed", extra={"error_type": type(exc).__name__})
        return JSONResponse({"error": str(exc)}, status_code=500)

    outcome = await use_case.execute(inbound, recipient_id=recipient_id, base_url=base_url)
    return JSONResponse(outcome.as_body(), status_code=outcome.status_code)
