"""Contratos canônicos da resposta da Telegram Bot API.

A resposta é decodificada na borda (connector) para um union discriminado
por `kind`, de modo que a extração de referência opere sobre um tipo fechado
em vez de sondar campos presentes.

Envelope:
    {"ok": true, "result": {"photo": [...]} | {"document": {...}} | ...}
    {"ok": false, "error_code": 400, "description": "Bad Request: ..."}

Precedência quando mais de uma seção está presente: photo, document,
video, audio.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

MEDIA_SECTION_PRECEDENCE: tuple[str, ...] = ("photo", "document", "video", "audio")


class PhotoSize(BaseModel):
    """Uma resolução de foto retornada pelo sendPhoto."""

    model_config = ConfigDict(extra="ignore")

    file_id: str
    file_unique_id: str = ""
    width: int = 0
    height: int = 0
    file_size: int = 0


class MediaFile(BaseModel):
    """Arquivo único (document, video, audio)."""

    model_config = ConfigDict(extra="ignore")

    file_id: str
    file_unique_id: str = ""
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class PhotoMedia(BaseModel):
    kind: Literal["photo"] = "photo"
    variants: list[PhotoSize] = Field(min_length=1)


class DocumentMedia(BaseModel):
    kind: Literal["document"] = "document"
    file: MediaFile


class VideoMedia(BaseModel):
    kind: Literal["video"] = "video"
    file: MediaFile


class AudioMedia(BaseModel):
    kind: Literal["audio"] = "audio"
    file: MediaFile


SentMedia = Annotated[
    PhotoMedia | DocumentMedia | VideoMedia | AudioMedia,
    Field(discriminator="kind"),
]

_SENT_MEDIA_ADAPTER: TypeAdapter[SentMedia] = TypeAdapter(SentMedia)


class BotApiResponse(BaseModel):
    """Envelope decodificado de uma chamada send*."""

    model_config = ConfigDict(extra="ignore")

    ok: bool = False
    description: str | None = None
    error_code: int | None = None
    media: SentMedia | None = None


def decode_bot_response(payload: Any) -> BotApiResponse:
    """Decodifica o JSON do Telegram para BotApiResponse.

    Nunca levanta para formas inesperadas: seções não reconhecíveis
    resultam em `media=None`.

    Args:
        payload: JSON já parseado (normalmente dict).

    Returns:
        BotApiResponse com a mídia discriminada (quando reconhecível).
    """
    if not isinstance(payload, dict):
        return BotApiResponse()

    description = payload.get("description")
    error_code = payload.get("error_code")
    return BotApiResponse(
        ok=payload.get("ok") is True,
        description=description if isinstance(description, str) else None,
        error_code=error_code if isinstance(error_code, int) else None,
        media=_decode_media(payload.get("result")),
    )


def _decode_media(result: Any) -> PhotoMedia | DocumentMedia | VideoMedia | AudioMedia | None:
    if not isinstance(result, dict):
        return None

    for section in MEDIA_SECTION_PRECEDENCE:
        raw = result.get(section)
        if not raw:
            continue
        tagged = (
            {"kind": section, "variants": raw}
            if section == "photo"
            else {"kind": section, "file": raw}
        )
        try:
            return _SENT_MEDIA_ADAPTER.validate_python(tagged)
        except ValidationError as exc:
            logger.warning(
                "telegram_media_section_invalid",
                extra={"section": section, "error_count": exc.error_count()},
            )
    return None
