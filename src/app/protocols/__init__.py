"""Protocolos e contratos do core da aplicação."""

from .kv_store import KVStoreProtocol
from .models import (
    AudioMedia,
    BotApiResponse,
    DocumentMedia,
    MediaFile,
    PhotoMedia,
    PhotoSize,
    VideoMedia,
    decode_bot_response,
)
from .upstream_client import MediaUploadClientProtocol

__all__ = [
    "AudioMedia",
    "BotApiResponse",
    "DocumentMedia",
    "KVStoreProtocol",
    "MediaFile",
    "MediaUploadClientProtocol",
    "PhotoMedia",
    "PhotoSize",
    "VideoMedia",
    "decode_bot_response",
]
