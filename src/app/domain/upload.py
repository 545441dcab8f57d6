"""Modelos de domínio do relay de upload.

Tipos imutáveis que atravessam o fluxo:
InboundFile → UpstreamRequest → UpstreamReply → UpstreamResult → CanonicalReference.

StoredMetadata é entregue ao key-value store, que passa a ser o dono do registro.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import BotApiResponse


class UploadCategory(enum.Enum):
    """Categoria de upload derivada do MIME type declarado."""

    PHOTO = "photo"
    AUDIO = "audio"
    VIDEO = "video"
    DOCUMENT = "document"

    @property
    def operation_name(self) -> str:
        """Método da Bot API (ex: sendPhoto)."""
        return f"send{self.value.capitalize()}"

    @property
    def field_name(self) -> str:
        """Nome do campo multipart que carrega o arquivo."""
        return self.value


@dataclass(frozen=True, slots=True)
class InboundFile:
    """Arquivo recebido do cliente. Consumido uma única vez pelo driver."""

    name: str
    declared_type: str
    size: int
    content: bytes

    @property
    def extension(self) -> str:
        """Trecho após o último ponto, em minúsculas.

        Sem ponto no nome, o nome inteiro é tratado como extensão.
        """
        return self.name.rsplit(".", 1)[-1].lower()


@dataclass(frozen=True, slots=True)
class UpstreamRequest:
    """Requisição de uma tentativa de upload (nova instância por tentativa)."""

    category: UploadCategory
    payload: InboundFile
    recipient_id: str

    @property
    def operation_name(self) -> str:
        return self.category.operation_name

    def as_document(self) -> UpstreamRequest:
        """Mesma carga e destinatário, forçando a categoria Document."""
        return replace(self, category=UploadCategory.DOCUMENT)


@dataclass(frozen=True, slots=True)
class UpstreamReply:
    """Resposta bem-formada do Telegram para uma tentativa.

    accepted=False representa recusa declarada pela plataforma
    (ok=false e/ou status HTTP de erro com description).
    """

    accepted: bool
    response: BotApiResponse
    description: str | None = None


@dataclass(frozen=True, slots=True)
class UpstreamSuccess:
    """Upload aceito pelo Telegram."""

    response: BotApiResponse


@dataclass(frozen=True, slots=True)
class UpstreamFailure:
    """Upload definitivamente falho (recusa ou rede esgotada)."""

    reason: str


UpstreamResult = UpstreamSuccess | UpstreamFailure


@dataclass(frozen=True, slots=True)
class CanonicalReference:
    """Identificador estável da mídia no Telegram (file_id)."""

    id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CanonicalReference.id não pode ser vazio")

    def storage_key(self, extension: str) -> str:
        """Chave no KV e sufixo da URL pública: <id>.<extensão>."""
        return f"{self.id}.{extension}"


@dataclass(frozen=True, slots=True)
class StoredMetadata:
    """Metadados gravados junto à chave <id>.<extensão>."""

    timestamp: int
    file_name: str
    file_size: int
    list_type: str = "None"
    label: str = "None"
    liked: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Formato gravado no KV (nomes de campo lidos pelo endpoint de arquivos)."""
        return {
            "TimeStamp": self.timestamp,
            "ListType": self.list_type,
            "Label": self.label,
            "liked": self.liked,
            "fileName": self.file_name,
            "fileSize": self.file_size,
        }
