"""Extração da referência canônica (file_id) de um resultado de upload."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.upload import CanonicalReference, UpstreamSuccess
from app.protocols.models import PhotoMedia

if TYPE_CHECKING:
    from app.domain.upload import UpstreamResult
    from app.protocols.models import PhotoSize


def extract_reference(result: UpstreamResult) -> CanonicalReference | None:
    """Extrai o file_id de maior fidelidade do resultado.

    Fecha em None: falhas, envelopes com ok=false ou sem mídia
    reconhecível não produzem referência (erro fatal para o chamador).

    Args:
        result: Resultado do UploadDriver.

    Returns:
        CanonicalReference ou None.
    """
    if not isinstance(result, UpstreamSuccess):
        return None

    response = result.response
    if not response.ok or response.media is None:
        return None

    media = response.media
    if isinstance(media, PhotoMedia):
        file_id = _largest_variant(media.variants).file_id
    else:
        file_id = media.file.file_id

    return CanonicalReference(id=file_id) if file_id else None


def _largest_variant(variants: list[PhotoSize]) -> PhotoSize:
    # Empate mantém o primeiro máximo (varredura estável da esquerda p/ direita)
    best = variants[0]
    for variant in variants[1:]:
        if variant.file_size > best.file_size:
            best = variant
    return best
