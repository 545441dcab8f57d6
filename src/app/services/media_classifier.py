"""Classificação do arquivo recebido em categoria de upload do Telegram."""

from __future__ import annotations

from app.domain.upload import UploadCategory

_PREFIX_TO_CATEGORY: tuple[tuple[str, UploadCategory], ...] = (
    ("image/", UploadCategory.PHOTO),
    ("audio/", UploadCategory.AUDIO),
    ("video/", UploadCategory.VIDEO),
)


def classify(declared_type: str | None) -> UploadCategory:
    """Mapeia o MIME type declarado para a categoria de upload.

    Total sobre qualquer string: tipos vazios, malformados ou
    desconhecidos caem em DOCUMENT.
    """
    mime = declared_type or ""
    for prefix, category in _PREFIX_TO_CATEGORY:
        if mime.startswith(prefix):
            return category
    return UploadCategory.DOCUMENT
