"""Serviços de aplicação do relay.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/ e api/connectors/.
"""

from app.services.media_classifier import classify
from app.services.reference_extractor import extract_reference
from app.services.upload_driver import UploadDriver

__all__ = [
    "UploadDriver",
    "classify",
    "extract_reference",
]
