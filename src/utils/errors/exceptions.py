"""Exceções do relay: falhas de requisição e de infraestrutura."""

from __future__ import annotations


class RelayError(Exception):
    """Base para falhas reportadas ao cliente com status HTTP próprio."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingFileError(RelayError):
    """Requisição sem arquivo no campo "file" (corrigível pelo cliente)."""

    status_code = 400


class UpstreamRejectionError(RelayError):
    """Telegram entendeu a requisição e recusou o upload."""


class ReferenceExtractionError(RelayError):
    """Resposta de sucesso sem referência de mídia reconhecível."""


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class UpstreamTransportError(InfrastructureError):
    """Falha de rede ao falar com o Telegram (nenhuma resposta utilizável)."""


class KVStoreError(InfrastructureError):
    """Falha ao persistir metadados no key-value store."""


class RedisConnectionError(KVStoreError):
    """Falha de conexão/timeout ao acessar Redis."""


class FirestoreUnavailableError(KVStoreError):
    """Falha de indisponibilidade ao acessar Firestore."""
