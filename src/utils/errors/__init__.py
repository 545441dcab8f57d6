"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FirestoreUnavailableError,
    InfrastructureError,
    KVStoreError,
    MissingFileError,
    RedisConnectionError,
    ReferenceExtractionError,
    RelayError,
    UpstreamRejectionError,
    UpstreamTransportError,
)

__all__ = [
    "FirestoreUnavailableError",
    "InfrastructureError",
    "KVStoreError",
    "MissingFileError",
    "RedisConnectionError",
    "ReferenceExtractionError",
    "RelayError",
    "UpstreamRejectionError",
    "UpstreamTransportError",
]
