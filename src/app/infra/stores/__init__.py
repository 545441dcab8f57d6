"""Stores — implementações concretas do KV de metadados de arquivos.

Módulos disponíveis:
    - memory_kv_store: KV em memória para desenvolvimento/testes
    - redis_kv_store: KV usando Redis (Upstash)
    - firestore_kv_store: KV usando Firestore
"""

from __future__ import annotations

from app.infra.stores.firestore_kv_store import FirestoreKVStore
from app.infra.stores.memory_kv_store import MemoryKVStore
from app.infra.stores.redis_kv_store import RedisKVStore

__all__ = [
    "FirestoreKVStore",
    "MemoryKVStore",
    "RedisKVStore",
]
