"""Settings do relay: URL pública e persistência de metadados."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

VALID_KV_BACKENDS = frozenset({"memory", "redis", "firestore", "none"})
VALID_FAILURE_POLICIES = frozenset({"fail", "ignore"})


@dataclass(frozen=True)
class RelaySettings:
    """Configurações do relay de arquivos.

    Attributes:
        public_base_url: Base das URLs devolvidas (vazio = scheme://host da requisição)
        kv_backend: Backend do KV de metadados ("none" desativa a gravação)
        kv_namespace: Prefixo de chave (Redis) ou collection (Firestore)
        kv_write_failure_policy: "fail" responde 500; "ignore" loga e devolve a URL
    """

    public_base_url: str = ""
    kv_backend: str = "memory"
    kv_namespace: str = "img_url"
    kv_write_failure_policy: str = "fail"

    @property
    def kv_enabled(self) -> bool:
        return self.kv_backend != "none"

    @property
    def fail_on_kv_error(self) -> bool:
        return self.kv_write_failure_policy == "fail"

    def validate(self) -> list[str]:
        """Valida configurações do relay.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.kv_backend not in VALID_KV_BACKENDS:
            errors.append(f"RELAY_KV_BACKEND inválido: {self.kv_backend}")

        if self.kv_write_failure_policy not in VALID_FAILURE_POLICIES:
            errors.append(
                "RELAY_KV_WRITE_FAILURE_POLICY deve ser 'fail' ou 'ignore'"
            )

        if self.public_base_url and not self.public_base_url.startswith(("http://", "https://")):
            errors.append("RELAY_PUBLIC_BASE_URL deve começar com http:// ou https://")

        return errors


def _default_kv_backend() -> str:
    environment = os.getenv("ENVIRONMENT", "development").lower()
    return "redis" if environment in ("staging", "production") else "memory"


def _load_from_env() -> RelaySettings:
    return RelaySettings(
        public_base_url=os.getenv("RELAY_PUBLIC_BASE_URL", "").rstrip("/"),
        kv_backend=os.getenv("RELAY_KV_BACKEND", _default_kv_backend()).lower(),
        kv_namespace=os.getenv("RELAY_KV_NAMESPACE", "img_url"),
        kv_write_failure_policy=os.getenv("RELAY_KV_WRITE_FAILURE_POLICY", "fail").lower(),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_from_env()
