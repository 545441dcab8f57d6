"""Settings específicas de Telegram.

Configurações do upload via Bot API (sendPhoto, sendAudio, sendVideo,
sendDocument) e da política de retry transitório.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Telegram Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        chat_id: Chat/canal que recebe os arquivos (destinatário fixo)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout por tentativa (upload de mídia)
        max_transient_retries: Retries após falha de rede (além da 1ª tentativa)
        backoff_base_seconds: Base do backoff linear (base × n)
    """

    # Credenciais
    bot_token: str = ""
    chat_id: str = ""

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 60.0
    max_transient_retries: int = 2
    backoff_base_seconds: float = 1.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com token do bot."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}"

    def get_method_endpoint(self, operation_name: str) -> str:
        """URL de um método da Bot API (ex: .../bot<token>/sendPhoto)."""
        return f"{self.api_endpoint}/{operation_name}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bot_token:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")

        if not self.chat_id:
            errors.append("TELEGRAM_CHAT_ID não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_transient_retries < 0:
            errors.append("TELEGRAM_MAX_TRANSIENT_RETRIES deve ser >= 0")

        if self.backoff_base_seconds < 0:
            errors.append("TELEGRAM_BACKOFF_BASE_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        chat_id=os.getenv("TELEGRAM_CHAT_ID", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "60")
        ),
        max_transient_retries=int(os.getenv("TELEGRAM_MAX_TRANSIENT_RETRIES", "2")),
        backoff_base_seconds=float(os.getenv("TELEGRAM_BACKOFF_BASE_SECONDS", "1")),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
