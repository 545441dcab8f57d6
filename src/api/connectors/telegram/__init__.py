"""Conector Telegram — adapter de borda para a Bot API.

Este módulo é o único ponto de IO com o Telegram.
Responsabilidades:
- HTTP client para os métodos send* (upload de mídia)
- Parsing e classificação de erros da Bot API
- Logging estruturado sem token
"""

from .bot_errors import TelegramApiError, is_permanent_error, parse_bot_error
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import TelegramHttpClient, create_telegram_http_client

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "TelegramApiError",
    "TelegramHttpClient",
    "create_telegram_http_client",
    "is_permanent_error",
    "parse_bot_error",
]
