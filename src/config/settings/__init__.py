"""Agregador de settings do relay.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.relay import (
    RelaySettings,
    get_relay_settings,
)
from config.settings.telegram import (
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)

__all__ = [
    "TELEGRAM_API_BASE_URL",
    "BaseSettings",
    "Environment",
    "RelaySettings",
    "TelegramSettings",
    "get_base_settings",
    "get_relay_settings",
    "get_telegram_settings",
]
