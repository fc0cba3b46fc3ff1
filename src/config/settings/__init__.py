"""Agregador de settings do line_bot_client.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.line import (
    LINE_API_BASE_URL,
    LINE_DATA_API_BASE_URL,
    LINE_USER_AGENT,
    LineSettings,
    get_line_settings,
)

__all__ = [
    # Constants
    "LINE_API_BASE_URL",
    "LINE_DATA_API_BASE_URL",
    "LINE_USER_AGENT",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "LineSettings",
    "get_base_settings",
    "get_line_settings",
]
