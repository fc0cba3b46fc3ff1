"""Settings específicas do canal LINE.

Configurações da LINE Messaging API. Credenciais e endpoints ficam aqui
para que o client e as factories não leiam variáveis de ambiente
diretamente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Hosts da Messaging API
LINE_API_BASE_URL: str = "https://api.line.me"
LINE_DATA_API_BASE_URL: str = "https://api-data.line.me"
LINE_USER_AGENT: str = "line-bot-client-python/1.0"


@dataclass(frozen=True)
class LineSettings:
    """Configurações do canal LINE.

    Attributes:
        channel_access_token: Token de acesso do canal (Bearer)
        channel_secret: Secret do canal (não usado pelo client HTTP)
        api_base_url: Host das operações de metadados (JSON)
        data_api_base_url: Host das operações binárias (conteúdo/imagens)
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Tentativas extras em falhas transitórias (0 = nenhuma)
        user_agent: User-Agent enviado em toda requisição
    """

    # Credenciais
    channel_access_token: str = ""
    channel_secret: str = ""

    # API
    api_base_url: str = LINE_API_BASE_URL
    data_api_base_url: str = LINE_DATA_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 0

    user_agent: str = LINE_USER_AGENT

    def api_url(self, path: str) -> str:
        """Monta URL completa para operação de metadados."""
        return f"{self.api_base_url.rstrip('/')}{path}"

    def data_api_url(self, path: str) -> str:
        """Monta URL completa para operação de conteúdo binário."""
        return f"{self.data_api_base_url.rstrip('/')}{path}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de LINE.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.channel_access_token:
            errors.append("LINE_CHANNEL_ACCESS_TOKEN não configurado")

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("LINE_API_BASE_URL deve ser uma URL http(s)")

        if not self.data_api_base_url.startswith(("https://", "http://")):
            errors.append("LINE_DATA_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("LINE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("LINE_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> LineSettings:
    """Carrega LineSettings a partir de variáveis de ambiente."""
    return LineSettings(
        channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN", ""),
        channel_secret=os.getenv("LINE_CHANNEL_SECRET", ""),
        api_base_url=os.getenv("LINE_API_BASE_URL", LINE_API_BASE_URL),
        data_api_base_url=os.getenv("LINE_DATA_API_BASE_URL", LINE_DATA_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("LINE_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("LINE_MAX_RETRIES", "0")),
        user_agent=os.getenv("LINE_USER_AGENT", LINE_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_line_settings() -> LineSettings:
    """Retorna instância cacheada de LineSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
