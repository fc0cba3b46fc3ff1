"""Environment Secrets — provedor de secrets via variáveis de ambiente.

Lê o valor a cada acesso, então rotação de credencial feita no
ambiente é percebida sem reiniciar o processo.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


class EnvSecretProvider:
    """Provedor de secrets usando variáveis de ambiente.

    Args:
        prefix: Prefixo para variáveis de ambiente (default: "")
    """

    def __init__(self, prefix: str = "") -> None:
        self._prefix = prefix.upper().rstrip("_") + "_" if prefix else ""

    def _env_key(self, key: str) -> str:
        """Converte nome de secret para variável de ambiente."""
        # line-channel-access-token -> LINE_CHANNEL_ACCESS_TOKEN
        env_key = key.upper().replace("-", "_")
        return f"{self._prefix}{env_key}"

    def get(self, key: str, default: str | None = None) -> str | None:
        """Obtém secret de variável de ambiente.

        Args:
            key: Nome do secret (ex.: line-channel-access-token)
            default: Valor padrão

        Returns:
            Valor ou default
        """
        env_key = self._env_key(key)
        value = os.getenv(env_key)
        if value is None:
            logger.debug("env_secret_not_found", extra={"key": key, "env_key": env_key})
            return default
        return value

    def require(self, key: str) -> str:
        """Obtém secret obrigatório de variável de ambiente.

        Raises:
            ValueError: Se variável não definida
        """
        value = self.get(key)
        if value is None:
            env_key = self._env_key(key)
            msg = f"Variável de ambiente obrigatória não definida: {env_key}"
            raise ValueError(msg)
        return value

    @property
    def line_channel_access_token(self) -> str:
        """Channel access token da LINE."""
        return self.require("line-channel-access-token")

    @property
    def line_channel_secret(self) -> str:
        """Channel secret da LINE."""
        return self.require("line-channel-secret")
