"""Secrets — integração com provedores de segredos.

Módulos disponíveis:
    - env_secrets: Leitura de variáveis de ambiente
"""

from __future__ import annotations

from app.infra.secrets.env_secrets import EnvSecretProvider

__all__ = [
    "EnvSecretProvider",
]
