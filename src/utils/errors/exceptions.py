"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class NetworkUnavailableError(InfrastructureError):
    """Falha de rede/timeout ao acessar um serviço externo."""
