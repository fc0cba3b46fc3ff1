"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    NetworkUnavailableError,
)

__all__ = [
    "InfrastructureError",
    "NetworkUnavailableError",
]
