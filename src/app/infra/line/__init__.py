"""Infra LINE — fornecedores concretos de channel access token."""

from app.infra.line.token_suppliers import (
    CallableChannelTokenSupplier,
    EnvChannelTokenSupplier,
    FixedChannelTokenSupplier,
)

__all__ = [
    "CallableChannelTokenSupplier",
    "EnvChannelTokenSupplier",
    "FixedChannelTokenSupplier",
]
