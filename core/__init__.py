# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "codec",
    "config",
    "crypto_rsa",
    "errors",
    "models",
    "oaep_budget",
    "pem",
    "provider",
]
