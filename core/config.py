# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de configuración cargados desde el entorno (.env).
# --------------------------------------------------------------
"""Configuración de la herramienta RSA-OAEP leída de variables de entorno."""

import logging
import os
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


_DEFAULT_KEY_SIZES = (1024, 2048, 4096)


def _parse_key_sizes(raw: str) -> Tuple[int, ...]:
    """Convierte una lista separada por comas en tamaños de clave ordenados.

    Las entradas que no son enteros positivos se ignoran; si no queda
    ninguna válida se usan los tamaños por defecto.
    """

    sizes = set()
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if chunk.isdecimal() and int(chunk) > 0:
            sizes.add(int(chunk))
        elif chunk:
            logger.warning("Tamaño de clave ignorado en RSA_KEY_SIZES: %r", chunk)
    return tuple(sorted(sizes)) or _DEFAULT_KEY_SIZES


def _parse_default_size(raw: str, default: int = 2048) -> int:
    """Lee el tamaño por defecto; un valor no numérico usa `default`."""

    raw = raw.strip()
    if raw.isdecimal() and int(raw) > 0:
        return int(raw)
    logger.warning("RSA_DEFAULT_KEY_SIZE inválido: %r; se usa %s", raw, default)
    return default


# Perfil fijo del algoritmo: RSA-OAEP con SHA-256 y exponente 65537.
HASH_ALGORITHM = "SHA-256"
PUBLIC_EXPONENT = 65537
MIN_KEY_SIZE = 1024

# Ancho de línea del cuerpo PEM (RFC 7468).
PEM_LINE_WIDTH = 64

KEY_SIZE_CHOICES = _parse_key_sizes(os.getenv("RSA_KEY_SIZES", ""))
DEFAULT_KEY_SIZE = _parse_default_size(os.getenv("RSA_DEFAULT_KEY_SIZE", "2048"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
