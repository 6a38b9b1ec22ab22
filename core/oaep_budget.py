# --------------------------------------------------------------
# File: oaep_budget.py
# Description: Cálculo del tamaño máximo de mensaje admitido por RSA-OAEP.
# --------------------------------------------------------------
"""Presupuesto de bytes de un bloque RSA-OAEP (RFC 8017, sección 7.1.1)."""

import logging

from core.config import HASH_ALGORITHM

__all__ = ["DIGEST_SIZES", "digest_size", "max_plaintext_bytes", "has_capacity"]

logger = logging.getLogger(__name__)

DIGEST_SIZES = {
    "SHA1": 20,
    "SHA256": 32,
    "SHA384": 48,
    "SHA512": 64,
}


def _normalize(hash_algorithm: str) -> str:
    return hash_algorithm.upper().replace("-", "").replace("_", "")


def digest_size(hash_algorithm: str) -> int:
    """Devuelve el tamaño en bytes del resumen de la función hash.

    Los nombres desconocidos usan el tamaño de SHA-256, el único hash que
    ofrece la herramienta.

    Args:
        hash_algorithm (str): Nombre del hash, p. ej. ``"SHA-256"`` o ``"sha384"``.

    Returns:
        int: Longitud del resumen en bytes.

    """

    size = DIGEST_SIZES.get(_normalize(hash_algorithm))
    if size is None:
        # TODO: rechazar hashes desconocidos en lugar de suponer 32 bytes.
        logger.warning(
            "Hash desconocido %r; se usa el tamaño de %s para el presupuesto OAEP.",
            hash_algorithm,
            HASH_ALGORITHM,
        )
        return DIGEST_SIZES[_normalize(HASH_ALGORITHM)]
    return size


def max_plaintext_bytes(modulus_length_bits: int, hash_algorithm: str = HASH_ALGORITHM) -> int:
    """Calcula cuántos bytes de mensaje caben en un bloque RSA-OAEP.

    Args:
        modulus_length_bits (int): Tamaño del módulo RSA en bits.
        hash_algorithm (str): Hash usado por OAEP.

    Returns:
        int: ``k - 2*hLen - 2``; puede ser ≤ 0 en claves absurdamente pequeñas.

    """

    modulus_bytes = (modulus_length_bits + 7) // 8
    return modulus_bytes - 2 * digest_size(hash_algorithm) - 2


def has_capacity(budget: int) -> bool:
    """Indica si un presupuesto admite al menos un byte de mensaje."""

    return budget > 0
