# --------------------------------------------------------------
# File: services.py
# Description: Acciones de la interfaz para generar claves, cifrar y descifrar.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que traducen errores tipados a mensajes."""

import logging
from typing import Optional, Tuple

from core.crypto_rsa import RsaOaepService
from core.errors import RsaToolError
from core.models import KeyPair

logger = logging.getLogger(__name__)


def _service(service: Optional[RsaOaepService]) -> RsaOaepService:
    return service if service is not None else RsaOaepService()


def generate_keys(
    key_size: int, service: Optional[RsaOaepService] = None
) -> Tuple[bool, str, Optional[KeyPair]]:
    """Genera un par de claves RSA para mostrarlo en el formulario.

    Args:
        key_size (int): Tamaño del módulo en bits.
        service (Optional[RsaOaepService]): Servicio a utilizar.

    Returns:
        Tuple[bool, str, Optional[KeyPair]]: Indicador de éxito, mensaje para
        la interfaz y el par generado (``None`` si falla).

    """

    try:
        key_pair = _service(service).generate_key_pair(key_size)
    except RsaToolError as exc:
        return False, str(exc), None
    return True, f"Claves RSA de {key_size} bits generadas correctamente.", key_pair


def encrypt_text(
    public_key_pem: str, plaintext: str, service: Optional[RsaOaepService] = None
) -> Tuple[bool, str, str]:
    """Cifra el texto del formulario con la clave pública introducida.

    Args:
        public_key_pem (str): Clave pública en formato PEM.
        plaintext (str): Texto a cifrar.
        service (Optional[RsaOaepService]): Servicio a utilizar.

    Returns:
        Tuple[bool, str, str]: Indicador de éxito, mensaje para la interfaz y
        texto cifrado en Base64 (vacío si falla).

    """

    if not public_key_pem.strip():
        return False, "Introduce o genera una clave pública.", ""
    try:
        ciphertext = _service(service).encrypt(public_key_pem, plaintext)
    except RsaToolError as exc:
        return False, str(exc), ""
    return True, "Cifrado correcto.", ciphertext


def decrypt_text(
    private_key_pem: str, ciphertext: str, service: Optional[RsaOaepService] = None
) -> Tuple[bool, str, str]:
    """Descifra el texto Base64 del formulario con la clave privada.

    Returns:
        Tuple[bool, str, str]: Indicador de éxito, mensaje para la interfaz y
        texto descifrado (vacío si falla).

    """

    if not private_key_pem.strip():
        return False, "Introduce o genera una clave privada.", ""
    try:
        plaintext = _service(service).decrypt(private_key_pem, ciphertext)
    except RsaToolError as exc:
        return False, str(exc), ""
    return True, "Descifrado correcto.", plaintext


def describe_budget(public_key_pem: str, service: Optional[RsaOaepService] = None) -> str:
    """Texto de ayuda con el máximo de bytes cifrables por la clave pública."""

    if not public_key_pem.strip():
        return ""
    try:
        budget = _service(service).max_plaintext_bytes_for(public_key_pem)
    except RsaToolError as exc:
        logger.debug("Sin presupuesto para la clave introducida: %s", exc)
        return ""
    return f"Máximo {max(budget, 0)} bytes UTF-8 por mensaje con esta clave."
