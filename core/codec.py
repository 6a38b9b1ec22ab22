# --------------------------------------------------------------
# File: codec.py
# Description: Conversión entre bytes y texto Base64 apto para transporte.
# --------------------------------------------------------------
"""Codificación Base64 estándar estricta para DER y textos cifrados."""

import base64
import binascii

from core.errors import MalformedEncodingError

__all__ = ["encode_text", "decode_text"]


def encode_text(data: bytes) -> str:
    """Codifica bytes en Base64 estándar sin saltos de línea.

    Args:
        data (bytes): Datos binarios a codificar.

    Returns:
        str: Texto ASCII con relleno `=`.

    """

    return base64.b64encode(data).decode("ascii")


def decode_text(text: str) -> bytes:
    """Decodifica Base64 estándar rechazando cualquier entrada mal formada.

    Args:
        text (str): Texto Base64 sin espacios ni saltos de línea.

    Returns:
        bytes: Datos binarios originales.

    Raises:
        MalformedEncodingError: Si hay caracteres fuera del alfabeto, el
            relleno es incorrecto o la longitud no es múltiplo de 4.

    """

    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        # ValueError: cadenas con caracteres no ASCII.
        raise MalformedEncodingError() from exc
