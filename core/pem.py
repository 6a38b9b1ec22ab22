# --------------------------------------------------------------
# File: pem.py
# Description: Envoltorio y extracción de documentos PEM (RFC 7468).
# --------------------------------------------------------------
"""Funciones para enmarcar DER como texto PEM y recuperarlo."""

from __future__ import annotations

import re
from typing import Tuple

from core.codec import decode_text, encode_text
from core.config import PEM_LINE_WIDTH
from core.errors import InvalidPEMError, MalformedEncodingError, PemBodyEncodingError

__all__ = [
    "PUBLIC_KEY_LABEL",
    "PRIVATE_KEY_LABEL",
    "frame",
    "unframe",
    "unframe_expecting",
]

PUBLIC_KEY_LABEL = "PUBLIC KEY"
PRIVATE_KEY_LABEL = "PRIVATE KEY"

_BEGIN = re.compile(r"-----BEGIN ([^-\r\n]+)-----")
_END = re.compile(r"-----END ([^-\r\n]+)-----")


def frame(label: str, der: bytes) -> str:
    """Envuelve un DER en un documento PEM con líneas de 64 caracteres.

    Args:
        label (str): Etiqueta del PEM, p. ej. ``"PUBLIC KEY"``.
        der (bytes): Estructura DER de la clave.

    Returns:
        str: Cabecera, cuerpo y pie unidos por ``\\n`` sin salto final.

    """

    body = encode_text(der)
    lines = [f"-----BEGIN {label}-----"]
    lines.extend(
        body[start : start + PEM_LINE_WIDTH] for start in range(0, len(body), PEM_LINE_WIDTH)
    )
    lines.append(f"-----END {label}-----")
    return "\n".join(lines)


def unframe(pem_text: str) -> Tuple[str, bytes]:
    """Extrae la etiqueta y el DER de un texto PEM editado a mano.

    Se aceptan finales de línea Windows/Unix y espacios, tabuladores o líneas
    en blanco dentro del cuerpo.

    Args:
        pem_text (str): Texto que contiene el documento PEM.

    Returns:
        Tuple[str, bytes]: Etiqueta y bytes DER.

    Raises:
        InvalidPEMError: Si faltan los delimitadores o no son coherentes.
        PemBodyEncodingError: Si el cuerpo no es Base64 válido.

    """

    text = pem_text.replace("\r\n", "\n").replace("\r", "\n")
    begin = _BEGIN.search(text)
    if begin is None:
        raise InvalidPEMError("No se encuentra la cabecera '-----BEGIN ...-----' del PEM.")
    end = _END.search(text, begin.end())
    if end is None:
        raise InvalidPEMError("No se encuentra el pie '-----END ...-----' del PEM.")

    label = begin.group(1).strip()
    if end.group(1).strip() != label:
        raise InvalidPEMError("Las etiquetas BEGIN y END del PEM no coinciden.")

    body = "".join(text[begin.end() : end.start()].split())
    try:
        der = decode_text(body)
    except MalformedEncodingError as exc:
        raise PemBodyEncodingError() from exc
    return label, der


def unframe_expecting(pem_text: str, label: str) -> bytes:
    """Extrae el DER comprobando que la etiqueta corresponde al tipo de clave."""

    found, der = unframe(pem_text)
    if found != label:
        raise InvalidPEMError(
            f"Se esperaba un PEM '{label}' pero se ha recibido '{found}'."
        )
    return der
