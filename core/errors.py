# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores tipados de la capa de claves y cifrado.
# --------------------------------------------------------------
"""Excepciones expuestas por el núcleo RSA-OAEP.

Todas heredan de `RsaToolError` y llevan un mensaje legible pensado para
mostrarse directamente en la interfaz.
"""


class RsaToolError(Exception):
    """Error base de la herramienta con un mensaje apto para el usuario."""

    default_message = "Error en la operación criptográfica."

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedEncodingError(RsaToolError):
    """El texto no es Base64 válido (alfabeto, relleno o longitud)."""

    default_message = "El texto no es Base64 válido."


class InvalidPEMError(RsaToolError):
    """El texto no contiene un documento PEM reconocible."""

    default_message = "La clave no tiene un formato PEM válido."


class PemBodyEncodingError(InvalidPEMError, MalformedEncodingError):
    """El cuerpo de un PEM existe pero su Base64 está corrupto."""

    default_message = "El contenido de la clave PEM no es Base64 válido."


class KeyImportError(RsaToolError):
    """El DER no describe una clave RSA utilizable."""

    default_message = "No se ha podido importar la clave RSA."


class KeyGenerationError(RsaToolError):
    """Fallo al generar un par de claves."""

    default_message = "No se ha podido generar el par de claves."


class PlaintextTooLargeError(RsaToolError):
    """El mensaje supera el presupuesto de un único bloque RSA-OAEP.

    Attributes:
        max_bytes (int): Tamaño máximo admitido por la clave en bytes.
        actual_bytes (int): Tamaño en bytes del mensaje codificado en UTF-8.

    """

    def __init__(self, max_bytes: int, actual_bytes: int) -> None:
        self.max_bytes = max_bytes
        self.actual_bytes = actual_bytes
        super().__init__(
            "El mensaje es demasiado largo para el tamaño de clave. "
            f"Máximo permitido: {max_bytes} bytes, recibido: {actual_bytes} bytes."
        )


class EncryptionFailedError(RsaToolError):
    default_message = (
        "El cifrado ha fallado. Verifica que usas la clave pública correcta "
        "y que el mensaje es válido."
    )


class DecryptionFailedError(RsaToolError):
    default_message = (
        "El descifrado ha fallado. Verifica que usas la clave privada correcta "
        "y que el texto cifrado es válido."
    )


class InvalidUtf8Error(RsaToolError):
    default_message = "El mensaje descifrado no es texto UTF-8 válido."
