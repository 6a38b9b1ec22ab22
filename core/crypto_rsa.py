# --------------------------------------------------------------
# File: crypto_rsa.py
# Description: Orquestación de generación, cifrado y descifrado RSA-OAEP.
# --------------------------------------------------------------
"""Operaciones RSA-OAEP de alto nivel sobre claves en formato PEM."""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from typing import Optional

from core.codec import decode_text, encode_text
from core.config import DEFAULT_KEY_SIZE
from core.errors import (
    DecryptionFailedError,
    EncryptionFailedError,
    InvalidUtf8Error,
    KeyGenerationError,
    PlaintextTooLargeError,
    RsaToolError,
)
from core.models import KeyPair
from core.oaep_budget import has_capacity, max_plaintext_bytes
from core.pem import PRIVATE_KEY_LABEL, PUBLIC_KEY_LABEL, frame, unframe_expecting
from core.provider import CryptographyKeyProvider, KeyProvider

__all__ = ["RsaOaepService"]

logger = logging.getLogger(__name__)


class RsaOaepService:
    """Compone proveedor, presupuesto OAEP y codificación PEM/Base64.

    No guarda estado entre llamadas: cada operación importa sus claves a
    partir del PEM recibido.

    Args:
        provider (Optional[KeyProvider]): Proveedor criptográfico a utilizar;
            por defecto `CryptographyKeyProvider`.

    """

    def __init__(self, provider: Optional[KeyProvider] = None) -> None:
        self.provider = provider if provider is not None else CryptographyKeyProvider()

    def generate_key_pair(self, modulus_length_bits: int = DEFAULT_KEY_SIZE) -> KeyPair:
        """Genera un par de claves y deriva sus representaciones PEM.

        Args:
            modulus_length_bits (int): Tamaño del módulo en bits.

        Returns:
            KeyPair: Manejadores, PEM pública/privada y perfil de la clave.

        Raises:
            KeyGenerationError: Si el proveedor no puede generar el par.

        """

        try:
            public_handle, private_handle = self.provider.generate_key_pair(modulus_length_bits)
            public_der = self.provider.export_public_key_der(public_handle)
            private_der = self.provider.export_private_key_der(private_handle)
            profile = self.provider.key_profile(public_handle)
        except KeyGenerationError:
            logger.warning("Generación rechazada para %s bits", modulus_length_bits)
            raise
        except Exception as exc:
            logger.exception("Fallo inesperado del proveedor al generar claves")
            raise KeyGenerationError() from exc

        logger.info("Par RSA de %s bits generado", profile.modulus_length_bits)
        return KeyPair(
            public_key_handle=public_handle,
            private_key_handle=private_handle,
            public_key_pem=frame(PUBLIC_KEY_LABEL, public_der),
            private_key_pem=frame(PRIVATE_KEY_LABEL, private_der),
            profile=profile,
        )

    def generate_key_pair_async(
        self, modulus_length_bits: int, executor: Executor
    ) -> Future[KeyPair]:
        """Delega la generación en un ejecutor y devuelve su `Future`.

        El `Future` contiene el `KeyPair` o el error tipado de la generación.
        """

        return executor.submit(self.generate_key_pair, modulus_length_bits)

    def _import_public(self, public_key_pem: str):
        der = unframe_expecting(public_key_pem, PUBLIC_KEY_LABEL)
        return self.provider.import_public_key(der)

    def _import_private(self, private_key_pem: str):
        der = unframe_expecting(private_key_pem, PRIVATE_KEY_LABEL)
        return self.provider.import_private_key(der)

    def max_plaintext_bytes_for(self, public_key_pem: str) -> int:
        """Presupuesto OAEP en bytes de la clave pública indicada."""

        profile = self.provider.key_profile(self._import_public(public_key_pem))
        return max_plaintext_bytes(profile.modulus_length_bits, profile.hash_algorithm)

    def encrypt(self, public_key_pem: str, plaintext: str) -> str:
        """Cifra un texto con la clave pública y lo devuelve en Base64.

        Args:
            public_key_pem (str): Clave pública SPKI en formato PEM.
            plaintext (str): Mensaje a cifrar; se codifica en UTF-8.

        Returns:
            str: Bloque cifrado codificado en Base64 estándar.

        Raises:
            InvalidPEMError: Si el PEM no es válido o no es una clave pública.
            KeyImportError: Si el DER no es una clave RSA utilizable.
            InvalidUtf8Error: Si el texto no se puede codificar en UTF-8.
            PlaintextTooLargeError: Si el mensaje no cabe en un bloque OAEP.
            EncryptionFailedError: Ante cualquier otro fallo del proveedor.

        """

        handle = self._import_public(public_key_pem)
        try:
            data = plaintext.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidUtf8Error("El texto a cifrar no es UTF-8 válido.") from exc

        profile = self.provider.key_profile(handle)
        budget = max_plaintext_bytes(profile.modulus_length_bits, profile.hash_algorithm)
        if not has_capacity(budget) or len(data) > budget:
            logger.warning("Mensaje de %s bytes rechazado (máximo %s)", len(data), budget)
            raise PlaintextTooLargeError(max_bytes=max(budget, 0), actual_bytes=len(data))

        try:
            ciphertext = self.provider.encrypt_block(handle, data)
        except RsaToolError:
            raise
        except Exception as exc:
            logger.exception("Fallo del proveedor durante el cifrado")
            raise EncryptionFailedError() from exc
        return encode_text(ciphertext)

    def decrypt(self, private_key_pem: str, ciphertext_text: str) -> str:
        """Descifra un bloque Base64 con la clave privada.

        Todos los fallos del proveedor (clave equivocada, relleno incorrecto,
        longitud inválida) se notifican con el mismo `DecryptionFailedError`.

        Args:
            private_key_pem (str): Clave privada PKCS#8 en formato PEM.
            ciphertext_text (str): Texto cifrado en Base64 estándar.

        Returns:
            str: Mensaje original.

        Raises:
            InvalidPEMError: Si el PEM no es válido o no es una clave privada.
            KeyImportError: Si el DER no es una clave RSA utilizable.
            MalformedEncodingError: Si el texto cifrado no es Base64.
            DecryptionFailedError: Si el proveedor no puede descifrar.
            InvalidUtf8Error: Si el resultado no es texto UTF-8.

        """

        handle = self._import_private(private_key_pem)
        ciphertext = decode_text(ciphertext_text.strip())

        try:
            data = self.provider.decrypt_block(handle, ciphertext)
        except Exception as exc:
            # Mismo error para todo fallo del proveedor, sin su motivo.
            logger.warning("Descifrado rechazado (%s)", type(exc).__name__)
            raise DecryptionFailedError() from None

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidUtf8Error() from exc
