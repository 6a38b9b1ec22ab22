# --------------------------------------------------------------
# File: provider.py
# Description: Contrato del proveedor criptográfico y adaptador `cryptography`.
# --------------------------------------------------------------
"""Adaptador del proveedor RSA-OAEP/SHA-256.

El orquestador solo conoce el protocolo `KeyProvider`; los tipos concretos de
`cryptography` quedan encerrados en `CryptographyKeyProvider`.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from core.config import HASH_ALGORITHM, MIN_KEY_SIZE, PUBLIC_EXPONENT
from core.errors import KeyGenerationError, KeyImportError
from core.models import KeyProfile

__all__ = ["KeyProvider", "CryptographyKeyProvider"]


@runtime_checkable
class KeyProvider(Protocol):
    def generate_key_pair(self, modulus_length_bits: int) -> Tuple[Any, Any]: ...

    def import_public_key(self, der: bytes) -> Any: ...

    def import_private_key(self, der: bytes) -> Any: ...

    def export_public_key_der(self, handle: Any) -> bytes: ...

    def export_private_key_der(self, handle: Any) -> bytes: ...

    def key_profile(self, handle: Any) -> KeyProfile: ...

    def encrypt_block(self, handle: Any, plaintext: bytes) -> bytes: ...

    def decrypt_block(self, handle: Any, ciphertext: bytes) -> bytes: ...


def _oaep() -> padding.OAEP:
    """Construye el relleno OAEP fijo: MGF1-SHA256, SHA-256 y sin etiqueta."""

    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


class CryptographyKeyProvider:
    """Implementación de `KeyProvider` sobre `cryptography.hazmat`.

    Los manejadores son objetos `RSAPublicKey` / `RSAPrivateKey`.
    """

    def generate_key_pair(self, modulus_length_bits: int) -> Tuple[Any, Any]:
        """Genera un par RSA con exponente 65537.

        Args:
            modulus_length_bits (int): Tamaño del módulo en bits.

        Returns:
            Tuple[Any, Any]: Manejadores (pública, privada).

        Raises:
            KeyGenerationError: Si el tamaño no está soportado o el
                proveedor falla.

        """

        if modulus_length_bits < MIN_KEY_SIZE or modulus_length_bits % 8:
            raise KeyGenerationError(
                f"Tamaño de clave no soportado: {modulus_length_bits} bits "
                f"(mínimo {MIN_KEY_SIZE}, múltiplo de 8)."
            )
        try:
            private_key = rsa.generate_private_key(
                public_exponent=PUBLIC_EXPONENT, key_size=modulus_length_bits
            )
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise KeyGenerationError() from exc
        return private_key.public_key(), private_key

    def import_public_key(self, der: bytes) -> Any:
        try:
            key = serialization.load_der_public_key(der)
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise KeyImportError("La clave pública no es una estructura SPKI válida.") from exc
        if not isinstance(key, rsa.RSAPublicKey):
            raise KeyImportError("La clave pública no es una clave RSA.")
        return key

    def import_private_key(self, der: bytes) -> Any:
        try:
            key = serialization.load_der_private_key(der, password=None)
        except TypeError as exc:
            # PKCS#8 cifrado: no se admiten contraseñas.
            raise KeyImportError("La clave privada está protegida con contraseña.") from exc
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise KeyImportError("La clave privada no es una estructura PKCS#8 válida.") from exc
        if not isinstance(key, rsa.RSAPrivateKey):
            raise KeyImportError("La clave privada no es una clave RSA.")
        return key

    def export_public_key_der(self, handle: Any) -> bytes:
        return handle.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def export_private_key_der(self, handle: Any) -> bytes:
        return handle.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def key_profile(self, handle: Any) -> KeyProfile:
        """Describe el perfil de una clave pública o privada."""

        public_key = handle.public_key() if isinstance(handle, rsa.RSAPrivateKey) else handle
        return KeyProfile(
            modulus_length_bits=public_key.key_size,
            hash_algorithm=HASH_ALGORITHM,
            public_exponent=public_key.public_numbers().e,
        )

    def encrypt_block(self, handle: Any, plaintext: bytes) -> bytes:
        return handle.encrypt(plaintext, _oaep())

    def decrypt_block(self, handle: Any, ciphertext: bytes) -> bytes:
        return handle.decrypt(ciphertext, _oaep())
