# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con pares de claves y proveedores de prueba.
# --------------------------------------------------------------

from typing import Any

import pytest

from core.crypto_rsa import RsaOaepService
from core.models import KeyPair, KeyProfile
from core.provider import CryptographyKeyProvider


class FailingProvider(CryptographyKeyProvider):
    """Proveedor real cuyas operaciones de bloque fallan con errores internos."""

    def encrypt_block(self, handle: Any, plaintext: bytes) -> bytes:
        raise RuntimeError("internal provider state: rsa_ossl_public_encrypt")

    def decrypt_block(self, handle: Any, ciphertext: bytes) -> bytes:
        raise ValueError("oaep decoding error: lHash mismatch")


@pytest.fixture(scope="session")
def service() -> RsaOaepService:
    """Servicio RSA-OAEP con el proveedor `cryptography` por defecto.

    Returns:
        RsaOaepService: Instancia sin estado reutilizable en toda la sesión.
    """
    return RsaOaepService()


@pytest.fixture(scope="session")
def key_pair(service) -> KeyPair:
    """Par RSA de 2048 bits generado una única vez por sesión.

    Args:
        service (RsaOaepService): Servicio compartido.

    Returns:
        KeyPair: Par de claves con sus PEM.
    """
    return service.generate_key_pair(2048)


@pytest.fixture(scope="session")
def other_key_pair(service) -> KeyPair:
    """Segundo par RSA de 2048 bits, independiente del primero.

    Returns:
        KeyPair: Par de claves distinto de `key_pair`.
    """
    return service.generate_key_pair(2048)


@pytest.fixture(scope="session")
def small_key_pair(service) -> KeyPair:
    """Par RSA de 1024 bits para comprobar el presupuesto de 62 bytes.

    Returns:
        KeyPair: Par de claves de 1024 bits.
    """
    return service.generate_key_pair(1024)


@pytest.fixture
def failing_service() -> RsaOaepService:
    """Servicio inyectado con un proveedor que falla al cifrar y descifrar.

    Returns:
        RsaOaepService: Servicio con `FailingProvider`.
    """
    return RsaOaepService(provider=FailingProvider())


class TinyModulusProvider(CryptographyKeyProvider):
    """Proveedor real que declara un módulo de 512 bits en el perfil."""

    def key_profile(self, handle: Any) -> KeyProfile:
        return KeyProfile(modulus_length_bits=512)


@pytest.fixture
def tiny_modulus_service() -> RsaOaepService:
    """Servicio cuyo presupuesto OAEP es negativo (sin capacidad).

    Returns:
        RsaOaepService: Servicio con `TinyModulusProvider`.
    """
    return RsaOaepService(provider=TinyModulusProvider())
