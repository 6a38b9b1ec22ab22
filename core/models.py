# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan claves RSA y su perfil algorítmico."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from core.config import HASH_ALGORITHM, PUBLIC_EXPONENT


class KeyProfile(BaseModel):
    """Parámetros fijos de una clave RSA que determinan el presupuesto OAEP.

    Attributes:
        modulus_length_bits (int): Tamaño del módulo en bits.
        hash_algorithm (str): Función hash usada por OAEP y MGF1.
        public_exponent (int): Exponente público de la clave.

    """

    model_config = ConfigDict(frozen=True)

    modulus_length_bits: int
    hash_algorithm: str = HASH_ALGORITHM
    public_exponent: int = PUBLIC_EXPONENT


class KeyPair(BaseModel):
    """Par de claves recién generado junto con su representación PEM.

    Los manejadores son opacos y solo los interpreta el proveedor que los
    creó; los PEM son instantáneas inmutables derivadas de ellos.

    Attributes:
        public_key_handle (Any): Referencia a la clave pública del proveedor.
        private_key_handle (Any): Referencia a la clave privada del proveedor.
        public_key_pem (str): Clave pública SPKI en PEM.
        private_key_pem (str): Clave privada PKCS#8 en PEM.
        profile (KeyProfile): Perfil con el que se generó el par.

    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    public_key_handle: Any
    private_key_handle: Any
    public_key_pem: str
    private_key_pem: str
    profile: KeyProfile
