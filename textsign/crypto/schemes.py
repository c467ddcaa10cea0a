"""
Signing schemes

Two interchangeable schemes behind one sign/verify contract:
- Blake3: keyed BLAKE3 hash over a 32-byte shared secret (sign and verify)
- Ed25519: signer holds the 32-byte secret seed, verifier holds only the
  32-byte public key

Instances wrap already-validated key material and are meant to be built
fresh for each operation.
"""

from __future__ import annotations

import hmac
import logging
from abc import ABC, abstractmethod
from typing import List

import nacl.bindings
import nacl.exceptions
import nacl.signing
from blake3 import blake3

from ..errors import KeyFormatError
from ..types import (
    BLAKE3_KEY_SIZE,
    BLAKE3_SIGNATURE_SIZE,
    ED25519_KEY_SIZE,
    ED25519_SIGNATURE_SIZE,
)
from ..utils.genpass import generate_password

logger = logging.getLogger(__name__)


# ============================================================
# Contracts
# ============================================================


class TextSigner(ABC):
    """Produces a raw signature over a byte string."""

    KEY_SIZE: int
    SIGNATURE_SIZE: int

    @classmethod
    @abstractmethod
    def try_new(cls, key: bytes) -> TextSigner:
        ...

    @abstractmethod
    def sign(self, data: bytes) -> bytes:
        ...


class TextVerifier(ABC):
    """Checks a raw signature over a byte string. Never raises on a bad signature."""

    KEY_SIZE: int
    SIGNATURE_SIZE: int

    @classmethod
    @abstractmethod
    def try_new(cls, key: bytes) -> TextVerifier:
        ...

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> bool:
        ...


def _require_length(scheme: str, key: bytes, size: int, exact: bool) -> None:
    actual = len(key)
    if actual < size or (exact and actual != size):
        qualifier = "exactly" if exact else "at least"
        raise KeyFormatError(
            f"Invalid {scheme} key length: expected {qualifier} {size} bytes, got {actual}",
            expected=size,
            actual=actual,
        )


# ============================================================
# Keyed hash
# ============================================================


class Blake3(TextSigner, TextVerifier):
    """
    BLAKE3 keyed hash

    try_new() accepts key material longer than 32 bytes and uses only the
    first 32 bytes. This keeps key files with a trailing newline usable.
    Shorter material is rejected.
    """

    KEY_SIZE = BLAKE3_KEY_SIZE
    SIGNATURE_SIZE = BLAKE3_SIGNATURE_SIZE

    def __init__(self, key: bytes):
        _require_length("blake3", key, self.KEY_SIZE, exact=True)
        self._key = bytes(key)

    @classmethod
    def try_new(cls, key: bytes) -> Blake3:
        _require_length("blake3", key, cls.KEY_SIZE, exact=False)
        if len(key) > cls.KEY_SIZE:
            logger.debug(f"Truncating {len(key)}-byte blake3 key to {cls.KEY_SIZE} bytes")
        return cls(key[: cls.KEY_SIZE])

    def sign(self, data: bytes) -> bytes:
        return blake3(data, key=self._key).digest()

    def verify(self, data: bytes, signature: bytes) -> bool:
        if len(signature) != self.SIGNATURE_SIZE:
            logger.debug(
                f"blake3 signature has {len(signature)} bytes, expected {self.SIGNATURE_SIZE}"
            )
            return False
        return hmac.compare_digest(self.sign(data), signature)

    @staticmethod
    def generate() -> List[bytes]:
        """
        Generate a new key

        The key is a 32-character password drawn from all four character
        classes, used as its ASCII bytes.

        Returns:
            [key]
        """
        password = generate_password(
            BLAKE3_KEY_SIZE, uppercase=True, lowercase=True, digits=True, symbols=True
        )
        return [password.encode("ascii")]


# ============================================================
# Ed25519
# ============================================================


class Ed25519Signer(TextSigner):
    """Ed25519 signing with a 32-byte secret seed. Signatures are deterministic."""

    KEY_SIZE = ED25519_KEY_SIZE
    SIGNATURE_SIZE = ED25519_SIGNATURE_SIZE

    def __init__(self, key: nacl.signing.SigningKey):
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> Ed25519Signer:
        _require_length("ed25519 secret", key, cls.KEY_SIZE, exact=True)
        return cls(nacl.signing.SigningKey(bytes(key)))

    def sign(self, data: bytes) -> bytes:
        return self._key.sign(data).signature

    @property
    def public_key(self) -> bytes:
        return bytes(self._key.verify_key)

    def verifier(self) -> Ed25519Verifier:
        """Verifier for the matching public key"""
        return Ed25519Verifier(self._key.verify_key)

    @staticmethod
    def generate() -> List[bytes]:
        """
        Generate a new key pair from the OS random source

        Returns:
            [secret_key, public_key], 32 bytes each
        """
        signing_key = nacl.signing.SigningKey.generate()
        return [bytes(signing_key), bytes(signing_key.verify_key)]


class Ed25519Verifier(TextVerifier):
    """Ed25519 verification with a 32-byte public key."""

    KEY_SIZE = ED25519_KEY_SIZE
    SIGNATURE_SIZE = ED25519_SIGNATURE_SIZE

    def __init__(self, key: nacl.signing.VerifyKey):
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> Ed25519Verifier:
        _require_length("ed25519 public", key, cls.KEY_SIZE, exact=True)
        key = bytes(key)
        if not nacl.bindings.crypto_core_ed25519_is_valid_point(key):
            raise KeyFormatError("Invalid ed25519 public key: not a valid curve point")
        return cls(nacl.signing.VerifyKey(key))

    def verify(self, data: bytes, signature: bytes) -> bool:
        if len(signature) != self.SIGNATURE_SIZE:
            logger.debug(
                f"ed25519 signature has {len(signature)} bytes, expected {self.SIGNATURE_SIZE}"
            )
            return False
        try:
            self._key.verify(data, bytes(signature))
        except nacl.exceptions.BadSignatureError:
            return False
        return True
