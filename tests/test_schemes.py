"""Tests for the blake3 and ed25519 signing schemes."""

import os

import pytest

from textsign.crypto.schemes import Blake3, Ed25519Signer, Ed25519Verifier
from textsign.errors import KeyFormatError
from textsign.utils.genpass import UPPERCASE, LOWERCASE, DIGITS, SYMBOLS

from .conftest import BLAKE3_TEST_KEY, ED25519_TEST_SEED


def flip_byte(data: bytes, index: int) -> bytes:
    buf = bytearray(data)
    buf[index] ^= 0x01
    return bytes(buf)


class TestBlake3:
    def test_sign_verify_round_trip(self):
        blake3 = Blake3.try_new(BLAKE3_TEST_KEY)
        sig = blake3.sign(b"hello1")
        assert len(sig) == 32
        assert blake3.verify(b"hello1", sig) is True

    def test_changed_data_fails(self):
        blake3 = Blake3.try_new(BLAKE3_TEST_KEY)
        sig = blake3.sign(b"hello1")
        assert blake3.verify(b"hello2", sig) is False

    def test_deterministic(self):
        a = Blake3.try_new(BLAKE3_TEST_KEY).sign(b"hello1")
        b = Blake3.try_new(BLAKE3_TEST_KEY).sign(b"hello1")
        assert a == b

    def test_different_keys_produce_different_signatures(self):
        a = Blake3.try_new(os.urandom(32)).sign(b"hello1")
        b = Blake3.try_new(os.urandom(32)).sign(b"hello1")
        assert a != b

    def test_known_vector(self):
        sig = Blake3.try_new(BLAKE3_TEST_KEY).sign(b"hello1")
        assert sig.hex() == "7d827fdf1a9a7c84f314295da15b60be45e9da62ff5529483e157e9dcdf650c5"

    def test_matches_blake3_keyed_mode(self):
        from blake3 import blake3

        expected = blake3(b"hello1", key=BLAKE3_TEST_KEY).digest()
        assert Blake3.try_new(BLAKE3_TEST_KEY).sign(b"hello1") == expected

    def test_empty_data(self):
        blake3 = Blake3.try_new(BLAKE3_TEST_KEY)
        assert blake3.verify(b"", blake3.sign(b""))

    @pytest.mark.parametrize("index", [0, 15, 31])
    def test_flipped_byte_fails(self, index):
        blake3 = Blake3.try_new(BLAKE3_TEST_KEY)
        sig = blake3.sign(b"hello1")
        assert blake3.verify(b"hello1", flip_byte(sig, index)) is False

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_wrong_signature_length_returns_false(self, length):
        blake3 = Blake3.try_new(BLAKE3_TEST_KEY)
        assert blake3.verify(b"hello1", b"\x00" * length) is False

    def test_rejects_short_key(self):
        with pytest.raises(KeyFormatError, match="at least 32 bytes") as exc_info:
            Blake3.try_new(BLAKE3_TEST_KEY[:31])
        assert exc_info.value.expected == 32
        assert exc_info.value.actual == 31
        assert exc_info.value.code == "KEY_FORMAT"

    def test_rejects_empty_key(self):
        with pytest.raises(KeyFormatError):
            Blake3.try_new(b"")

    def test_truncates_long_key(self):
        long_key = BLAKE3_TEST_KEY + b"\n"
        assert Blake3.try_new(long_key).sign(b"hello1") == Blake3.try_new(BLAKE3_TEST_KEY).sign(b"hello1")

    def test_constructor_requires_exact_length(self):
        with pytest.raises(KeyFormatError, match="exactly 32 bytes"):
            Blake3(BLAKE3_TEST_KEY + b"x")

    def test_generate_returns_single_key(self):
        keys = Blake3.generate()
        assert len(keys) == 1
        assert len(keys[0]) == 32

    def test_generate_uses_all_character_classes(self):
        key = Blake3.generate()[0].decode("ascii")
        assert any(c in UPPERCASE for c in key)
        assert any(c in LOWERCASE for c in key)
        assert any(c in DIGITS for c in key)
        assert any(c in SYMBOLS for c in key)

    def test_generated_key_is_usable(self):
        blake3 = Blake3.try_new(Blake3.generate()[0])
        assert blake3.verify(b"data", blake3.sign(b"data"))

    def test_generate_is_random(self):
        assert Blake3.generate() != Blake3.generate()


class TestEd25519:
    def test_sign_verify_round_trip(self):
        sk, pk = Ed25519Signer.generate()
        sig = Ed25519Signer.try_new(sk).sign(b"hello1")
        assert len(sig) == 64
        assert Ed25519Verifier.try_new(pk).verify(b"hello1", sig) is True

    def test_changed_data_fails(self):
        sk, pk = Ed25519Signer.generate()
        sig = Ed25519Signer.try_new(sk).sign(b"hello1")
        assert Ed25519Verifier.try_new(pk).verify(b"hello2", sig) is False

    def test_deterministic(self):
        a = Ed25519Signer.try_new(ED25519_TEST_SEED).sign(b"hello1")
        b = Ed25519Signer.try_new(ED25519_TEST_SEED).sign(b"hello1")
        assert a == b

    def test_mismatched_key_pair_fails(self):
        sk, _ = Ed25519Signer.generate()
        _, other_pk = Ed25519Signer.generate()
        sig = Ed25519Signer.try_new(sk).sign(b"hello1")
        assert Ed25519Verifier.try_new(other_pk).verify(b"hello1", sig) is False

    @pytest.mark.parametrize("index", [0, 31, 32, 63])
    def test_flipped_byte_fails(self, index):
        signer = Ed25519Signer.try_new(ED25519_TEST_SEED)
        sig = signer.sign(b"hello1")
        assert signer.verifier().verify(b"hello1", flip_byte(sig, index)) is False

    @pytest.mark.parametrize("length", [0, 32, 63, 65])
    def test_wrong_signature_length_returns_false(self, length):
        verifier = Ed25519Signer.try_new(ED25519_TEST_SEED).verifier()
        assert verifier.verify(b"hello1", b"\x01" * length) is False

    def test_verifier_matches_public_key(self):
        signer = Ed25519Signer.try_new(ED25519_TEST_SEED)
        verifier = Ed25519Verifier.try_new(signer.public_key)
        assert verifier.verify(b"x", signer.sign(b"x"))

    def test_generate_returns_secret_then_public(self):
        keys = Ed25519Signer.generate()
        assert len(keys) == 2
        sk, pk = keys
        assert len(sk) == 32
        assert len(pk) == 32
        assert Ed25519Signer.try_new(sk).public_key == pk

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_signer_rejects_wrong_key_length(self, length):
        with pytest.raises(KeyFormatError, match="exactly 32 bytes"):
            Ed25519Signer.try_new(b"\x01" * length)

    @pytest.mark.parametrize("length", [0, 31, 33])
    def test_verifier_rejects_wrong_key_length(self, length):
        with pytest.raises(KeyFormatError):
            Ed25519Verifier.try_new(b"\x01" * length)

    def test_verifier_rejects_invalid_point(self):
        with pytest.raises(KeyFormatError, match="not a valid curve point"):
            Ed25519Verifier.try_new(bytes(32))
