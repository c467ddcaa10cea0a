"""Shared fixtures: key files and messages written to tmp_path."""

import pytest

from textsign.config import reset_config
from textsign.crypto.schemes import Ed25519Signer

# 32 ASCII bytes (NOT a real key, safe to commit)
BLAKE3_TEST_KEY = b"0123456789abcdef0123456789abcdef"

# Deterministic ed25519 seed (NOT a real key, safe to commit)
ED25519_TEST_SEED = bytes(range(32))


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from an unset configuration and no TEXTSIGN_* env."""
    for name in (
        "TEXTSIGN_LOG_LEVEL",
        "TEXTSIGN_KEY_DIR",
        "TEXTSIGN_SECRET_KEY_MODE",
        "TEXTSIGN_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def blake3_key_file(tmp_path):
    path = tmp_path / "blake3.key"
    path.write_bytes(BLAKE3_TEST_KEY)
    return path


@pytest.fixture
def ed25519_key_files(tmp_path):
    """(secret_key_path, public_key_path)"""
    signer = Ed25519Signer.try_new(ED25519_TEST_SEED)
    sk = tmp_path / "ed25519.sk"
    pk = tmp_path / "ed25519.pk"
    sk.write_bytes(ED25519_TEST_SEED)
    pk.write_bytes(signer.public_key)
    return sk, pk


@pytest.fixture
def message_file(tmp_path):
    path = tmp_path / "message.txt"
    path.write_bytes(b"hello1")
    return path
