"""Crypto utilities"""

from .schemes import (
    TextSigner,
    TextVerifier,
    Blake3,
    Ed25519Signer,
    Ed25519Verifier,
)

from .keys import (
    load_key,
    save_keys,
    key_filenames,
)

from .encoding import (
    encode_signature,
    decode_signature,
    encode_base64,
    decode_base64,
)

__all__ = [
    "TextSigner",
    "TextVerifier",
    "Blake3",
    "Ed25519Signer",
    "Ed25519Verifier",
    # Keys
    "load_key",
    "save_keys",
    "key_filenames",
    # Encoding
    "encode_signature",
    "decode_signature",
    "encode_base64",
    "decode_base64",
]
