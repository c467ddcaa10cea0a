"""
textsign
Sign and verify text with a shared-secret keyed hash (BLAKE3) or a
public-key signature (Ed25519), selected per call by a format tag.

Example:
    ```python
    from textsign import generate_keys, save_keys, sign_text, verify_text

    paths = save_keys("ed25519", generate_keys("ed25519"), "./keys")
    sig = sign_text("message.txt", "./keys/ed25519.sk", "ed25519")
    assert verify_text("message.txt", "./keys/ed25519.pk", sig, "ed25519")
    ```
"""

__version__ = "0.1.0"

# Types
from .types import TextSignFormat, Base64Format

# Errors
from .errors import (
    TextSignError,
    FileAccessError,
    KeyFormatError,
    EncodingError,
    SignatureFormatError,
    InvalidFormatError,
    InvalidInputError,
)

# Schemes and keys
from .crypto import (
    TextSigner,
    TextVerifier,
    Blake3,
    Ed25519Signer,
    Ed25519Verifier,
    load_key,
    save_keys,
    key_filenames,
    encode_signature,
    decode_signature,
)

# Entry points
from .process import (
    sign_text,
    verify_text,
    generate_keys,
    encode_source,
    decode_source,
)

from .utils import generate_password, read_all

from .config import TextSignConfig, get_config, set_config, reset_config

__all__ = [
    "__version__",
    # Types
    "TextSignFormat",
    "Base64Format",
    # Errors
    "TextSignError",
    "FileAccessError",
    "KeyFormatError",
    "EncodingError",
    "SignatureFormatError",
    "InvalidFormatError",
    "InvalidInputError",
    # Schemes and keys
    "TextSigner",
    "TextVerifier",
    "Blake3",
    "Ed25519Signer",
    "Ed25519Verifier",
    "load_key",
    "save_keys",
    "key_filenames",
    "encode_signature",
    "decode_signature",
    # Entry points
    "sign_text",
    "verify_text",
    "generate_keys",
    "encode_source",
    "decode_source",
    "generate_password",
    "read_all",
    # Config
    "TextSignConfig",
    "get_config",
    "set_config",
    "reset_config",
]
