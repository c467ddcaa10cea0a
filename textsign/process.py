"""
Signing, verification and key generation entry points

Each call reads its input, loads a fresh key instance, runs one operation
and drops the key. Nothing is cached between calls.
"""

import logging
from typing import Dict, List, Tuple, Type, Union

from .crypto.encoding import decode_base64, decode_signature, encode_base64, encode_signature
from .crypto.keys import load_key
from .crypto.schemes import Blake3, Ed25519Signer, Ed25519Verifier, TextSigner, TextVerifier
from .errors import SignatureFormatError
from .types import Base64Format, TextSignFormat
from .utils.io import PathLike, read_all

logger = logging.getLogger(__name__)

FormatLike = Union[str, TextSignFormat]

# format -> (signer class, verifier class)
SCHEMES: Dict[TextSignFormat, Tuple[Type[TextSigner], Type[TextVerifier]]] = {
    TextSignFormat.BLAKE3: (Blake3, Blake3),
    TextSignFormat.ED25519: (Ed25519Signer, Ed25519Verifier),
}


def sign_text(source: PathLike, key_path: PathLike, fmt: FormatLike) -> str:
    """
    Sign the content of a source

    Args:
        source: File path or "-" for stdin
        key_path: blake3 key or ed25519 secret key file
        fmt: Format tag

    Returns:
        Signature as URL-safe base64 without padding

    Raises:
        InvalidFormatError: Unknown format
        FileAccessError: Source or key unreadable
        KeyFormatError: Key bytes invalid for the scheme
    """
    fmt = TextSignFormat.parse(fmt)
    signer_cls, _ = SCHEMES[fmt]

    data = read_all(source)
    signer = load_key(key_path, signer_cls)
    signature = signer.sign(data)

    logger.debug(f"Signed {len(data)} bytes with {fmt.value}")
    return encode_signature(signature)


def verify_text(
    source: PathLike,
    key_path: PathLike,
    signature: str,
    fmt: FormatLike,
) -> bool:
    """
    Verify a signature produced by sign_text()

    A signature that is well formed but does not match returns False.

    Args:
        source: File path or "-" for stdin
        key_path: blake3 key or ed25519 public key file
        signature: Signature text
        fmt: Format tag

    Returns:
        True if the signature matches

    Raises:
        InvalidFormatError: Unknown format
        EncodingError: Signature text is not URL-safe base64 without padding
        SignatureFormatError: Decoded signature has the wrong length
        FileAccessError: Source or key unreadable
        KeyFormatError: Key bytes invalid for the scheme
    """
    fmt = TextSignFormat.parse(fmt)
    _, verifier_cls = SCHEMES[fmt]

    raw = decode_signature(signature)
    if len(raw) != verifier_cls.SIGNATURE_SIZE:
        raise SignatureFormatError(
            f"Invalid {fmt.value} signature length: expected {verifier_cls.SIGNATURE_SIZE} bytes, got {len(raw)}",
            expected=verifier_cls.SIGNATURE_SIZE,
            actual=len(raw),
        )

    data = read_all(source)
    verifier = load_key(key_path, verifier_cls)
    verified = verifier.verify(data, raw)

    if verified:
        logger.debug(f"{fmt.value} signature verified over {len(data)} bytes")
    else:
        logger.info(f"{fmt.value} signature mismatch over {len(data)} bytes")
    return verified


def generate_keys(fmt: FormatLike) -> List[bytes]:
    """
    Generate new key material

    Returns:
        [key] for blake3, [secret_key, public_key] for ed25519
    """
    fmt = TextSignFormat.parse(fmt)
    if fmt is TextSignFormat.BLAKE3:
        keys = Blake3.generate()
    else:
        keys = Ed25519Signer.generate()

    logger.debug(f"Generated {len(keys)} {fmt.value} key blob(s)")
    return keys


def encode_source(source: PathLike, fmt: Union[str, Base64Format] = Base64Format.STANDARD) -> str:
    """Base64-encode the content of a source"""
    return encode_base64(read_all(source), fmt)


def decode_source(source: PathLike, fmt: Union[str, Base64Format] = Base64Format.STANDARD) -> bytes:
    """
    Base64-decode the content of a source

    Raises:
        EncodingError: If the content is not valid base64 in the given format
    """
    return decode_base64(read_all(source), fmt)
