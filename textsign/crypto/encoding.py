"""
Text-safe encodings for binary material

Signatures always cross the text boundary as URL-safe base64 without padding.
The general-purpose helpers also support the standard padded alphabet.
"""

import base64
import binascii
import re
from typing import Union

from ..errors import EncodingError
from ..types import Base64Format

_URLSAFE_RE = re.compile(r"^[A-Za-z0-9_-]*$")
_STANDARD_RE = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")


def _require_canonical(text: str, reencoded: str, fmt: Base64Format) -> None:
    # Non-zero trailing bits decode to the same bytes as the canonical form
    if reencoded != text:
        raise EncodingError(
            f"Invalid {fmt.value} base64 text: non-canonical trailing bits",
            {"format": fmt.value},
        )


def encode_base64(data: bytes, fmt: Union[str, Base64Format] = Base64Format.URLSAFE) -> str:
    """Encode bytes as base64 text in the given format"""
    fmt = Base64Format.parse(fmt)
    if fmt is Base64Format.STANDARD:
        return base64.b64encode(data).decode("ascii")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode_base64(text: Union[str, bytes], fmt: Union[str, Base64Format] = Base64Format.URLSAFE) -> bytes:
    """
    Decode base64 text in the given format

    Surrounding whitespace is ignored.

    Raises:
        EncodingError: On characters outside the alphabet, wrong padding
            an impossible length or non-canonical trailing bits
    """
    fmt = Base64Format.parse(fmt)
    if isinstance(text, bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as e:
            raise EncodingError("Base64 input is not ASCII text") from e
    text = text.strip()

    if fmt is Base64Format.STANDARD:
        if not _STANDARD_RE.match(text) or len(text) % 4 != 0:
            raise EncodingError(
                "Invalid standard base64 text", {"format": fmt.value, "length": len(text)}
            )
        try:
            decoded = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise EncodingError(f"Invalid standard base64 text: {e}") from e
        _require_canonical(text, base64.b64encode(decoded).decode("ascii"), fmt)
        return decoded

    # URL-safe: alphabet is -_ and padding is not allowed
    if not _URLSAFE_RE.match(text):
        raise EncodingError(
            "Invalid URL-safe base64 text: unexpected character or padding",
            {"format": fmt.value},
        )
    if len(text) % 4 == 1:
        raise EncodingError(
            f"Invalid URL-safe base64 text: impossible length {len(text)}",
            {"format": fmt.value, "length": len(text)},
        )
    padded = text + "=" * (-len(text) % 4)
    try:
        decoded = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid URL-safe base64 text: {e}") from e
    _require_canonical(text, base64.urlsafe_b64encode(decoded).rstrip(b"=").decode("ascii"), fmt)
    return decoded


def encode_signature(signature: bytes) -> str:
    """Encode raw signature bytes for printing or embedding in URLs and filenames"""
    return encode_base64(signature, Base64Format.URLSAFE)


def decode_signature(text: Union[str, bytes]) -> bytes:
    """
    Decode a signature produced by encode_signature

    Raises:
        EncodingError: If the text is not padding-free URL-safe base64
    """
    return decode_base64(text, Base64Format.URLSAFE)
