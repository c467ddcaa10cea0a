"""
Type definitions for textsign
Format tags and fixed sizes of key and signature material
"""

from enum import Enum
from typing import Union

from .errors import InvalidFormatError


# Sizes in bytes
BLAKE3_KEY_SIZE = 32
BLAKE3_SIGNATURE_SIZE = 32
ED25519_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64


class TextSignFormat(str, Enum):
    """Selects the signing scheme. There is no default."""
    BLAKE3 = "blake3"
    ED25519 = "ed25519"

    @classmethod
    def parse(cls, value: Union[str, "TextSignFormat"]) -> "TextSignFormat":
        """
        Resolve a format tag from an enum member or its name (case-insensitive)

        Raises:
            InvalidFormatError: If the tag is unknown
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        supported = ", ".join(f.value for f in cls)
        raise InvalidFormatError(
            f"Unsupported sign format: {value!r} (expected one of: {supported})",
            {"format": str(value)},
        )


class Base64Format(str, Enum):
    """Alphabet and padding used by the base64 utility"""
    STANDARD = "standard"
    URLSAFE = "urlsafe"

    @classmethod
    def parse(cls, value: Union[str, "Base64Format"]) -> "Base64Format":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        supported = ", ".join(f.value for f in cls)
        raise InvalidFormatError(
            f"Unsupported base64 format: {value!r} (expected one of: {supported})",
            {"format": str(value)},
        )
