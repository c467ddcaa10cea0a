"""
Random password generation
All randomness comes from the secrets module
"""

import secrets
from typing import List

from ..errors import InvalidInputError

# Look-alike characters (I, O, l, 0) are left out
UPPERCASE = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWERCASE = "abcdefghijkmnopqrstuvwxyz"
DIGITS = "123456789"
SYMBOLS = "!@#$%^&*_"

DEFAULT_LENGTH = 16


def generate_password(
    length: int = DEFAULT_LENGTH,
    uppercase: bool = True,
    lowercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> str:
    """
    Generate a random password

    Every enabled character class contributes at least one character; the
    rest is drawn from the union of the enabled classes and the result is
    shuffled.

    Args:
        length: Password length
        uppercase: Include uppercase letters
        lowercase: Include lowercase letters
        digits: Include digits
        symbols: Include symbols

    Returns:
        Password string (ASCII only, so len(password.encode()) == length)

    Raises:
        InvalidInputError: If no class is enabled or length is too small

    Example:
        >>> len(generate_password(32))
        32
    """
    classes = [
        alphabet
        for alphabet, enabled in (
            (UPPERCASE, uppercase),
            (LOWERCASE, lowercase),
            (DIGITS, digits),
            (SYMBOLS, symbols),
        )
        if enabled
    ]
    if not classes:
        raise InvalidInputError("At least one character class must be enabled")
    if length < len(classes):
        raise InvalidInputError(
            f"Password length {length} is shorter than the number of enabled character classes ({len(classes)})",
            {"length": length, "classes": len(classes)},
        )

    pool = "".join(classes)
    chars: List[str] = [secrets.choice(alphabet) for alphabet in classes]
    chars.extend(secrets.choice(pool) for _ in range(length - len(chars)))

    # Fisher-Yates with a CSPRNG
    for i in range(len(chars) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]

    return "".join(chars)
