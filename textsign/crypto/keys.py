"""
Key material loading and persistence

Key files are raw bytes with no header: blake3.key (32 bytes),
ed25519.sk (32-byte seed) and ed25519.pk (32-byte public key).
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Sequence, Type, TypeVar, Union

from ..errors import FileAccessError, InvalidInputError
from ..types import TextSignFormat
from .schemes import TextSigner, TextVerifier

logger = logging.getLogger(__name__)

S = TypeVar("S", TextSigner, TextVerifier)

DEFAULT_SECRET_KEY_MODE = 0o600

# Blob position -> filename; the first blob is always secret
KEY_FILENAMES: Dict[TextSignFormat, List[str]] = {
    TextSignFormat.BLAKE3: ["blake3.key"],
    TextSignFormat.ED25519: ["ed25519.sk", "ed25519.pk"],
}


def load_key(path: Union[str, Path], scheme: Type[S]) -> S:
    """
    Load key material from a file into a scheme instance

    The bytes are passed to scheme.try_new() as-is.

    Args:
        path: Key file path
        scheme: Scheme class (Blake3, Ed25519Signer, Ed25519Verifier)

    Returns:
        Scheme instance owning the key

    Raises:
        FileAccessError: If the file cannot be read
        KeyFormatError: If the bytes are not a valid key for the scheme
    """
    path = Path(path)
    try:
        key = path.read_bytes()
    except OSError as e:
        raise FileAccessError(f"Cannot read key file {path}: {e.strerror or e}", path=str(path)) from e

    instance = scheme.try_new(key)
    logger.debug(f"Loaded {scheme.__name__} key from {path}")
    return instance


def key_filenames(fmt: Union[str, TextSignFormat]) -> List[str]:
    """Filenames used by save_keys() for a format, in blob order"""
    return list(KEY_FILENAMES[TextSignFormat.parse(fmt)])


def save_keys(
    fmt: Union[str, TextSignFormat],
    keys: Sequence[bytes],
    output_dir: Union[str, Path],
    secret_key_mode: int = DEFAULT_SECRET_KEY_MODE,
) -> List[Path]:
    """
    Write generated key blobs to their files

    Args:
        fmt: Format the keys were generated for
        keys: Blobs as returned by generate_keys()
        output_dir: Directory to write into (created if missing)
        secret_key_mode: Permission bits for the secret key file

    Returns:
        Written paths, in blob order

    Raises:
        InvalidInputError: If the number of blobs does not match the format
        FileAccessError: If the directory or files cannot be written
    """
    fmt = TextSignFormat.parse(fmt)
    names = KEY_FILENAMES[fmt]
    if len(keys) != len(names):
        raise InvalidInputError(
            f"{fmt.value} expects {len(names)} key blob(s), got {len(keys)}",
            {"format": fmt.value, "expected": len(names), "actual": len(keys)},
        )

    directory = Path(output_dir)
    paths: List[Path] = []
    try:
        directory.mkdir(parents=True, exist_ok=True)
        for index, (name, blob) in enumerate(zip(names, keys)):
            path = directory / name
            path.write_bytes(blob)
            if index == 0:
                os.chmod(path, secret_key_mode)
            paths.append(path)
    except OSError as e:
        raise FileAccessError(
            f"Cannot write keys to {directory}: {e.strerror or e}", path=str(directory)
        ) from e

    logger.info(f"Wrote {fmt.value} keys: {', '.join(str(p) for p in paths)}")
    return paths
