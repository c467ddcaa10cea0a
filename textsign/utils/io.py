"""
Byte source reading
"-" reads standard input, anything else is a file path
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

from ..errors import FileAccessError

logger = logging.getLogger(__name__)

STDIN = "-"

PathLike = Union[str, Path]


def read_all(source: PathLike, stdin: Optional[BinaryIO] = None) -> bytes:
    """
    Read the full content of a named source

    Args:
        source: File path, or "-" for standard input
        stdin: Binary stream to use for "-" (defaults to sys.stdin.buffer)

    Returns:
        Raw bytes, unmodified

    Raises:
        FileAccessError: If the path cannot be read
    """
    if str(source) == STDIN:
        stream = stdin if stdin is not None else sys.stdin.buffer
        data = stream.read()
        logger.debug(f"Read {len(data)} bytes from stdin")
        return data

    path = Path(source)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileAccessError(f"Cannot read {path}: {e.strerror or e}", path=str(path)) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data
