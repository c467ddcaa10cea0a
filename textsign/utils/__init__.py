"""Utility modules"""

from .io import read_all, STDIN
from .genpass import generate_password

__all__ = [
    "read_all",
    "STDIN",
    "generate_password",
]
