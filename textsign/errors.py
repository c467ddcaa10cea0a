"""
Custom exception classes for textsign
Structural failures raise; a signature that simply does not match is a False result
"""

from typing import Optional, Dict, Any


class TextSignError(Exception):
    """Base textsign error class"""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class FileAccessError(TextSignError):
    """Source, key or output path could not be read or written"""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if path is not None:
            error_details["path"] = path
        super().__init__("IO_ERROR", message, error_details)
        self.path = path


class KeyFormatError(TextSignError):
    """Key bytes have the wrong length or are not a valid key for the scheme"""

    def __init__(
        self,
        message: str,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        details: Dict[str, Any] = {}
        if expected is not None:
            details["expected"] = expected
        if actual is not None:
            details["actual"] = actual
        super().__init__("KEY_FORMAT", message, details)
        self.expected = expected
        self.actual = actual


class EncodingError(TextSignError):
    """Text could not be decoded back to bytes"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("ENCODING", message, details)


class SignatureFormatError(TextSignError):
    """Decoded signature has the wrong length for the scheme"""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(
            "SIGNATURE_FORMAT", message, {"expected": expected, "actual": actual}
        )
        self.expected = expected
        self.actual = actual


class InvalidFormatError(TextSignError):
    """Unknown format tag"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_FORMAT", message, details)


class InvalidInputError(TextSignError):
    """Invalid input error"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_INPUT", message, details)
