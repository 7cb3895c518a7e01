"""
SigVerify Error Model

This module provides the error handling framework for the signature
verification registry. Every failure surfaced by the registry, key managers
and verifier primitives is one of the exceptions defined here.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for registry, key and signature failures."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    REENTRANT_INITIALIZATION = 2

    # Registry errors (100-199)
    UNKNOWN_KEY_TYPE = 100
    DUPLICATE_KEY_TYPE = 101
    INVALID_KEY_MANAGER = 102

    # Key errors (700-799)
    INVALID_KEY = 700
    UNSUPPORTED_KEY_VERSION = 701
    KEY_TYPE_MISMATCH = 702

    # Signature errors (800-899)
    MALFORMED_SIGNATURE = 800


class SigVerifyError(Exception):
    """
    Base class for all sigverify errors.

    Carries a machine-readable code plus optional structured details and the
    underlying exception, if any.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class RegistryError(SigVerifyError):
    """Key manager registration and lookup errors."""


class DuplicateKeyTypeError(RegistryError):
    """A different key manager is already registered for the key type."""

    def __init__(self, key_type: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(
            f"A different key manager is already registered for key type {key_type!r}",
            ErrorCode.DUPLICATE_KEY_TYPE, {"key_type": key_type, **(details or {})}, cause
        )
        self.key_type = key_type


class UnknownKeyTypeError(RegistryError):
    """No key manager is registered for the key type."""

    def __init__(self, key_type: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(
            f"No key manager registered for key type {key_type!r}",
            ErrorCode.UNKNOWN_KEY_TYPE, {"key_type": key_type, **(details or {})}, cause
        )
        self.key_type = key_type


class RegistrationError(RegistryError):
    """The object offered for registration is not a usable key manager."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_KEY_MANAGER, details, cause)


class InvalidKeyError(SigVerifyError):
    """Structurally or semantically invalid key parameters."""

    def __init__(self, message: str = "Invalid key", code: ErrorCode = ErrorCode.INVALID_KEY,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UnsupportedKeyVersionError(SigVerifyError):
    """Recognized key type carrying a format version the manager does not handle."""

    def __init__(self, version: int, max_version: int, key_type: str = "",
                 cause: Optional[Exception] = None):
        super().__init__(
            f"Key version {version} is not supported (maximum supported version is {max_version})",
            ErrorCode.UNSUPPORTED_KEY_VERSION,
            {"version": version, "max_version": max_version, "key_type": key_type}, cause
        )
        self.version = version
        self.max_version = max_version


class MalformedSignatureError(SigVerifyError):
    """Signature bytes that cannot be decoded for the key's signature encoding."""

    def __init__(self, message: str = "Malformed signature",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MALFORMED_SIGNATURE, details, cause)


__all__ = [
    "ErrorCode",
    "SigVerifyError",
    "RegistryError",
    "DuplicateKeyTypeError",
    "UnknownKeyTypeError",
    "RegistrationError",
    "InvalidKeyError",
    "UnsupportedKeyVersionError",
    "MalformedSignatureError",
]
