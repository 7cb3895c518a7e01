"""
Key models.

Typed representations of serialized keys and of the public key messages
carried inside them.
"""

from __future__ import annotations
from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator

from ..enums import HashType, EllipticCurveType, EcdsaSignatureEncoding


ECDSA_PUBLIC_KEY_TYPE_URL = "type.googleapis.com/google.crypto.tink.EcdsaPublicKey"
ED25519_PUBLIC_KEY_TYPE_URL = "type.googleapis.com/google.crypto.tink.Ed25519PublicKey"


def _coerce_bytes(v: Any) -> bytes:
    """Accept bytes-like values or hex strings."""
    if isinstance(v, (bytes, bytearray, memoryview)):
        return bytes(v)
    if isinstance(v, str):
        return bytes.fromhex(v)
    raise ValueError(f"expected bytes or hex string, got {type(v).__name__}")


class SerializedKey(BaseModel):
    """
    An opaque serialized key tagged with its key type identifier.

    Produced by key storage; consumed by exactly one key manager, the one
    registered for ``type_url``.
    """
    type_url: str = Field(min_length=1, alias="typeUrl", description="Key type identifier")
    value: bytes = Field(default=b"", description="Serialized key message")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> bytes:
        return _coerce_bytes(v)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {"typeUrl": self.type_url, "value": self.value.hex()}

    def __repr__(self) -> str:
        return f"SerializedKey(type_url={self.type_url!r}, value=<{len(self.value)} bytes>)"


class EcdsaParams(BaseModel):
    """ECDSA signature parameters."""
    hash_type: HashType
    curve: EllipticCurveType
    encoding: EcdsaSignatureEncoding

    model_config = {"frozen": True}


class EcdsaPublicKey(BaseModel):
    """
    ECDSA public key.

    ``x`` and ``y`` are the big-endian affine coordinates of the public point.
    """
    version: int = Field(default=0, ge=0)
    params: EcdsaParams
    x: bytes
    y: bytes

    model_config = {"frozen": True}

    @field_validator("x", "y", mode="before")
    @classmethod
    def validate_coordinate(cls, v: Any) -> bytes:
        return _coerce_bytes(v)


class Ed25519PublicKey(BaseModel):
    """Ed25519 public key; ``key_value`` is the 32-byte encoded point."""
    version: int = Field(default=0, ge=0)
    key_value: bytes

    model_config = {"frozen": True}

    @field_validator("key_value", mode="before")
    @classmethod
    def validate_key_value(cls, v: Any) -> bytes:
        return _coerce_bytes(v)


__all__ = [
    "ECDSA_PUBLIC_KEY_TYPE_URL",
    "ED25519_PUBLIC_KEY_TYPE_URL",
    "SerializedKey",
    "EcdsaParams",
    "EcdsaPublicKey",
    "Ed25519PublicKey",
]
