"""
Key message codec.

Encodes and decodes the public key messages stored in ``SerializedKey.value``.

Layouts (varints are ULEB128, byte strings are varint length-prefixed):

    EcdsaPublicKey:   version, hash_type, curve, encoding, x, y
    Ed25519PublicKey: version, key_value

The version is decoded first so that keys written in a newer format are
reported as unsupported rather than malformed.
"""

from typing import Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ..enums import HashType, EllipticCurveType, EcdsaSignatureEncoding
from ..keys.models import (
    ECDSA_PUBLIC_KEY_TYPE_URL,
    ED25519_PUBLIC_KEY_TYPE_URL,
    SerializedKey,
    EcdsaParams,
    EcdsaPublicKey,
    Ed25519PublicKey,
)
from ..runtime.errors import InvalidKeyError, UnsupportedKeyVersionError
from .reader import BinaryReader, CodecError
from .writer import BinaryWriter


E = TypeVar("E", HashType, EllipticCurveType, EcdsaSignatureEncoding)


def _read_enum(reader: BinaryReader, enum_cls: Type[E], field: str) -> E:
    raw = reader.uvarint()
    try:
        return enum_cls(raw)
    except ValueError:
        raise InvalidKeyError(
            f"Unknown {field} value {raw}",
            details={"field": field, "value": raw}
        ) from None


def _read_version(reader: BinaryReader, key_type: str, max_version: Optional[int]) -> int:
    version = reader.uvarint()
    if max_version is not None and version > max_version:
        raise UnsupportedKeyVersionError(version, max_version, key_type)
    return version


def encode_ecdsa_public_key(key: EcdsaPublicKey) -> bytes:
    """
    Encode an ECDSA public key message.

    Args:
        key: Key to encode

    Returns:
        Serialized key message
    """
    writer = BinaryWriter()
    writer.uvarint(key.version)
    writer.uvarint(int(key.params.hash_type))
    writer.uvarint(int(key.params.curve))
    writer.uvarint(int(key.params.encoding))
    writer.len_prefixed_bytes(key.x)
    writer.len_prefixed_bytes(key.y)
    return writer.to_bytes()


def decode_ecdsa_public_key(value: bytes, max_version: Optional[int] = None) -> EcdsaPublicKey:
    """
    Decode an ECDSA public key message.

    Args:
        value: Serialized key message
        max_version: Highest key version the caller supports, or None to accept any

    Returns:
        Decoded key

    Raises:
        UnsupportedKeyVersionError: If the version exceeds ``max_version``
        InvalidKeyError: If the message is truncated, has trailing bytes or
            carries unknown enum values
    """
    reader = BinaryReader(value)
    try:
        version = _read_version(reader, ECDSA_PUBLIC_KEY_TYPE_URL, max_version)
        hash_type = _read_enum(reader, HashType, "hash_type")
        curve = _read_enum(reader, EllipticCurveType, "curve")
        encoding = _read_enum(reader, EcdsaSignatureEncoding, "encoding")
        x = reader.len_prefixed_bytes()
        y = reader.len_prefixed_bytes()
        reader.expect_eof()
    except CodecError as e:
        raise InvalidKeyError(f"Cannot decode ECDSA public key: {e}", cause=e) from e

    try:
        return EcdsaPublicKey(
            version=version,
            params=EcdsaParams(hash_type=hash_type, curve=curve, encoding=encoding),
            x=x,
            y=y,
        )
    except PydanticValidationError as e:
        raise InvalidKeyError(f"Invalid ECDSA public key: {e}", cause=e) from e


def encode_ed25519_public_key(key: Ed25519PublicKey) -> bytes:
    """Encode an Ed25519 public key message."""
    writer = BinaryWriter()
    writer.uvarint(key.version)
    writer.len_prefixed_bytes(key.key_value)
    return writer.to_bytes()


def decode_ed25519_public_key(value: bytes, max_version: Optional[int] = None) -> Ed25519PublicKey:
    """
    Decode an Ed25519 public key message.

    Raises:
        UnsupportedKeyVersionError: If the version exceeds ``max_version``
        InvalidKeyError: If the message is truncated or has trailing bytes
    """
    reader = BinaryReader(value)
    try:
        version = _read_version(reader, ED25519_PUBLIC_KEY_TYPE_URL, max_version)
        key_value = reader.len_prefixed_bytes()
        reader.expect_eof()
    except CodecError as e:
        raise InvalidKeyError(f"Cannot decode Ed25519 public key: {e}", cause=e) from e

    try:
        return Ed25519PublicKey(version=version, key_value=key_value)
    except PydanticValidationError as e:
        raise InvalidKeyError(f"Invalid Ed25519 public key: {e}", cause=e) from e


def serialize_ecdsa_public_key(key: EcdsaPublicKey) -> SerializedKey:
    """Wrap an ECDSA public key in a SerializedKey."""
    return SerializedKey(type_url=ECDSA_PUBLIC_KEY_TYPE_URL, value=encode_ecdsa_public_key(key))


def serialize_ed25519_public_key(key: Ed25519PublicKey) -> SerializedKey:
    """Wrap an Ed25519 public key in a SerializedKey."""
    return SerializedKey(type_url=ED25519_PUBLIC_KEY_TYPE_URL, value=encode_ed25519_public_key(key))


__all__ = [
    "encode_ecdsa_public_key",
    "decode_ecdsa_public_key",
    "encode_ed25519_public_key",
    "decode_ed25519_public_key",
    "serialize_ecdsa_public_key",
    "serialize_ed25519_public_key",
]
