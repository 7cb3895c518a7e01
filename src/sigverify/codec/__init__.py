"""
Binary codec for serialized keys.
"""

from .reader import BinaryReader, CodecError
from .writer import BinaryWriter
from .keys import (
    encode_ecdsa_public_key,
    decode_ecdsa_public_key,
    encode_ed25519_public_key,
    decode_ed25519_public_key,
    serialize_ecdsa_public_key,
    serialize_ed25519_public_key,
)

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "CodecError",
    "encode_ecdsa_public_key",
    "decode_ecdsa_public_key",
    "encode_ed25519_public_key",
    "decode_ed25519_public_key",
    "serialize_ecdsa_public_key",
    "serialize_ed25519_public_key",
]
