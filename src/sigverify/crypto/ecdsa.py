"""
ECDSA cryptographic operations.

Loads public points on the NIST curves and converts between the IEEE P1363
and ASN.1 DER signature encodings, using the 'cryptography' library.
"""

from __future__ import annotations
from typing import Dict, Tuple, Type

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from ..enums import HashType, EllipticCurveType
from ..runtime.errors import InvalidKeyError, MalformedSignatureError


CURVES: Dict[EllipticCurveType, Type[ec.EllipticCurve]] = {
    EllipticCurveType.NIST_P256: ec.SECP256R1,
    EllipticCurveType.NIST_P384: ec.SECP384R1,
    EllipticCurveType.NIST_P521: ec.SECP521R1,
}

HASHES: Dict[HashType, Type[hashes.HashAlgorithm]] = {
    HashType.SHA1: hashes.SHA1,
    HashType.SHA256: hashes.SHA256,
    HashType.SHA384: hashes.SHA384,
    HashType.SHA512: hashes.SHA512,
}


def curve_for(curve: EllipticCurveType) -> ec.EllipticCurve:
    """Get the 'cryptography' curve object for a curve type."""
    try:
        return CURVES[curve]()
    except KeyError:
        raise InvalidKeyError(f"Unsupported curve: {curve.name}", details={"curve": curve.name}) from None


def hash_for(hash_type: HashType) -> hashes.HashAlgorithm:
    """Get the 'cryptography' hash object for a hash type."""
    try:
        return HASHES[hash_type]()
    except KeyError:
        raise InvalidKeyError(
            f"Unsupported hash: {hash_type.name}", details={"hash_type": hash_type.name}
        ) from None


def load_public_key(curve: EllipticCurveType, x: bytes, y: bytes) -> ec.EllipticCurvePublicKey:
    """
    Build a public key from big-endian affine coordinates.

    Args:
        curve: Named curve
        x: X coordinate
        y: Y coordinate

    Returns:
        Public key object

    Raises:
        InvalidKeyError: If a coordinate is too long or the point is not on the curve
    """
    field_size = curve.field_size
    for name, coordinate in (("x", x), ("y", y)):
        if not coordinate:
            raise InvalidKeyError(f"Public point coordinate {name} is empty", details={"field": name})
        if len(coordinate.lstrip(b"\x00")) > field_size:
            raise InvalidKeyError(
                f"Public point coordinate {name} is longer than {field_size} bytes",
                details={"field": name, "length": len(coordinate)}
            )

    numbers = ec.EllipticCurvePublicNumbers(
        int.from_bytes(x, "big"), int.from_bytes(y, "big"), curve_for(curve)
    )
    try:
        return numbers.public_key()
    except ValueError as e:
        raise InvalidKeyError(f"Invalid public point: {e}", cause=e) from e


def decode_der_signature(signature: bytes) -> Tuple[int, int]:
    """
    Decode a DER signature into (r, s).

    Raises:
        MalformedSignatureError: If the bytes are not a DER ECDSA signature
    """
    try:
        return decode_dss_signature(signature)
    except ValueError as e:
        raise MalformedSignatureError(f"Invalid DER signature: {e}", cause=e) from e


def ieee_p1363_to_der(signature: bytes, curve: EllipticCurveType) -> bytes:
    """
    Convert an IEEE P1363 signature (r || s) to DER.

    Raises:
        MalformedSignatureError: If the length does not match the curve
    """
    size = curve.field_size
    if len(signature) != 2 * size:
        raise MalformedSignatureError(
            f"IEEE P1363 signature must be {2 * size} bytes for {curve.name}, got {len(signature)}",
            details={"expected": 2 * size, "actual": len(signature)}
        )
    r = int.from_bytes(signature[:size], "big")
    s = int.from_bytes(signature[size:], "big")
    return encode_dss_signature(r, s)


def der_to_ieee_p1363(signature: bytes, curve: EllipticCurveType) -> bytes:
    """
    Convert a DER signature to IEEE P1363 (r || s).

    Raises:
        MalformedSignatureError: If the DER is invalid or r/s do not fit the curve
    """
    r, s = decode_der_signature(signature)
    size = curve.field_size
    try:
        return r.to_bytes(size, "big") + s.to_bytes(size, "big")
    except OverflowError as e:
        raise MalformedSignatureError(f"Signature component too large for {curve.name}", cause=e) from e


__all__ = [
    "CURVES",
    "HASHES",
    "curve_for",
    "hash_for",
    "load_public_key",
    "decode_der_signature",
    "ieee_p1363_to_der",
    "der_to_ieee_p1363",
]
