"""
Enumerations for key parameters.

Wire values are the integers written into serialized keys.
"""

from enum import IntEnum


class HashType(IntEnum):
    """Hash function applied to the message before signing."""
    UNKNOWN_HASH = 0
    SHA1 = 1
    SHA384 = 2
    SHA256 = 3
    SHA512 = 4


class EllipticCurveType(IntEnum):
    """Named elliptic curves."""
    UNKNOWN_CURVE = 0
    NIST_P256 = 2
    NIST_P384 = 3
    NIST_P521 = 4

    @property
    def field_size(self) -> int:
        """Size in bytes of a field element (and of r and s in IEEE P1363 form)."""
        return _FIELD_SIZES[self]


_FIELD_SIZES = {
    EllipticCurveType.UNKNOWN_CURVE: 0,
    EllipticCurveType.NIST_P256: 32,
    EllipticCurveType.NIST_P384: 48,
    EllipticCurveType.NIST_P521: 66,
}


class EcdsaSignatureEncoding(IntEnum):
    """Encoding of ECDSA signatures."""
    UNKNOWN_ENCODING = 0
    # r || s, each left-padded to the curve's field size
    IEEE_P1363 = 1
    # ASN.1 SEQUENCE { r INTEGER, s INTEGER }
    DER = 2


__all__ = ["HashType", "EllipticCurveType", "EcdsaSignatureEncoding"]
