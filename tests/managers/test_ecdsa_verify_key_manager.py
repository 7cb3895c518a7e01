"""
Test the ECDSA verify key manager.

Checks parameter policy, point validation, version handling and key type
matching.
"""

import pytest

from helpers import mk_ecdsa_key
from sigverify.codec.keys import serialize_ecdsa_public_key
from sigverify.codec.writer import BinaryWriter
from sigverify.enums import EcdsaSignatureEncoding, EllipticCurveType, HashType
from sigverify.keys.models import ECDSA_PUBLIC_KEY_TYPE_URL, SerializedKey
from sigverify.managers import EcdsaVerifyKeyManager, Ed25519VerifyKeyManager
from sigverify.policy import KeyPolicy
from sigverify.runtime.errors import ErrorCode, InvalidKeyError, UnsupportedKeyVersionError
from sigverify.verifiers import EcdsaVerifier

P256, P384, P521 = EllipticCurveType.NIST_P256, EllipticCurveType.NIST_P384, EllipticCurveType.NIST_P521
DER, P1363 = EcdsaSignatureEncoding.DER, EcdsaSignatureEncoding.IEEE_P1363


@pytest.fixture
def manager():
    return EcdsaVerifyKeyManager()


@pytest.mark.unit
def test_key_type(manager):
    assert manager.key_type() == ECDSA_PUBLIC_KEY_TYPE_URL
    assert manager.does_support(ECDSA_PUBLIC_KEY_TYPE_URL)
    assert not manager.does_support("type.googleapis.com/google.crypto.tink.Ed25519PublicKey")
    assert manager.primitive_class is EcdsaVerifier


@pytest.mark.unit
@pytest.mark.parametrize("curve,hash_type", [
    (P256, HashType.SHA256),
    (P384, HashType.SHA384),
    (P384, HashType.SHA512),
    (P521, HashType.SHA512),
])
@pytest.mark.parametrize("encoding", [DER, P1363])
def test_approved_parameters(manager, curve, hash_type, encoding):
    key = mk_ecdsa_key(curve, hash_type, encoding)

    decoded = manager.validate_key(key.serialized)

    assert decoded == key.public_key
    verifier = manager.new_primitive(key.serialized)
    assert isinstance(verifier, EcdsaVerifier)
    assert (verifier.curve, verifier.hash_type, verifier.encoding) == (curve, hash_type, encoding)


@pytest.mark.unit
@pytest.mark.parametrize("curve,hash_type", [
    (P256, HashType.SHA512),
    (P256, HashType.SHA1),
    (P384, HashType.SHA256),
    (P521, HashType.SHA256),
    (P521, HashType.SHA384),
])
def test_rejected_curve_hash_pairings(manager, curve, hash_type):
    key = mk_ecdsa_key(curve, hash_type)

    with pytest.raises(InvalidKeyError) as exc_info:
        manager.validate_key(key.serialized)

    assert exc_info.value.code == ErrorCode.INVALID_KEY
    assert hash_type.name in exc_info.value.message
    with pytest.raises(InvalidKeyError):
        manager.new_primitive(key.serialized)


def _raw_key(version=0, hash_type=3, curve=2, encoding=2, x=b"\x01", y=b"\x02", trailing=b""):
    writer = BinaryWriter()
    for v in (version, hash_type, curve, encoding):
        writer.uvarint(v)
    writer.len_prefixed_bytes(x)
    writer.len_prefixed_bytes(y)
    writer.bytes(trailing)
    return SerializedKey(type_url=ECDSA_PUBLIC_KEY_TYPE_URL, value=writer.to_bytes())


@pytest.mark.unit
@pytest.mark.parametrize("fields,reason", [
    ({"curve": 0}, "Curve UNKNOWN_CURVE is not approved"),
    ({"curve": 9}, "Unknown curve value 9"),
    ({"hash_type": 42}, "Unknown hash_type value 42"),
    ({"encoding": 0}, "Signature encoding UNKNOWN_ENCODING is not allowed"),
    ({"encoding": 7}, "Unknown encoding value 7"),
])
def test_unsupported_parameters_named(manager, fields, reason):
    with pytest.raises(InvalidKeyError) as exc_info:
        manager.validate_key(_raw_key(**fields))
    assert reason in exc_info.value.message


@pytest.mark.unit
def test_point_not_on_curve(manager, p256_key):
    y = int.from_bytes(p256_key.public_key.y, "big") + 1
    bad = p256_key.public_key.model_copy(update={"y": y.to_bytes(32, "big")})

    with pytest.raises(InvalidKeyError) as exc_info:
        manager.validate_key(serialize_ecdsa_public_key(bad))
    assert exc_info.value.cause is not None


@pytest.mark.unit
def test_oversized_coordinate(manager, p256_key):
    bad = p256_key.public_key.model_copy(update={"x": b"\x01" + p256_key.public_key.x})

    with pytest.raises(InvalidKeyError, match="longer than 32 bytes"):
        manager.validate_key(serialize_ecdsa_public_key(bad))


@pytest.mark.unit
def test_leading_zero_coordinate_accepted(manager, p256_key):
    padded = p256_key.public_key.model_copy(update={"x": b"\x00" + p256_key.public_key.x})
    manager.validate_key(serialize_ecdsa_public_key(padded))


@pytest.mark.unit
def test_empty_coordinate(manager):
    with pytest.raises(InvalidKeyError, match="empty"):
        manager.validate_key(_raw_key(x=b""))


@pytest.mark.unit
def test_unsupported_version(manager):
    key = mk_ecdsa_key(version=1)

    with pytest.raises(UnsupportedKeyVersionError) as exc_info:
        manager.new_primitive(key.serialized)

    assert exc_info.value.version == 1
    assert exc_info.value.max_version == 0
    assert exc_info.value.code == ErrorCode.UNSUPPORTED_KEY_VERSION
    assert not isinstance(exc_info.value, InvalidKeyError)


@pytest.mark.unit
def test_truncated_key(manager, p256_key):
    truncated = SerializedKey(type_url=ECDSA_PUBLIC_KEY_TYPE_URL, value=p256_key.serialized.value[:-3])

    with pytest.raises(InvalidKeyError, match="Cannot decode"):
        manager.validate_key(truncated)


@pytest.mark.unit
def test_trailing_bytes(manager, p256_key):
    padded = SerializedKey(type_url=ECDSA_PUBLIC_KEY_TYPE_URL, value=p256_key.serialized.value + b"\x00")

    with pytest.raises(InvalidKeyError, match="trailing"):
        manager.validate_key(padded)


@pytest.mark.unit
def test_empty_value(manager):
    with pytest.raises(InvalidKeyError):
        manager.validate_key(SerializedKey(type_url=ECDSA_PUBLIC_KEY_TYPE_URL))


@pytest.mark.unit
def test_key_type_mismatch(manager, ed25519_key):
    with pytest.raises(InvalidKeyError) as exc_info:
        manager.new_primitive(ed25519_key.serialized)
    assert exc_info.value.code == ErrorCode.KEY_TYPE_MISMATCH


@pytest.mark.unit
def test_rejects_non_serialized_key(manager, p256_key):
    with pytest.raises(InvalidKeyError):
        manager.validate_key(p256_key.serialized.value)


@pytest.mark.unit
def test_strict_policy_rejects_p1363(p256_key):
    manager = EcdsaVerifyKeyManager(KeyPolicy.strict())
    key = mk_ecdsa_key(encoding=P1363)

    manager.validate_key(p256_key.serialized)
    with pytest.raises(InvalidKeyError, match="IEEE_P1363"):
        manager.validate_key(key.serialized)


@pytest.mark.unit
def test_equality():
    assert EcdsaVerifyKeyManager() == EcdsaVerifyKeyManager()
    assert hash(EcdsaVerifyKeyManager()) == hash(EcdsaVerifyKeyManager())
    assert EcdsaVerifyKeyManager() != EcdsaVerifyKeyManager(KeyPolicy.strict())
    assert EcdsaVerifyKeyManager() != Ed25519VerifyKeyManager()
