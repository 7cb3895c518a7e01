"""
Key acceptance policy.

A KeyPolicy lists the parameter combinations a key manager accepts. Two
managers of the same class are interchangeable only if their policies are
equal.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .enums import HashType, EllipticCurveType, EcdsaSignatureEncoding
from .keys.models import EcdsaParams
from .runtime.errors import InvalidKeyError


DEFAULT_ECDSA_CURVE_HASHES: FrozenSet[Tuple[EllipticCurveType, HashType]] = frozenset({
    (EllipticCurveType.NIST_P256, HashType.SHA256),
    (EllipticCurveType.NIST_P384, HashType.SHA384),
    (EllipticCurveType.NIST_P384, HashType.SHA512),
    (EllipticCurveType.NIST_P521, HashType.SHA512),
})

DEFAULT_ECDSA_ENCODINGS: FrozenSet[EcdsaSignatureEncoding] = frozenset({
    EcdsaSignatureEncoding.DER,
    EcdsaSignatureEncoding.IEEE_P1363,
})


@dataclass(frozen=True)
class KeyPolicy:
    """Configuration for key validation."""
    ecdsa_curve_hashes: FrozenSet[Tuple[EllipticCurveType, HashType]] = field(
        default_factory=lambda: DEFAULT_ECDSA_CURVE_HASHES
    )
    ecdsa_encodings: FrozenSet[EcdsaSignatureEncoding] = field(
        default_factory=lambda: DEFAULT_ECDSA_ENCODINGS
    )
    max_key_version: int = 0

    @classmethod
    def default(cls) -> "KeyPolicy":
        """Policy accepting every currently approved parameter set."""
        return cls()

    @classmethod
    def strict(cls) -> "KeyPolicy":
        """Default policy restricted to DER-encoded ECDSA signatures."""
        return cls(ecdsa_encodings=frozenset({EcdsaSignatureEncoding.DER}))

    def validate_ecdsa_params(self, params: EcdsaParams) -> None:
        """
        Check ECDSA parameters against the policy.

        Args:
            params: Parameters to check

        Raises:
            InvalidKeyError: Naming the first violated constraint
        """
        curves = {curve for curve, _ in self.ecdsa_curve_hashes}
        if params.curve not in curves:
            raise InvalidKeyError(
                f"Curve {params.curve.name} is not approved",
                details={"curve": params.curve.name}
            )
        if (params.curve, params.hash_type) not in self.ecdsa_curve_hashes:
            raise InvalidKeyError(
                f"Hash {params.hash_type.name} is not approved for curve {params.curve.name}",
                details={"curve": params.curve.name, "hash_type": params.hash_type.name}
            )
        if params.encoding not in self.ecdsa_encodings:
            raise InvalidKeyError(
                f"Signature encoding {params.encoding.name} is not allowed",
                details={"encoding": params.encoding.name}
            )


__all__ = ["KeyPolicy", "DEFAULT_ECDSA_CURVE_HASHES", "DEFAULT_ECDSA_ENCODINGS"]
