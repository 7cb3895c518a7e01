from .factories import TestKey, mk_ecdsa_key, mk_ed25519_key, flip_bit

__all__ = [
    "TestKey",
    "mk_ecdsa_key",
    "mk_ed25519_key",
    "flip_bit",
]
