"""
sigverify - pluggable registry for digital signature verifiers.

Turns a serialized public key into a verifier without the caller knowing the
algorithm:

    >>> from sigverify import public_key_verify_config, default_registry
    >>> config = public_key_verify_config()  # registers the standard key types
    >>> verifier = default_registry().get_primitive(serialized_key)
    >>> verifier.verify(message, signature)
"""

from .enums import *
from .runtime.errors import *
from .runtime.once import Once, OnceState, LazyInstance
from .keys import *
from .policy import KeyPolicy
from .verifiers import Verifier, EcdsaVerifier, Ed25519Verifier
from .managers import KeyManager, EcdsaVerifyKeyManager, Ed25519VerifyKeyManager
from .registry import Registry, default_registry
from .config import KeyTypeCatalog, PublicKeyVerifyConfig, public_key_verify_config
from .codec import serialize_ecdsa_public_key, serialize_ed25519_public_key

__version__ = "0.1.0"
