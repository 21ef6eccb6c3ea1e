"""Peer identities — Ed25519 public keys and the secret keys that sign opinions.

A :class:`PublicKey` is the identity of a peer inside a trust set. It is an
opaque, hashable wrapper over the 32 raw public-key bytes. The all-zero key
returned by :meth:`PublicKey.default` is the NULL identity that marks an empty
slot; it is never produced by key generation.

:class:`SecretKey` wraps the ``cryptography`` package's Ed25519 primitives.
Key material is handled as raw bytes so callers can store or transmit keys
without depending on this module's types.
"""
from __future__ import annotations

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

KEY_SIZE: int = 32
SIGNATURE_SIZE: int = 64

_NULL_KEY_BYTES: bytes = bytes(KEY_SIZE)


@dataclass(frozen=True)
class PublicKey:
    """Identity of a peer: 32 raw Ed25519 public-key bytes.

    Parameters
    ----------
    raw:
        The raw key bytes. Must be exactly :data:`KEY_SIZE` bytes long.
    """

    raw: bytes = _NULL_KEY_BYTES

    def __post_init__(self) -> None:
        if len(self.raw) != KEY_SIZE:
            raise ValueError(
                f"Public key must be {KEY_SIZE} bytes, got {len(self.raw)}"
            )

    @classmethod
    def default(cls) -> PublicKey:
        """Return the NULL identity used to mark an empty slot."""
        return cls(_NULL_KEY_BYTES)

    def is_null(self) -> bool:
        return self.raw == _NULL_KEY_BYTES

    def hex(self) -> str:
        return "0x" + self.raw.hex()

    def short(self) -> str:
        """Abbreviated hex form for display."""
        full = self.raw.hex()
        return f"0x{full[:6]}…{full[-4:]}"

    def verify(self, signature: bytes, data: bytes) -> bool:
        """Verify an Ed25519 signature over ``data``.

        Returns ``False`` for the NULL identity and for any invalid signature.
        """
        if self.is_null():
            return False
        public_key = Ed25519PublicKey.from_public_bytes(self.raw)
        try:
            public_key.verify(signature, data)
            return True
        except InvalidSignature:
            return False

    def __repr__(self) -> str:
        if self.is_null():
            return "PublicKey(NULL)"
        return f"PublicKey({self.short()})"


class SecretKey:
    """Ed25519 signing key of a peer.

    Example
    -------
    ::

        sk = SecretKey.random()
        signature = sk.sign(b"hello world")
        assert sk.public().verify(signature, b"hello world")
    """

    def __init__(self, private_key: Ed25519PrivateKey) -> None:
        self._private_key = private_key

    @classmethod
    def random(cls) -> SecretKey:
        """Generate a fresh key from the operating system's CSPRNG."""
        return cls(Ed25519PrivateKey.generate())

    @classmethod
    def from_bytes(cls, raw: bytes) -> SecretKey:
        """Load a key from its 32-byte raw seed.

        Raises
        ------
        ValueError
            If ``raw`` is not exactly 32 bytes.
        """
        if len(raw) != KEY_SIZE:
            raise ValueError(f"Secret key must be {KEY_SIZE} bytes, got {len(raw)}")
        return cls(Ed25519PrivateKey.from_private_bytes(raw))

    def to_bytes(self) -> bytes:
        return self._private_key.private_bytes(
            Encoding.Raw, PrivateFormat.Raw, NoEncryption()
        )

    def public(self) -> PublicKey:
        raw = self._private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        return PublicKey(raw)

    def sign(self, data: bytes) -> bytes:
        """Return the 64-byte Ed25519 signature over ``data``."""
        return self._private_key.sign(data)

    def __repr__(self) -> str:
        return f"SecretKey(public={self.public().short()})"


__all__ = ["KEY_SIZE", "SIGNATURE_SIZE", "PublicKey", "SecretKey"]
