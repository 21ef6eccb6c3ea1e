"""Unit tests for eigentrust.keys — PublicKey identities and SecretKey signing."""
from __future__ import annotations

import pytest

from eigentrust.keys import KEY_SIZE, SIGNATURE_SIZE, PublicKey, SecretKey


# ---------------------------------------------------------------------------
# PublicKey
# ---------------------------------------------------------------------------


class TestPublicKey:
    def test_default_is_null(self) -> None:
        assert PublicKey.default().is_null()

    def test_default_equals_zero_bytes(self) -> None:
        assert PublicKey.default() == PublicKey(bytes(KEY_SIZE))

    def test_generated_key_is_not_null(self) -> None:
        assert not SecretKey.random().public().is_null()

    def test_wrong_length_raises(self) -> None:
        with pytest.raises(ValueError, match="32 bytes"):
            PublicKey(b"\x01" * 16)

    def test_hashable_and_comparable(self) -> None:
        pk = SecretKey.random().public()
        same = PublicKey(pk.raw)
        assert pk == same
        assert len({pk, same}) == 1

    def test_hex_has_prefix(self) -> None:
        pk = SecretKey.random().public()
        assert pk.hex() == "0x" + pk.raw.hex()

    def test_repr_of_null(self) -> None:
        assert "NULL" in repr(PublicKey.default())

    def test_null_key_never_verifies(self) -> None:
        assert not PublicKey.default().verify(bytes(SIGNATURE_SIZE), b"data")


# ---------------------------------------------------------------------------
# SecretKey
# ---------------------------------------------------------------------------


class TestSecretKey:
    def test_sign_returns_64_bytes(self) -> None:
        assert len(SecretKey.random().sign(b"hello")) == SIGNATURE_SIZE

    def test_signature_verifies(self) -> None:
        sk = SecretKey.random()
        signature = sk.sign(b"hello")
        assert sk.public().verify(signature, b"hello")

    def test_signature_over_other_data_fails(self) -> None:
        sk = SecretKey.random()
        signature = sk.sign(b"hello")
        assert not sk.public().verify(signature, b"goodbye")

    def test_signature_from_other_key_fails(self) -> None:
        signature = SecretKey.random().sign(b"hello")
        assert not SecretKey.random().public().verify(signature, b"hello")

    def test_from_bytes_is_deterministic(self) -> None:
        seed = bytes(range(32))
        assert SecretKey.from_bytes(seed).public() == SecretKey.from_bytes(seed).public()

    def test_bytes_round_trip(self) -> None:
        sk = SecretKey.random()
        assert SecretKey.from_bytes(sk.to_bytes()).public() == sk.public()

    def test_from_bytes_wrong_length_raises(self) -> None:
        with pytest.raises(ValueError):
            SecretKey.from_bytes(b"\x00" * 31)

    def test_random_keys_differ(self) -> None:
        assert SecretKey.random().public() != SecretKey.random().public()
