"""Fr — scalar field element used for every trust score.

Scores live in the scalar field of the BN254 curve so that the same values
can be fed to proof systems out-of-band. Arithmetic is plain modular integer
arithmetic on Python ints.

Inversion is total: the inverse of zero is defined as zero so that
normalizing an all-zero opinion never raises.
"""
from __future__ import annotations

from dataclasses import dataclass

MODULUS: int = 21888242871839275222246405745257275088548364400416034343698204186575808495617

_NUM_BYTES: int = 32


@dataclass(frozen=True)
class Fr:
    """An element of the prime field of order :data:`MODULUS`.

    Any integer is accepted and reduced into ``[0, MODULUS)``.

    Example
    -------
    ::

        half = Fr(2).invert()
        assert half * Fr(2) == Fr.one()
        assert Fr.zero().invert() == Fr.zero()
    """

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) % MODULUS)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Fr:
        return cls(0)

    @classmethod
    def one(cls) -> Fr:
        return cls(1)

    @classmethod
    def from_bytes(cls, data: bytes) -> Fr:
        """Build an element from little-endian bytes, reducing modulo the field order."""
        return cls(int.from_bytes(data, "little"))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Fr:
        if isinstance(other, Fr):
            return Fr(self.value + other.value)
        if isinstance(other, int):
            return Fr(self.value + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Fr:
        if isinstance(other, Fr):
            return Fr(self.value - other.value)
        if isinstance(other, int):
            return Fr(self.value - other)
        return NotImplemented

    def __rsub__(self, other: object) -> Fr:
        if isinstance(other, int):
            return Fr(other - self.value)
        return NotImplemented

    def __mul__(self, other: object) -> Fr:
        if isinstance(other, Fr):
            return Fr(self.value * other.value)
        if isinstance(other, int):
            return Fr(self.value * other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Fr:
        return Fr(-self.value)

    def __pow__(self, exponent: int) -> Fr:
        if exponent < 0:
            return self.invert() ** (-exponent)
        return Fr(pow(self.value, exponent, MODULUS))

    def invert(self) -> Fr:
        """Return the multiplicative inverse, or zero when ``self`` is zero."""
        if self.value == 0:
            return Fr.zero()
        return Fr(pow(self.value, -1, MODULUS))

    def is_zero(self) -> bool:
        return self.value == 0

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def __int__(self) -> int:
        return self.value

    def to_bytes(self) -> bytes:
        """Return the 32-byte little-endian encoding."""
        return self.value.to_bytes(_NUM_BYTES, "little")

    def to_hex(self) -> str:
        """Return the big-endian ``0x``-prefixed hex encoding (64 hex digits)."""
        return "0x" + self.value.to_bytes(_NUM_BYTES, "big").hex()

    def __repr__(self) -> str:
        return f"Fr({self.value})"


def field_sum(values: list[Fr]) -> Fr:
    """Sum a sequence of field elements, returning zero for an empty sequence."""
    total = Fr.zero()
    for value in values:
        total = total + value
    return total


__all__ = ["Fr", "MODULUS", "field_sum"]
