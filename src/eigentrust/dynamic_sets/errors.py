"""Exceptions raised by the dynamic trust set.

Usage errors (duplicate members, unknown members, a full set, too few peers
to converge) indicate a caller-side logic error and are never retried.
:class:`ConservationError` signals a bug in the algorithm itself.
"""
from __future__ import annotations

from eigentrust.keys import PublicKey


class EigenTrustError(Exception):
    """Base class for all trust-set errors."""


class MemberAlreadyExistsError(EigenTrustError, ValueError):
    """Raised when adding a peer that already occupies a slot."""

    def __init__(self, pk: PublicKey) -> None:
        self.pk = pk
        super().__init__(f"Peer {pk!r} is already a member of the set.")


class MemberNotFoundError(EigenTrustError, KeyError):
    """Raised when removing, or accepting an opinion from, a non-member."""

    def __init__(self, pk: PublicKey) -> None:
        self.pk = pk
        super().__init__(f"Peer {pk!r} is not a member of the set.")


class SetCapacityError(EigenTrustError):
    """Raised when adding a peer to a set with no free slot."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Trust set is full ({capacity} slots in use).")


class InsufficientPeersError(EigenTrustError):
    """Raised when converging a set with fewer than two members."""

    def __init__(self, num_members: int) -> None:
        self.num_members = num_members
        super().__init__(
            f"Insufficient peers for calculation: {num_members} member(s), at least 2 required."
        )


class ConservationError(EigenTrustError, RuntimeError):
    """Raised when the total score changed during convergence."""

    def __init__(self, sum_before: object, sum_after: object) -> None:
        self.sum_before = sum_before
        self.sum_after = sum_after
        super().__init__(
            f"Score sum not conserved: before={sum_before!r}, after={sum_after!r}"
        )


__all__ = [
    "ConservationError",
    "EigenTrustError",
    "InsufficientPeersError",
    "MemberAlreadyExistsError",
    "MemberNotFoundError",
    "SetCapacityError",
]
