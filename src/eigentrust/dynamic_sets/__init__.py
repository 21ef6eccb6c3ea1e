"""Dynamic trust sets — membership, opinion filtering and convergence.

A trust set tracks a fixed number of slots, the peers occupying them and
the opinions those peers submitted, and computes global trust scores by
power iteration over the filtered, normalized opinions.
"""
from __future__ import annotations

from eigentrust.dynamic_sets.errors import (
    ConservationError,
    EigenTrustError,
    InsufficientPeersError,
    MemberAlreadyExistsError,
    MemberNotFoundError,
    SetCapacityError,
)
from eigentrust.dynamic_sets.trust_set import EigenTrustSet

__all__ = [
    "ConservationError",
    "EigenTrustError",
    "EigenTrustSet",
    "InsufficientPeersError",
    "MemberAlreadyExistsError",
    "MemberNotFoundError",
    "SetCapacityError",
]
