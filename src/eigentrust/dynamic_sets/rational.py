"""Exact rational mirror of the trust-set convergence.

Field scores are exact but unreadable once divided; the same computation
over :class:`fractions.Fraction` yields numerators and denominators a human
can interpret. Filtering is shared with the field computation, so both
views always agree on which peers rate whom.
"""
from __future__ import annotations

from fractions import Fraction
from typing import Optional, Sequence

from eigentrust.dynamic_sets import algorithm
from eigentrust.field import Fr
from eigentrust.keys import PublicKey
from eigentrust.opinion import Opinion


def normalize_rational(opinion: Opinion) -> list[Fraction]:
    """Lift a filtered opinion to rationals and divide by its total."""
    lifted = [Fraction(int(score)) for score in opinion.values]
    total = sum(lifted, Fraction(0))
    if total == 0:
        return [Fraction(0) for _ in lifted]
    return [value / total for value in lifted]


def converge_rational(
    members: Sequence[tuple[PublicKey, Fr]],
    opinions: dict[PublicKey, Opinion],
    num_iterations: int,
) -> list[Fraction]:
    """Run filtering, normalization and power iteration over rationals.

    Parameters
    ----------
    members:
        Snapshot of the slot table.
    opinions:
        Snapshot of the stored opinions.
    num_iterations:
        Number of power iteration rounds.

    Returns
    -------
    list[Fraction]
        Final score per slot.

    Raises
    ------
    InsufficientPeersError
        If fewer than two slots are occupied.
    ConservationError
        If the total score changed.
    """
    algorithm.check_quorum(members)
    filtered = algorithm.filter_opinions(members, opinions)

    rows: list[Optional[list[Fraction]]] = []
    for pk, _ in members:
        if pk.is_null():
            rows.append(None)
            continue
        rows.append(normalize_rational(filtered[pk]))

    initial = [Fraction(int(score)) for _, score in members]
    s = algorithm.power_iterate(initial, rows, num_iterations, zero=Fraction(0))

    algorithm.check_conservation(sum(initial, Fraction(0)), sum(s, Fraction(0)))
    return s


__all__ = ["converge_rational", "normalize_rational"]
