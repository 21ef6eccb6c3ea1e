"""Opinion filtering, normalization and power iteration.

These are pure functions over a snapshot of a trust set: the ``members``
slot table and the ``opinions`` mapping. :class:`EigenTrustSet` takes the
snapshot and calls them; the rational mirror in
:mod:`eigentrust.dynamic_sets.rational` reuses the same steps.

Filtering rules for the opinion of member ``i`` at slot ``j``:

- the score is zeroed when the submitted identity differs from the member
  in slot ``j``, when slot ``j`` is empty, or when slot ``j`` is ``i`` itself;
- a submitted identity that differs from the member in slot ``j`` is
  replaced by that member;
- an opinion that sums to zero afterwards gives a score of one to every
  other live member.

Example 1::

    set     => [p1, null, p3]
    opinion => [(p1, 10), (p6, 10), (p3, 10)]   from p1
            => [(p1, 0), (null, 0), (p3, 10)]

Example 2::

    set     => [p1, p2, p3]
    opinion => [(p1, 0), (p2, 0), (p3, 0)]      from p1
            => [(p1, 0), (p2, 1), (p3, 1)]
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

from eigentrust.dynamic_sets.errors import ConservationError, InsufficientPeersError
from eigentrust.field import Fr, field_sum
from eigentrust.keys import PublicKey
from eigentrust.opinion import Opinion

MIN_PEERS: int = 2

Member = tuple[PublicKey, Fr]
T = TypeVar("T")


def count_members(members: Sequence[Member]) -> int:
    """Return the number of occupied (non-NULL) slots."""
    return sum(1 for pk, _ in members if not pk.is_null())


def check_quorum(members: Sequence[Member]) -> None:
    """Raise :class:`InsufficientPeersError` unless at least two slots are occupied."""
    num_members = count_members(members)
    if num_members < MIN_PEERS:
        raise InsufficientPeersError(num_members)


def check_conservation(sum_before: T, sum_after: T) -> None:
    """Raise :class:`ConservationError` if the score mass changed."""
    if sum_before != sum_after:
        raise ConservationError(sum_before, sum_after)


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def filter_opinion(
    pk_i: PublicKey,
    members: Sequence[Member],
    opinion: Optional[Opinion],
) -> Opinion:
    """Reconcile one member's opinion against the canonical slot table.

    Parameters
    ----------
    pk_i:
        The member who submitted the opinion.
    members:
        The canonical ``(identity, score)`` slot table.
    opinion:
        The stored opinion, or ``None`` if the member never submitted one.

    Returns
    -------
    Opinion
        A corrected copy. ``opinion`` itself is never modified.
    """
    capacity = len(members)
    op_i = opinion.copy() if opinion is not None else Opinion.empty(capacity)

    for j, (set_pk_j, _) in enumerate(members):
        op_pk_j, score = op_i.scores[j]

        is_diff_pk_j = set_pk_j != op_pk_j
        if is_diff_pk_j or set_pk_j.is_null() or set_pk_j == pk_i:
            score = Fr.zero()
        if is_diff_pk_j:
            op_pk_j = set_pk_j

        op_i.scores[j] = (op_pk_j, score)

    if field_sum(op_i.values).is_zero():
        op_i.scores = [
            (pk_j, Fr.one()) if pk_j != pk_i and not pk_j.is_null() else (pk_j, score)
            for pk_j, score in op_i.scores
        ]

    return op_i


def filter_opinions(
    members: Sequence[Member],
    opinions: dict[PublicKey, Opinion],
) -> dict[PublicKey, Opinion]:
    """Filter the opinion of every live member.

    Members without a stored opinion get one synthesized from an empty
    opinion. The result has exactly one entry per occupied slot. Never raises.
    """
    filtered: dict[PublicKey, Opinion] = {}
    for pk_i, _ in members:
        if pk_i.is_null():
            continue
        filtered[pk_i] = filter_opinion(pk_i, members, opinions.get(pk_i))
    return filtered


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalize_opinion(opinion: Opinion) -> Opinion:
    """Divide every score by the opinion's total (zero total gives all zeros)."""
    inverted_sum = field_sum(opinion.values).invert()
    normalized = opinion.copy()
    normalized.scores = [(pk, score * inverted_sum) for pk, score in opinion.scores]
    return normalized


def normalize_opinions(filtered: dict[PublicKey, Opinion]) -> dict[PublicKey, Opinion]:
    return {pk: normalize_opinion(op) for pk, op in filtered.items()}


# ---------------------------------------------------------------------------
# Power iteration
# ---------------------------------------------------------------------------


def power_iterate(
    initial: Sequence[T],
    rows: Sequence[Optional[Sequence[T]]],
    num_iterations: int,
    zero: T,
    reduce: Callable[[T], T] = lambda value: value,
) -> list[T]:
    """Run exactly ``num_iterations`` rounds of ``s := s · C``.

    Parameters
    ----------
    initial:
        Starting score per slot.
    rows:
        Normalized opinion row per slot, or ``None`` for an empty slot.
    num_iterations:
        Fixed number of rounds; there is no early exit.
    zero:
        Additive identity of the value type.
    reduce:
        Applied to every accumulated value (modular reduction for field
        values, identity for rationals).

    Returns
    -------
    list
        Final score per slot.
    """
    size = len(initial)
    s = list(initial)
    for _ in range(num_iterations):
        contributions: list[list[T]] = []
        for i in range(size):
            row = rows[i]
            if row is None:
                # Empty slots contribute nothing.
                contributions.append([zero] * size)
                continue
            n_score = s[i]
            contributions.append([reduce(row[j] * n_score) for j in range(size)])

        new_s: list[T] = []
        for j in range(size):
            new_score = zero
            for i in range(size):
                new_score = reduce(new_score + contributions[i][j])
            new_s.append(new_score)
        s = new_s
    return s


def scale_scores(scores: Sequence[Fr], num_iterations: int) -> list[Fr]:
    """Multiply every score by ``10 ** num_iterations`` for display."""
    scale_factor = Fr(10) ** num_iterations
    return [score * scale_factor for score in scores]


__all__ = [
    "MIN_PEERS",
    "check_conservation",
    "check_quorum",
    "count_members",
    "filter_opinion",
    "filter_opinions",
    "normalize_opinion",
    "normalize_opinions",
    "power_iterate",
    "scale_scores",
]
