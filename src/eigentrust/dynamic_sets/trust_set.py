"""EigenTrustSet — dynamic membership, opinions and global trust convergence.

The set owns a fixed-capacity slot table of ``(identity, score)`` pairs and
the latest opinion submitted by each member. ``converge`` snapshots both,
filters and normalizes the opinions, and runs a fixed number of power
iteration rounds. The total score is conserved by every run.

Opinions are assumed to have been authenticated by the caller; the set only
enforces consistency with its own membership.
"""
from __future__ import annotations

import logging
import threading
from fractions import Fraction

from eigentrust.config import TrustSetConfig
from eigentrust.dynamic_sets import algorithm
from eigentrust.dynamic_sets.errors import (
    MemberAlreadyExistsError,
    MemberNotFoundError,
    SetCapacityError,
)
from eigentrust.dynamic_sets.rational import converge_rational
from eigentrust.field import MODULUS, Fr, field_sum
from eigentrust.keys import PublicKey
from eigentrust.opinion import Opinion

logger = logging.getLogger(__name__)


def _reduce_mod(value: int) -> int:
    return value % MODULUS


class EigenTrustSet:
    """Dynamic set of peers for EigenTrust score computation.

    Thread-safe for mutation: every mutation acquires a lock, and the
    convergence methods copy the state under the lock before computing.

    Parameters
    ----------
    config:
        Capacity, iteration count and initial score. Defaults to
        :class:`TrustSetConfig` with no customization.

    Example
    -------
    ::

        trust_set = EigenTrustSet(TrustSetConfig(num_neighbours=4))
        trust_set.add_member(pk1)
        trust_set.add_member(pk2)
        trust_set.update_op(pk1, sign_opinion(sk1, [pk1, pk2, null, null], scores))
        scores = trust_set.converge()
    """

    def __init__(self, config: TrustSetConfig | None = None) -> None:
        self._config: TrustSetConfig = config if config is not None else TrustSetConfig()
        self._set: list[tuple[PublicKey, Fr]] = [
            (PublicKey.default(), Fr.zero()) for _ in range(self._config.num_neighbours)
        ]
        self._ops: dict[PublicKey, Opinion] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> TrustSetConfig:
        return self._config

    @property
    def capacity(self) -> int:
        return self._config.num_neighbours

    @property
    def members(self) -> list[tuple[PublicKey, Fr]]:
        """Copy of the slot table, one ``(identity, score)`` pair per slot."""
        with self._lock:
            return list(self._set)

    @property
    def opinions(self) -> dict[PublicKey, Opinion]:
        """Copy of the stored opinions keyed by submitter."""
        with self._lock:
            return {pk: op.copy() for pk, op in self._ops.items()}

    @property
    def num_members(self) -> int:
        with self._lock:
            return algorithm.count_members(self._set)

    def slot_of(self, pk: PublicKey) -> int | None:
        """Return the slot index of ``pk``, or ``None`` if it is not a member."""
        with self._lock:
            return self._position(pk)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def add_member(self, pk: PublicKey) -> int:
        """Add a peer to the first free slot with the initial score.

        Parameters
        ----------
        pk:
            Identity of the joining peer.

        Returns
        -------
        int
            The slot index assigned to the peer.

        Raises
        ------
        ValueError
            If ``pk`` is the NULL identity.
        MemberAlreadyExistsError
            If ``pk`` already occupies a slot.
        SetCapacityError
            If every slot is occupied.
        """
        if pk.is_null():
            raise ValueError("The NULL identity cannot join a trust set.")
        with self._lock:
            if self._position(pk) is not None:
                raise MemberAlreadyExistsError(pk)

            index = self._position(PublicKey.default())
            if index is None:
                raise SetCapacityError(self.capacity)

            self._set[index] = (pk, Fr(self._config.initial_score))

        logger.info("Peer %r joined at slot %d", pk, index)
        return index

    def remove_member(self, pk: PublicKey) -> None:
        """Free the slot of ``pk`` and discard its opinion.

        Raises
        ------
        MemberNotFoundError
            If ``pk`` is not a member.
        """
        with self._lock:
            index = self._position(pk)
            if index is None or pk.is_null():
                raise MemberNotFoundError(pk)

            self._set[index] = (PublicKey.default(), Fr.zero())
            self._ops.pop(pk, None)

        logger.info("Peer %r left slot %d", pk, index)

    def update_op(self, from_pk: PublicKey, op: Opinion) -> None:
        """Store ``op`` as the latest opinion of ``from_pk``.

        The opinion is copied; its contents are reconciled with the
        membership only when the set converges.

        Raises
        ------
        MemberNotFoundError
            If ``from_pk`` is not a member.
        ValueError
            If the opinion does not have exactly one entry per slot.
        """
        if len(op.scores) != self.capacity:
            raise ValueError(
                f"Opinion must rate exactly {self.capacity} slots, got {len(op.scores)}"
            )
        with self._lock:
            if from_pk.is_null() or self._position(from_pk) is None:
                raise MemberNotFoundError(from_pk)
            self._ops[from_pk] = op.copy()

        logger.debug("Stored opinion of %r", from_pk)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def filter_opinions(self) -> dict[PublicKey, Opinion]:
        """Return the filtered opinion of every live member."""
        members, ops = self._snapshot()
        return algorithm.filter_opinions(members, ops)

    # ------------------------------------------------------------------
    # Convergence
    # ------------------------------------------------------------------

    def converge(self) -> list[Fr]:
        """Compute the global trust score of every slot.

        Returns
        -------
        list[Fr]
            One score per slot, aligned with :attr:`members`. Empty slots
            score zero.

        Raises
        ------
        InsufficientPeersError
            If fewer than two slots are occupied.
        ConservationError
            If the total score changed (an algorithm bug).
        """
        members, ops = self._snapshot()
        algorithm.check_quorum(members)

        filtered_ops = algorithm.normalize_opinions(algorithm.filter_opinions(members, ops))

        rows: list[list[int] | None] = []
        for pk, _ in members:
            if pk.is_null():
                rows.append(None)
                continue
            rows.append([int(score) for score in filtered_ops[pk].values])

        initial = [int(score) for _, score in members]
        final = algorithm.power_iterate(
            initial,
            rows,
            self._config.num_iterations,
            zero=0,
            reduce=_reduce_mod,
        )
        s = [Fr(value) for value in final]

        sum_initial = field_sum([score for _, score in members])
        sum_final = field_sum(s)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("new s: %s", s)
            logger.debug("scaled new s: %s", self.scaled_scores(s))
            logger.debug("sum before: %r, sum after: %r", sum_initial, sum_final)
        algorithm.check_conservation(sum_initial, sum_final)

        logger.info(
            "Converged %d members over %d iterations",
            algorithm.count_members(members),
            self._config.num_iterations,
        )
        return s

    def converge_rational(self) -> list[Fraction]:
        """Compute the global trust scores as exact rationals.

        Same filtering, normalization, iteration count and checks as
        :meth:`converge`, carried out over :class:`fractions.Fraction`.
        """
        members, ops = self._snapshot()
        return converge_rational(members, ops, self._config.num_iterations)

    def scaled_scores(self, scores: list[Fr]) -> list[Fr]:
        """Return ``scores`` multiplied by ``10 ** num_iterations`` for display."""
        return algorithm.scale_scores(scores, self._config.num_iterations)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _position(self, pk: PublicKey) -> int | None:
        for index, (slot_pk, _) in enumerate(self._set):
            if slot_pk == pk:
                return index
        return None

    def _snapshot(self) -> tuple[list[tuple[PublicKey, Fr]], dict[PublicKey, Opinion]]:
        with self._lock:
            return list(self._set), {pk: op.copy() for pk, op in self._ops.items()}

    def __len__(self) -> int:
        """Return the number of live members."""
        return self.num_members

    def __contains__(self, pk: object) -> bool:
        """Support ``pk in trust_set`` membership test."""
        if not isinstance(pk, PublicKey) or pk.is_null():
            return False
        with self._lock:
            return self._position(pk) is not None

    def __repr__(self) -> str:
        return (
            f"EigenTrustSet(members={self.num_members}, capacity={self.capacity}, "
            f"iterations={self._config.num_iterations})"
        )
