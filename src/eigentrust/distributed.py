"""Distributed EigenTrust — each peer iterates its own global trust value.

In the distributed form of the algorithm no node holds the whole matrix.
Every peer keeps its local trust values for its neighbours and, on each
heartbeat, recomputes its own global trust as::

    t_i(k+1) = c_1i * t_1(k) + c_2i * t_2(k) + ... + c_ni * t_n(k)

weighting each neighbour's opinion of ``i`` by that neighbour's own global
trust. A peer stops updating once its value moves by at most :data:`DELTA`.

Values are floats; this model is a simulation aid and is independent of the
field arithmetic used by :class:`~eigentrust.dynamic_sets.EigenTrustSet`.
"""
from __future__ import annotations

import logging
from typing import Sequence

logger = logging.getLogger(__name__)

DELTA: float = 0.001


class Peer:
    """A single peer in the distributed computation.

    Parameters
    ----------
    index:
        Position of the peer in the network.
    initial_ti:
        Starting global trust value.
    """

    def __init__(self, index: int, initial_ti: float) -> None:
        self.index = index
        self._local_trust_values: dict[int, float] = {}
        self._ti = initial_ti
        self._is_converged = False

    def add_neighbor(self, peer: Peer, local_trust_value: float) -> None:
        """Record this peer's local trust in ``peer``."""
        self._local_trust_values[peer.index] = local_trust_value

    def heartbeat(self, neighbors: Sequence[Peer]) -> None:
        """Recompute the global trust value from the neighbours' opinions.

        Does nothing once the peer has converged.
        """
        if self._is_converged:
            return

        new_ti = 0.0
        for j, neighbor_j in enumerate(neighbors):
            if j == self.index:
                continue
            new_ti += neighbor_j.local_trust_value(self.index) * neighbor_j.ti

        if abs(new_ti - self._ti) <= DELTA:
            self._is_converged = True

        self._ti = new_ti

    @property
    def is_converged(self) -> bool:
        return self._is_converged

    @property
    def ti(self) -> float:
        return self._ti

    def local_trust_value(self, i: int) -> float:
        """Return the local trust value for peer ``i``.

        Raises
        ------
        KeyError
            If ``i`` is not a neighbour of this peer.
        """
        return self._local_trust_values[i]

    def __repr__(self) -> str:
        return f"Peer(index={self.index}, ti={self._ti:.6f}, converged={self._is_converged})"


class Network:
    """A fully connected network of :class:`Peer` objects.

    Parameters
    ----------
    local_trust_matrix:
        Row-stochastic matrix; ``local_trust_matrix[i][j]`` is peer ``i``'s
        normalized local trust in peer ``j``. The diagonal is ignored.
    initial_scores:
        Starting global trust value per peer.

    Example
    -------
    ::

        network = Network([[0.0, 1.0], [1.0, 0.0]], [0.5, 0.5])
        network.run()
        print(network.global_trust_scores())
    """

    def __init__(
        self,
        local_trust_matrix: Sequence[Sequence[float]],
        initial_scores: Sequence[float],
    ) -> None:
        size = len(local_trust_matrix)
        if len(initial_scores) != size:
            raise ValueError(
                f"Expected {size} initial scores, got {len(initial_scores)}"
            )
        for row in local_trust_matrix:
            if len(row) != size:
                raise ValueError("Local trust matrix must be square.")

        self.peers: list[Peer] = [Peer(i, initial_scores[i]) for i in range(size)]
        for i, row in enumerate(local_trust_matrix):
            for j, c_ij in enumerate(row):
                if i == j:
                    continue
                self.peers[i].add_neighbor(self.peers[j], c_ij)

    @property
    def is_converged(self) -> bool:
        return all(peer.is_converged for peer in self.peers)

    def tick(self) -> None:
        """Run one heartbeat on every peer, in index order."""
        for peer in self.peers:
            peer.heartbeat(self.peers)

    def run(self, max_ticks: int = 1000) -> int:
        """Tick until every peer has converged.

        Returns
        -------
        int
            Number of ticks performed.

        Raises
        ------
        RuntimeError
            If the network has not converged after ``max_ticks`` ticks.
        """
        for tick in range(1, max_ticks + 1):
            self.tick()
            if self.is_converged:
                logger.debug("Network of %d peers converged after %d ticks", len(self.peers), tick)
                return tick
        raise RuntimeError(f"Network did not converge within {max_ticks} ticks")

    def global_trust_scores(self) -> list[float]:
        """Return every peer's global trust value, normalized to sum to one."""
        total = sum(peer.ti for peer in self.peers)
        if total == 0:
            return [0.0 for _ in self.peers]
        return [peer.ti / total for peer in self.peers]


__all__ = ["DELTA", "Network", "Peer"]
