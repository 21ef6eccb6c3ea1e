"""TrustSetConfig — the fixed shape of a trust-set computation.

The three parameters are constant for the lifetime of a trust set: the
score vector and every opinion have exactly ``num_neighbours`` slots, and
convergence always runs ``num_iterations`` rounds.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TrustSetConfig(BaseModel):
    """Configuration for an :class:`~eigentrust.dynamic_sets.EigenTrustSet`.

    Parameters
    ----------
    num_neighbours:
        Capacity of the set: maximum number of simultaneous members and the
        length of every opinion.
    num_iterations:
        Number of power-iteration rounds run by ``converge``.
    initial_score:
        Score given to each member when it joins.
    """

    num_neighbours: int = Field(default=256, ge=2)
    num_iterations: int = Field(default=10, ge=1)
    initial_score: int = Field(default=1000, gt=0)

    model_config = ConfigDict(frozen=True)
