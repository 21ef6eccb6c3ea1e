"""eigentrust — EigenTrust global trust scores for dynamic sets of peers.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import eigentrust
>>> eigentrust.__version__
'0.1.0'

Quick start
-----------
::

    from eigentrust import EigenTrustSet, TrustSetConfig, SecretKey, sign_opinion

    trust_set = EigenTrustSet(TrustSetConfig(num_neighbours=4))
    sk1, sk2 = SecretKey.random(), SecretKey.random()
    trust_set.add_member(sk1.public())
    trust_set.add_member(sk2.public())
    scores = trust_set.converge()
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ------------------------------------------------------------------
# Primitives
# ------------------------------------------------------------------
from eigentrust.field import MODULUS, Fr
from eigentrust.keys import PublicKey, SecretKey
from eigentrust.opinion import Opinion, calculate_message_hash, sign_opinion, verify_opinion
from eigentrust.config import TrustSetConfig

# ------------------------------------------------------------------
# Dynamic trust sets
# ------------------------------------------------------------------
from eigentrust.dynamic_sets import (
    ConservationError,
    EigenTrustError,
    EigenTrustSet,
    InsufficientPeersError,
    MemberAlreadyExistsError,
    MemberNotFoundError,
    SetCapacityError,
)

# ------------------------------------------------------------------
# Reporting and simulation
# ------------------------------------------------------------------
from eigentrust.report import ScoreRecord, build_score_records
from eigentrust.distributed import Network, Peer

__all__ = [
    # version
    "__version__",
    # primitives
    "Fr",
    "MODULUS",
    "Opinion",
    "PublicKey",
    "SecretKey",
    "TrustSetConfig",
    "calculate_message_hash",
    "sign_opinion",
    "verify_opinion",
    # dynamic sets
    "ConservationError",
    "EigenTrustError",
    "EigenTrustSet",
    "InsufficientPeersError",
    "MemberAlreadyExistsError",
    "MemberNotFoundError",
    "SetCapacityError",
    # reporting and simulation
    "Network",
    "Peer",
    "ScoreRecord",
    "build_score_records",
]
