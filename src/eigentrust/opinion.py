"""Opinion — one peer's signed rating of every slot in a trust set.

An opinion pairs each slot with the identity the submitter believes occupies
it and the score it assigns. The signature and message hash are evidence
produced by the external signing step; the trust set only stores and
repositions them, it never checks them.

The helpers at the bottom of this module are that signing step: they hash
``(identities, scores)`` and sign the digest. Ingestion pipelines use
:func:`verify_opinion` before handing an opinion to the trust set.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Sequence

from eigentrust.field import Fr
from eigentrust.keys import SIGNATURE_SIZE, PublicKey, SecretKey

_EMPTY_SIGNATURE: bytes = bytes(SIGNATURE_SIZE)


@dataclass
class Opinion:
    """A peer's local trust values for every slot of a trust set.

    Parameters
    ----------
    signature:
        Ed25519 signature over ``message_hash``. Opaque to the trust set.
    message_hash:
        Hash binding the rated identities and scores.
    scores:
        Exactly ``capacity`` ``(identity, score)`` pairs, positionally
        mirroring the trust set's members as the submitter saw them.
    """

    signature: bytes
    message_hash: Fr
    scores: list[tuple[PublicKey, Fr]] = field(default_factory=list)

    @classmethod
    def empty(cls, capacity: int) -> Opinion:
        """Return an unsigned opinion that rates every slot NULL with zero."""
        return cls(
            signature=_EMPTY_SIGNATURE,
            message_hash=Fr.zero(),
            scores=[(PublicKey.default(), Fr.zero()) for _ in range(capacity)],
        )

    def copy(self) -> Opinion:
        """Return a copy whose ``scores`` list can be modified independently."""
        return Opinion(
            signature=self.signature,
            message_hash=self.message_hash,
            scores=list(self.scores),
        )

    @property
    def identities(self) -> list[PublicKey]:
        return [pk for pk, _ in self.scores]

    @property
    def values(self) -> list[Fr]:
        return [score for _, score in self.scores]

    def __len__(self) -> int:
        return len(self.scores)


# ---------------------------------------------------------------------------
# Signing step
# ---------------------------------------------------------------------------


def _sponge(chunks: Sequence[bytes]) -> bytes:
    sponge = hashlib.sha3_256()
    for chunk in chunks:
        sponge.update(chunk)
    return sponge.digest()


def calculate_message_hash(pks: Sequence[PublicKey], scores: Sequence[Fr]) -> Fr:
    """Hash a list of rated identities and their scores into a field element.

    The identities and the scores are absorbed by two separate SHA3-256
    sponges; the two digests are then hashed together and reduced into the
    field.

    Raises
    ------
    ValueError
        If ``pks`` and ``scores`` differ in length.
    """
    if len(pks) != len(scores):
        raise ValueError(
            f"Identity and score lists differ in length: {len(pks)} != {len(scores)}"
        )
    pks_hash = _sponge([pk.raw for pk in pks])
    scores_hash = _sponge([score.to_bytes() for score in scores])
    return Fr.from_bytes(_sponge([pks_hash, scores_hash]))


def sign_opinion(
    sk: SecretKey,
    pks: Sequence[PublicKey],
    scores: Sequence[Fr],
) -> Opinion:
    """Build and sign an opinion rating ``pks`` with ``scores``.

    Parameters
    ----------
    sk:
        Signing key of the submitting peer.
    pks:
        Identity the submitter sees in each slot (NULL for empty slots).
    scores:
        Score given to each slot, same length as ``pks``.

    Returns
    -------
    Opinion
        The signed opinion, ready for :meth:`EigenTrustSet.update_op`.
    """
    message_hash = calculate_message_hash(pks, scores)
    signature = sk.sign(message_hash.to_bytes())
    return Opinion(
        signature=signature,
        message_hash=message_hash,
        scores=list(zip(pks, scores)),
    )


def verify_opinion(pk: PublicKey, opinion: Opinion) -> bool:
    """Check that ``opinion`` was signed by ``pk`` over its own contents.

    Both the message hash and the signature must match; any mismatch
    returns ``False``.
    """
    expected = calculate_message_hash(opinion.identities, opinion.values)
    if expected != opinion.message_hash:
        return False
    return pk.verify(opinion.signature, opinion.message_hash.to_bytes())


__all__ = ["Opinion", "calculate_message_hash", "sign_opinion", "verify_opinion"]
