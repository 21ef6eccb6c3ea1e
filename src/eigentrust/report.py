"""ScoreRecord — a converged score paired back with the peer that holds it.

Convergence returns scores by slot index. Reporting layers pair each slot
with the identity in the same slot of the trust set and present the score
both as a field element and as an exact rational.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

from eigentrust.field import Fr
from eigentrust.keys import PublicKey


@dataclass(frozen=True)
class ScoreRecord:
    """Global trust score of a single peer.

    Parameters
    ----------
    peer:
        Hex-encoded identity of the peer.
    score_fr:
        Field score as big-endian hex.
    numerator:
        Numerator of the rational score, in lowest terms.
    denominator:
        Denominator of the rational score, in lowest terms.
    score:
        Integer part of the rational score.
    """

    peer: str
    score_fr: str
    numerator: int
    denominator: int
    score: int

    @classmethod
    def from_score(cls, pk: PublicKey, score_fr: Fr, score_rat: Fraction) -> ScoreRecord:
        return cls(
            peer=pk.hex(),
            score_fr=score_fr.to_hex(),
            numerator=score_rat.numerator,
            denominator=score_rat.denominator,
            score=math.floor(score_rat),
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "peer": self.peer,
            "score_fr": self.score_fr,
            "numerator": str(self.numerator),
            "denominator": str(self.denominator),
            "score": str(self.score),
        }


def build_score_records(
    members: Sequence[tuple[PublicKey, Fr]],
    scores: Sequence[Fr],
    rational_scores: Sequence[Fraction],
) -> list[ScoreRecord]:
    """Pair slot-aligned scores with the members occupying each slot.

    Empty slots are skipped.

    Raises
    ------
    ValueError
        If the three sequences are not the same length.
    """
    if not len(members) == len(scores) == len(rational_scores):
        raise ValueError(
            "members, scores and rational_scores must be slot-aligned: "
            f"{len(members)}, {len(scores)}, {len(rational_scores)}"
        )
    return [
        ScoreRecord.from_score(pk, score_fr, score_rat)
        for (pk, _), score_fr, score_rat in zip(members, scores, rational_scores)
        if not pk.is_null()
    ]


__all__ = ["ScoreRecord", "build_score_records"]
