"""Unit tests for eigentrust.dynamic_sets.rational — exact rational convergence."""
from __future__ import annotations

from fractions import Fraction

import pytest

from eigentrust.config import TrustSetConfig
from eigentrust.dynamic_sets import EigenTrustSet, InsufficientPeersError
from eigentrust.dynamic_sets.rational import normalize_rational
from eigentrust.field import Fr
from eigentrust.keys import PublicKey, SecretKey
from eigentrust.opinion import Opinion, sign_opinion

NUM_NEIGHBOURS = 4
INITIAL_SCORE = 1000
NULL = PublicKey.default()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def trust_set() -> EigenTrustSet:
    """Three peers rating each other 0/1/3, 1/0/1 and 2/2/0."""
    trust_set = EigenTrustSet(
        TrustSetConfig(num_neighbours=NUM_NEIGHBOURS, num_iterations=5, initial_score=INITIAL_SCORE)
    )
    sks = [SecretKey.random() for _ in range(3)]
    pks = [sk.public() for sk in sks]
    for pk in pks:
        trust_set.add_member(pk)
    row = pks + [NULL]
    for sk, values in zip(sks, [(0, 1, 3, 0), (1, 0, 1, 0), (2, 2, 0, 0)]):
        trust_set.update_op(sk.public(), sign_opinion(sk, row, [Fr(v) for v in values]))
    return trust_set


# ---------------------------------------------------------------------------
# normalize_rational
# ---------------------------------------------------------------------------


class TestNormalizeRational:
    def test_divides_by_total(self) -> None:
        op = Opinion(signature=b"", message_hash=Fr(0), scores=[(NULL, Fr(1)), (NULL, Fr(3))])
        assert normalize_rational(op) == [Fraction(1, 4), Fraction(3, 4)]

    def test_zero_total_gives_zeros(self) -> None:
        assert normalize_rational(Opinion.empty(3)) == [Fraction(0)] * 3


# ---------------------------------------------------------------------------
# converge_rational
# ---------------------------------------------------------------------------


class TestConvergeRational:
    def test_total_is_conserved(self, trust_set: EigenTrustSet) -> None:
        scores = trust_set.converge_rational()
        assert sum(scores) == 3 * INITIAL_SCORE

    def test_one_iteration_values(self) -> None:
        trust_set = EigenTrustSet(
            TrustSetConfig(num_neighbours=3, num_iterations=1, initial_score=INITIAL_SCORE)
        )
        sks = [SecretKey.random() for _ in range(3)]
        pks = [sk.public() for sk in sks]
        for pk in pks:
            trust_set.add_member(pk)
        trust_set.update_op(pks[0], sign_opinion(sks[0], pks, [Fr(0), Fr(300), Fr(700)]))
        trust_set.update_op(pks[1], sign_opinion(sks[1], pks, [Fr(600), Fr(0), Fr(400)]))
        trust_set.update_op(pks[2], sign_opinion(sks[2], pks, [Fr(600), Fr(400), Fr(0)]))
        assert trust_set.converge_rational() == [Fraction(1200), Fraction(700), Fraction(1100)]

    def test_agrees_with_field_scores(self, trust_set: EigenTrustSet) -> None:
        field_scores = trust_set.converge()
        rational_scores = trust_set.converge_rational()
        for field_score, rational in zip(field_scores, rational_scores):
            expected = Fr(rational.numerator) * Fr(rational.denominator).invert()
            assert field_score == expected

    def test_empty_slot_scores_zero(self, trust_set: EigenTrustSet) -> None:
        assert trust_set.converge_rational()[3] == 0

    def test_one_member_fails(self) -> None:
        trust_set = EigenTrustSet(TrustSetConfig(num_neighbours=NUM_NEIGHBOURS))
        trust_set.add_member(SecretKey.random().public())
        with pytest.raises(InsufficientPeersError):
            trust_set.converge_rational()

    def test_missing_opinions_split_evenly(self) -> None:
        trust_set = EigenTrustSet(TrustSetConfig(num_neighbours=NUM_NEIGHBOURS, num_iterations=3))
        for _ in range(3):
            trust_set.add_member(SecretKey.random().public())
        scores = trust_set.converge_rational()
        assert scores[:3] == [Fraction(1000)] * 3
