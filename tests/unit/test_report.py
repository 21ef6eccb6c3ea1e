"""Unit tests for eigentrust.report — ScoreRecord and build_score_records."""
from __future__ import annotations

from fractions import Fraction

import pytest

from eigentrust.field import Fr
from eigentrust.keys import PublicKey, SecretKey
from eigentrust.report import ScoreRecord, build_score_records


class TestScoreRecord:
    def test_from_score_fields(self) -> None:
        pk = SecretKey.random().public()
        score_rat = Fraction(7, 2)
        score_fr = Fr(7) * Fr(2).invert()
        record = ScoreRecord.from_score(pk, score_fr, score_rat)
        assert record.peer == pk.hex()
        assert record.score_fr == score_fr.to_hex()
        assert record.numerator == 7
        assert record.denominator == 2
        assert record.score == 3

    def test_to_dict_uses_strings(self) -> None:
        record = ScoreRecord.from_score(SecretKey.random().public(), Fr(1000), Fraction(1000))
        data = record.to_dict()
        assert data["numerator"] == "1000"
        assert data["denominator"] == "1"
        assert data["score"] == "1000"
        assert str(data["score_fr"]).startswith("0x")


class TestBuildScoreRecords:
    def test_skips_empty_slots(self) -> None:
        pk1, pk2 = SecretKey.random().public(), SecretKey.random().public()
        members = [(pk1, Fr(10)), (PublicKey.default(), Fr(0)), (pk2, Fr(10))]
        records = build_score_records(
            members,
            [Fr(5), Fr(0), Fr(15)],
            [Fraction(5), Fraction(0), Fraction(15)],
        )
        assert [r.peer for r in records] == [pk1.hex(), pk2.hex()]
        assert [r.score for r in records] == [5, 15]

    def test_misaligned_input_raises(self) -> None:
        members = [(SecretKey.random().public(), Fr(10))]
        with pytest.raises(ValueError, match="slot-aligned"):
            build_score_records(members, [Fr(1), Fr(2)], [Fraction(1)])
