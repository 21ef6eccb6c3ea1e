#!/usr/bin/env python3
"""Example: Membership churn

Shows how opinions that still name a departed peer are filtered when the
set converges: the departed slot scores zero and its share is spread over
the remaining members.

Usage:
    python examples/02_membership_churn.py

Requirements:
    pip install eigentrust
"""
from __future__ import annotations

from eigentrust import EigenTrustSet, Fr, SecretKey, TrustSetConfig, build_score_records, sign_opinion


def show(trust_set: EigenTrustSet, title: str) -> None:
    records = build_score_records(
        trust_set.members, trust_set.converge(), trust_set.converge_rational()
    )
    print(title)
    for record in records:
        print(f"  {record.peer[:16]}...  {record.numerator}/{record.denominator}")


def main() -> None:
    trust_set = EigenTrustSet(TrustSetConfig(num_neighbours=4, num_iterations=10))
    sks = [SecretKey.random() for _ in range(3)]
    for sk in sks:
        trust_set.add_member(sk.public())

    pks = [pk for pk, _ in trust_set.members]
    for i, sk in enumerate(sks):
        scores = [Fr(0) if j == i or pk.is_null() else Fr(10 * (j + 1)) for j, pk in enumerate(pks)]
        trust_set.update_op(sk.public(), sign_opinion(sk, pks, scores))

    show(trust_set, "Before churn:")

    # The second peer leaves; the others keep their stale opinions.
    trust_set.remove_member(sks[1].public())
    show(trust_set, "After the second peer left:")

    # A newcomer takes the free slot but has not rated anyone yet.
    newcomer = SecretKey.random()
    slot = trust_set.add_member(newcomer.public())
    print(f"Newcomer joined slot {slot}")
    show(trust_set, "After the newcomer joined:")


if __name__ == "__main__":
    main()
