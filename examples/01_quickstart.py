#!/usr/bin/env python3
"""Example: Quickstart

Demonstrates the minimal setup for eigentrust: three peers join a trust
set, submit signed opinions about each other and converge to global
trust scores.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install eigentrust
"""
from __future__ import annotations

import eigentrust
from eigentrust import EigenTrustSet, Fr, SecretKey, TrustSetConfig, sign_opinion


def main() -> None:
    print(f"eigentrust version: {eigentrust.__version__}")

    # Step 1: Create a set with three slots
    trust_set = EigenTrustSet(TrustSetConfig(num_neighbours=3, num_iterations=20))
    sks = [SecretKey.random() for _ in range(3)]
    for sk in sks:
        slot = trust_set.add_member(sk.public())
        print(f"Joined slot {slot}: {sk.public().short()}")

    # Step 2: Each peer signs an opinion over the current slot order
    pks = [pk for pk, _ in trust_set.members]
    ratings = [
        [0, 300, 700],
        [600, 0, 400],
        [600, 400, 0],
    ]
    for sk, row in zip(sks, ratings):
        opinion = sign_opinion(sk, pks, [Fr(v) for v in row])
        trust_set.update_op(sk.public(), opinion)

    # Step 3: Converge and show exact scores
    for pk, score in zip(pks, trust_set.converge_rational()):
        print(f"{pk.short()}: {float(score):.2f}")

    print("\nQuickstart complete.")


if __name__ == "__main__":
    main()
