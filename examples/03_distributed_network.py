#!/usr/bin/env python3
"""Example: Distributed heartbeat model

Runs the distributed variant, where each peer recomputes only its own
global trust value from its neighbours on every heartbeat.

Usage:
    python examples/03_distributed_network.py

Requirements:
    pip install eigentrust
"""
from __future__ import annotations

from eigentrust import Network


def main() -> None:
    local_trust = [
        [0.0, 0.3, 0.7],
        [0.6, 0.0, 0.4],
        [0.6, 0.4, 0.0],
    ]
    network = Network(local_trust, [1 / 3, 1 / 3, 1 / 3])
    ticks = network.run()
    print(f"Converged after {ticks} ticks")
    for peer, score in zip(network.peers, network.global_trust_scores()):
        print(f"  peer {peer.index}: {score:.4f}")


if __name__ == "__main__":
    main()
