"""Test that the quickstart API from the package docstring works for eigentrust."""
from __future__ import annotations


def test_quickstart_import() -> None:
    import eigentrust

    assert eigentrust.__version__ == "0.1.0"


def test_quickstart_two_peers_converge() -> None:
    from eigentrust import EigenTrustSet, SecretKey, TrustSetConfig

    trust_set = EigenTrustSet(TrustSetConfig(num_neighbours=4))
    sk1, sk2 = SecretKey.random(), SecretKey.random()
    trust_set.add_member(sk1.public())
    trust_set.add_member(sk2.public())
    scores = trust_set.converge()
    assert len(scores) == 4
    assert int(scores[0]) == 1000
    assert int(scores[1]) == 1000


def test_quickstart_signed_opinion() -> None:
    from eigentrust import EigenTrustSet, Fr, PublicKey, SecretKey, TrustSetConfig, sign_opinion, verify_opinion

    trust_set = EigenTrustSet(TrustSetConfig(num_neighbours=3))
    sks = [SecretKey.random() for _ in range(2)]
    for sk in sks:
        trust_set.add_member(sk.public())
    pks = [sk.public() for sk in sks] + [PublicKey.default()]
    opinion = sign_opinion(sks[0], pks, [Fr(0), Fr(10), Fr(0)])
    assert verify_opinion(sks[0].public(), opinion)
    trust_set.update_op(sks[0].public(), opinion)
    assert sum(int(s) for s in trust_set.converge()) == 2000


def test_quickstart_repr() -> None:
    from eigentrust import EigenTrustSet

    text = repr(EigenTrustSet())
    assert "EigenTrustSet" in text
    assert "capacity=256" in text
