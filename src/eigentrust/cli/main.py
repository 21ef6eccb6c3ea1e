"""CLI entry point for eigentrust.

Invoked as::

    eigentrust [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m eigentrust.cli.main

Commands
--------
version    Show version information
simulate   Build a random trust set locally and converge it
"""
from __future__ import annotations

import logging
import random
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="eigentrust")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """EigenTrust global trust scores for dynamic peer sets"""
    logging.basicConfig(level=getattr(logging, log_level.upper()))


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from eigentrust import __version__

    console.print(f"[bold]eigentrust[/bold] v{__version__}")


# ------------------------------------------------------------------
# simulate
# ------------------------------------------------------------------


@cli.command(name="simulate")
@click.option("--peers", "-p", type=int, default=4, show_default=True, help="Number of peers that join.")
@click.option("--capacity", "-c", type=int, default=8, show_default=True, help="Number of slots in the set.")
@click.option("--iterations", "-i", type=int, default=10, show_default=True, help="Power iteration rounds.")
@click.option("--initial-score", type=int, default=1000, show_default=True, help="Score given to each joining peer.")
@click.option("--seed", type=int, default=0, show_default=True, help="Seed for keys and opinions.")
@click.option(
    "--missing",
    type=int,
    default=0,
    show_default=True,
    help="Number of peers (counted from the last) that submit no opinion.",
)
@click.option(
    "--remove",
    "-r",
    type=int,
    multiple=True,
    help="Slot of a peer to remove before converging (repeatable).",
)
def simulate_command(
    peers: int,
    capacity: int,
    iterations: int,
    initial_score: int,
    seed: int,
    missing: int,
    remove: tuple[int, ...],
) -> None:
    """Build a random trust set, submit signed opinions and converge it."""
    from pydantic import ValidationError

    from eigentrust.config import TrustSetConfig
    from eigentrust.dynamic_sets import EigenTrustError, EigenTrustSet
    from eigentrust.field import Fr
    from eigentrust.keys import SecretKey
    from eigentrust.opinion import sign_opinion
    from eigentrust.report import build_score_records

    try:
        config = TrustSetConfig(
            num_neighbours=capacity,
            num_iterations=iterations,
            initial_score=initial_score,
        )
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] invalid configuration: {escape(str(exc))}")
        sys.exit(1)

    rng = random.Random(seed)
    secret_keys = [SecretKey.from_bytes(rng.randbytes(32)) for _ in range(peers)]
    trust_set = EigenTrustSet(config)

    try:
        for sk in secret_keys:
            trust_set.add_member(sk.public())

        pks = [pk for pk, _ in trust_set.members]
        for sk in secret_keys[: max(peers - missing, 0)]:
            scores = [
                Fr(0) if pk.is_null() else Fr(rng.randint(0, 255))
                for pk in pks
            ]
            trust_set.update_op(sk.public(), sign_opinion(sk, pks, scores))

        members = trust_set.members
        for slot in remove:
            if not 0 <= slot < capacity or members[slot][0].is_null():
                console.print(f"[red]Error:[/red] slot {slot} holds no peer.")
                sys.exit(1)
            trust_set.remove_member(members[slot][0])

        scores_fr = trust_set.converge()
        scores_rat = trust_set.converge_rational()
    except EigenTrustError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    members = trust_set.members
    records = build_score_records(members, scores_fr, scores_rat)

    table = Table(title="Global Trust Scores", show_header=True)
    table.add_column("Slot", justify="right")
    table.add_column("Peer", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Exact", justify="right")
    table.add_column("Field", overflow="fold")

    slots = [index for index, (pk, _) in enumerate(members) if not pk.is_null()]
    for slot, record in zip(slots, records):
        table.add_row(
            str(slot),
            members[slot][0].short(),
            str(record.score),
            f"{record.numerator}/{record.denominator}",
            record.score_fr,
        )

    console.print(table)
    console.print(f"\n  Members:    [bold]{trust_set.num_members}[/bold] / {capacity}")
    console.print(f"  Total:      [bold]{sum(scores_rat)}[/bold]")


if __name__ == "__main__":
    cli()
