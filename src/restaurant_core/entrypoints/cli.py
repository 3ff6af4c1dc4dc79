"""Command-line runner for the exercise demonstrations."""

from __future__ import annotations

import click

from restaurant_core.entrypoints.exercises import EXERCISES
from restaurant_core.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


@click.command()
@click.argument(
    "exercises",
    nargs=-1,
    type=click.Choice([str(n) for n in EXERCISES]),
)
def main(exercises: tuple[str, ...]) -> None:
    """Run exercise demonstrations by number, or all of them when none are given.

    Rejected inputs are logged, never raised; the exit code is always 0
    unless an exercise number is unknown.
    """
    configure_logging()

    selected = [int(n) for n in exercises] or list(EXERCISES)
    for number in selected:
        logger.info("Running exercise", exercise=number, routine=EXERCISES[number].__name__)
        EXERCISES[number]()
