"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ftkit.conversion import atoi

__all__ = [
    "UsageError",
    "ConfigError",
    "SimulationConfig",
    "parse_arguments",
    "MAX_PHILOSOPHERS",
]

MAX_PHILOSOPHERS = 200

_UNLIMITED_MEALS = -1


class UsageError(Exception):
    """The command line has the wrong number of arguments."""


class ConfigError(ValueError):
    """A setting is outside the range the simulation accepts."""


@dataclass
class SimulationConfig:
    """Settings of one simulation; times are in milliseconds.

    ``meals_required`` is ``None`` when the philosophers eat until one dies.
    """

    philosopher_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None

    def validate(self) -> None:
        """Raise :class:`ConfigError` when a setting is out of range."""
        if not 0 < self.philosopher_count <= MAX_PHILOSOPHERS:
            raise ConfigError(
                f"Error: Invalid number of philosophers (1-{MAX_PHILOSOPHERS})"
            )
        if min(self.time_to_die, self.time_to_eat, self.time_to_sleep) <= 0:
            raise ConfigError("Error: All times must be positive integers")
        if self.meals_required is not None and self.meals_required <= 0:
            raise ConfigError("Error: Number of meals must be positive or -1")


def _usage(program: str) -> str:
    return (
        f"Usage: {program} number_of_philosophers time_to_die "
        "time_to_eat time_to_sleep "
        "[number_of_times_each_philosopher_must_eat]"
    )


def parse_arguments(argv: Sequence[str]) -> SimulationConfig:
    """Build the settings from *argv*, whose first item is the program name.

    Numbers are read the lenient way: leading whitespace and a sign are
    accepted and reading stops at the first non-digit. A meal count of
    -1 means no limit. The result is not validated.
    """
    if not 5 <= len(argv) <= 6:
        program = argv[0] if argv else "philo"
        raise UsageError(_usage(program))
    meals: int | None = None
    if len(argv) == 6:
        meals = atoi(argv[5])
        if meals == _UNLIMITED_MEALS:
            meals = None
    return SimulationConfig(
        philosopher_count=atoi(argv[1]),
        time_to_die=atoi(argv[2]),
        time_to_eat=atoi(argv[3]),
        time_to_sleep=atoi(argv[4]),
        meals_required=meals,
    )