"""The table of the dining philosophers: forks, shared state and actions."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from ftkit.philo_clock import sleep_ms, timestamp_ms
from ftkit.philo_config import SimulationConfig

__all__ = ["Action", "Philosopher", "Table", "COLOR_RESET"]

COLOR_RESET = "\033[0m"

_COLOURS = {
    "has taken a fork": "\033[33m",
    "is eating": "\033[32m",
    "is sleeping": "\033[36m",
    "is thinking": "\033[35m",
    "died": "\033[31m",
}


class Action(Enum):
    """What a philosopher reports doing."""

    TAKE_FORK = "has taken a fork"
    EAT = "is eating"
    SLEEP = "is sleeping"
    THINK = "is thinking"
    DIED = "died"

    @property
    def colour(self) -> str:
        """The terminal colour sequence the action is printed in."""
        return _COLOURS[self.value]


@dataclass(eq=False)
class Philosopher:
    """One seat at the table, numbered from 1, between two forks."""

    id: int
    table: "Table" = field(repr=False)
    left_fork: int
    right_fork: int
    meals_eaten: int = 0
    last_meal_time: int = 0

    def _fork_order(self) -> tuple[threading.Lock, threading.Lock]:
        forks = self.table.forks
        first, second = sorted((self.left_fork, self.right_fork))
        return forks[first], forks[second]

    def take_forks(self) -> None:
        """Pick up both forks, lower-numbered first, reporting each."""
        first, second = self._fork_order()
        first.acquire()
        self.table.print_action(self, Action.TAKE_FORK)
        second.acquire()
        self.table.print_action(self, Action.TAKE_FORK)

    def drop_forks(self) -> None:
        """Put both forks down, in the reverse order of taking them."""
        first, second = self._fork_order()
        second.release()
        first.release()

    def eat(self) -> None:
        """Report eating, record the meal, then spend the time to eat."""
        table = self.table
        table.print_action(self, Action.EAT)
        with table.meal_lock:
            self.last_meal_time = timestamp_ms()
            self.meals_eaten += 1
        sleep_ms(table.config.time_to_eat)

    def sleep_and_think(self) -> None:
        """Sleep for the time to sleep, then start thinking."""
        table = self.table
        table.print_action(self, Action.SLEEP)
        sleep_ms(table.config.time_to_sleep)
        table.print_action(self, Action.THINK)
        if table.config.philosopher_count % 2 == 1:
            sleep_ms(1)


class Table:
    """Forks, philosophers and the state they share.

    ``start_time`` is the moment the simulation began, in milliseconds;
    reported timestamps are relative to it.
    """

    def __init__(self, config: SimulationConfig, out: TextIO | None = None) -> None:
        self.config = config
        self.out = sys.stdout if out is None else out
        self.start_time = 0
        self.simulation_end = False
        self.write_lock = threading.Lock()
        self.death_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        count = config.philosopher_count
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                id=seat + 1,
                table=self,
                left_fork=seat,
                right_fork=seat if count == 1 else (seat + 1) % count,
            )
            for seat in range(count)
        ]

    def print_action(self, philosopher: Philosopher, action: Action) -> None:
        """Write one coloured report line unless the simulation has ended."""
        with self.write_lock:
            if not self.simulation_end:
                elapsed = timestamp_ms() - self.start_time
                self.out.write(
                    f"{action.colour}{elapsed} {philosopher.id} "
                    f"{action.value}{COLOR_RESET}\n"
                )

    def ended(self) -> bool:
        """Whether the simulation has been stopped."""
        with self.death_lock:
            return self.simulation_end

    def end(self) -> None:
        """Stop the simulation."""
        with self.death_lock:
            self.simulation_end = True