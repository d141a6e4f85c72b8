"""Running the dining philosophers: the philosopher threads and the monitor."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from typing import TextIO

from ftkit.philo_clock import sleep_ms, timestamp_ms
from ftkit.philo_config import ConfigError, SimulationConfig, UsageError, parse_arguments
from ftkit.philo_table import COLOR_RESET, Action, Philosopher, Table

__all__ = [
    "philosopher_routine",
    "monitor_routine",
    "check_death",
    "check_meals_completed",
    "run_simulation",
    "main",
]

_MONITOR_INTERVAL_MS = 1


def _has_eaten_enough(philosopher: Philosopher) -> bool:
    table = philosopher.table
    required = table.config.meals_required
    with table.meal_lock:
        return required is not None and philosopher.meals_eaten >= required


def philosopher_routine(philosopher: Philosopher) -> None:
    """Eat, sleep and think until the simulation ends or enough meals are had.

    A philosopher alone at the table holds its only fork until it dies.
    Even-numbered philosophers start a moment late so neighbours do not
    all reach for the same fork at once.
    """
    table = philosopher.table
    config = table.config
    if config.philosopher_count == 1:
        table.print_action(philosopher, Action.TAKE_FORK)
        sleep_ms(config.time_to_die)
        return
    if philosopher.id % 2 == 0:
        sleep_ms(1)
    while not table.ended():
        philosopher.take_forks()
        philosopher.eat()
        philosopher.drop_forks()
        if _has_eaten_enough(philosopher):
            break
        philosopher.sleep_and_think()


def _announce_death(table: Table, philosopher: Philosopher, current_time: int) -> bool:
    with table.death_lock:
        if table.simulation_end:
            return False
        table.simulation_end = True
    with table.write_lock:
        elapsed = current_time - table.start_time
        table.out.write(
            f"{Action.DIED.colour}{elapsed} {philosopher.id} "
            f"{Action.DIED.value}{COLOR_RESET}\n"
        )
    return True


def check_death(table: Table) -> bool:
    """End the simulation and report the first philosopher that has starved.

    Returns True when this call detected and reported a death.
    """
    current_time = timestamp_ms()
    for philosopher in table.philosophers:
        with table.meal_lock:
            last_meal = philosopher.last_meal_time
        if table.ended():
            return False
        if current_time - last_meal >= table.config.time_to_die:
            return _announce_death(table, philosopher, current_time)
    return False


def check_meals_completed(table: Table) -> bool:
    """Whether every philosopher has eaten the required number of meals."""
    required = table.config.meals_required
    if required is None:
        return False
    with table.meal_lock:
        return all(p.meals_eaten >= required for p in table.philosophers)


def monitor_routine(table: Table) -> None:
    """Watch for starvation or completed meals until the simulation ends."""
    while not table.ended():
        if check_death(table):
            break
        if check_meals_completed(table):
            table.end()
            break
        sleep_ms(_MONITOR_INTERVAL_MS)


def run_simulation(config: SimulationConfig, out: TextIO | None = None) -> Table:
    """Seat the philosophers, run the simulation to its end and return the table."""
    table = Table(config, out)
    table.start_time = timestamp_ms()
    threads = []
    for philosopher in table.philosophers:
        with table.meal_lock:
            philosopher.last_meal_time = table.start_time
        thread = threading.Thread(
            target=philosopher_routine, args=(philosopher,), daemon=True
        )
        thread.start()
        threads.append(thread)
    monitor = threading.Thread(target=monitor_routine, args=(table,), daemon=True)
    monitor.start()
    for thread in threads:
        thread.join()
    monitor.join()
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from the command line; return the exit status."""
    args = list(sys.argv if argv is None else argv)
    try:
        config = parse_arguments(args)
        config.validate()
    except (UsageError, ConfigError) as error:
        print(error)
        return 1
    run_simulation(config)
    return 0