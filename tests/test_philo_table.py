import io
import re
import threading
import time

import pytest

from ftkit.philo_clock import timestamp_ms
from ftkit.philo_config import SimulationConfig
from ftkit.philo_table import Action, Table

LINE = re.compile(r"^(\x1b\[\d+m)(\d+) (\d+) (.+)\x1b\[0m$")


def make_table(count=3, eat=5, sleep=5):
    out = io.StringIO()
    table = Table(SimulationConfig(count, 1000, eat, sleep), out)
    table.start_time = timestamp_ms()
    return table, out


def lines(out):
    return [LINE.match(line).groups() for line in out.getvalue().splitlines()]


@pytest.mark.parametrize(
    ("action", "colour", "text"),
    [
        (Action.TAKE_FORK, "\033[33m", "has taken a fork"),
        (Action.EAT, "\033[32m", "is eating"),
        (Action.SLEEP, "\033[36m", "is sleeping"),
        (Action.THINK, "\033[35m", "is thinking"),
        (Action.DIED, "\033[31m", "died"),
    ],
)
def test_action_texts_and_colours(action, colour, text):
    table, out = make_table()
    table.print_action(table.philosophers[0], action)
    [(printed_colour, _, seat, printed_text)] = lines(out)
    assert printed_colour == colour
    assert seat == "1"
    assert printed_text == text
    assert out.getvalue().endswith("\033[0m\n")


def test_seats_and_forks():
    table, _ = make_table(count=4)
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4]
    assert [(p.left_fork, p.right_fork) for p in table.philosophers] == [
        (0, 1),
        (1, 2),
        (2, 3),
        (3, 0),
    ]
    assert len(table.forks) == 4


def test_single_philosopher_shares_one_fork():
    table, _ = make_table(count=1)
    only = table.philosophers[0]
    assert only.left_fork == only.right_fork == 0


def test_print_action_format():
    table, out = make_table()
    table.print_action(table.philosophers[1], Action.SLEEP)
    [(colour, elapsed, seat, text)] = lines(out)
    assert colour == Action.SLEEP.colour
    assert 0 <= int(elapsed) < 1000
    assert seat == "2"
    assert text == "is sleeping"


def test_nothing_printed_after_end():
    table, out = make_table()
    assert table.ended() is False
    table.end()
    assert table.ended() is True
    table.print_action(table.philosophers[0], Action.EAT)
    assert out.getvalue() == ""


def test_take_and_drop_forks():
    table, out = make_table()
    philosopher = table.philosophers[0]
    philosopher.take_forks()
    assert table.forks[0].locked() and table.forks[1].locked()
    assert not table.forks[2].locked()
    assert [text for *_, text in lines(out)] == ["has taken a fork"] * 2
    philosopher.drop_forks()
    assert not any(fork.locked() for fork in table.forks)


def test_lower_numbered_fork_is_taken_first():
    table, out = make_table(count=3)
    last = table.philosophers[2]
    table.forks[2].acquire()
    worker = threading.Thread(target=last.take_forks)
    worker.start()
    deadline = time.monotonic() + 2
    while not table.forks[0].locked() and time.monotonic() < deadline:
        time.sleep(0.005)
    assert table.forks[0].locked()
    assert len(lines(out)) == 1
    table.forks[2].release()
    worker.join(timeout=2)
    assert not worker.is_alive()
    assert len(lines(out)) == 2
    last.drop_forks()
    assert not any(fork.locked() for fork in table.forks)


def test_eat_records_meal():
    table, out = make_table(eat=10)
    philosopher = table.philosophers[0]
    before = timestamp_ms()
    philosopher.eat()
    after = timestamp_ms()
    assert philosopher.meals_eaten == 1
    assert before <= philosopher.last_meal_time <= after
    assert after - philosopher.last_meal_time >= 10
    assert [text for *_, text in lines(out)] == ["is eating"]


def test_sleep_and_think():
    table, out = make_table(sleep=10)
    philosopher = table.philosophers[0]
    start = timestamp_ms()
    philosopher.sleep_and_think()
    assert timestamp_ms() - start >= 10
    reported = lines(out)
    assert [text for *_, text in reported] == ["is sleeping", "is thinking"]
    assert int(reported[1][1]) >= int(reported[0][1])


@pytest.mark.parametrize("count", [2, 5])
def test_meals_start_at_zero(count):
    table, _ = make_table(count=count)
    assert all(p.meals_eaten == 0 for p in table.philosophers)
    assert all(p.last_meal_time == 0 for p in table.philosophers)