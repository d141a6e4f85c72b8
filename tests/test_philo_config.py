import pytest

from ftkit.philo_config import (
    ConfigError,
    SimulationConfig,
    UsageError,
    parse_arguments,
)


def test_parse_four_settings():
    config = parse_arguments(["philo", "5", "800", "200", "200"])
    assert config == SimulationConfig(5, 800, 200, 200, None)


def test_parse_meal_count():
    config = parse_arguments(["philo", "4", "410", "200", "200", "7"])
    assert config.meals_required == 7
    assert config.philosopher_count == 4


def test_minus_one_meals_means_unlimited():
    config = parse_arguments(["philo", "4", "410", "200", "200", "-1"])
    assert config.meals_required is None
    config.validate()
    assert config.meals_required is None


@pytest.mark.parametrize(
    "argv",
    [
        ["philo"],
        ["philo", "1", "2", "3"],
        ["philo", "1", "2", "3", "4", "5", "6"],
    ],
)
def test_wrong_argument_count(argv):
    with pytest.raises(UsageError, match="number_of_philosophers"):
        parse_arguments(argv)


def test_usage_names_program():
    with pytest.raises(UsageError) as info:
        parse_arguments(["./philo"])
    assert str(info.value).startswith("Usage: ./philo ")


def test_lenient_number_reading():
    config = parse_arguments(["philo", "  +3abc", "60x", "abc", "-5"])
    assert config.philosopher_count == 3
    assert config.time_to_die == 60
    assert config.time_to_eat == 0
    assert config.time_to_sleep == -5


@pytest.mark.parametrize("count", [0, -1, 201])
def test_invalid_philosopher_count(count):
    with pytest.raises(ConfigError, match="Invalid number of philosophers"):
        SimulationConfig(count, 100, 100, 100).validate()


@pytest.mark.parametrize("count", [1, 200])
def test_philosopher_count_limits_accepted(count):
    config = SimulationConfig(count, 100, 100, 100)
    config.validate()
    assert config.philosopher_count == count


@pytest.mark.parametrize("times", [(0, 1, 1), (1, 0, 1), (1, 1, -3)])
def test_times_must_be_positive(times):
    with pytest.raises(ConfigError, match="All times must be positive"):
        SimulationConfig(2, *times).validate()


@pytest.mark.parametrize("meals", [0, -2])
def test_meal_count_must_be_positive(meals):
    with pytest.raises(ConfigError, match="Number of meals"):
        SimulationConfig(2, 100, 100, 100, meals).validate()


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["philo", "0", "1", "1", "1"]).validate()