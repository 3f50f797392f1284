"""
Tests for the trial runner and flip-detection analysis.
"""

import logging

import pytest

from ParityGrid.analysis import (
    TrialConfig,
    check_single_flip_detection,
    find_undetected_double_flips,
    run_round_trip_trials,
    run_trials,
)
from ParityGrid.data.generators import create_random_message
from ParityGrid.protocol.config import EncoderConfig
from ParityGrid.utils.logging import get_logger
from ParityGrid.utils.timing import Timer


def test_round_trip_trials_have_no_false_negatives(encoder, rng):
    result = run_round_trip_trials(encoder, 10_000, rng)
    assert result.trials == 10_000
    assert result.passed == 10_000
    assert result.false_negatives == 0
    assert result.failures == []
    assert result.pass_rate == 1.0


def test_single_flips_never_escape(encoder, large_encoder, rng):
    for enc in (encoder, large_encoder):
        message = enc.encode(create_random_message(enc.data_capacity, rng))
        assert check_single_flip_detection(message) == []


def test_double_flips_on_reference_block(encoder, scenario_input):
    """
    On a 4 x 4 block every row and column has a distinct group
    signature, so no pair of flips cancels in all five parities.
    """
    message = encoder.encode(scenario_input)
    assert find_undetected_double_flips(message) == []


def test_some_double_flips_escape_on_larger_block(large_encoder, rng):
    """Columns 0 and 4 of an 8 x 8 block belong to the same groups."""
    message = large_encoder.encode(create_random_message(large_encoder.data_capacity, rng))
    escaped = find_undetected_double_flips(message)
    assert (0, 4) in escaped
    assert (5, 9) not in escaped


def test_run_trials_from_config(caplog):
    config = TrialConfig(trials=200, seed=11, log_interval=100)
    with caplog.at_level(logging.INFO, logger="ParityGrid"):
        result = run_trials(config)
    assert result.passed == 200
    assert "Trial 100/200" in caplog.text
    assert "200/200 blocks validated" in caplog.text


def test_run_trials_is_reproducible():
    config = TrialConfig(trials=50, seed=5, encoder=EncoderConfig(60, 4))
    assert run_trials(config).passed == run_trials(config).passed == 50


def test_trial_config_dict_round_trip():
    config = TrialConfig(trials=10, seed=3, encoder=EncoderConfig(60, 4, False))
    d = config.to_dict()
    assert d["encoder"] == {"data_bits": 60, "parity_bits": 4, "strict_length": False}
    assert TrialConfig.from_dict(d) == config


def test_encoder_config_ignores_unknown_keys():
    config = EncoderConfig.from_dict({"data_bits": 12, "parity_bits": 4, "extra": 1})
    assert config == EncoderConfig()


def test_get_logger_caches_instances():
    assert get_logger("evaluation") is get_logger("evaluation")
    assert get_logger().logger.name == "ParityGrid"
    assert get_logger("evaluation").logger.name == "ParityGrid.evaluation"


def test_timer_measures_elapsed_time():
    with Timer("block") as timer:
        sum(range(1000))
    assert timer.elapsed >= 0.0
    assert timer.start_time is None


def test_timer_stop_without_start():
    with pytest.raises(RuntimeError):
        Timer().stop()
