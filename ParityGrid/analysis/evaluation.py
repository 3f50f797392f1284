"""
Evaluation routines for ParityGrid detection properties.
"""

from dataclasses import dataclass, field
from itertools import combinations
from typing import List, Optional, Tuple

import numpy as np

from ParityGrid.analysis.config import TrialConfig
from ParityGrid.data.generators import MessageGenerator
from ParityGrid.protocol.encoder import Encoder, validate_block
from ParityGrid.protocol.message import Message
from ParityGrid.utils.logging import get_logger
from ParityGrid.utils.timing import timed


@dataclass
class TrialResult:
    """Outcome of a round-trip trial run."""

    trials: int
    passed: int
    failures: List[np.ndarray] = field(default_factory=list)

    @property
    def false_negatives(self) -> int:
        return self.trials - self.passed

    @property
    def pass_rate(self) -> float:
        return self.passed / self.trials if self.trials else 1.0


def run_round_trip_trials(
    encoder: Encoder,
    trials: int,
    rng: np.random.Generator,
    log_interval: int = 0,
) -> TrialResult:
    """
    Encodes random inputs and checks that every block validates.

    Args:
        encoder: Encoder under test
        trials: Number of random blocks
        rng: Random source for the data bits
        log_interval: Log progress every this many trials (0 disables)

    Returns:
        TrialResult with the inputs of any block that failed validation
    """
    logger = get_logger("evaluation")
    generator = MessageGenerator(encoder.data_capacity, rng=rng)
    result = TrialResult(trials=trials, passed=0)

    for trial in range(1, trials + 1):
        bits = generator.generate()
        message = encoder.encode(bits)
        if validate_block(message.data):
            result.passed += 1
        else:
            result.failures.append(bits)

        if log_interval and trial % log_interval == 0:
            logger.trial_progress(trial, trials, len(result.failures))

    return result


def check_single_flip_detection(message: Message) -> List[int]:
    """
    Flips each bit of a block in turn.

    Returns:
        Positions whose flip was NOT detected (empty for a sound encoder)
    """
    return [
        p for p in range(len(message))
        if validate_block(message.flipped(p))
    ]


def find_undetected_double_flips(message: Message) -> List[Tuple[int, int]]:
    """
    Flips every pair of bits of a block.

    Two flips always restore the overall parity, so a pair escapes
    detection whenever it also cancels in all four directional groups.

    Returns:
        Position pairs whose combined flip passes validation
    """
    return [
        (a, b) for a, b in combinations(range(len(message)), 2)
        if validate_block(message.flipped(a, b))
    ]


@timed
def run_trials(config: TrialConfig, rng: Optional[np.random.Generator] = None) -> TrialResult:
    """
    Runs a round-trip trial from a TrialConfig.

    Args:
        config: Trial settings
        rng: Random source; built from config.seed when omitted

    Returns:
        TrialResult
    """
    logger = get_logger("evaluation")
    encoder = Encoder.from_config(config.encoder)
    if rng is None:
        rng = np.random.default_rng(config.seed)

    logger.info(
        f"Running {config.trials} trials on {encoder.block_length}-bit blocks "
        f"({encoder.data_capacity} data bits)"
    )
    result = run_round_trip_trials(encoder, config.trials, rng, config.log_interval)
    logger.info(
        f"Done: {result.passed}/{result.trials} blocks validated, "
        f"{result.false_negatives} false negatives"
    )
    return result
