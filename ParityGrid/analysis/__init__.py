from ParityGrid.analysis.config import TrialConfig
from ParityGrid.analysis.evaluation import (
    TrialResult,
    run_round_trip_trials,
    check_single_flip_detection,
    find_undetected_double_flips,
    run_trials,
)

__all__ = [
    "TrialConfig",
    "TrialResult",
    "run_round_trip_trials",
    "check_single_flip_detection",
    "find_undetected_double_flips",
    "run_trials",
]
