import logging
import sys
from typing import Dict, Optional

class ParityGridLogger:
    def __init__(self, name: str = "ParityGrid", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def trial_progress(
        self,
        trial: int,
        total: int,
        failures: int,
        **kwargs,
    ) -> None:
        msg = f"Trial {trial}/{total} | Failures: {failures}"
        for k, v in kwargs.items():
            if isinstance(v, float):
                msg += f" | {k}: {v:.4f}"
            else:
                msg += f" | {k}: {v}"
        self.info(msg)


_loggers: Dict[str, ParityGridLogger] = {}

def get_logger(name: Optional[str] = None) -> ParityGridLogger:
    if "ParityGrid" not in _loggers:
        _loggers["ParityGrid"] = ParityGridLogger()
    if not name:
        return _loggers["ParityGrid"]

    # Children inherit level and handler from the package logger.
    full_name = f"ParityGrid.{name}"
    if full_name not in _loggers:
        _loggers[full_name] = ParityGridLogger(full_name, level=logging.NOTSET)
    return _loggers[full_name]
