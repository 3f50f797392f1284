"""
Trial configuration for ParityGrid analysis runs.
"""

from dataclasses import dataclass, field
from typing import Optional

from ParityGrid.protocol.config import EncoderConfig


@dataclass
class TrialConfig:
    """
    Configuration for a round-trip trial run.

    Captures the encoder settings and the random source seed.
    """

    trials: int = 10_000
    seed: Optional[int] = None
    log_interval: int = 2_500
    encoder: EncoderConfig = field(default_factory=EncoderConfig)

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        d = {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }
        d["encoder"] = self.encoder.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "TrialConfig":
        """Creates a TrialConfig from a dictionary."""
        kwargs = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        if isinstance(kwargs.get("encoder"), dict):
            kwargs["encoder"] = EncoderConfig.from_dict(kwargs["encoder"])
        return cls(**kwargs)
