from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

ENV_SIZE = "CUBECORE_SIZE"
ENV_LOG_LEVEL = "CUBECORE_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CubeConfig:
    size: int = 3
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Cube size must be >= 1")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CubeConfig:
        env = os.environ if environ is None else environ
        defaults = cls()

        raw_size = env.get(ENV_SIZE, "").strip()
        size = defaults.size
        if raw_size:
            try:
                size = int(raw_size)
            except ValueError as exc:
                raise ValueError(f"Environment variable {ENV_SIZE} must be an integer") from exc
            if size < 1:
                raise ValueError(f"Environment variable {ENV_SIZE} must be >= 1")

        log_level = env.get(ENV_LOG_LEVEL, "").strip().upper() or defaults.log_level
        if log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Environment variable {ENV_LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)}"
            )

        return cls(size=size, log_level=log_level)


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
