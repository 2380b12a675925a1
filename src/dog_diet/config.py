from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .units import MassUnit


@dataclass(frozen=True)
class Settings:
    decimals: int = 2
    default_unit: MassUnit = MassUnit.KG
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_decimals = env.get("DOG_DIET_DECIMALS", "2")
        try:
            decimals = int(raw_decimals)
        except ValueError:
            raise ValueError(f"DOG_DIET_DECIMALS must be an integer, got {raw_decimals!r}") from None
        if decimals < 0:
            raise ValueError("DOG_DIET_DECIMALS must be >= 0")

        raw_unit = env.get("DOG_DIET_DEFAULT_UNIT", "kg").strip().lower()
        try:
            unit = MassUnit(raw_unit)
        except ValueError:
            raise ValueError("DOG_DIET_DEFAULT_UNIT must be one of: kg, lbs") from None

        log_level = env.get("DOG_DIET_LOG_LEVEL", "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown DOG_DIET_LOG_LEVEL: {log_level}")

        return cls(decimals=decimals, default_unit=unit, log_level=log_level)
