"""Runtime settings for the bluetime command line.

Values come from the environment and are overridden by CLI flags:
- BLUETIME_TZ: IANA zone name; unset means host local time
- BLUETIME_LOG_LEVEL: logging level name (default WARNING)
- BLUETIME_MODE: default difference mode (default absolute)
- BLUETIME_ROUNDING: default rounding policy (default rounded)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from bluetime.difference import MODES, ROUNDINGS, Mode, Rounding
from bluetime.errors import InvalidArgumentError


def check_log_level(name: str, source: str = "BLUETIME_LOG_LEVEL") -> str:
    """Return the upper-cased level name, or raise if logging has no such level."""
    level = name.upper()
    if level not in logging.getLevelNamesMapping():
        valid = ", ".join(sorted(logging.getLevelNamesMapping()))
        raise InvalidArgumentError(
            f"{source} must be a logging level name, got {name!r}.\n"
            f"Hint: valid levels are {valid}"
        )
    return level


@dataclass(frozen=True, kw_only=True)
class Settings:
    tz: str | None = None
    log_level: str = "WARNING"
    mode: Mode = "absolute"
    rounding: Rounding = "rounded"

    def __post_init__(self) -> None:
        check_log_level(self.log_level)
        if self.mode not in MODES:
            raise InvalidArgumentError(
                f"BLUETIME_MODE must be one of {', '.join(MODES)}, got {self.mode!r}"
            )
        if self.rounding not in ROUNDINGS:
            raise InvalidArgumentError(
                f"BLUETIME_ROUNDING must be one of {', '.join(ROUNDINGS)}, "
                f"got {self.rounding!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            tz=env.get("BLUETIME_TZ") or None,
            log_level=env.get("BLUETIME_LOG_LEVEL", "WARNING").upper(),
            mode=env.get("BLUETIME_MODE", "absolute"),  # type: ignore[arg-type]
            rounding=env.get("BLUETIME_ROUNDING", "rounded"),  # type: ignore[arg-type]
        )
