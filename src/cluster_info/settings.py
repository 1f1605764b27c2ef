import math
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_TARGET_NAMESPACE = "default"
DEFAULT_POLL_INTERVAL = 30.0
DEFAULT_LOG_LEVEL = "INFO"


class SettingsError(ValueError):
    """Raised when the environment holds a setting we cannot use."""


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings read from the environment.

    Attributes:
        target_namespace: Namespace whose pods are listed each cycle
        poll_interval: Seconds to wait between cycles
        log_level: Name of the logging level, or "NONE" to silence logging
        color: Whether self entries are wrapped in ANSI highlighting
    """

    target_namespace: str = DEFAULT_TARGET_NAMESPACE
    poll_interval: float = DEFAULT_POLL_INTERVAL
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "Settings":
        raw_interval = environ.get("POLL_INTERVAL_SECONDS", "")
        try:
            poll_interval = float(raw_interval) if raw_interval else DEFAULT_POLL_INTERVAL
        except ValueError as e:
            raise SettingsError(f"POLL_INTERVAL_SECONDS must be a number, got {raw_interval!r}") from e
        if poll_interval <= 0 or not math.isfinite(poll_interval):
            raise SettingsError(f"POLL_INTERVAL_SECONDS must be a positive finite number, got {raw_interval!r}")

        return cls(
            target_namespace=environ.get("TARGET_NAMESPACE") or DEFAULT_TARGET_NAMESPACE,
            poll_interval=poll_interval,
            log_level=environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
            color=not environ.get("NO_COLOR"),
        )
