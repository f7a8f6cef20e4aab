"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from blackjack.rules import TableRules


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    """Read a true/false environment variable."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset means a fresh random seed."""
    if not os.getenv("BLACKJACK_SEED", "").strip():
        return None
    return _env_int("BLACKJACK_SEED", 0)


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    num_players: int = field(default_factory=lambda: _env_int("BLACKJACK_PLAYERS", 2))
    num_rounds: int = field(default_factory=lambda: _env_int("BLACKJACK_ROUNDS", 3))
    seed: int | None = field(default_factory=_env_seed)
    ties_push: bool = field(
        default_factory=lambda: _env_bool("BLACKJACK_TIES_PUSH", False)
    )
    dealer_stands_on: int = field(
        default_factory=lambda: _env_int("BLACKJACK_DEALER_STANDS_ON", 17)
    )
    reshuffle_when_empty: bool = field(
        default_factory=lambda: _env_bool("BLACKJACK_RESHUFFLE_WHEN_EMPTY", True)
    )

    def rules(self) -> TableRules:
        """Build the table rules for this configuration."""
        return TableRules(
            dealer_stands_on=self.dealer_stands_on,
            ties_push=self.ties_push,
            reshuffle_when_empty=self.reshuffle_when_empty,
        )


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    file: str | None = field(default_factory=lambda: os.getenv("LOG_FILE") or None)


@dataclass(frozen=True)
class UIConfig:
    """Terminal presentation configuration."""

    color: bool = field(default_factory=lambda: _env_bool("BLACKJACK_COLOR", True))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    log: LogConfig = field(default_factory=LogConfig)
    ui: UIConfig = field(default_factory=UIConfig)

