"""
Game configuration.

Defaults follow the standard rules. Environment variables override
defaults; CLI flags override both:

- UNOLITE_SEED: shuffle seed (deterministic games)
- UNOLITE_HAND_SIZE: cards dealt to each player
- UNOLITE_MAX_PLAYERS: upper bound on seats
- UNOLITE_LOG_LEVEL: logging level for the CLI
"""

from __future__ import annotations
import os
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class GameConfig(BaseModel):
    """Table rules for one game."""
    min_players: int = Field(default=2, ge=2)
    max_players: int = Field(default=10, ge=2)
    initial_hand_size: int = Field(default=7, ge=1)
    draw_two_penalty: int = Field(default=2, ge=1)
    seed: Optional[int] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_player_bounds(self) -> GameConfig:
        if self.max_players < self.min_players:
            raise ValueError("max_players must be >= min_players")
        return self

    @classmethod
    def from_env(cls, **overrides: Any) -> GameConfig:
        """
        Build a config from UNOLITE_* environment variables.

        Keyword overrides that are not None win over the environment.
        """
        values: dict[str, Any] = {}
        env_map = {
            "seed": "UNOLITE_SEED",
            "initial_hand_size": "UNOLITE_HAND_SIZE",
            "max_players": "UNOLITE_MAX_PLAYERS",
        }
        for field_name, env_name in env_map.items():
            raw = os.getenv(env_name)
            if raw:
                values[field_name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def check_player_count(self, count: int):
        """Raise ValueError unless count is within the seat limits."""
        if count < self.min_players or count > self.max_players:
            raise ValueError(
                f"Player count must be between {self.min_players} and {self.max_players}, got {count}"
            )


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def log_level_from_env(default: str = "WARNING") -> str:
    return os.getenv("UNOLITE_LOG_LEVEL", default).upper()
