from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class ExpansionConfig:
    """Defaults for bounded expansions.

    Values can be overridden via environment variables:
    - CONTFRAC_MAX_STEPS
    - CONTFRAC_SYMBOLIC_SIMPLIFY
    - CONTFRAC_LOG_LEVEL
    """

    max_steps: int = field(
        default_factory=lambda: int(os.getenv("CONTFRAC_MAX_STEPS", "1000"))
    )
    # Rewrite sympy remainders after each inversion so that quadratic surds
    # stay in a canonical a + b*sqrt(d) shape.
    symbolic_simplify: bool = field(
        default_factory=lambda: _env_bool("CONTFRAC_SYMBOLIC_SIMPLIFY", True)
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("CONTFRAC_LOG_LEVEL", "WARNING").upper()
    )

    def __post_init__(self) -> None:
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")


_config: Optional[ExpansionConfig] = None


def get_config() -> ExpansionConfig:
    global _config
    if _config is None:
        _config = ExpansionConfig()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next `get_config` re-reads the environment."""
    global _config
    _config = None


def resolve_max_steps(max_steps: Optional[int]) -> int:
    if max_steps is None:
        return get_config().max_steps
    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")
    return max_steps
