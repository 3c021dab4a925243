"""Placement constraint and result models."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from spawnfield.core.geometry import Vec2

PositionsLike = Iterable[Vec2] | Callable[[], Iterable[Vec2]]
"""Either a snapshot of positions or a zero-argument callable producing one.

Callables are re-read on every sampling attempt.
"""

REJECT_PLAYER = "player"
REJECT_PEER = "peer"


@dataclass(frozen=True, slots=True)
class PlacementConstraints:
    """Spatial rules a spawn position must satisfy. Immutable."""

    min_distance_from_players: float = 25.0
    """Candidates closer than this to any present player are rejected."""

    min_distance_from_peers: float = 2.0
    """Candidates closer than this to any tracked entity are rejected."""

    border_margin: float = 1.0
    """Inward margin from every playfield edge."""

    max_attempts: int = 30
    """Rejection-sampling budget before falling back."""

    def __post_init__(self) -> None:
        if self.max_attempts < 0:
            raise ValueError(f"max_attempts must be >= 0, got {self.max_attempts}")
        if self.min_distance_from_players < 0 or self.min_distance_from_peers < 0:
            raise ValueError("minimum distances must be >= 0")
        if self.border_margin < 0:
            raise ValueError(f"border_margin must be >= 0, got {self.border_margin}")


@dataclass(slots=True)
class Placement:
    """Outcome of one placement search."""

    position: Vec2
    attempts: int
    """Candidates tested against the constraints (fallback excluded)."""

    used_fallback: bool = False
    rejections: dict[str, int] = field(default_factory=dict)
    """Rejection counts keyed by reason ("player" or "peer")."""
