"""Constrained spawn placement by rejection sampling.

Candidates are drawn uniformly over a disk centered on the playfield,
clamped inside the margin-shrunk playfield, and tested against player and
peer distances. When the attempt budget runs out one more candidate is
returned unconditionally, so placement never fails.

Usage:
    sampler = SpatialPlacementSampler(spawn_radius=50.0, rng=random.Random(7))
    pos = sampler.sample(bounds, players=[], peers=registry.positions, constraints=c)
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from spawnfield.core.geometry import PlayfieldBounds, Vec2
from spawnfield.core.placement.models import (
    REJECT_PEER,
    REJECT_PLAYER,
    Placement,
    PlacementConstraints,
    PositionsLike,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Subset of random.Random used by placement and population code."""

    def random(self) -> float: ...

    def choice(self, seq: Sequence[T], /) -> T: ...


def _snapshot(source: PositionsLike) -> tuple[Vec2, ...]:
    if callable(source):
        return tuple(source())
    return tuple(source)


def _any_within(candidate: Vec2, positions: Iterable[Vec2], distance: float) -> bool:
    return any(candidate.distance_to(p) < distance for p in positions)


class SpatialPlacementSampler:
    """Proposes spawn positions that keep clear of players and peers.

    Args:
        spawn_radius: Upper bound for the sampling disk radius. The effective
            radius is also capped at half the playfield's shorter side.
        rng: Random source. Defaults to a fresh random.Random().
    """

    def __init__(self, spawn_radius: float, rng: RandomSource | None = None) -> None:
        if spawn_radius < 0:
            raise ValueError(f"spawn_radius must be >= 0, got {spawn_radius}")
        self._spawn_radius = spawn_radius
        self._rng: RandomSource = rng if rng is not None else random.Random()

    @property
    def spawn_radius(self) -> float:
        return self._spawn_radius

    def effective_radius(self, bounds: PlayfieldBounds) -> float:
        return min(self._spawn_radius, min(bounds.width, bounds.height) / 2)

    def candidate(self, bounds: PlayfieldBounds, radius: float, margin: float) -> Vec2:
        """Draw one disk-uniform candidate clamped into the margin-shrunk bounds.

        The square root on the radial draw gives uniform density over the disk.
        """
        angle = self._rng.random() * 2 * math.pi
        distance = math.sqrt(self._rng.random()) * radius
        center = bounds.center
        raw = Vec2(center.x + math.cos(angle) * distance, center.y + math.sin(angle) * distance)
        return bounds.shrink(margin).clamp(raw)

    def place(
        self,
        bounds: PlayfieldBounds,
        players: PositionsLike,
        peers: PositionsLike,
        constraints: PlacementConstraints,
    ) -> Placement:
        """Run the bounded search and report how it went."""
        radius = self.effective_radius(bounds)
        margin = constraints.border_margin
        rejections = {REJECT_PLAYER: 0, REJECT_PEER: 0}

        for attempt in range(1, constraints.max_attempts + 1):
            position = self.candidate(bounds, radius, margin)

            # An empty player set never rejects; peers have no such special case.
            player_positions = _snapshot(players)
            if player_positions and _any_within(
                position, player_positions, constraints.min_distance_from_players
            ):
                rejections[REJECT_PLAYER] += 1
                continue

            if _any_within(position, _snapshot(peers), constraints.min_distance_from_peers):
                rejections[REJECT_PEER] += 1
                continue

            return Placement(position=position, attempts=attempt, rejections=rejections)

        position = self.candidate(bounds, radius, margin)
        logger.debug(
            "Placement budget of %d exhausted (%s), falling back to %s",
            constraints.max_attempts,
            rejections,
            position,
        )
        return Placement(
            position=position,
            attempts=constraints.max_attempts,
            used_fallback=True,
            rejections=rejections,
        )

    def sample(
        self,
        bounds: PlayfieldBounds,
        players: PositionsLike,
        peers: PositionsLike,
        constraints: PlacementConstraints,
    ) -> Vec2:
        """Return a spawn position; never fails."""
        return self.place(bounds, players, peers, constraints).position
