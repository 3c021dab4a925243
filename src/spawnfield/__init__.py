"""spawnfield: monster population management for bounded 2D playfields.

Usage:
    from spawnfield import (
        LocalWorld, MonsterTemplate, PlayerRegistry, PopulationHost,
        PopulationSettings, TerrainRoot, TerrainScene, Tilemap,
    )

    scene = TerrainScene(TerrainRoot("Ground", [Tilemap.from_rows("floor", ["#" * 60] * 40)]))
    world = LocalWorld(templates=[MonsterTemplate("Enemy 0"), MonsterTemplate("Enemy 1")])
    players = PlayerRegistry()

    async with PopulationHost(world, players, terrain=scene,
                              population=PopulationSettings(target_count=25)) as host:
        ...  # population stays near 25 while monsters die
"""

__version__ = "0.1.0"

# Actors
from spawnfield.actor import ActorController, Camera, ViewportRect, letterbox_rect

# Configuration
from spawnfield.config import ActorSettings, PlacementSettings, PopulationSettings

# Core primitives
from spawnfield.core import (
    BoundsResolver,
    EntityId,
    Placement,
    PlacementConstraints,
    PlayfieldBounds,
    SpatialPlacementSampler,
    Vec2,
    clamp_position,
    clamp_viewport,
)

# Population
from spawnfield.population import (
    PopulationHost,
    PopulationReconciler,
    ReconcilerState,
    TrackedEntity,
)

# Terrain
from spawnfield.terrain import TerrainRoot, TerrainScene, Tilemap

# Tracing
from spawnfield.tracing import HistoryStore, InMemoryHistoryStore, ReconcileRecord

# World
from spawnfield.world import (
    LifecycleEvent,
    LifecycleKind,
    LocalWorld,
    MonsterTemplate,
    NetworkRole,
    PlayerRegistry,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Vec2",
    "PlayfieldBounds",
    "EntityId",
    "BoundsResolver",
    "Placement",
    "PlacementConstraints",
    "SpatialPlacementSampler",
    "clamp_position",
    "clamp_viewport",
    # Terrain
    "Tilemap",
    "TerrainRoot",
    "TerrainScene",
    # World
    "LocalWorld",
    "MonsterTemplate",
    "NetworkRole",
    "PlayerRegistry",
    "LifecycleEvent",
    "LifecycleKind",
    # Population
    "PopulationReconciler",
    "PopulationHost",
    "ReconcilerState",
    "TrackedEntity",
    # Actors
    "ActorController",
    "Camera",
    "ViewportRect",
    "letterbox_rect",
    # Configuration
    "PopulationSettings",
    "PlacementSettings",
    "ActorSettings",
    # Tracing
    "HistoryStore",
    "InMemoryHistoryStore",
    "ReconcileRecord",
]
