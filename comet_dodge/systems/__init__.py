"""
Simulation systems exports.

Provides the clock, comet spawner and collision resolution.
"""

from comet_dodge.systems.simulation_clock import advance_clock
from comet_dodge.systems.spawn_manager import CometSpawner
from comet_dodge.systems.collision_manager import CollisionManager, hit_test

__all__ = [
    'advance_clock',
    'CometSpawner',
    'CollisionManager',
    'hit_test',
]
