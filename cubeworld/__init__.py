"""Simulation core of a voxel world: noise, blocks, entities, physics, input, UI state and atlases."""

__version__ = "0.1.0"

__all__ = [
    "atlas",
    "blocks",
    "ecs",
    "geometry",
    "input",
    "movement",
    "noise",
    "physics",
    "ui",
]