# particle_group.py

import logging
import numpy as np
from particle import Particle
import constants

logger = logging.getLogger("fireworks")


class ParticleGroup:
    """
    A fixed-capacity pool of particles sharing one display color, stored as
    NumPy arrays (Structure of Arrays).

    Slots are handed out by a wrap-around write cursor. Spawning never checks
    whether the slot is still in use: once more than `capacity` particles have
    been spawned, the oldest slot is overwritten whatever its state.

    Data Contract:
    - Inputs:
        - color (str): One of constants.GROUP_COLORS.
        - capacity (int): Number of slots. Defaults to MAX_PARTICLES_PER_COLOR.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Owns the lifecycle of every particle in its slots.
    - Invariants:
        - All arrays have exactly `capacity` rows for the group's lifetime.
        - coordinates[i] equals positions[i] for alive slots and
          constants.OFFSCREEN for retired or never-used slots, after every
          spawn and every tick.
        - 0 <= write_cursor < capacity.
    """
    def __init__(self, color: str, capacity: int = constants.MAX_PARTICLES_PER_COLOR):
        if capacity <= 0:
            raise ValueError(f"ParticleGroup capacity must be positive, got {capacity}.")
        self.color = color
        self.capacity = capacity
        self.write_cursor = 0
        self.spawn_total = 0

        # --- Per-slot particle state ---
        self.positions = np.zeros((capacity, 2), dtype=np.float64)
        self.velocities = np.zeros((capacity, 2), dtype=np.float64)
        self.accelerations = np.zeros((capacity, 2), dtype=np.float64)
        # Never-used slots start retired so they can never explode.
        self.alive = np.zeros(capacity, dtype=np.bool_)
        self.exploded = np.zeros(capacity, dtype=np.bool_)
        self.is_sub = np.zeros(capacity, dtype=np.bool_)

        # --- Render array, read by the front ends ---
        self.coordinates = np.empty((capacity, 2), dtype=np.float64)
        self.coordinates[:] = constants.OFFSCREEN

        logger.debug(f"ParticleGroup '{color}' created with {capacity} slots.")

    def spawn(self, is_sub: bool, position: np.ndarray, velocity: np.ndarray) -> int:
        """
        Writes a fresh particle into the slot under the write cursor and
        advances the cursor. Returns the slot index that was written.
        """
        slot = self.write_cursor
        self.positions[slot] = position
        self.velocities[slot] = velocity
        self.accelerations[slot] = 0.0
        self.alive[slot] = True
        self.exploded[slot] = False
        self.is_sub[slot] = is_sub
        self.coordinates[slot] = self.positions[slot]

        self.write_cursor += 1
        if self.write_cursor == self.capacity:
            self.write_cursor = 0
        self.spawn_total += 1
        return slot

    def particle(self, slot: int) -> Particle:
        """Returns a detached Particle copy of a slot, for inspection."""
        p = Particle(self.is_sub[slot], self.positions[slot], self.velocities[slot])
        p.acceleration[:] = self.accelerations[slot]
        p.alive = bool(self.alive[slot])
        p.exploded = bool(self.exploded[slot])
        return p

    def active_count(self) -> int:
        return int(np.count_nonzero(self.alive))

    def __len__(self):
        return self.capacity
